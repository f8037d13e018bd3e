from typing import Optional, Sequence

from statutory.core.schemas import Band

def band_covers(band: Band, earning_base: float) -> bool:
    return earning_base >= band.min and (band.max is None or earning_base <= band.max)

def select_band(bands: Sequence[Band], earning_base: float) -> Optional[Band]:
    """
    Return the first band, in stored order, whose range covers the earning base.

    First match wins, so a base sitting on a shared boundary falls in the
    lower band. Bands are not checked for gaps or overlaps here; an
    uncovered base returns None.
    """
    for band in bands:
        if band_covers(band, earning_base):
            return band
    return None
