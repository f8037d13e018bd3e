from statutory.core.schemas import DeductionConfig

from .bands import select_band

def compute_raw(config: DeductionConfig, earning_base: float) -> float:
    """Deduction before limits: flat rate, or the selected band's rate, on the whole base."""
    if not config.has_bands:
        return earning_base * config.percentage / 100
    band = select_band(config.bands, earning_base)
    if band is None:
        return 0.0
    return earning_base * band.percentage / 100
