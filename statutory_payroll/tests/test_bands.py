from statutory.core.schemas import Band, DeductionConfig
from statutory.engine.bands import select_band
from statutory.engine.rates import compute_raw

BANDS = [Band(min=0, max=50000, percentage=10), Band(min=50000, max=None, percentage=20)]

def test_boundary_selects_first_band():
    assert select_band(BANDS, 50000) is BANDS[0]

def test_open_band_covers_everything_above():
    assert select_band(BANDS, 50000.01) is BANDS[1]
    assert select_band(BANDS, 10**9) is BANDS[1]

def test_uncovered_amount_returns_none():
    gapped = [Band(min=0, max=1000, percentage=5), Band(min=2000, max=None, percentage=10)]
    assert select_band(gapped, 1500) is None
    assert select_band([], 100) is None

def test_flat_rate_identity():
    config = DeductionConfig(percentage=7.5)
    assert compute_raw(config, 40000) == 40000 * 7.5 / 100

def test_banded_rate_applies_to_whole_base():
    config = DeductionConfig(has_bands=True, percentage=99, bands=BANDS)
    assert compute_raw(config, 50000) == 5000
    assert compute_raw(config, 60000) == 12000

def test_no_band_matched_is_zero():
    assert compute_raw(DeductionConfig(has_bands=True, bands=[]), 60000) == 0

def test_out_of_range_percentages_are_computed():
    assert compute_raw(DeductionConfig(percentage=-5), 1000) == -50
    assert compute_raw(DeductionConfig(percentage=150), 1000) == 1500
