from statutory.core.schemas import EarningSnapshot
from statutory.engine.deductions import compute_deduction
from statutory.tax.config_manager import validate_config
from statutory.tax.presets import housing_levy, kenya_default_deductions, nssf, paye, shif

SNAP = EarningSnapshot(basic_pay=100000)

def test_presets_are_well_formed():
    for config in kenya_default_deductions():
        assert [w for w in validate_config(config) if w.severity == "warning"] == []

def test_paye_band():
    assert compute_deduction(paye(), SNAP).employee_deduction == 30000
    assert compute_deduction(paye(), EarningSnapshot(basic_pay=20000)).employee_deduction == 2000

def test_nssf_capped_on_earnings_and_shared():
    res = compute_deduction(nssf(), SNAP)
    assert res.total_deduction_amount == 8640
    assert res.employee_deduction == res.employer_portion == 4320

def test_shif_minimum():
    assert compute_deduction(shif(), EarningSnapshot(basic_pay=8000)).employee_deduction == 300
    assert compute_deduction(shif(), SNAP).employee_deduction == 2750

def test_housing_levy_split():
    res = compute_deduction(housing_levy(), SNAP)
    assert res.employee_deduction == 1500
    assert res.employer_portion == 1500

def test_paye_rate_applies_to_whole_base_at_band_edge():
    assert compute_deduction(paye(), EarningSnapshot(basic_pay=24000)).employee_deduction == 2400
    assert compute_deduction(paye(), EarningSnapshot(basic_pay=24001)).employee_deduction == 6000.25
