from statutory.core.schemas import DeductionConfig, EarningSnapshot
from statutory.payroll.engine import PayrollEngine
from statutory.tax.presets import kenya_default_deductions

def test_payslip_net_pay():
    engine = PayrollEngine("demo-tenant", kenya_default_deductions())
    snap = EarningSnapshot(basic_pay=80000, allowances={"House": 15000, "Transport": 5000})
    slip = engine.compute_net_pay(snap, [{"name": "Sacco Loan", "amount": "2000"}])
    assert slip["gross"] == 100000
    assert [d["name"] for d in slip["deductions"]] == ["PAYE", "NSSF", "SHIF", "Housing Levy"]
    assert slip["statutory_deductions"] == 38570
    assert slip["employer_contributions"] == 5820
    assert slip["other_deductions_total"] == 2000
    assert slip["net"] == 59430

def test_payslip_without_deductions():
    slip = PayrollEngine("demo-tenant", []).compute_net_pay(EarningSnapshot(basic_pay=1234.567))
    assert slip["gross"] == 1234.57
    assert slip["net"] == 1234.57
    assert slip["deductions"] == []

def test_run_payroll_tags_employees_in_order():
    engine = PayrollEngine("demo-tenant", kenya_default_deductions())
    slips = engine.run_payroll([
        {"id": "EMP001", "first_name": "Jane", "last_name": "Wanjiru", "basic_pay": 50000,
         "allowances": [{"name": "House", "amount": 10000}]},
        {"id": "EMP002", "name": "Otieno", "basicPay": 20000, "other_deductions": [{"name": "Advance", "amount": 500}]},
    ])
    assert [s["employee_id"] for s in slips] == ["EMP001", "EMP002"]
    assert slips[0]["name"] == "Jane Wanjiru"
    assert slips[0]["gross"] == 60000
    assert slips[1]["other_deductions_total"] == 500
    assert slips[1]["net"] < 20000

def test_totals_match_rounded_lines():
    tiny = [DeductionConfig(percentage=0.4, paid_by={"employee": 100, "employer": 100}) for _ in range(3)]
    slip = PayrollEngine("demo-tenant", tiny).compute_net_pay(EarningSnapshot(basic_pay=1))
    # each line is 0.004, shown as 0.0
    assert [d["employee"] for d in slip["deductions"]] == [0.0, 0.0, 0.0]
    assert slip["statutory_deductions"] == 0.0
    assert slip["employer_contributions"] == 0.0
    assert slip["net"] == 1.0
