from typing import Any, Dict, Iterable, List, Optional

from statutory.core.config import settings
from statutory.core.schemas import DeductionConfig, EarningSnapshot
from statutory.core.utils import setup_logging, to_number
from statutory.engine.deductions import compute_deductions

class PayrollEngine:
    """Payslips for employees against one tenant's statutory deduction configs."""

    def __init__(self, tenant_id: str, deductions: Iterable[DeductionConfig]):
        self.tenant_id = tenant_id
        self.deductions = list(deductions)
        self.logger = setup_logging(tenant_id)

    def _round(self, amount: float) -> float:
        return round(amount, settings.ROUND_DIGITS)

    def compute_net_pay(self, snapshot: EarningSnapshot, other_deductions: Optional[List[Dict]] = None) -> Dict[str, Any]:
        results = compute_deductions(self.deductions, snapshot)
        gross = self._round(snapshot.basic_pay + snapshot.total_allowances)
        lines = [
            {
                "config_id": r.config_id,
                "name": r.name,
                "earning_base": self._round(r.earning_base),
                "total": self._round(r.total_deduction_amount),
                "employee": self._round(r.employee_deduction),
                "employer": self._round(r.employer_portion),
            }
            for r in results
        ]
        # totals add up the printed (rounded) lines
        statutory = self._round(sum(line["employee"] for line in lines))
        employer = self._round(sum(line["employer"] for line in lines))
        others = [
            {"name": str(d.get("name", "")), "amount": self._round(to_number(d.get("amount")))}
            for d in (other_deductions or [])
        ]
        other_total = self._round(sum(d["amount"] for d in others))
        return {
            "basic_pay": self._round(snapshot.basic_pay),
            "allowances": self._round(snapshot.total_allowances),
            "gross": gross,
            "deductions": lines,
            "statutory_deductions": statutory,
            "employer_contributions": employer,
            "other_deductions": others,
            "other_deductions_total": other_total,
            "net": self._round(gross - statutory - other_total),
        }

    def run_payroll(self, employees: List[Dict]) -> List[Dict]:
        results = []
        for e in employees:
            snapshot = EarningSnapshot(
                basic_pay=e.get("basic_pay", e.get("basicPay", 0.0)),
                allowances=e.get("allowances"),
            )
            slip = self.compute_net_pay(snapshot, e.get("other_deductions"))
            slip["employee_id"] = e.get("id", e.get("employee_id"))
            slip["name"] = e.get("name") or f"{e.get('first_name','')} {e.get('last_name','')}".strip()
            results.append(slip)
        self.logger.info("Payroll run for %d employees against %d deductions", len(results), len(self.deductions))
        return results
