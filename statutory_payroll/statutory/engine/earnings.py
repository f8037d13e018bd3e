from statutory.core.schemas import BASIC_SALARY, GROSS_EARNINGS, EarningSnapshot

def resolve_earning_base(earning_type: str, snapshot: EarningSnapshot) -> float:
    """
    Map a deduction's earning reference to an amount from the snapshot.

    "Gross Earnings" is basic pay plus every allowance, "Basic Salary" is
    basic pay alone, and anything else names an allowance. An allowance
    the employee does not have resolves to 0 rather than raising.
    """
    if earning_type == GROSS_EARNINGS:
        return snapshot.basic_pay + snapshot.total_allowances
    if earning_type == BASIC_SALARY:
        return snapshot.basic_pay
    return snapshot.allowances.get(earning_type, 0.0)
