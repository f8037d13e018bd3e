from typing import NamedTuple

from statutory.core.schemas import PaidBy

class Split(NamedTuple):
    employee_deduction: float
    employer_portion: float

def split_deduction(deduction_amount: float, paid_by: PaidBy) -> Split:
    """
    Divide the final (post-limit) deduction between employee and employer.

    Each leg is its own percentage of the deduction amount. The legs are not
    forced to add up to the whole, so partial remittance can be modelled.
    """
    return Split(
        employee_deduction=deduction_amount * paid_by.employee / 100,
        employer_portion=deduction_amount * paid_by.employer / 100,
    )
