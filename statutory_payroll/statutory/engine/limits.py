"""
Lower/upper limits on a computed deduction.

Limits apply either to the deduction amount itself or to the earning base
feeding the rate. An earning base above the upper limit is clamped and the
rate is computed again on the clamped base (re-selecting the band when the
deduction is banded). That recomputation happens at most once, since the
clamped base cannot exceed the limit.
"""
from typing import NamedTuple

from statutory.core.schemas import LIMIT_DEDUCTION, LIMIT_EARNING, DeductionConfig, Limits

from .rates import compute_raw

class ClampedAmount(NamedTuple):
    earning_base: float
    deduction_amount: float

def clamp_deduction(amount: float, limits: Limits) -> float:
    if limits.lower is not None and amount < limits.lower:
        amount = limits.lower
    if limits.upper is not None and amount > limits.upper:
        amount = limits.upper
    return amount

def clamp_earning(config: DeductionConfig, earning_base: float, raw_amount: float) -> ClampedAmount:
    limits = config.limits
    base, amount = earning_base, raw_amount
    if limits.lower is not None and earning_base < limits.lower:
        amount = 0.0
    # checked against the unclamped base even when the lower limit fired;
    # the recomputed amount is final
    if limits.upper is not None and earning_base > limits.upper:
        base = limits.upper
        amount = compute_raw(config, base)
    return ClampedAmount(base, amount)

def apply_limits(config: DeductionConfig, earning_base: float, raw_amount: float) -> ClampedAmount:
    limits = config.limits
    if limits.type == LIMIT_DEDUCTION:
        return ClampedAmount(earning_base, clamp_deduction(raw_amount, limits))
    if limits.type == LIMIT_EARNING:
        return clamp_earning(config, earning_base, raw_amount)
    # unknown limit types carry no limits
    return ClampedAmount(earning_base, raw_amount)
