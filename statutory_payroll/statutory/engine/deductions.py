"""
Statutory deduction pipeline.

earning base -> raw amount (flat or banded) -> limits -> employer/employee split.
Pure functions: no I/O, no shared state, safe to call concurrently.
"""
from typing import Iterable, List

from statutory.core.schemas import DeductionConfig, DeductionResult, EarningSnapshot

from .earnings import resolve_earning_base
from .limits import apply_limits
from .rates import compute_raw
from .split import split_deduction

def compute_deduction(config: DeductionConfig, snapshot: EarningSnapshot) -> DeductionResult:
    earning_base = resolve_earning_base(config.earning_type, snapshot)
    raw_amount = compute_raw(config, earning_base)
    clamped = apply_limits(config, earning_base, raw_amount)
    split = split_deduction(clamped.deduction_amount, config.paid_by)
    return DeductionResult(
        config_id=config.id,
        name=config.name,
        earning_base=clamped.earning_base,
        raw_amount=raw_amount,
        employee_deduction=split.employee_deduction,
        employer_portion=split.employer_portion,
        total_deduction_amount=clamped.deduction_amount,
    )

def compute_deductions(configs: Iterable[DeductionConfig], snapshot: EarningSnapshot) -> List[DeductionResult]:
    return [compute_deduction(config, snapshot) for config in configs]
