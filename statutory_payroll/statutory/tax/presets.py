from typing import List

from ..core.config import settings
from ..core.schemas import GROSS_EARNINGS, LIMIT_DEDUCTION, LIMIT_EARNING, DeductionConfig

SHARED = {"employer": 50.0, "employee": 50.0}
EMPLOYEE_ONLY = {"employer": 0.0, "employee": 100.0}

def paye() -> DeductionConfig:
    """
    PAYE as a banded deduction on gross earnings.

    The selected band's rate applies to the whole base and no personal
    relief is taken off, so this is not the statutory progressive PAYE
    computation: just above a band edge the tax jumps (24,000 -> 2,400,
    24,001 -> about 6,000). Tenants needing exact PAYE configure it themselves.
    """
    return DeductionConfig(
        id="paye",
        name="PAYE",
        earning_type=GROSS_EARNINGS,
        has_bands=True,
        bands=[
            {"id": f"paye-{i + 1}", "min": lower, "max": upper, "percentage": rate}
            for i, (lower, upper, rate) in enumerate(settings.PAYE_BANDS)
        ],
        paid_by=EMPLOYEE_ONLY,
    )

def nssf() -> DeductionConfig:
    return DeductionConfig(
        id="nssf",
        name="NSSF",
        percentage=settings.NSSF_RATE,
        earning_type=GROSS_EARNINGS,
        paid_by=SHARED,
        limits={"type": LIMIT_EARNING, "upper": settings.NSSF_UPPER_EARNING_LIMIT},
    )

def shif() -> DeductionConfig:
    return DeductionConfig(
        id="shif",
        name="SHIF",
        percentage=settings.SHIF_RATE,
        earning_type=GROSS_EARNINGS,
        paid_by=EMPLOYEE_ONLY,
        limits={"type": LIMIT_DEDUCTION, "lower": settings.SHIF_MINIMUM},
    )

def housing_levy() -> DeductionConfig:
    return DeductionConfig(
        id="housing-levy",
        name="Housing Levy",
        percentage=settings.HOUSING_LEVY_RATE,
        earning_type=GROSS_EARNINGS,
        paid_by=SHARED,
    )

def kenya_default_deductions() -> List[DeductionConfig]:
    return [paye(), nssf(), shif(), housing_levy()]
