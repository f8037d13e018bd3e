"""
Typed records exchanged with the administrative layer.

Deduction configurations and earning snapshots arrive as loosely typed
payloads (camelCase keys, numbers as strings, blanks, NaN from
spreadsheets). Every numeric field coerces instead of failing: junk
becomes 0, and an unset bound stays None.
"""
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import to_number, to_optional_number

GROSS_EARNINGS = "Gross Earnings"
BASIC_SALARY = "Basic Salary"

LIMIT_DEDUCTION = "deduction"
LIMIT_EARNING = "earning"

def new_id() -> str:
    return str(uuid.uuid4())

class Record(BaseModel):
    """Immutable record that accepts both field names and admin-layer aliases."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

class Band(Record):
    """An earning range with its own rate; ``max`` None means open-ended."""
    id: str = Field(default_factory=new_id)
    min: float = 0.0
    max: Optional[float] = None
    percentage: float = 0.0

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return new_id() if value in (None, "") else str(value)

    @field_validator("min", "percentage", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("max", mode="before")
    @classmethod
    def _coerce_max(cls, value: Any) -> Optional[float]:
        return to_optional_number(value)

class PaidBy(Record):
    """Percentages of the deduction amount borne by each party."""
    employer: float = 0.0
    employee: float = 0.0

    @field_validator("employer", "employee", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return to_number(value)

class Limits(Record):
    type: str = LIMIT_DEDUCTION
    lower: Optional[float] = None
    upper: Optional[float] = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> str:
        if value is None:
            return LIMIT_DEDUCTION
        return str(value).strip().lower()

    @field_validator("lower", "upper", mode="before")
    @classmethod
    def _coerce_bound(cls, value: Any) -> Optional[float]:
        return to_optional_number(value)

class DeductionConfig(Record):
    """One admin-configured statutory deduction (PAYE, NSSF, ...)."""
    id: str = Field(default_factory=new_id)
    name: str = ""
    percentage: float = 0.0
    earning_type: str = Field(GROSS_EARNINGS, alias="earningType")
    has_bands: bool = Field(False, alias="hasBands")
    bands: List[Band] = Field(default_factory=list)
    # missing shares, and a missing split, count as 0%
    paid_by: PaidBy = Field(default_factory=PaidBy, alias="paidBy")
    limits: Limits = Field(default_factory=Limits)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return new_id() if value in (None, "") else str(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("percentage", mode="before")
    @classmethod
    def _coerce_percentage(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("earning_type", mode="before")
    @classmethod
    def _coerce_earning_type(cls, value: Any) -> str:
        return GROSS_EARNINGS if value is None else str(value)

    @field_validator("has_bands", mode="before")
    @classmethod
    def _coerce_has_bands(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("bands", mode="before")
    @classmethod
    def _coerce_bands(cls, value: Any) -> list:
        return [] if value is None else value

    @field_validator("paid_by", mode="before")
    @classmethod
    def _coerce_paid_by(cls, value: Any) -> Any:
        return PaidBy() if value is None else value

    @field_validator("limits", mode="before")
    @classmethod
    def _coerce_limits(cls, value: Any) -> Any:
        return Limits() if value is None else value

class EarningSnapshot(Record):
    """Basic pay plus named allowances for one employee at computation time."""
    basic_pay: float = Field(0.0, alias="basicPay")
    allowances: Dict[str, float] = Field(default_factory=dict)

    @field_validator("basic_pay", mode="before")
    @classmethod
    def _coerce_basic_pay(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("allowances", mode="before")
    @classmethod
    def _coerce_allowances(cls, value: Any) -> Dict[str, float]:
        # staff records hold allowances as [{"name": ..., "amount": ...}];
        # repeated names add up
        if value is None:
            return {}
        items = value.items() if isinstance(value, dict) else (
            (a.get("name"), a.get("amount")) for a in value if isinstance(a, dict)
        )
        allowances: Dict[str, float] = {}
        for name, amount in items:
            if name is None:
                continue
            allowances[str(name)] = allowances.get(str(name), 0.0) + to_number(amount)
        return allowances

    @property
    def total_allowances(self) -> float:
        return sum(self.allowances.values())

class DeductionResult(Record):
    """Outcome of one deduction config applied to one snapshot."""
    config_id: str = Field(alias="configId")
    name: str = ""
    earning_base: float = Field(alias="earningBase")
    raw_amount: float = Field(alias="rawAmount")
    employee_deduction: float = Field(alias="employeeDeduction")
    employer_portion: float = Field(alias="employerPortion")
    total_deduction_amount: float = Field(alias="totalDeductionAmount")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
