"""
Deduction configuration loading and validation at the admin-layer boundary.

The engine computes whatever it is given. Misconfiguration (gapped bands,
out-of-range rates, crossed limits) is reported here as warnings and logged,
never raised, so a bad record cannot stop a payroll run.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from ..core.schemas import DeductionConfig
from ..core.utils import setup_logging

WARNING = "warning"
INFO = "info"

@dataclass
class ConfigWarning:
    """A structural problem found in one deduction configuration."""
    config_id: str
    code: str
    message: str
    severity: str = WARNING

    def to_dict(self):
        return asdict(self)

def _out_of_range(value: float) -> bool:
    return value < 0 or value > 100

def validate_bands(config: DeductionConfig) -> List[ConfigWarning]:
    warnings = []

    def warn(code: str, message: str):
        warnings.append(ConfigWarning(config.id, code, message))

    if not config.bands:
        warn("no_bands", f"{config.name or config.id}: banded deduction has no bands, it will always be 0")
        return warnings

    first = config.bands[0]
    if first.min != 0:
        warn("first_band_min", f"first band starts at {first.min:g}, earnings below it are not covered")

    for index, band in enumerate(config.bands):
        if band.max is not None and band.max < band.min:
            warn("band_inverted", f"band {index + 1} has max {band.max:g} below min {band.min:g}")
        if _out_of_range(band.percentage):
            warn("band_percentage_range", f"band {index + 1} rate {band.percentage:g}% is outside 0-100")
        if index == 0:
            continue
        previous = config.bands[index - 1]
        if band.min < previous.min:
            warn("bands_unordered", f"band {index + 1} starts below band {index}")
        if previous.max is None:
            warn("open_band_not_last", f"band {index} is open-ended but is not the last band")
        elif band.min != previous.max:
            kind = "gap" if band.min > previous.max else "overlap"
            warn(f"band_{kind}", f"{kind} between band {index} (max {previous.max:g}) and band {index + 1} (min {band.min:g})")
    return warnings

def validate_config(config: DeductionConfig) -> List[ConfigWarning]:
    """List structural problems in a deduction configuration without raising."""
    warnings = []
    if config.has_bands:
        warnings.extend(validate_bands(config))
    elif _out_of_range(config.percentage):
        warnings.append(ConfigWarning(config.id, "percentage_range", f"rate {config.percentage:g}% is outside 0-100"))

    paid_by = config.paid_by
    for party in ("employer", "employee"):
        value = getattr(paid_by, party)
        if _out_of_range(value):
            warnings.append(ConfigWarning(config.id, "paid_by_range", f"{party} share {value:g}% is outside 0-100"))
    total = paid_by.employer + paid_by.employee
    if abs(total - 100) > 1e-9:
        # partial remittance is allowed
        warnings.append(ConfigWarning(
            config.id, "paid_by_total", f"employer and employee shares add up to {total:g}%, not 100%", INFO
        ))

    limits = config.limits
    if limits.lower is not None and limits.upper is not None and limits.lower > limits.upper:
        warnings.append(ConfigWarning(
            config.id, "limits_crossed", f"lower limit {limits.lower:g} is above upper limit {limits.upper:g}"
        ))
    return warnings

class DeductionConfigManager:
    """Turns admin-layer records into deduction configs, logging anything suspicious."""

    def __init__(self, tenant_id: str):
        self.tenant_id = tenant_id
        self.logger = setup_logging(tenant_id)

    def load(self, records: Iterable[Any]) -> List[DeductionConfig]:
        configs = []
        for position, record in enumerate(records):
            if isinstance(record, DeductionConfig):
                config = record
            elif isinstance(record, dict):
                try:
                    config = DeductionConfig.model_validate(record)
                except ValidationError as e:
                    self.logger.warning("Skipping deduction config #%d: %s", position, e)
                    continue
            else:
                self.logger.warning("Skipping deduction config #%d: expected a mapping, got %s",
                                    position, type(record).__name__)
                continue
            self._log_warnings(config)
            configs.append(config)
        self.logger.info("Loaded %d deduction configs", len(configs))
        return configs

    def validate(self, configs: Iterable[DeductionConfig]) -> Dict[str, List[ConfigWarning]]:
        """Warnings keyed by config id, only for configs that have any."""
        report = {}
        for config in configs:
            warnings = validate_config(config)
            if warnings:
                report[config.id] = warnings
        return report

    def _log_warnings(self, config: DeductionConfig):
        for warning in validate_config(config):
            log = self.logger.info if warning.severity == INFO else self.logger.warning
            log("Deduction %s (%s): %s", config.name, config.id, warning.message)
