import logging
import math
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from statutory.core.config import settings

def mkdir_safe(path: str):
    Path(path).mkdir(parents=True, exist_ok=True)

def setup_logging(tenant_id: str = "system", *, log_level: str = None):
    logger_name = f"{settings.APP_NAME}.{tenant_id}"
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger
    level = log_level or settings.LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    mkdir_safe(settings.AUDIT_LOG_PATH)
    logfile = Path(settings.AUDIT_LOG_PATH) / f"{tenant_id}.log"
    handler = RotatingFileHandler(str(logfile), maxBytes=10_000_000, backupCount=5)
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if os.getenv("DEV", "").lower() in ("1", "true", "yes"):
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    logger.propagate = False
    return logger

def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce admin-layer input to a float; missing, NaN and junk become ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return number

def to_optional_number(value: Any) -> Optional[float]:
    """Like ``to_number`` but keeps "not set" as None (used for limits and open band maxima)."""
    number = to_number(value, default=math.nan)
    if math.isnan(number):
        return None
    return number
