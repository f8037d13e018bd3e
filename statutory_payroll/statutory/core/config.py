from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Optional, Tuple

class Settings(BaseSettings):
    APP_NAME: str = Field("StatutoryPayroll", description="Prefix for logger names")
    LOG_LEVEL: str = Field("INFO", description="Root level for tenant loggers")
    AUDIT_LOG_PATH: str = Field("./data/logs", description="Directory for rotating log files")
    ROUND_DIGITS: int = Field(2, description="Decimal places for payslip amounts")

    # Statutory defaults (Kenya, 2025 monthly, KES)
    # PAYE bands as (min, max, percentage); max None is the open top band
    PAYE_BANDS: List[Tuple[float, Optional[float], float]] = [
        (0, 24000, 10.0),
        (24000, 32333, 25.0),
        (32333, 500000, 30.0),
        (500000, 800000, 32.5),
        (800000, None, 35.0),
    ]

    # NSSF: 12% combined (6% employee + 6% employer) up to the Tier II limit
    NSSF_RATE: float = 12.0
    NSSF_UPPER_EARNING_LIMIT: float = 72000.0

    # SHIF replaces NHIF: 2.75% of gross with a fixed floor
    SHIF_RATE: float = 2.75
    SHIF_MINIMUM: float = 300.0

    # Affordable Housing Levy: 1.5% employee + 1.5% employer
    HOUSING_LEVY_RATE: float = 3.0

settings = Settings()
