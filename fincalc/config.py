"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    # Rows of the amortization schedule printed before the CLI truncates it.
    MAX_ROWS: int = int(os.getenv("FINCALC_MAX_ROWS", "120"))
    DECIMAL_PRECISION: int = int(os.getenv("FINCALC_DECIMAL_PRECISION", "28"))


settings = Settings()
