from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    decimal_precision: int = 28
    demand_shaving_factor: Decimal = Decimal("0.6")

    irr_initial_guess: Decimal = Decimal("0.10")
    irr_tolerance: Decimal = Decimal("1e-6")
    irr_max_iterations: int = 50
    irr_lower_bound: Decimal = Decimal("-1")
    irr_upper_bound: Decimal = Decimal("10")

    sanity_annual_abs_tolerance: Decimal = Decimal("5000")
    sanity_annual_rel_tolerance: Decimal = Decimal("0.10")
    sanity_payback_tolerance: Decimal = Decimal("0.25")

    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    class Config:
        env_prefix = "BATTERY_ROI_"
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()
