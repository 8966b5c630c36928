# src/erfpacht/adapters/config.py
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # Projection defaults (overridable per request)
    DISCOUNT_RATE: float = Field(default=0.035)
    PROJECTION_YEARS: int = Field(default=30)

    # Used when the tariff tables have no rate for the selected year.
    # The current contract falls back to FALLBACK_CANON_RATE whatever its
    # regime; FALLBACK_AB2024_RATE only prices the switch to AB2024.
    FALLBACK_CANON_RATE: float = Field(default=0.033)
    FALLBACK_AB2024_RATE: float = Field(default=0.022)

    # -----------------------------
    # Wizard state persistence
    # -----------------------------
    STATE_PATH: Path = Field(default=Path.home() / ".erfpacht" / "wizard.json")

    model_config = SettingsConfigDict(
        env_prefix="ERFPACHT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "DISCOUNT_RATE",
        "FALLBACK_CANON_RATE",
        "FALLBACK_AB2024_RATE",
        mode="before",
    )
    @classmethod
    def _to_non_negative_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        is_percent = False
        if isinstance(v, str):
            v = v.strip()
            is_percent = v.endswith("%")
            v = v.rstrip("%")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if is_percent or f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("PROJECTION_YEARS", mode="before")
    @classmethod
    def _years_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("PROJECTION_YEARS must be > 0")
        return n


config = AppConfig()
