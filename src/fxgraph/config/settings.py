# src/fxgraph/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a .env file) with validation.

Files that USE this module:
- fxgraph.app (loads settings to build the exchange and configure logging)

Files that this module USES:
- fxgraph.shared.validators (validation functions for settings)
- fxgraph.domain (Currency, ExactRational for the parsed rate table)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Dict, Optional, Tuple  # Type hints

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxgraph.domain.models import Currency
from fxgraph.domain.rational import ExactRational
from fxgraph.shared.validators import (
    validate_pair_code,  # Validate 'USD/EUR' pair keys
    validate_rate_text,  # Validate 'N/D' rate values
)

KNOWN_CODES = frozenset(c.code for c in Currency)

# Rates quoted at startup (units of TO per 1 FROM)
DEFAULT_INITIAL_RATES: Dict[str, str] = {
    "USD/EUR": "91/100",
    "USD/RUB": "75/1",
    "USD/BTC": "1/50000",
    "BTC/ETH": "13/1",
}


def parse_rate_text(text: str) -> ExactRational:
    """Turn 'N/D' (or 'N') into a normalized ExactRational."""
    numerator, _, denominator = text.replace(" ", "").partition("/")
    return ExactRational.of(int(numerator), int(denominator or 1))


def parse_pair_code(pair: str) -> Tuple[Currency, Currency]:
    """Turn 'USD/EUR' into (Currency.USD, Currency.EUR)."""
    src, dst = pair.split("/")
    return Currency.from_code(src), Currency.from_code(dst)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Rate table ---
    initial_rates: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_INITIAL_RATES), alias="INITIAL_RATES"
    )
    complete_inverses: bool = Field(default=True, alias="COMPLETE_INVERSES")

    # --- Randomization ---
    perturb_max_pct: int = Field(default=5, alias="PERTURB_MAX_PCT", ge=0, le=99)
    rng_seed: Optional[int] = Field(default=None, alias="RNG_SEED")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXGRAPH_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("initial_rates")
    @classmethod
    def validate_initial_rates(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Validate every pair key and rate value of the table."""
        for pair, rate in v.items():
            if not validate_pair_code(pair, KNOWN_CODES):
                raise ValueError(f"Invalid currency pair in INITIAL_RATES: {pair!r}")
            if not validate_rate_text(rate):
                raise ValueError(f"Invalid rate for {pair} in INITIAL_RATES: {rate!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        if v.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()

    def rate_table(self) -> Dict[Tuple[Currency, Currency], ExactRational]:
        """
        Parsed initial rate table.

        Returns:
            Mapping of (from, to) currency pair to normalized rate
        """
        return {
            parse_pair_code(pair): parse_rate_text(rate)
            for pair, rate in self.initial_rates.items()
        }


# Global settings instance
settings = Settings()
