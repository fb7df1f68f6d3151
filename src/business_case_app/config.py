"""Projection defaults and runtime settings."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_HORIZON_YEARS: int = 5
DEFAULT_CURRENCY: str = "€"
SENSITIVITY_DELTA: float = 0.10       # +/- 10% on the price multiplier
EXPORT_SHEET_NAME: str = "Business Case"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.environ.get("BUSINESS_CASE_LOG_LEVEL", "INFO").upper(),
            default_currency=os.environ.get("BUSINESS_CASE_CURRENCY", DEFAULT_CURRENCY),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
