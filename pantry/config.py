"""TOML configuration loader for pantry-kit."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .totals.currency import get_currency_info
from .totals.tax import tax_rate_for

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


@dataclass
class TotalsConfig:
    tax_rate: float = 0.0
    country: str = ""
    region: str = ""
    currency: str = "USD"
    currency_symbol: str = "$"
    currency_position: str = "before"
    decimal_places: int = 2
    taxable_categories: list[str] = field(default_factory=list)
    budget: float | None = None


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class PantryConfig:
    totals: TotalsConfig = field(default_factory=TotalsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _env_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, value)
        return None


def load_config(path: str | Path | None = None) -> PantryConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Values the file leaves unset can come from PANTRY_* environment
    variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)
        else:
            logger.debug("Config file %s not found, using defaults", p)

    tot = raw.get("totals", {})
    log = raw.get("logging", {})

    # Resolve currency: config file → environment variable → USD
    currency = get_currency_info(
        tot.get("currency", "") or os.environ.get("PANTRY_CURRENCY", "") or "USD"
    )

    # Resolve tax rate: explicit rate → environment → country/region table
    country = tot.get("country", "")
    region = tot.get("region", "")
    tax_rate = tot.get("tax_rate")
    if tax_rate is None:
        tax_rate = _env_float("PANTRY_TAX_RATE")
    if tax_rate is None:
        tax_rate = tax_rate_for(country, region) if country else 0.0

    budget = tot.get("budget")
    if budget is None:
        budget = _env_float("PANTRY_BUDGET")

    return PantryConfig(
        totals=TotalsConfig(
            tax_rate=tax_rate,
            country=country,
            region=region,
            currency=currency.code,
            currency_symbol=tot.get("currency_symbol", currency.symbol),
            currency_position=tot.get("currency_position", currency.position),
            decimal_places=tot.get("decimal_places", currency.decimal_places),
            taxable_categories=list(tot.get("taxable_categories", [])),
            budget=budget,
        ),
        logging=LoggingConfig(
            level=(
                log.get("level", "")
                or os.environ.get("PANTRY_LOG_LEVEL", "")
                or "WARNING"
            ).upper(),
        ),
    )
