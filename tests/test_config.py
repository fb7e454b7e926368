"""Tests for pantry config loading."""

import os
import tempfile

import pytest

from pantry.config import LoggingConfig, PantryConfig, TotalsConfig, load_config
from pantry.totals.calculator import TotalsCalculator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PANTRY_TAX_RATE", "PANTRY_CURRENCY", "PANTRY_BUDGET", "PANTRY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _load_toml(content: bytes) -> PantryConfig:
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(content)
        f.flush()
    try:
        return load_config(f.name)
    finally:
        os.unlink(f.name)


def test_load_config_defaults():
    """Loading with no path returns all defaults."""
    config = load_config()
    assert isinstance(config, PantryConfig)
    assert config.totals == TotalsConfig()
    assert config.totals.tax_rate == 0.0
    assert config.totals.currency == "USD"
    assert config.totals.currency_symbol == "$"
    assert config.totals.decimal_places == 2
    assert config.totals.taxable_categories == []
    assert config.totals.budget is None
    assert config.logging == LoggingConfig()


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.totals.currency == "USD"


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    config = _load_toml(b"""\
[totals]
tax_rate = 0.07
currency = "EUR"
taxable_categories = ["Household Items", "Beverages"]
budget = 150.0

[logging]
level = "debug"
""")
    assert config.totals.tax_rate == 0.07
    assert config.totals.currency == "EUR"
    assert config.totals.currency_symbol == "€"
    assert config.totals.taxable_categories == ["Household Items", "Beverages"]
    assert config.totals.budget == 150.0
    assert config.logging.level == "DEBUG"


def test_tax_rate_from_region():
    """Country and region select a default rate when none is given."""
    config = _load_toml(b"""\
[totals]
country = "US"
region = "IA"
""")
    assert config.totals.tax_rate == 0.06


def test_explicit_tax_rate_wins_over_region():
    config = _load_toml(b"""\
[totals]
tax_rate = 0.0
country = "UK"
""")
    assert config.totals.tax_rate == 0.0


def test_currency_fields_override_table():
    """Explicit symbol, position and decimals override the currency table."""
    config = _load_toml(b"""\
[totals]
currency = "JPY"
currency_symbol = "JPY "
decimal_places = 2
""")
    assert config.totals.currency == "JPY"
    assert config.totals.currency_symbol == "JPY "
    assert config.totals.decimal_places == 2


def test_currency_table_fills_defaults():
    config = _load_toml(b"""\
[totals]
currency = "sek"
""")
    assert config.totals.currency == "SEK"
    assert config.totals.currency_symbol == "kr"
    assert config.totals.currency_position == "after"


def test_load_config_env_override(monkeypatch):
    """Environment variables fill values the file leaves unset."""
    monkeypatch.setenv("PANTRY_TAX_RATE", "0.1")
    monkeypatch.setenv("PANTRY_CURRENCY", "gbp")
    monkeypatch.setenv("PANTRY_BUDGET", "75")
    monkeypatch.setenv("PANTRY_LOG_LEVEL", "info")

    config = load_config()
    assert config.totals.tax_rate == 0.1
    assert config.totals.currency == "GBP"
    assert config.totals.currency_symbol == "£"
    assert config.totals.budget == 75.0
    assert config.logging.level == "INFO"


def test_load_config_file_takes_precedence(monkeypatch):
    """Config file values take precedence over env vars."""
    monkeypatch.setenv("PANTRY_TAX_RATE", "0.1")
    monkeypatch.setenv("PANTRY_CURRENCY", "GBP")

    config = _load_toml(b"""\
[totals]
tax_rate = 0.05
currency = "CAD"
""")
    assert config.totals.tax_rate == 0.05
    assert config.totals.currency == "CAD"


def test_unparseable_env_numbers_ignored(monkeypatch):
    monkeypatch.setenv("PANTRY_TAX_RATE", "lots")
    monkeypatch.setenv("PANTRY_BUDGET", "")

    config = load_config()
    assert config.totals.tax_rate == 0.0
    assert config.totals.budget is None


def test_invalid_toml_raises():
    with pytest.raises(ValueError):
        _load_toml(b"[totals\ntax_rate = ")


def test_calculator_from_config():
    config = _load_toml(b"""\
[totals]
tax_rate = 0.08
currency = "CHF"
""")
    calc = TotalsCalculator.from_config(config.totals)
    assert calc.tax_rate == 0.08
    assert calc.currency == "CHF"
    assert calc.format_currency(5) == "5.00CHF"
