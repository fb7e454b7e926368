"""Default sales tax rates and category taxability by jurisdiction."""

from __future__ import annotations

from types import MappingProxyType

# Country → flat rate, or country → {region: rate}
DEFAULT_TAX_RATES: MappingProxyType[str, float | MappingProxyType[str, float]] = MappingProxyType({
    "US": MappingProxyType({
        "AL": 0.04,    # Alabama
        "CA": 0.0725,  # California
        "FL": 0.06,    # Florida
        "IA": 0.06,    # Iowa
        "NY": 0.08,    # New York
        "TX": 0.0625,  # Texas
        "WA": 0.065,   # Washington
    }),
    "CA": 0.05,  # Canada GST
    "UK": 0.20,  # UK VAT
    "EU": 0.21,  # EU average VAT
})

TAXABLE_CATEGORIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    # Generally taxable in most jurisdictions
    "TAXABLE": (
        "Household Items",
        "Personal Care",
        "Cleaning Supplies",
        "Paper Products",
        "Pet Supplies",
        "Beverages",
    ),
    # Generally exempt (food)
    "TAX_EXEMPT": (
        "Produce",
        "Meat & Seafood",
        "Dairy",
        "Bread & Bakery",
        "Canned Goods",
        "Frozen Foods",
        "Pantry Staples",
        "Fresh Fruits",
        "Fresh Vegetables",
        "Grains",
        "Condiments",
    ),
})


def tax_rate_for(country: str | None, region: str | None = None) -> float:
    """Return the default tax rate for a jurisdiction.

    Countries with per-region rates (US) need a known *region*; anything
    unknown yields 0.0.
    """
    if not isinstance(country, str):
        return 0.0

    rate = DEFAULT_TAX_RATES.get(country.strip().upper())
    if rate is None:
        return 0.0
    if isinstance(rate, float):
        return rate

    if not isinstance(region, str):
        return 0.0
    return rate.get(region.strip().upper(), 0.0)
