"""Shopping list totals, currencies, tax tables and price analytics."""

from .calculator import (
    CategorySummary,
    CategoryTotals,
    ItemCalc,
    Summary,
    TotalsCalculator,
    TotalsResult,
    parse_price,
    parse_quantity,
)
from .currency import SUPPORTED_CURRENCIES, CurrencyInfo, get_currency_info
from .prices import (
    DealAnalysis,
    PricePoint,
    PriceStatistics,
    StoreComparison,
    StoreRecommendation,
    analyze_deal,
    price_points,
    price_statistics,
    similar_items,
    store_comparison,
    store_recommendations,
)
from .tax import DEFAULT_TAX_RATES, TAXABLE_CATEGORIES, tax_rate_for

__all__ = [
    "TotalsCalculator",
    "TotalsResult",
    "ItemCalc",
    "CategoryTotals",
    "Summary",
    "CategorySummary",
    "parse_price",
    "parse_quantity",
    "CurrencyInfo",
    "SUPPORTED_CURRENCIES",
    "get_currency_info",
    "DEFAULT_TAX_RATES",
    "TAXABLE_CATEGORIES",
    "tax_rate_for",
    "PricePoint",
    "PriceStatistics",
    "StoreComparison",
    "StoreRecommendation",
    "DealAnalysis",
    "price_points",
    "price_statistics",
    "store_comparison",
    "analyze_deal",
    "store_recommendations",
    "similar_items",
]
