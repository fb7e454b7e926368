"""pantry-kit: ingredient matching and shopping list totals."""

from .matching import best_match, can_match, extract_name, normalize
from .totals import TotalsCalculator, TotalsResult

__version__ = "0.1.0"

__all__ = [
    "normalize",
    "extract_name",
    "can_match",
    "best_match",
    "TotalsCalculator",
    "TotalsResult",
]
