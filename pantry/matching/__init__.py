"""Ingredient name normalization and matching."""

from .matcher import (
    best_match,
    can_match,
    can_substitute,
    is_specialty,
    substitutions_for,
    variations_of,
)
from .normalize import extract_name, ingredient_key, normalize
from .tables import (
    INGREDIENT_VARIATIONS,
    INTELLIGENT_SUBSTITUTIONS,
    NEVER_CROSS_MATCH,
    NEVER_MATCH_INGREDIENTS,
    Substitution,
)

__all__ = [
    "normalize",
    "extract_name",
    "ingredient_key",
    "is_specialty",
    "can_match",
    "variations_of",
    "best_match",
    "substitutions_for",
    "can_substitute",
    "Substitution",
    "NEVER_MATCH_INGREDIENTS",
    "NEVER_CROSS_MATCH",
    "INGREDIENT_VARIATIONS",
    "INTELLIGENT_SUBSTITUTIONS",
]
