"""Ingredient equivalence rules for inventory-to-recipe reconciliation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .normalize import extract_name, normalize
from .tables import (
    INGREDIENT_VARIATIONS,
    INTELLIGENT_SUBSTITUTIONS,
    NEVER_CROSS_MATCH,
    NEVER_MATCH_INGREDIENTS,
    Substitution,
)

logger = logging.getLogger(__name__)


def _normalized_all(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(n for n in (normalize(name) for name in names) if n)


# Normalized views of the rule tables, built once at import time
_SPECIALTY: tuple[str, ...] = _normalized_all(NEVER_MATCH_INGREDIENTS)

_CROSS_MATCH: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
    (normalize(key), _normalized_all(blocked))
    for key, blocked in NEVER_CROSS_MATCH.items()
    if normalize(key)
)

_VARIATION_GROUPS: tuple[tuple[str, frozenset[str]], ...] = tuple(
    (normalize(base), frozenset(_normalized_all(aliases)))
    for base, aliases in INGREDIENT_VARIATIONS.items()
)

_SUBSTITUTION_KEYS: dict[str, str] = {}
for _key in INTELLIGENT_SUBSTITUTIONS:
    _SUBSTITUTION_KEYS.setdefault(normalize(_key), _key)
del _key


def _contains(text: str, fragment: str) -> bool:
    # Substring semantics: "peanut butter sauce" still counts as peanut butter
    return text == fragment or fragment in text


def _field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _quantity_of(item: Any) -> float:
    value = _field(item, "quantity")
    if isinstance(value, bool):
        return 0.0
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        return 0.0
    return quantity if quantity == quantity else 0.0


def is_specialty(name: object) -> bool:
    """Return True if *name* is (or contains) a specialty ingredient."""
    normalized = normalize(name)
    if not normalized:
        return False
    return any(_contains(normalized, specialty) for specialty in _SPECIALTY)


def _is_cross_blocked(a_norm: str, b_norm: str) -> bool:
    for key, blocked in _CROSS_MATCH:
        if _contains(a_norm, key) and any(_contains(b_norm, b) for b in blocked):
            return True
        if _contains(b_norm, key) and any(_contains(a_norm, b) for b in blocked):
            return True
    return False


def variations_of(name: object) -> frozenset[str]:
    """Return every surface form considered interchangeable with *name*.

    Specialty ingredients only ever yield their own normalized and raw
    forms. Everything else is expanded through the variation table, both
    from a base entry to its aliases and from an alias back to its base.
    """
    if not isinstance(name, str):
        return frozenset()

    cleaned = extract_name(name)
    normalized = normalize(cleaned)
    raw = name.lower().strip()

    if is_specialty(name):
        return frozenset(v for v in (normalized, raw) if v)

    found = {normalized, raw, cleaned.lower().strip()}
    for base, aliases in _VARIATION_GROUPS:
        if normalized and (normalized == base or normalized in aliases):
            found.add(base)
            found |= aliases
    found.discard("")
    return frozenset(found)


def can_match(a: object, b: object) -> bool:
    """Decide whether two ingredient names denote the same purchasable good.

    Symmetric: ``can_match(a, b) == can_match(b, a)`` for all inputs.
    """
    if not a or not b or not isinstance(a, str) or not isinstance(b, str):
        return False

    a_norm = normalize(a)
    b_norm = normalize(b)

    if a_norm == b_norm:
        # Names made only of noise words normalize to ""
        return bool(a_norm) or a.lower().strip() == b.lower().strip()

    if is_specialty(a) or is_specialty(b):
        return False

    if _is_cross_blocked(a_norm, b_norm):
        return False

    return not variations_of(a).isdisjoint(variations_of(b))


def best_match(recipe_ingredient: object, inventory: Iterable[Any] | None) -> Any | None:
    """Pick the inventory item that best satisfies a recipe ingredient.

    An exact match after normalization wins (first in input order).
    Otherwise the matching item with the highest quantity is returned,
    ties going to the earliest item. Returns None when nothing matches.
    """
    items = list(inventory or [])
    cleaned = extract_name(recipe_ingredient)
    target = normalize(cleaned)

    if target:
        for item in items:
            if normalize(extract_name(_field(item, "name"))) == target:
                logger.debug("exact inventory match for %r: %r", recipe_ingredient, _field(item, "name"))
                return item

    candidates = [item for item in items if can_match(cleaned, _field(item, "name"))]
    if not candidates:
        logger.debug("no inventory match for %r", recipe_ingredient)
        return None

    chosen = max(candidates, key=_quantity_of)
    logger.debug("inventory match for %r: %r", recipe_ingredient, _field(chosen, "name"))
    return chosen


def substitutions_for(name: object) -> Substitution | None:
    """Look up substitution hints for an ingredient.

    Informational only; these hints never affect ``can_match``.
    """
    normalized = normalize(extract_name(name))
    if not normalized:
        return None

    key = _SUBSTITUTION_KEYS.get(normalized)
    if key is not None:
        return INTELLIGENT_SUBSTITUTIONS[key]

    # The name may itself be listed as a substitute for something else
    for base, hint in INTELLIGENT_SUBSTITUTIONS.items():
        if any(normalize(s) == normalized for s in hint.can_substitute_with):
            others = tuple(
                s for s in hint.can_substitute_with if normalize(s) != normalized
            )
            return Substitution(
                can_substitute_with=(base, *others),
                conversion_note=f"Can substitute for {base}. {hint.conversion_note}",
            )

    return None


def can_substitute(a: object, b: object) -> bool:
    """Return True if either ingredient lists the other as a substitute."""
    a_norm = normalize(extract_name(a))
    b_norm = normalize(extract_name(b))
    if not a_norm or not b_norm:
        return False

    for hint, other in ((substitutions_for(a), b_norm), (substitutions_for(b), a_norm)):
        if hint and any(normalize(s) == other for s in hint.can_substitute_with):
            return True
    return False
