"""Free-text ingredient name cleanup.

``extract_name`` turns a recipe line ("2 cups all-purpose flour, sifted")
into its ingredient noun phrase. ``normalize`` canonicalizes a name for
comparison. Both return ``""`` for anything that is not a non-empty string.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_LEADING_COUNT = re.compile(r"^\d+\s+")
_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Mixed fractions, fraction glyphs, decimals, n/m fractions, bare numbers
_NUMBERS: list[re.Pattern[str]] = [
    re.compile(r"\d+\s*[½¼¾]"),
    re.compile(r"[½¼¾]"),
    re.compile(r"\d*\.\d+"),
    re.compile(r"\b\d+/\d+\b"),
    re.compile(r"\b\d+\b"),
]

_UNITS = re.compile(
    r"\b(cups?|tbsp|tsp|tablespoons?|teaspoons?|lbs?|pounds?|oz|ounces?|"
    r"ml|liters?|l|grams?|g|kg|kilograms?|pt\.?|pints?|qt|quarts?|gal|"
    r"gallons?|fl\.?\s*oz|fluid\s*ounces?)\b",
    re.IGNORECASE,
)

# Applied in order by extract_name, after units are gone
_EXTRACT_NOISE: list[re.Pattern[str]] = [
    re.compile(
        r"\b(beaten|melted|softened|minced|chopped|sliced|diced|crushed|"
        r"grated|shredded|packed|cold|hot|warm|uncooked|cooked|finely)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(pounded|flattened|tenderized|marinated|seasoned|trimmed|cut|"
        r"split|halved|quartered)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(thick|thin|medium|large|small|extra|jumbo|mini)\b", re.IGNORECASE),
    re.compile(
        r"\b(bone-in|boneless|skin-on|skinless|lean|extra lean|fat free|low fat)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(inch|inches|thickness|diameter|width|length)\b", re.IGNORECASE),
    re.compile(r"\b(about|approximately|roughly|around)\b", re.IGNORECASE),
    re.compile(r"\b(each|per|piece|pieces)\b", re.IGNORECASE),
    re.compile(r"\b(to taste|optional|dash|pinch)\b", re.IGNORECASE),
    re.compile(r"\b(to|into|for|with|from|of|the|and|or|a|an)\b", re.IGNORECASE),
]

# Applied in order by normalize on already lower-cased text
_NORMALIZE_NOISE: list[re.Pattern[str]] = [
    re.compile(r"\b(organic|natural|pure|fresh|raw|whole|fine|coarse|ground)\b"),
    re.compile(r"\b(small|medium|large|extra large|jumbo|mini|thick|thin)\b"),
    re.compile(r"\b(bone-in|boneless|skin-on|skinless|lean|extra lean)\b"),
    re.compile(r"\b(can|jar|bottle|bag|box|package|container)\b"),
    re.compile(
        r"\b(pounded|flattened|tenderized|cut|sliced|diced|chopped|minced|"
        r"crushed|grated|shredded)\b"
    ),
    re.compile(
        r"\b(inch|inches|thickness|diameter|about|approximately|each|per|"
        r"piece|pieces)\b"
    ),
    re.compile(r"\b(to|into|for|with|from|of|the|and|or|a|an)\b"),
]

_CUBE_STEAK_NAMES = (
    "cube steaks", "cubed steaks", "cube steak", "cubed steak",
    "minute steaks", "minute steak", "swiss steaks", "swiss steak",
)
_GROUND_BEEF_NAMES = ("ground beef", "lean beef", "hamburger", "ground chuck")


def _strip(text: str, patterns: list[re.Pattern[str]]) -> str:
    for pattern in patterns:
        text = pattern.sub("", text)
    return text


def _collapse(text: str) -> str:
    text = _PUNCTUATION.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def normalize(name: object) -> str:
    """Canonicalize an ingredient name for comparison.

    Lower-cases, drops parenthetical asides, descriptive/size/packaging
    words, preparation words, connecting words and numbers, then turns
    punctuation into spaces and collapses whitespace.
    """
    if not name or not isinstance(name, str):
        return ""

    text = _PARENTHETICAL.sub("", name.lower().strip())
    text = _strip(text, _NORMALIZE_NOISE)
    text = _strip(text, _NUMBERS)
    return _collapse(text)


def extract_name(line: object) -> str:
    """Extract the ingredient noun phrase from a recipe ingredient line.

    Args:
        line: e.g. "2 cups all-purpose flour, sifted"

    Returns:
        The remaining name with case preserved, e.g. "all purpose flour".
    """
    if not line or not isinstance(line, str):
        return ""

    text = _PARENTHETICAL.sub("", line)
    # Anything after the first comma is a preparation note
    text = text.split(",")[0]
    text = _LEADING_COUNT.sub("", text)
    text = _strip(text, _NUMBERS)
    text = _UNITS.sub("", text)
    text = _strip(text, _EXTRACT_NOISE)
    cleaned = _collapse(text)

    logger.debug("extract %r -> %r", line, cleaned)
    return cleaned


def ingredient_key(line: object) -> str:
    """Build a grouping key used to merge equivalent shopping list lines."""
    cleaned = extract_name(line).lower().strip()

    if any(n in cleaned for n in _CUBE_STEAK_NAMES):
        return "cube-steaks"
    if any(n in cleaned for n in _GROUND_BEEF_NAMES):
        return "ground-beef"
    if "chicken breast" in cleaned and "ground" not in cleaned:
        return "chicken-breast"
    if "ground chicken" in cleaned:
        return "ground-chicken"
    if "pork chops" in cleaned:
        return "pork-chops"
    if "italian sausage" in cleaned:
        return "italian-sausage"

    return _WHITESPACE.sub("-", cleaned)
