"""Tests for ingredient matching rules."""

from dataclasses import dataclass

import pytest

from pantry.matching import (
    INGREDIENT_VARIATIONS,
    NEVER_CROSS_MATCH,
    NEVER_MATCH_INGREDIENTS,
    best_match,
    can_match,
    can_substitute,
    is_specialty,
    normalize,
    substitutions_for,
    variations_of,
)


def _table_names() -> list[str]:
    names = set(NEVER_MATCH_INGREDIENTS)
    for key, blocked in NEVER_CROSS_MATCH.items():
        names.add(key)
        names.update(blocked)
    for base, aliases in INGREDIENT_VARIATIONS.items():
        names.add(base)
        names.update(aliases)
    return sorted(names)


TABLE_NAMES = _table_names()
SPECIALTY_NAMES = [name for name in TABLE_NAMES if is_specialty(name)]


@dataclass
class StockItem:
    name: str
    quantity: float = 0


class TestCanMatch:
    @pytest.mark.parametrize("a, b", [
        ("ground beef", "hamburger"),
        ("flour", "all-purpose flour"),
        ("sugar", "granulated sugar"),
        ("milk", "whole milk"),
        ("eggs", "large eggs"),
        ("garlic", "minced garlic"),
    ])
    def test_variations_match(self, a, b):
        assert can_match(a, b)
        assert can_match(b, a)

    @pytest.mark.parametrize("a, b", [
        ("peanut butter", "butter"),
        ("green onions", "onion"),
        ("buttermilk", "milk"),
        ("almond flour", "flour"),
        ("powdered sugar", "sugar"),
        ("almond milk", "milk"),
        ("tomato paste", "tomatoes"),
    ])
    def test_never_match(self, a, b):
        assert not can_match(a, b)
        assert not can_match(b, a)

    @pytest.mark.parametrize("name", ["milk", "almond flour", "Peanut Butter", "fresh"])
    def test_reflexive(self, name):
        assert can_match(name, name)

    def test_case_and_descriptors_ignored(self):
        assert can_match("Organic Spinach", "spinach")

    @pytest.mark.parametrize("a, b", [
        ("", "milk"),
        ("milk", ""),
        (None, "milk"),
        ("milk", 3),
    ])
    def test_invalid_input(self, a, b):
        assert can_match(a, b) is False

    def test_unrelated(self):
        assert not can_match("carrots", "chicken thighs")

    def test_substitutions_do_not_affect_matching(self):
        # light olive oil is listed only as a substitution hint
        assert substitutions_for("olive oil") is not None
        assert not can_match("olive oil", "light olive oil")


class TestSpecialty:
    def test_specialty_names(self):
        assert is_specialty("almond flour")
        assert is_specialty("2 cups buttermilk")

    def test_substring_containment(self):
        assert is_specialty("organic vanilla extract")

    def test_plain_tomatoes_count_as_specialty(self):
        # "whole tomatoes" normalizes to "tomatoes"
        assert is_specialty("tomatoes")

    def test_basic_items(self):
        assert not is_specialty("flour")
        assert not is_specialty("milk")
        assert not is_specialty("")


class TestVariationsOf:
    def test_base_expands_to_aliases(self):
        variations = variations_of("ground beef")
        assert "hamburger" in variations
        assert "ground beef" in variations

    def test_alias_reaches_base(self):
        assert "sugar" in variations_of("granulated sugar")

    def test_specialty_does_not_expand(self):
        assert variations_of("almond flour") == frozenset({"almond flour"})

    def test_no_empty_strings(self):
        assert "" not in variations_of("fresh")

    def test_non_string(self):
        assert variations_of(None) == frozenset()


class TestBestMatch:
    def test_exact_match_wins_in_order(self):
        inventory = [
            {"name": "whole milk", "quantity": 1},
            {"name": "milk", "quantity": 3},
        ]
        assert best_match("milk", inventory) is inventory[0]

    def test_highest_quantity_among_matches(self):
        inventory = [
            {"name": "hamburger", "quantity": 1},
            {"name": "ground chuck", "quantity": 5},
            {"name": "carrots", "quantity": 10},
        ]
        assert best_match("1 lb ground beef", inventory) is inventory[1]

    def test_tie_keeps_first(self):
        inventory = [
            {"name": "hamburger", "quantity": 2},
            {"name": "ground chuck", "quantity": 2},
        ]
        assert best_match("ground beef", inventory) is inventory[0]

    def test_missing_quantity_counts_as_zero(self):
        inventory = [
            {"name": "hamburger"},
            {"name": "ground chuck", "quantity": "abc"},
            {"name": "ground hamburger", "quantity": 0.5},
        ]
        assert best_match("ground beef", inventory) is inventory[2]

    def test_attribute_items(self):
        inventory = [StockItem("granulated sugar", 2), StockItem("sugar", 1)]
        assert best_match("1 cup sugar", inventory) is inventory[1]

    def test_specialty_not_substituted(self):
        inventory = [{"name": "all-purpose flour", "quantity": 5}]
        assert best_match("2 cups almond flour", inventory) is None

    @pytest.mark.parametrize("inventory", [[], None])
    def test_empty_inventory(self, inventory):
        assert best_match("milk", inventory) is None

    def test_no_match(self):
        assert best_match("saffron", [{"name": "milk", "quantity": 1}]) is None


class TestSubstitutions:
    def test_direct_lookup(self):
        hint = substitutions_for("garlic cloves")
        assert hint is not None
        assert "minced garlic" in hint.can_substitute_with
        assert "clove" in hint.conversion_note

    def test_reverse_lookup(self):
        hint = substitutions_for("texas toast")
        assert hint is not None
        assert hint.can_substitute_with[0] == "bread"
        assert hint.conversion_note.startswith("Can substitute for bread.")

    def test_unknown(self):
        assert substitutions_for("saffron") is None
        assert substitutions_for(None) is None

    def test_can_substitute_either_direction(self):
        assert can_substitute("garlic cloves", "minced garlic")
        assert can_substitute("texas toast", "bread")
        assert not can_substitute("bread", "saffron")


class TestTableWideProperties:
    @pytest.mark.parametrize("a", TABLE_NAMES)
    def test_symmetric(self, a):
        """can_match gives the same answer in both directions for every table name."""
        asymmetric = [b for b in TABLE_NAMES if can_match(a, b) != can_match(b, a)]
        assert asymmetric == []

    @pytest.mark.parametrize("specialty", SPECIALTY_NAMES)
    def test_specialty_only_matches_itself(self, specialty):
        """A specialty name matches nothing that normalizes differently."""
        target = normalize(specialty)
        matched = [
            other for other in TABLE_NAMES
            if normalize(other) != target
            and (can_match(specialty, other) or can_match(other, specialty))
        ]
        assert matched == []

    def test_listed_specialties_are_detected(self):
        assert set(NEVER_MATCH_INGREDIENTS) <= set(SPECIALTY_NAMES)
