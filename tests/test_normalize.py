"""Tests for ingredient name normalization and extraction."""

import pytest

from pantry.matching.normalize import extract_name, ingredient_key, normalize


class TestNormalize:
    def test_lowercases_and_strips_descriptors(self):
        assert normalize("Fresh Organic Spinach") == "spinach"

    def test_removes_parenthetical(self):
        assert normalize("Butter (softened)") == "butter"

    def test_removes_numbers_and_size_words(self):
        assert normalize("1 large egg") == "egg"

    def test_removes_fraction_glyphs(self):
        assert normalize("1½ lemon") == "lemon"

    def test_punctuation_becomes_space(self):
        assert normalize("all-purpose flour") == "all purpose flour"

    def test_packaging_words(self):
        assert normalize("can of tuna") == "tuna"

    def test_ground_is_a_descriptor(self):
        assert normalize("ground beef") == "beef"

    def test_idempotent(self):
        once = normalize("2 Cups Whole Milk (cold)")
        assert normalize(once) == once

    @pytest.mark.parametrize("value", [None, "", 42, ["milk"]])
    def test_non_string_is_empty(self, value):
        assert normalize(value) == ""

    def test_noise_only_name(self):
        assert normalize("fresh") == ""


class TestExtractName:
    def test_strips_amount_unit_and_note(self):
        assert extract_name("2 cups all-purpose flour, sifted") == "all purpose flour"

    def test_preserves_case(self):
        assert extract_name("1 tbsp Dijon Mustard") == "Dijon Mustard"

    def test_drops_preparation_words(self):
        assert extract_name("3 cloves garlic, minced") == "cloves garlic"

    def test_drops_parenthetical_and_cut_words(self):
        line = "1 lb boneless skinless chicken breasts (about 2)"
        assert extract_name(line) == "chicken breasts"

    def test_fraction_amount(self):
        assert extract_name("1/2 tsp salt") == "salt"

    def test_plain_name_unchanged(self):
        assert extract_name("onion") == "onion"

    @pytest.mark.parametrize("value", [None, "", 7])
    def test_non_string_is_empty(self, value):
        assert extract_name(value) == ""


class TestIngredientKey:
    def test_ground_beef_family(self):
        assert ingredient_key("1 lb lean ground beef") == "ground-beef"
        assert ingredient_key("hamburger") == "ground-beef"

    def test_cube_steaks(self):
        assert ingredient_key("4 cube steaks") == "cube-steaks"

    def test_chicken_breast(self):
        assert ingredient_key("2 boneless chicken breasts") == "chicken-breast"

    def test_ground_chicken_is_not_breast(self):
        assert ingredient_key("1 lb ground chicken") == "ground-chicken"

    def test_default_dash_joined(self):
        assert ingredient_key("2 large red bell peppers") == "red-bell-peppers"

    def test_empty(self):
        assert ingredient_key(None) == ""
