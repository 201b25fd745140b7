"""
Tests for chart_recipes/classification/patterns.py and values.py.

What we test
------------
- Name tokenization splits on ``_``, space, ``-`` and ``.``.
- Adjacent token pairs let two-word keywords match (``zip`` + ``code``).
- Squashed names ignore separators and case.
- Lenient number parsing: leading numbers, booleans, NaN.
"""

from __future__ import annotations

import pytest

from chart_recipes.classification.patterns import (
    CATEGORY_VALUE_PATTERNS,
    GEO_KEYWORDS,
    TEMPORAL_EXACT_SQUASHED,
    keyword_candidates,
    squash_name,
    tokenize_name,
)
from chart_recipes.classification.values import numeric_sample, parse_float, parse_leading_int


class TestTokenization:
    def test_splits_on_all_separators(self):
        assert tokenize_name("Shipping-Address.City name") == ["shipping", "address", "city", "name"]

    def test_drops_empty_tokens(self):
        assert tokenize_name("__zip__code__") == ["zip", "code"]

    def test_keyword_candidates_include_pairs(self):
        candidates = keyword_candidates(["customer", "zip", "code"])
        assert "zip_code" in candidates
        assert "customer_zip" in candidates
        assert "customer" in candidates

    def test_two_word_keyword_reachable_from_tokens(self):
        candidates = keyword_candidates(tokenize_name("Postal Code"))
        assert any(c in GEO_KEYWORDS for c in candidates)


class TestSquashName:
    @pytest.mark.parametrize("name", ["created_at", "Created-At", "CREATEDAT", " created_at "])
    def test_separators_and_case_ignored(self, name):
        assert squash_name(name) == "createdat"

    def test_exact_names_stored_squashed(self):
        assert "createdat" in TEMPORAL_EXACT_SQUASHED
        assert "created_at" not in TEMPORAL_EXACT_SQUASHED


class TestCategoryValuePatterns:
    @pytest.mark.parametrize("value", ["yes", "Pending", "XL", "AB", "off"])
    def test_coded_values_match(self, value):
        assert any(p.match(value) for p in CATEGORY_VALUE_PATTERNS)

    @pytest.mark.parametrize("value", ["ABCD", "hello world", "42"])
    def test_free_values_do_not_match(self, value):
        assert not any(p.match(value) for p in CATEGORY_VALUE_PATTERNS)


class TestParseFloat:
    def test_plain_numbers(self):
        assert parse_float(3) == 3.0
        assert parse_float("2.5") == 2.5

    def test_leading_number_with_units(self):
        assert parse_float("12 kg") == 12.0

    def test_rejects_booleans_and_nan(self):
        assert parse_float(True) is None
        assert parse_float(float("nan")) is None
        assert parse_float(None) is None

    def test_non_numeric_text(self):
        assert parse_float("north") is None

    def test_numeric_sample_drops_failures(self):
        assert numeric_sample([1, "x", None, "4.5"]) == [1.0, 4.5]


class TestParseLeadingInt:
    def test_date_string_gives_year(self):
        assert parse_leading_int("2024-01-15") == 2024

    def test_float_truncates(self):
        assert parse_leading_int(2019.7) == 2019

    def test_no_digits(self):
        assert parse_leading_int("Q3") is None
