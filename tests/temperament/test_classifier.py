from itertools import product

import pytest

from services.temperament_engine.classifier import (
    CATEGORY_PATTERNS,
    classify,
    matching_patterns,
    pattern_matches,
)
from services.temperament_engine.models import (
    AllTiedOutcome,
    Category,
    CategoryOutcome,
    UnclassifiedOutcome,
)

ALL_PATTERNS = [
    (category, pattern)
    for category, patterns in CATEGORY_PATTERNS.items()
    for pattern in patterns
]


def test_pattern_table_has_nine_patterns_per_category():
    assert set(CATEGORY_PATTERNS) == set(Category)
    assert all(len(patterns) == 9 for patterns in CATEGORY_PATTERNS.values())
    assert len({pattern for _, pattern in ALL_PATTERNS}) == 36


@pytest.mark.parametrize("category,pattern", ALL_PATTERNS)
def test_each_pattern_classifies_into_its_category(category, pattern):
    assert classify(pattern) == CategoryOutcome(category=category)


@pytest.mark.parametrize("code,category", [
    ("ESTP", Category.ARTISAN),
    ("XSFP", Category.ARTISAN),
    ("ISXP", Category.ARTISAN),
    ("ESTJ", Category.GUARDIAN),
    ("ISXJ", Category.GUARDIAN),
    ("ENFP", Category.IDEALIST),
    ("XNFX", Category.IDEALIST),
    ("INFX", Category.IDEALIST),
    ("INTJ", Category.RATIONAL),
    ("ENTX", Category.RATIONAL),
])
def test_classify_known_codes(code, category):
    outcome = classify(code)
    assert isinstance(outcome, CategoryOutcome)
    assert outcome.category == category


def test_all_tied_code():
    assert classify("XXXX") == AllTiedOutcome()


@pytest.mark.parametrize("code", ["XSTX", "XFXJ", "XNXP", "ESTX", "XXTJ", "", "ENF", "ENFPX", "enfp"])
def test_unmatched_codes_are_unclassified(code):
    outcome = classify(code)
    assert isinstance(outcome, UnclassifiedOutcome)
    assert outcome.candidates == (Category.ARTISAN, Category.GUARDIAN, Category.IDEALIST, Category.RATIONAL)


def test_wildcard_accepts_either_letter_or_tie():
    assert pattern_matches("XNFX", "ENFJ")
    assert pattern_matches("XNFX", "INFP")
    assert pattern_matches("XNFX", "XNFX")
    assert not pattern_matches("XNFX", "XNTX")


def test_concrete_letter_does_not_accept_tie():
    assert not pattern_matches("ESFP", "XSFP")


def test_wildcard_does_not_accept_letters_of_other_dichotomies():
    assert not pattern_matches("XSXP", "SSXP")
    assert not pattern_matches("XSXP", "XSJP")


def test_matching_patterns_lists_all_wildcard_hits():
    hits = matching_patterns("ESFP")
    assert {category for category, _ in hits} == {Category.ARTISAN}
    assert {pattern for _, pattern in hits} == {"XSFP", "XSXP", "ESXP", "ESFP"}


def test_categories_never_overlap_for_any_code():
    for letters in product("EIX", "SNX", "TFX", "JPX"):
        code = "".join(letters)
        categories = {category for category, _ in matching_patterns(code)}
        assert len(categories) <= 1, code


def test_every_concrete_code_is_classified():
    for letters in product("EI", "SN", "TF", "JP"):
        assert isinstance(classify("".join(letters)), CategoryOutcome)


def test_classify_is_stateless():
    assert classify("INTP") == classify("INTP")
    assert classify("XSTX") == classify("XSTX")
