"""
Temperament classification.

Maps a four-character temperament code onto one of the four Keirsey temperament
families. An ``X`` in a pattern stands for either letter of its dichotomy, or for
a tie in the code itself.
"""
import logging
from typing import Dict, List, Tuple

from .models import (
    AllTiedOutcome,
    Category,
    CategoryOutcome,
    Classification,
    UnclassifiedOutcome,
)
from .resolver import DICHOTOMY_LETTERS, TIE

logger = logging.getLogger(__name__)

ALL_TIED_CODE = TIE * len(DICHOTOMY_LETTERS)

CATEGORY_PATTERNS: Dict[Category, Tuple[str, ...]] = {
    Category.ARTISAN: ("ISFP", "XSFP", "XSTP", "XSXP", "ESXP", "ISTP", "ISXP", "ESFP", "ESTP"),
    Category.GUARDIAN: ("ISFJ", "XSFJ", "ISXJ", "ESXJ", "XSXJ", "XSTJ", "ESFJ", "ESTJ", "ISTJ"),
    Category.IDEALIST: ("INFP", "INFJ", "ENFP", "ENFJ", "XNFX", "ENFX", "INFX", "XNFJ", "XNFP"),
    Category.RATIONAL: ("INTP", "INTJ", "ENTP", "ENTJ", "XNTX", "ENTX", "INTX", "XNTJ", "XNTP"),
}


def _position_matches(pattern_letter: str, code_letter: str, dichotomy: int) -> bool:
    if pattern_letter == TIE:
        return code_letter == TIE or code_letter in DICHOTOMY_LETTERS[dichotomy]
    return pattern_letter == code_letter


def pattern_matches(pattern: str, code: str) -> bool:
    if len(pattern) != len(code):
        return False
    return all(
        _position_matches(p, c, index)
        for index, (p, c) in enumerate(zip(pattern, code))
    )


def matching_patterns(code: str) -> List[Tuple[Category, str]]:
    """Lists every (category, pattern) pair accepting ``code``."""
    return [
        (category, pattern)
        for category, patterns in CATEGORY_PATTERNS.items()
        for pattern in patterns
        if pattern_matches(pattern, code)
    ]


def classify(code: str) -> Classification:
    if code == ALL_TIED_CODE:
        return AllTiedOutcome()

    categories = {category for category, _ in matching_patterns(code)}
    if len(categories) == 1:
        return CategoryOutcome(category=categories.pop())
    if categories:
        # Pattern sets are disjoint per category.
        logger.warning("Code %s matched several categories: %s", code, sorted(c.value for c in categories))
    else:
        logger.info("Code %s matched no temperament pattern", code)
    return UnclassifiedOutcome()
