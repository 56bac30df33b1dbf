from typing import Sequence, Tuple

from .models import FacetTally

TIE = "X"

# (majority-yes letter, majority-no letter) per dichotomy
DICHOTOMY_LETTERS: Tuple[Tuple[str, str], ...] = (
    ("E", "I"),
    ("S", "N"),
    ("T", "F"),
    ("J", "P"),
)


def resolve(pair: Tuple[int, int], dichotomy: int) -> str:
    """Picks the letter of the larger count for one dichotomy, or ``X`` on an exact tie."""
    yes, no = pair
    first, second = DICHOTOMY_LETTERS[dichotomy]
    if yes > no:
        return first
    if yes < no:
        return second
    return TIE


def temperament_code(aggregates: Sequence[FacetTally]) -> str:
    """Builds the four-character code from the E/I, S/N, T/F and J/P aggregates."""
    return "".join(resolve(pair, index) for index, pair in enumerate(aggregates))
