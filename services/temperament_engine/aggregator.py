"""
Facet aggregation.

Each batch holds one answer per facet position. Position 0 alone measures
Extraversion/Introversion; positions (1, 2), (3, 4) and (5, 6) are merged pairwise
for Sensing/iNtuition, Thinking/Feeling and Judging/Perceiving.
"""
from typing import List, Sequence, Tuple

from .models import Answer, FacetTally, FACETS_PER_BATCH

# Output slot -> raw facet positions summed into it.
SLOT_SOURCES: Tuple[Tuple[int, ...], ...] = (
    (0,),
    (1,),
    (2,),
    (2, 1),
    (3,),
    (4,),
    (4, 3),
    (5,),
    (6,),
    (6, 5),
)

# Slots that feed the E/I, S/N, T/F and J/P dichotomies, in that order.
DICHOTOMY_SLOTS: Tuple[int, ...] = (0, 3, 6, 9)


def facet_tallies(batches: Sequence[Sequence[Answer]]) -> List[FacetTally]:
    """Sums each facet position across all batches; short batches skip missing positions."""
    tallies = [FacetTally() for _ in range(FACETS_PER_BATCH)]
    for batch in batches:
        for position, answer in enumerate(batch[:FACETS_PER_BATCH]):
            tallies[position] = tallies[position].merge(answer.tally)
    return tallies


def aggregate(batches: Sequence[Sequence[Answer]]) -> List[FacetTally]:
    """Returns the ten slot tallies described by ``SLOT_SOURCES``."""
    raw = facet_tallies(batches)
    slots = []
    for sources in SLOT_SOURCES:
        total = FacetTally()
        for position in sources:
            total = total.merge(raw[position])
        slots.append(total)
    return slots


def dichotomy_tallies(slots: Sequence[FacetTally]) -> List[FacetTally]:
    return [slots[index] for index in DICHOTOMY_SLOTS]
