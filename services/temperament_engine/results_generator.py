# Builds the display text for a finished (or partial) questionnaire session.

import logging
from typing import Any, Dict, List

from .models import (
    AllTiedOutcome,
    Category,
    CategoryDescriptions,
    CategoryOutcome,
    Classification,
    FacetTally,
    UnclassifiedOutcome,
)

logger = logging.getLogger(__name__)

UNCLASSIFIED_PREAMBLE = (
    "Your answers did not settle into a single temperament. "
    "Read each of the four descriptions and see which one fits you best."
)


def format_running_score(totals: FacetTally) -> str:
    """Score line shown above each question, e.g. ``Score:\\nA: 3 B: 1``."""
    return f"Score:\nA: {totals.yes} B: {totals.no}"


def format_answer_split(split: Dict[str, float]) -> str:
    return "\n".join(f"{token}: {pct:.2f}%" for token, pct in split.items())


def _category_section(category: Category, descriptions: CategoryDescriptions) -> Dict[str, str]:
    return {"name": category.value, "description": descriptions.categories[category]}


def generate_results_text(
    code: str,
    outcome: Classification,
    descriptions: CategoryDescriptions,
) -> Dict[str, Any]:
    """
    Generates the descriptive sections for a classification outcome.

    Args:
        code: The four-character temperament code.
        outcome: Result of classifying ``code``.
        descriptions: Category texts and the all-tied narrative.

    Returns:
        A dictionary with ``temperament_code``, ``kind``, an optional ``preamble``
        and the list of category ``sections`` to show.
    """
    output: Dict[str, Any] = {"temperament_code": code, "kind": outcome.kind}
    sections: List[Dict[str, str]] = []

    if isinstance(outcome, AllTiedOutcome):
        output["preamble"] = descriptions.all_tied_narrative
    elif isinstance(outcome, CategoryOutcome):
        sections.append(_category_section(outcome.category, descriptions))
    elif isinstance(outcome, UnclassifiedOutcome):
        logger.info("No single temperament for code %s; showing all categories", code)
        output["preamble"] = UNCLASSIFIED_PREAMBLE
        sections.extend(_category_section(c, descriptions) for c in outcome.candidates)

    output["sections"] = sections
    return output


def format_results(results: Dict[str, Any]) -> str:
    lines = [f"Your temperament code: {results['temperament_code']}"]
    if results.get("preamble"):
        lines += ["", results["preamble"]]
    for section in results["sections"]:
        lines += ["", section["name"], section["description"]]
    return "\n".join(lines)
