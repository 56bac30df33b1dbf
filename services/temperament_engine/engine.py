import logging
from typing import Dict, List, Optional

from .aggregator import aggregate, dichotomy_tallies
from .classifier import classify
from .ledger import ResponseLedger
from .models import Answer, Classification, FacetTally
from .resolver import temperament_code

logger = logging.getLogger(__name__)


class TemperamentEngine:
    """
    Scores one questionnaire session.

    Answers are recorded one per question; every query recomputes from the
    ledger, so results can be read after any prefix of the questionnaire.
    """
    def __init__(self, ledger: Optional[ResponseLedger] = None):
        self.ledger = ledger if ledger is not None else ResponseLedger()

    def record(self, answer: Answer) -> None:
        self.ledger.record(answer)

    def batches(self) -> List[List[Answer]]:
        return self.ledger.batches()

    def tallies(self) -> List[FacetTally]:
        """The ten facet/dichotomy slot tallies, for diagnostics."""
        return aggregate(self.ledger.batches())

    def temperament_code(self) -> str:
        return temperament_code(dichotomy_tallies(self.tallies()))

    def classification(self) -> Classification:
        code = self.temperament_code()
        outcome = classify(code)
        logger.info("Classified code %s as %s", code, outcome.kind)
        return outcome

    def running_totals(self) -> FacetTally:
        """Overall (yes, no) counts across every recorded answer."""
        total = FacetTally()
        for answer in self.ledger.answers():
            total = total.merge(answer.tally)
        return total

    def answer_split(self) -> Dict[str, float]:
        """
        Percentage of A and B answers over the whole session.

        Returns:
            ``{"A": pct, "B": pct}``; both are 0.0 before any answer is recorded.
        """
        yes, no = self.running_totals()
        total = yes + no
        if total == 0:
            return {Answer.YES.value: 0.0, Answer.NO.value: 0.0}
        return {
            Answer.YES.value: yes / total * 100.0,
            Answer.NO.value: no / total * 100.0,
        }

    def summary(self) -> Dict[str, object]:
        """Snapshot of every derived value, used for logging and display."""
        slots = self.tallies()
        dichotomies = dichotomy_tallies(slots)
        code = temperament_code(dichotomies)
        return {
            "answers": len(self.ledger),
            "tallies": [tuple(t) for t in slots],
            "dichotomies": [tuple(t) for t in dichotomies],
            "temperament_code": code,
            "classification": classify(code).model_dump(mode="json"),
        }
