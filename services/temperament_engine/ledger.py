import logging
from typing import Iterator, List

from .models import Answer, FACETS_PER_BATCH

logger = logging.getLogger(__name__)


class ResponseLedger:
    """
    Records answers in arrival order, framed into batches of one facet block each.

    Every complete batch holds exactly ``FACETS_PER_BATCH`` answers; only the
    last batch may be shorter while a block is still being administered.
    """
    def __init__(self):
        self._batches: List[List[Answer]] = []

    def record(self, answer: Answer) -> None:
        if not self._batches or len(self._batches[-1]) % FACETS_PER_BATCH == 0:
            self._batches.append([])
            logger.debug("Opened batch %d", len(self._batches))
        self._batches[-1].append(answer)

    def batches(self) -> List[List[Answer]]:
        """Returns copies of the recorded batches, including a short final one."""
        return [list(batch) for batch in self._batches]

    def answers(self) -> Iterator[Answer]:
        for batch in self._batches:
            yield from batch

    def __len__(self) -> int:
        return sum(len(batch) for batch in self._batches)
