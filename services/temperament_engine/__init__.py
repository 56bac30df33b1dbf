# Keirsey temperament scoring engine
from .models import (
    Answer, FacetTally, Category, CategoryOutcome, AllTiedOutcome, UnclassifiedOutcome,
    Classification, InvalidAnswerError, QuestionnaireValidationError, FACETS_PER_BATCH
)
from .ledger import ResponseLedger
from .aggregator import aggregate, facet_tallies, dichotomy_tallies
from .resolver import resolve, temperament_code
from .classifier import classify, matching_patterns
from .engine import TemperamentEngine
