from enum import Enum
from typing import Annotated, Dict, List, Literal, NamedTuple, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Number of recurring facet questions in one block of the questionnaire.
FACETS_PER_BATCH = 7


class InvalidAnswerError(ValueError):
    """Raised when raw input cannot be read as an answer token."""
    pass


class QuestionnaireValidationError(ValueError):
    """Raised for questionnaire or category files that cannot be used."""
    pass


class Answer(str, Enum):
    YES = "A"
    NO = "B"

    @classmethod
    def parse(cls, raw: str) -> "Answer":
        """Reads a typed answer such as ``"a"`` or ``" B\\n"``."""
        token = raw.strip().upper()
        for member in cls:
            if member.value == token:
                return member
        raise InvalidAnswerError(f"Invalid answer '{raw.strip()}'. Expected one of: A, B")

    @property
    def tally(self) -> "FacetTally":
        return FacetTally(1, 0) if self is Answer.YES else FacetTally(0, 1)


class FacetTally(NamedTuple):
    yes: int = 0
    no: int = 0

    def merge(self, other: "FacetTally") -> "FacetTally":
        return FacetTally(self.yes + other.yes, self.no + other.no)


class Category(str, Enum):
    ARTISAN = "Artisan"
    GUARDIAN = "Guardian"
    IDEALIST = "Idealist"
    RATIONAL = "Rational"


# --- Classification outcomes ---

class CategoryOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["category"] = "category"
    category: Category


class AllTiedOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["all_tied"] = "all_tied"


class UnclassifiedOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unclassified"] = "unclassified"
    candidates: Tuple[Category, ...] = tuple(Category)


Classification = Annotated[
    Union[CategoryOutcome, AllTiedOutcome, UnclassifiedOutcome],
    Field(discriminator="kind"),
]


# --- Questionnaire content ---

class Question(BaseModel):
    question: str
    options: List[Dict[Literal["a", "b"], str]]

    @field_validator("options")
    @classmethod
    def one_option_per_answer(cls, options):
        keys = [key for option in options for key in option]
        if sorted(keys) != ["a", "b"]:
            raise ValueError(f"Expected exactly one 'a' and one 'b' option, got {keys}")
        return options

    def option_text(self, answer: Answer) -> str:
        key = answer.value.lower()
        for option in self.options:
            if key in option:
                return option[key]
        raise KeyError(key)


class Questionnaire(BaseModel):
    questions: List[Question]

    @field_validator("questions")
    @classmethod
    def whole_facet_blocks(cls, questions):
        if not questions or len(questions) % FACETS_PER_BATCH != 0:
            raise ValueError(
                f"Question count must be a non-zero multiple of {FACETS_PER_BATCH}, got {len(questions)}"
            )
        return questions


class CategoryDescriptions(BaseModel):
    categories: Dict[Category, str]
    all_tied_narrative: str

    @field_validator("categories")
    @classmethod
    def every_category_described(cls, categories):
        missing = [c.value for c in Category if c not in categories]
        if missing:
            raise ValueError(f"Missing descriptions for categories: {missing}")
        return categories
