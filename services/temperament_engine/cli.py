"""
Keirsey Temperament Sorter - interactive session runner.

Asks every question of the questionnaire, records one answer per question,
then prints the answer split, the temperament code and the matching
temperament description(s).

Usage:
    keirsey-sorter
    keirsey-sorter --questions assets/questions.yml --categories assets/categories.yml
    keirsey-sorter --log-level DEBUG --json-logs
    keirsey-sorter --no-color

Exit Codes:
    0   Session(s) completed
    1   Questionnaire or category file could not be loaded, or input ended mid-session
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console
from colorama.ansi import Cursor, clear_screen

from .config import get_settings
from .engine import TemperamentEngine
from .loader import load_category_descriptions_from_file, load_questionnaire_from_file
from .logging_config import setup_logging
from .models import (
    Answer,
    CategoryDescriptions,
    InvalidAnswerError,
    Question,
    Questionnaire,
    QuestionnaireValidationError,
)
from .results_generator import (
    format_answer_split,
    format_results,
    format_running_score,
    generate_results_text,
)

logger = logging.getLogger(__name__)

TITLE = "Keirsey Temperament Sorter"
INVALID_INPUT_MESSAGE = "Invalid input"


class QuestionnaireSession:
    """
    Administers one pass through the questionnaire.

    Colour and screen clearing are used only when ``color`` is set, or when it is
    left as None and the output stream is a terminal.
    """

    def __init__(
        self,
        questionnaire: Questionnaire,
        descriptions: CategoryDescriptions,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ):
        self.questionnaire = questionnaire
        self.descriptions = descriptions
        self.input_fn = input_fn
        self.output = output
        self.color = _is_terminal(self.stream) if color is None else color
        self.engine = TemperamentEngine()

    @property
    def stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    def paint(self, text: str, colour: str) -> str:
        return f"{colour}{text}{Style.RESET_ALL}" if self.color else text

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def clear(self) -> None:
        if self.color:
            self.stream.write(clear_screen() + Cursor.POS(1, 1))

    def ask(self, question: Question, number: int) -> Answer:
        """Asks one question until a valid answer token is given."""
        total = len(self.questionnaire.questions)
        self.clear()
        while True:
            self.write(format_running_score(self.engine.running_totals()))
            self.write()
            self.write(f"Question {number} of {total}")
            self.write(self.paint(question.question, Fore.GREEN))
            for answer in Answer:
                self.write(f"{answer.value}: {question.option_text(answer)}")
            try:
                return Answer.parse(self.input_fn(self.paint("> ", Fore.CYAN)))
            except InvalidAnswerError as e:
                logger.debug("Rejected answer for question %d: %s", number, e)
                self.clear()
                self.write(self.paint(INVALID_INPUT_MESSAGE, Fore.RED))

    def run(self) -> TemperamentEngine:
        for number, question in enumerate(self.questionnaire.questions, start=1):
            self.engine.record(self.ask(question, number))
            self.write()
        self.clear()
        self.show_results()
        return self.engine

    def show_results(self) -> None:
        code = self.engine.temperament_code()
        outcome = self.engine.classification()
        results = generate_results_text(code, outcome, self.descriptions)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Session summary: %s", self.engine.summary())

        self.write(format_answer_split(self.engine.answer_split()))
        self.write()
        self.write(format_results(results))


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def run_sorter(
    questionnaire: Questionnaire,
    descriptions: CategoryDescriptions,
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
    color: Optional[bool] = None,
) -> int:
    """
    Runs sessions until the user declines to go again. Returns the number of sessions run.

    End of input at the "run again" prompt counts as declining.
    """
    sessions = 0
    while True:
        session = QuestionnaireSession(questionnaire, descriptions, input_fn=input_fn, output=output, color=color)
        session.run()
        sessions += 1
        session.write()
        try:
            again = input_fn("Run again? (y/n) ").strip().lower()
        except EOFError:
            session.write()
            return sessions
        if again not in ("y", "yes"):
            return sessions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keirsey-sorter", description=TITLE)
    parser.add_argument("--questions", help="Path to the questionnaire YAML/JSON file")
    parser.add_argument("--categories", help="Path to the category descriptions YAML/JSON file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None, help="Disable colored output")
    return parser


def main(
    argv: Optional[List[str]] = None,
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(
        args.log_level or settings.log_level,
        json_logs=args.json_logs if args.json_logs is not None else settings.json_logs,
    )

    questions_path = args.questions or settings.questions_path
    categories_path = args.categories or settings.categories_path
    try:
        questionnaire = load_questionnaire_from_file(questions_path)
        descriptions = load_category_descriptions_from_file(categories_path)
    except QuestionnaireValidationError as e:
        logger.error("Could not load questionnaire content: %s", e)
        return 1

    just_fix_windows_console()
    print(TITLE, file=output if output is not None else sys.stdout)
    try:
        sessions = run_sorter(questionnaire, descriptions, input_fn=input_fn, output=output, color=args.color)
    except (EOFError, KeyboardInterrupt):
        logger.warning("Session aborted before the questionnaire was completed")
        return 1

    logger.info("Finished after %d session(s)", sessions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
