from pathlib import Path

import pytest

from services.temperament_engine.loader import (
    load_category_descriptions_data,
    load_questionnaire_data,
)


@pytest.fixture(scope="session")
def assets_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "assets"


@pytest.fixture
def one_block_questionnaire_data():
    """Seven questions, i.e. exactly one facet block."""
    return {
        "questions": [
            {"question": f"Facet question {i + 1}?", "options": [{"a": f"Option A{i + 1}"}, {"b": f"Option B{i + 1}"}]}
            for i in range(7)
        ]
    }


@pytest.fixture
def one_block_questionnaire(one_block_questionnaire_data):
    return load_questionnaire_data(one_block_questionnaire_data)


@pytest.fixture
def category_descriptions_data():
    return {
        "categories": {
            "Artisan": "Artisan description.",
            "Guardian": "Guardian description.",
            "Idealist": "Idealist description.",
            "Rational": "Rational description.",
        },
        "all_tied_narrative": "Perfectly balanced narrative.",
    }


@pytest.fixture
def category_descriptions(category_descriptions_data):
    return load_category_descriptions_data(category_descriptions_data)
