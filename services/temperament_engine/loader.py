import logging
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from .models import CategoryDescriptions, Questionnaire, QuestionnaireValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: Type[ModelT], data: Dict[str, Any], source: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise QuestionnaireValidationError(f"Invalid content in {source}: {e}") from e


def _read_document(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Reads a YAML or JSON document into a dictionary.

    JSON files go through the YAML parser as well, since YAML is a superset of JSON.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise QuestionnaireValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise QuestionnaireValidationError(f"Error parsing file {file_path}: {e}")

    if data is None:
        raise QuestionnaireValidationError(f"File is empty or invalid: {file_path}")
    if not isinstance(data, dict):
        raise QuestionnaireValidationError(f"Expected a mapping at the top of {file_path}")
    return data


def load_questionnaire_data(data: Dict[str, Any], source: str = "<data>") -> Questionnaire:
    questionnaire = _validate(Questionnaire, data, source)
    logger.debug("Loaded %d questions from %s", len(questionnaire.questions), source)
    return questionnaire


def load_questionnaire_from_file(file_path: Union[str, Path]) -> Questionnaire:
    """
    Loads the questionnaire, validates it and returns a Questionnaire.

    Raises:
        QuestionnaireValidationError: If the file is missing, unparsable, or its
            questions do not form whole facet blocks.
    """
    return load_questionnaire_data(_read_document(file_path), str(file_path))


def load_category_descriptions_data(data: Dict[str, Any], source: str = "<data>") -> CategoryDescriptions:
    return _validate(CategoryDescriptions, data, source)


def load_category_descriptions_from_file(file_path: Union[str, Path]) -> CategoryDescriptions:
    return load_category_descriptions_data(_read_document(file_path), str(file_path))
