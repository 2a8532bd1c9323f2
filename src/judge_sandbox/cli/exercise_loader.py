"""
Exercise document loading.

Exercises are YAML (.yaml/.yml) or JSON (.json) documents validated
against ExerciseDTO.
"""

import json
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from judge_sandbox.application.dto import ExerciseDTO
from judge_sandbox.domain.entities import CodeExercise
from judge_sandbox.errors import ExerciseLoadError


def load_exercise(path: Union[str, Path]) -> CodeExercise:
    """
    Load and validate an exercise document.

    Raises:
        ExerciseLoadError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExerciseLoadError(str(path), e.strerror or str(e))

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ExerciseLoadError(str(path), f"invalid document: {e}")

    if not isinstance(data, dict):
        raise ExerciseLoadError(str(path), "document must be a mapping")

    try:
        return ExerciseDTO.model_validate(data).to_domain()
    except ValidationError as e:
        raise ExerciseLoadError(str(path), str(e))
    except ValueError as e:
        # entity invariants, e.g. duplicate test case ids
        raise ExerciseLoadError(str(path), str(e))
