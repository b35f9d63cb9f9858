"""
Shared pytest fixtures for the grading tests.

This module provides:
- Question and exam fixtures mirroring stored exam data
- Utilities for testing Pydantic validation
- Settings cache isolation
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from exam_grading.answer.models import Question, QuestionType
from exam_grading.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Run every test against default settings, unaffected by the environment."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"EXAM_GRADING_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def multiple_choice_question() -> Question:
    return Question(
        type=QuestionType.MULTIPLE_CHOICE,
        question="¿Cuál es la capital de España?",
        options=["Madrid", "Barcelona", "Valencia", "Sevilla"],
        correct_answer="Madrid",
        points=10,
    )


@pytest.fixture
def short_answer_question() -> Question:
    return Question(
        type=QuestionType.SHORT_ANSWER,
        question="¿Cuál es la capital de Francia?",
        correct_answer="París",
        points=10,
        case_sensitive=False,
    )


@pytest.fixture
def partial_credit_question() -> Question:
    return Question(
        type=QuestionType.SHORT_ANSWER,
        question="What is the capital of the United Kingdom?",
        correct_answer="London",
        points=10,
        partial_credit=True,
    )


@pytest.fixture
def exam_sections() -> list[dict[str, Any]]:
    """Two sections in the stored (camelCase) shape."""
    return [
        {
            "questions": [
                {
                    "type": "MULTIPLE_CHOICE",
                    "question": "Question 1",
                    "options": ["A", "B", "C"],
                    "correctAnswer": "A",
                    "points": 10,
                },
                {
                    "type": "TRUE_FALSE",
                    "question": "Question 2",
                    "correctAnswer": "true",
                    "points": 10,
                },
            ],
        },
        {
            "questions": [
                {
                    "type": "SHORT_ANSWER",
                    "question": "Question 3",
                    "correctAnswer": "answer",
                    "points": 20,
                    "caseSensitive": False,
                },
            ],
        },
    ]


@pytest.fixture
def exam_with_essay() -> list[dict[str, Any]]:
    return [
        {
            "questions": [
                {
                    "type": "MULTIPLE_CHOICE",
                    "question": "MC Question",
                    "options": ["A", "B"],
                    "correctAnswer": "A",
                    "points": 10,
                },
                {
                    "type": "ESSAY",
                    "question": "Essay Question",
                    "correctAnswer": "",
                    "points": 30,
                },
            ],
        },
    ]


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
