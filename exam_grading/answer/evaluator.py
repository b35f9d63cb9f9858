"""
Base question evaluator framework.

Provides abstract base class for question evaluators and a registry
for type-based dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .models import Question, QuestionGradingResult, QuestionType


class QuestionEvaluator(BaseModel, ABC):
    """
    Abstract base class for question evaluators.

    Each evaluator grades one family of question types against a single
    submitted answer.

    Subclasses must implement:
    - compare(): Core decision, returning (is_correct, score)
    - question_types: Class variable listing the types it grades
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    question_types: ClassVar[tuple[QuestionType, ...]] = ()

    question: Question

    @abstractmethod
    def compare(self, user_answer: str) -> tuple[bool, float]:
        """
        Compare the submitted answer with the question's correct answer.

        Args:
            user_answer: Submitted answer, verbatim

        Returns:
            Tuple of (is_correct, score)
            - is_correct: Full-credit match
            - score: Fraction of the question's points earned (0.0 to 1.0)
        """
        pass

    def evaluate(self, user_answer: str, question_key: str) -> QuestionGradingResult:
        """
        Grade the submitted answer.

        Args:
            user_answer: Submitted answer, verbatim
            question_key: "{section_index}-{question_index}", echoed back

        Returns:
            QuestionGradingResult with points scaled from the compare() score
        """
        is_correct, score = self.compare(user_answer)

        return QuestionGradingResult(
            question_key=question_key,
            user_answer=user_answer,
            correct_answer=self.question.correct_answer.raw(),
            is_correct=is_correct,
            points_earned=self.question.points * score,
            max_points=self.question.points,
            explanation=self.question.explanation,
        )


class EvaluatorRegistry(BaseModel):
    """
    Registry for question evaluators.

    Provides type-based dispatch to appropriate evaluator.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _evaluators: dict[str, type[QuestionEvaluator]] = PrivateAttr(default_factory=dict)

    def register(
        self, question_type: QuestionType | str, evaluator_class: type[QuestionEvaluator]
    ) -> None:
        """
        Register an evaluator for a question type.

        Raises:
            TypeError: If evaluator_class is not a QuestionEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, QuestionEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of QuestionEvaluator, got {evaluator_class}")
        self._evaluators[question_type] = evaluator_class

    def get_evaluator(self, question_type: QuestionType | str) -> type[QuestionEvaluator] | None:
        """Evaluator class for a question type, or None if the type has no rule."""
        return self._evaluators.get(question_type)

    def create_evaluator(self, question: Question, **options: Any) -> QuestionEvaluator:
        """
        Create evaluator instance for a question.

        Raises:
            ValueError: If the question type is not registered
        """
        evaluator_class = self.get_evaluator(question.type)
        if evaluator_class is None:
            raise ValueError(f"No evaluator registered for type: {question.type}")

        return evaluator_class(question=question, **options)

    def get_registered_types(self) -> list[str]:
        return [getattr(question_type, "value", question_type) for question_type in self._evaluators]

    def missing_types(self) -> list[QuestionType]:
        """QuestionType members that have no evaluator registered."""
        return [question_type for question_type in QuestionType if question_type not in self._evaluators]


# Global registry instance
_global_registry = EvaluatorRegistry()


def register_evaluator(evaluator_class: type[QuestionEvaluator]) -> type[QuestionEvaluator]:
    """
    Register an evaluator in the global registry for each of its question_types.

    Returns the class so it can be used as a decorator.
    """
    for question_type in evaluator_class.question_types:
        _global_registry.register(question_type, evaluator_class)
    return evaluator_class


def get_evaluator(question_type: QuestionType | str) -> type[QuestionEvaluator] | None:
    return _global_registry.get_evaluator(question_type)


def create_evaluator(question: Question, **options: Any) -> QuestionEvaluator:
    return _global_registry.create_evaluator(question, **options)


def get_registry() -> EvaluatorRegistry:
    return _global_registry
