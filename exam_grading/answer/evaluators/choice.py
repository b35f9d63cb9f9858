"""
Exact-match evaluator for closed-choice questions.

Multiple choice and true/false answers come from a fixed option list, so the
submitted value is compared as-is: case-sensitive and untrimmed.
"""

from __future__ import annotations

from ..evaluator import QuestionEvaluator, register_evaluator
from ..models import QuestionType, SingleAnswer


@register_evaluator
class ChoiceEvaluator(QuestionEvaluator):
    """Evaluator for MULTIPLE_CHOICE and TRUE_FALSE questions."""

    question_types = (QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE)

    def compare(self, user_answer: str) -> tuple[bool, float]:
        correct = self.question.correct_answer
        # A list of answers never equals a single submitted option
        is_correct = isinstance(correct, SingleAnswer) and user_answer == correct.value
        return is_correct, 1.0 if is_correct else 0.0
