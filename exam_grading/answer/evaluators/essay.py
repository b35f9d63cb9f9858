"""
Essay evaluator.

Essays are never auto-graded: they score zero until a reviewer (or an external
AI grading call) assigns points through apply_review().
"""

from __future__ import annotations

from ..evaluator import QuestionEvaluator, register_evaluator
from ..models import QuestionGradingResult, QuestionType


@register_evaluator
class EssayEvaluator(QuestionEvaluator):
    """Evaluator for ESSAY questions."""

    question_types = (QuestionType.ESSAY,)

    def compare(self, user_answer: str) -> tuple[bool, float]:
        return False, 0.0

    def evaluate(self, user_answer: str, question_key: str) -> QuestionGradingResult:
        result = super().evaluate(user_answer, question_key)
        result.needs_review = True
        return result
