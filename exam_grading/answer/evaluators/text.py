"""
Free-text answer evaluator.

Handles short answers and fill-in-the-blank with:
- Whitespace and (optionally) case normalization
- Several acceptable answers
- Half credit for near misses when partial credit is enabled
"""

from __future__ import annotations

from pydantic import Field

from exam_grading.core.config import get_settings
from exam_grading.core.logging import get_context_logger

from ..evaluator import QuestionEvaluator, register_evaluator
from ..models import QuestionType
from ..normalize import normalize_answer
from ..similarity import similarity

logger = get_context_logger(__name__)


@register_evaluator
class TextEvaluator(QuestionEvaluator):
    """
    Evaluator for SHORT_ANSWER and FILL_BLANK questions.

    The answer is correct when its normalized form equals the normalized form
    of any acceptable answer. Otherwise, with partial credit enabled, an
    answer whose similarity to the first acceptable answer is strictly above
    ``partial_credit_threshold`` earns ``partial_credit_ratio`` of the points
    and stays incorrect.
    """

    question_types = (QuestionType.SHORT_ANSWER, QuestionType.FILL_BLANK)

    partial_credit_threshold: float = Field(
        default_factory=lambda: get_settings().PARTIAL_CREDIT_THRESHOLD,
        ge=0,
        le=1,
        description="Similarity that must be exceeded for partial credit",
    )
    partial_credit_ratio: float = Field(
        default_factory=lambda: get_settings().PARTIAL_CREDIT_RATIO,
        ge=0,
        le=1,
        description="Fraction of points awarded for a near miss",
    )
    max_similarity_length: int = Field(
        default_factory=lambda: get_settings().MAX_SIMILARITY_LENGTH,
        gt=0,
        description="Longest normalized answer the similarity check will score",
    )

    def parse_user_answer(self, answer: str) -> str:
        return normalize_answer(answer, self.question.case_sensitive)

    def accepted_answers(self) -> list[str]:
        return [
            normalize_answer(candidate, self.question.case_sensitive)
            for candidate in self.question.correct_answer.candidates()
        ]

    def compare(self, user_answer: str) -> tuple[bool, float]:
        normalized = self.parse_user_answer(user_answer)

        if normalized in self.accepted_answers():
            return True, 1.0

        if not self.question.partial_credit:
            return False, 0.0

        # Only the first acceptable answer is used for near misses
        primary = self.question.correct_answer.primary()
        if primary is None:
            return False, 0.0
        target = normalize_answer(primary, self.question.case_sensitive)

        if max(len(normalized), len(target)) > self.max_similarity_length:
            logger.warning(
                "Answer too long for partial credit check",
                extra_data={
                    "answer_length": len(normalized),
                    "correct_length": len(target),
                    "max_similarity_length": self.max_similarity_length,
                },
            )
            return False, 0.0

        if similarity(normalized, target) > self.partial_credit_threshold:
            return False, self.partial_credit_ratio

        return False, 0.0
