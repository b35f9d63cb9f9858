"""
Teacher review of graded answers.

A reviewer assigns points to one answer (typically an essay awaiting manual or
AI grading) and the attempt is scored again from the updated results.
"""

from __future__ import annotations

from typing import Optional

from exam_grading.core.config import get_settings
from exam_grading.core.errors import InvalidReviewError, QuestionNotFoundError
from exam_grading.core.logging import get_context_logger

from .grader import summarize
from .models import ExamGradingResult

logger = get_context_logger(__name__)


def apply_review(
    exam_result: ExamGradingResult,
    question_key: str,
    points_earned: float,
    feedback: Optional[str] = None,
    passing_score: Optional[float] = None,
) -> ExamGradingResult:
    """
    Record reviewed points for one question and rescore the exam.

    The reviewed answer counts as correct when it earns at least
    ``settings.REVIEW_CORRECT_RATIO`` of its maximum. ``exam_result`` is left
    untouched; a new result is returned.

    Args:
        exam_result: Result produced by grade_exam() (or a previous review)
        question_key: "{section_index}-{question_index}" of the reviewed answer
        points_earned: Points assigned by the reviewer
        feedback: Optional reviewer comment
        passing_score: Override for the passing percentage
            (default: the one the exam was graded with)

    Raises:
        QuestionNotFoundError: If no result has ``question_key``
        InvalidReviewError: If points are negative or above the maximum
    """
    settings = get_settings()
    if passing_score is None:
        passing_score = exam_result.passing_score

    index = next(
        (i for i, result in enumerate(exam_result.question_results) if result.question_key == question_key),
        None,
    )
    if index is None:
        raise QuestionNotFoundError(question_key)

    current = exam_result.question_results[index]
    if points_earned < 0 or points_earned > current.max_points:
        error = InvalidReviewError(question_key, points_earned, current.max_points)
        logger.warning("Rejected review", extra_data=error.details)
        raise error

    reviewed = current.model_copy(
        update={
            "points_earned": float(points_earned),
            "is_correct": points_earned >= current.max_points * settings.REVIEW_CORRECT_RATIO,
            "needs_review": False,
            "feedback": feedback,
        }
    )

    question_results = list(exam_result.question_results)
    question_results[index] = reviewed

    result = summarize(question_results, passing_score)

    logger.info(
        "Review applied",
        extra_data={
            "question_key": question_key,
            "points_earned": reviewed.points_earned,
            "max_points": reviewed.max_points,
            "percentage": result.percentage,
            "pending_review": len(result.pending_review),
        },
    )

    return result
