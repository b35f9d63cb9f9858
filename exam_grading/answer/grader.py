"""
Question and exam graders.

grade_question() dispatches one question to its evaluator; grade_exam() walks
every section in order, grades each question against the flat answer map and
folds the results into an ExamGradingResult.

Grading is total: missing answers, mismatched correct-answer shapes and
unknown question types all degrade to an incorrect, zero-point result.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from exam_grading.core.config import get_settings
from exam_grading.core.logging import get_context_logger

from . import evaluators  # noqa: F401  (registers the evaluators)
from .evaluator import get_evaluator
from .models import (
    ExamGradingResult,
    Question,
    QuestionGradingResult,
    QuestionType,
    Section,
)

logger = get_context_logger(__name__)

QuestionLike = Union[Question, Mapping[str, Any]]
SectionLike = Union[Section, Mapping[str, Any], Sequence[QuestionLike]]


def _as_question(question: QuestionLike) -> Question:
    if isinstance(question, Question):
        return question
    return Question.model_validate(question)


def _section_questions(section: SectionLike) -> Iterable[QuestionLike]:
    if isinstance(section, Section):
        return section.questions
    if isinstance(section, Mapping):
        return section.get("questions") or []
    return section


def round_percentage(value: float) -> float:
    """Round half-up to two decimals (33.3333 -> 33.33, 12.345 -> 12.35)."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def grade_question(
    question: QuestionLike,
    user_answer: str,
    question_key: str,
) -> QuestionGradingResult:
    """
    Grade one submitted answer.

    Args:
        question: Question model or a mapping in the stored question shape
        user_answer: Submitted answer, verbatim
        question_key: "{section_index}-{question_index}", echoed back

    Returns:
        QuestionGradingResult; never raises for a well-formed question
    """
    question = _as_question(question)

    evaluator_class = get_evaluator(question.type)
    if evaluator_class is None:
        logger.warning(
            "No grading rule for question type, awarding zero credit",
            extra_data={"question_key": question_key, "question_type": str(question.type)},
        )
        return QuestionGradingResult(
            question_key=question_key,
            user_answer=user_answer,
            correct_answer=question.correct_answer.raw(),
            is_correct=False,
            points_earned=0.0,
            max_points=question.points,
            explanation=question.explanation,
        )

    return evaluator_class(question=question).evaluate(user_answer, question_key)


def summarize(
    question_results: Sequence[QuestionGradingResult],
    passing_score: float,
) -> ExamGradingResult:
    """
    Fold per-question results into exam totals.

    Every result counts towards the point totals; results still waiting for
    review count towards neither correct nor incorrect answers.
    """
    total_points = 0.0
    earned_points = 0.0
    correct_answers = 0
    incorrect_answers = 0

    for result in question_results:
        total_points += result.max_points
        earned_points += result.points_earned
        if result.needs_review:
            continue
        if result.is_correct:
            correct_answers += 1
        else:
            incorrect_answers += 1

    if total_points > 0:
        percentage = round_percentage(earned_points / total_points * 100)
    else:
        percentage = 0.0

    return ExamGradingResult(
        total_questions=len(question_results),
        correct_answers=correct_answers,
        incorrect_answers=incorrect_answers,
        total_points=total_points,
        earned_points=earned_points,
        percentage=percentage,
        passed=percentage >= passing_score,
        passing_score=passing_score,
        question_results=list(question_results),
    )


def grade_exam(
    sections: Sequence[SectionLike],
    answers: Mapping[str, str],
    passing_score: Optional[float] = None,
) -> ExamGradingResult:
    """
    Grade a complete exam attempt.

    Args:
        sections: Ordered sections, each an ordered list of questions
        answers: Submitted answers keyed by "{section_index}-{question_index}";
            absent keys are graded as an empty answer
        passing_score: Percentage needed to pass (default: settings.PASSING_SCORE)

    Returns:
        ExamGradingResult with one question result per question, in order

    Essay questions are not auto-graded: they add their points to the total
    and get a placeholder result flagged ``needs_review``.
    """
    settings = get_settings()
    if passing_score is None:
        passing_score = settings.PASSING_SCORE

    question_results: list[QuestionGradingResult] = []

    for section_index, section in enumerate(sections):
        for question_index, raw_question in enumerate(_section_questions(section)):
            question = _as_question(raw_question)
            question_key = f"{section_index}-{question_index}"
            user_answer = answers.get(question_key) or ""

            if question.type == QuestionType.ESSAY:
                question_results.append(
                    QuestionGradingResult(
                        question_key=question_key,
                        user_answer=user_answer,
                        correct_answer="",
                        is_correct=False,
                        points_earned=0.0,
                        max_points=question.points,
                        explanation=settings.ESSAY_REVIEW_MESSAGE,
                        needs_review=True,
                    )
                )
            else:
                question_results.append(grade_question(question, user_answer, question_key))

    result = summarize(question_results, passing_score)

    logger.debug(
        "Exam graded",
        extra_data={
            "total_questions": result.total_questions,
            "correct_answers": result.correct_answers,
            "earned_points": result.earned_points,
            "total_points": result.total_points,
            "percentage": result.percentage,
            "passed": result.passed,
            "pending_review": len(result.pending_review),
        },
    )

    return result
