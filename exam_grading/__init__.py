"""exam_grading - Exam auto-grading engine for the language-learning platform.

Main namespace package:
- exam_grading.answer: Question evaluators, exam aggregation and review
- exam_grading.core: Settings, logging and exceptions
"""

from .answer import (
    ExamGradingResult,
    Question,
    QuestionGradingResult,
    QuestionType,
    Section,
    apply_review,
    grade_exam,
    grade_question,
)

__version__ = "0.1.0"

__all__ = [
    "grade_question",
    "grade_exam",
    "apply_review",
    "Question",
    "QuestionType",
    "Section",
    "QuestionGradingResult",
    "ExamGradingResult",
]
