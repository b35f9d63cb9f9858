"""
answer - Exam auto-grading for submitted answers

Provides:
- Type-specific evaluators behind a registry
- Whitespace/case normalization for free-text answers
- Similarity-based partial credit
- Exam-level aggregation with pass/fail
- Teacher review of individual answers
"""

from .evaluator import EvaluatorRegistry, QuestionEvaluator, get_registry
from .grader import grade_exam, grade_question, round_percentage, summarize
from .models import (
    AnyOfAnswers,
    Difficulty,
    ExamGradingResult,
    Question,
    QuestionGradingResult,
    QuestionType,
    Section,
    SingleAnswer,
)
from .normalize import normalize_answer
from .review import apply_review
from .similarity import levenshtein_distance, similarity

__all__ = [
    "QuestionEvaluator",
    "EvaluatorRegistry",
    "get_registry",
    "grade_question",
    "grade_exam",
    "summarize",
    "round_percentage",
    "apply_review",
    "normalize_answer",
    "levenshtein_distance",
    "similarity",
    # Models
    "QuestionType",
    "Difficulty",
    "SingleAnswer",
    "AnyOfAnswers",
    "Question",
    "Section",
    "QuestionGradingResult",
    "ExamGradingResult",
]
