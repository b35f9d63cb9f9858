"""
Grading exceptions.

Grading itself never raises for well-typed input; these exceptions cover the
caller-driven operations that validate what they are given (teacher review).
"""

from typing import Any, Dict, Optional


class ExamGradingError(Exception):
    """Base exception for exam grading errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload for the host application"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class QuestionNotFoundError(ExamGradingError):
    """Raised when a question key is not part of a graded exam"""

    def __init__(self, question_key: str):
        super().__init__(
            message=f"Question '{question_key}' not found in exam result",
            details={"question_key": question_key}
        )


class InvalidReviewError(ExamGradingError):
    """Raised when reviewed points fall outside 0..max_points"""

    def __init__(self, question_key: str, points_earned: float, max_points: float):
        if points_earned < 0:
            message = "Reviewed points must be greater than or equal to 0"
        else:
            message = "Reviewed points cannot exceed the question maximum"
        super().__init__(
            message=f"{message} ('{question_key}': {points_earned} of {max_points})",
            details={
                "question_key": question_key,
                "points_earned": points_earned,
                "max_points": max_points,
            }
        )
