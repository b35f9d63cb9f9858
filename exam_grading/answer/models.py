"""
Exam data structures.

Questions and sections are the grading input; QuestionGradingResult and
ExamGradingResult are the output handed back to the host application.

All models accept snake_case names as well as the camelCase names the
application stores (``correctAnswer``, ``caseSensitive``, ...), and dump to
camelCase with ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Question types with a grading rule."""

    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    SHORT_ANSWER = "SHORT_ANSWER"
    FILL_BLANK = "FILL_BLANK"
    ESSAY = "ESSAY"


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class SingleAnswer(BaseModel):
    """Exactly one acceptable answer."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    value: str

    def candidates(self) -> list[str]:
        return [self.value]

    def primary(self) -> Optional[str]:
        return self.value

    def raw(self) -> str:
        return self.value


class AnyOfAnswers(BaseModel):
    """Any one of several answers is accepted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["any_of"] = "any_of"
    values: list[str] = Field(default_factory=list)

    def candidates(self) -> list[str]:
        return list(self.values)

    def primary(self) -> Optional[str]:
        return self.values[0] if self.values else None

    def raw(self) -> list[str]:
        return list(self.values)


CorrectAnswer = Annotated[Union[SingleAnswer, AnyOfAnswers], Field(discriminator="kind")]


class Question(BaseModel):
    """
    A single exam question.

    Only ``type``, ``correct_answer``, ``points``, ``case_sensitive`` and
    ``partial_credit`` take part in grading. ``type`` keeps any string it is
    given: types without a grading rule (MATCHING, ORDERING, ...) are graded
    as zero credit instead of being rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    type: Union[QuestionType, str] = Field(union_mode="left_to_right")
    question: str = ""
    options: list[str] = Field(default_factory=list)
    correct_answer: CorrectAnswer = Field(default_factory=AnyOfAnswers)
    points: float = Field(default=0.0, ge=0)
    case_sensitive: bool = False
    partial_credit: bool = False
    explanation: Optional[str] = None

    # Authoring metadata, never consulted by grading
    order: Optional[int] = None
    difficulty: Optional[Difficulty] = None
    tags: list[str] = Field(default_factory=list)
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    @field_validator("correct_answer", mode="before")
    @classmethod
    def coerce_correct_answer(cls, v: Any) -> Any:
        """Accept the stored ``str | list[str] | None`` shapes."""
        if v is None:
            return AnyOfAnswers()
        if isinstance(v, str):
            return SingleAnswer(value=v)
        if isinstance(v, (list, tuple)):
            return AnyOfAnswers(values=[str(item) for item in v])
        return v

    @property
    def is_auto_gradable(self) -> bool:
        return self.type != QuestionType.ESSAY


class Section(BaseModel):
    """An ordered group of questions. List position is the section index."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    questions: list[Question] = Field(default_factory=list)
    title: Optional[str] = None
    description: Optional[str] = None
    order: Optional[int] = None


class QuestionGradingResult(BaseModel):
    """
    Outcome of grading one question.

    Attributes:
        question_key: "{section_index}-{question_index}"
        user_answer: Submitted answer, verbatim
        correct_answer: The question's correct answer in its stored shape
        is_correct: Full-credit match
        points_earned: 0 <= points_earned <= max_points
        max_points: The question's points
        explanation: Echoed from the question, or the essay review notice
        needs_review: Waiting for manual/AI grading (essays)
        feedback: Reviewer feedback, set by apply_review()
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question_key: str
    user_answer: str = ""
    correct_answer: Union[str, list[str]] = ""
    is_correct: bool = False
    points_earned: float = Field(default=0.0, ge=0)
    max_points: float = Field(default=0.0, ge=0)
    explanation: Optional[str] = None
    needs_review: bool = False
    feedback: Optional[str] = None

    def model_post_init(self, __context: Any) -> None:
        """Keep earned points within the question maximum."""
        if self.points_earned > self.max_points:
            self.points_earned = self.max_points

    @property
    def has_partial_credit(self) -> bool:
        return 0 < self.points_earned < self.max_points


class ExamGradingResult(BaseModel):
    """Scored summary of a whole exam attempt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_questions: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    total_points: float = 0.0
    earned_points: float = 0.0
    percentage: float = 0.0
    passed: bool = False
    passing_score: float = 70.0
    question_results: list[QuestionGradingResult] = Field(default_factory=list)

    @property
    def pending_review(self) -> list[str]:
        """Keys of questions still waiting for manual/AI grading."""
        return [r.question_key for r in self.question_results if r.needs_review]

    def get_result(self, question_key: str) -> Optional[QuestionGradingResult]:
        for result in self.question_results:
            if result.question_key == question_key:
                return result
        return None
