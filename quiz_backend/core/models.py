"""Domain models for the quiz backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import NamedTuple

from quiz_backend.constants.quiz_constants import MIN_OPTION_COUNT
from quiz_backend.core.errors import QuestionValidationError, ValidationError, ZeroQuestionsError


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def calculate_percentage(score: int, total_questions: int) -> float:
    """Return ``score`` as a percentage of ``total_questions``."""
    if total_questions == 0:
        raise ZeroQuestionsError()
    return score * 100.0 / total_questions


class AnswerPair(NamedTuple):
    """A submitted answer index for one question id."""

    question_id: int
    answer_index: int


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option.

    ``id`` is 0 until the question store assigns one on insertion.
    """

    question_text: str
    options: tuple[str, ...]
    correct_answer_index: int
    category: str
    difficulty: str
    id: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence of options but store an immutable tuple.
        object.__setattr__(self, "options", tuple(self.options))
        if not self.question_text or not self.question_text.strip():
            raise QuestionValidationError("Question text must not be empty.")
        if len(self.options) < MIN_OPTION_COUNT:
            raise QuestionValidationError(
                f"Each question must have at least {MIN_OPTION_COUNT} options."
            )
        if any(not option or not option.strip() for option in self.options):
            raise QuestionValidationError("Option text cannot be empty.")
        if isinstance(self.correct_answer_index, bool) or not isinstance(self.correct_answer_index, int):
            raise QuestionValidationError("Correct answer index must be an integer.")
        if not 0 <= self.correct_answer_index < len(self.options):
            raise QuestionValidationError(
                f"Correct answer index must be between 0 and {len(self.options) - 1}."
            )

    def matches_category(self, category: str) -> bool:
        return self.category.casefold() == category.casefold()

    def matches_difficulty(self, difficulty: str) -> bool:
        return self.difficulty.casefold() == difficulty.casefold()


@dataclass(frozen=True, slots=True)
class QuizResult:
    """A completed quiz attempt."""

    user_name: str
    user_email: str
    score: int
    total_questions: int
    category: str
    difficulty: str
    time_taken_seconds: int
    completed_at: datetime = field(default_factory=_utc_now)
    id: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.score <= self.total_questions:
            raise ValidationError(
                f"Score {self.score} is outside 0..{self.total_questions}."
            )
        # Naive timestamps are UTC.
        if self.completed_at.tzinfo is None:
            object.__setattr__(self, "completed_at", self.completed_at.replace(tzinfo=timezone.utc))

    @property
    def percentage(self) -> float:
        return calculate_percentage(self.score, self.total_questions)

    def matches_email(self, user_email: str) -> bool:
        return self.user_email.casefold() == user_email.casefold()


@dataclass(frozen=True, slots=True)
class QuizSubmission:
    """A quiz attempt as received from a quiz-taker, before scoring."""

    user_name: str
    user_email: str
    category: str
    difficulty: str
    time_taken_seconds: int
    answers: tuple[AnswerPair, ...]


@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """Scored submission returned to the caller after the result is saved."""

    result: QuizResult
    percentage: float
    passed: bool
    message: str


@dataclass(frozen=True, slots=True)
class QuizStats:
    """Aggregate counts over the question bank and saved attempts."""

    total_questions: int
    categories: list[str]
    total_attempts: int

    @property
    def total_categories(self) -> int:
        return len(self.categories)
