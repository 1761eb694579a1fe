"""Exception hierarchy raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all errors raised by the quiz core."""


class ValidationError(QuizError, ValueError):
    """Raised when a question or submission is malformed."""


class QuestionValidationError(ValidationError):
    """Raised when a question violates its construction-time invariants."""


class QuizImportError(ValidationError):
    """Raised when a quiz definition cannot be parsed."""


class AnswerCountError(QuizError, IndexError):
    """Raised when fewer answers than question ids are supplied for scoring."""

    def __init__(self, answer_count: int, question_count: int) -> None:
        super().__init__(
            f"Received {answer_count} answer(s) for {question_count} question(s)."
        )
        self.answer_count = answer_count
        self.question_count = question_count


class ZeroQuestionsError(QuizError, ZeroDivisionError):
    """Raised when a percentage is requested for an attempt with no questions."""

    def __init__(self) -> None:
        super().__init__("Cannot compute a percentage for an attempt with zero questions.")
