"""Builders for domain objects used across the test modules."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from quiz_backend.core.models import Question, QuizResult

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_question(
    text: str = "What is 2 + 2?",
    options: tuple[str, ...] = ("3", "4", "5", "22"),
    correct: int = 1,
    category: str = "Math",
    difficulty: str = "Easy",
) -> Question:
    return Question(
        question_text=text,
        options=options,
        correct_answer_index=correct,
        category=category,
        difficulty=difficulty,
    )


def make_result(
    score: int,
    total: int = 10,
    minutes: int = 0,
    category: str = "Math",
    email: str = "ada@example.com",
    name: str = "Ada",
) -> QuizResult:
    return QuizResult(
        user_name=name,
        user_email=email,
        score=score,
        total_questions=total,
        category=category,
        difficulty="Easy",
        time_taken_seconds=60,
        completed_at=BASE_TIME + timedelta(minutes=minutes),
    )
