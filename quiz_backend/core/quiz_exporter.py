"""Utilities for exporting questions to the plain-text format used for imports."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from quiz_backend.core.models import Question
from quiz_backend.core.quiz_importer import OPTION_LETTERS


def save_questions_to_file(file_path: Path, questions: list[Question]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty question list.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def serialize_questions(questions: Iterable[Question]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    if not blocks:
        return ""
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    if len(question.options) > len(OPTION_LETTERS):
        raise ValueError(
            f"Question {question.id} has more than {len(OPTION_LETTERS)} options."
        )

    question_lines = question.question_text.splitlines() or [question.question_text]
    lines = [f"Q: {question_lines[0]}", *question_lines[1:]]

    for letter, option_text in zip(OPTION_LETTERS, question.options):
        option_lines = option_text.splitlines() or [option_text]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])

    lines.append(f"CORRECT: {OPTION_LETTERS[question.correct_answer_index]}")
    lines.append(f"CATEGORY: {question.category}")
    lines.append(f"DIFFICULTY: {question.difficulty}")
    return "\n".join(lines)
