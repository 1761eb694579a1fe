"""Utilities for importing questions from a human-friendly text file.

File format (blocks separated by '---'; a new 'Q:' line also starts a block):

    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question. Blank lines inside
       the question or an option are kept as paragraph breaks.
    A: First option text
    B: Second option text
    ...            (up to H; at least A and B, no gaps)
    CORRECT: A|B|...
    CATEGORY: Category name
    DIFFICULTY: Easy|Medium|Hard (free-form)

Example:

    Q: What is $2 + 2$?
    A: 3
    B: 4
    C: 5
    D: 22
    CORRECT: B
    CATEGORY: Mathematics
    DIFFICULTY: Easy

The seed catalog shipped in ``quiz_backend/data`` uses the same format.
"""

from __future__ import annotations

from pathlib import Path

from quiz_backend.core.errors import QuestionValidationError, QuizImportError
from quiz_backend.core.models import Question

OPTION_LETTERS = ("A", "B", "C", "D", "E", "F", "G", "H")
_FIELD_MARKERS = ("CORRECT", "CATEGORY", "DIFFICULTY")


def load_questions_from_file(file_path: Path) -> list[Question]:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError(f"Quiz file {file_path} did not contain any questions.")
    return questions


def parse_quiz_text(text: str) -> list[Question]:
    """Parse every question block in ``text``."""
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped.upper().startswith("Q:") and any(line.strip() for line in current_block):
            blocks.append("\n".join(current_block).strip())
            current_block = []
        current_block.append(raw_line)
    blocks.append("\n".join(current_block).strip())

    questions: list[Question] = []
    for number, block in enumerate((b for b in blocks if b), start=1):
        try:
            questions.append(_parse_block(block))
        except QuizImportError as exc:
            raise QuizImportError(f"Question block {number}: {exc}") from exc
    return questions


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    fields: dict[str, str] = {}
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            # Paragraph break inside a multi-line question or option.
            if current_section == "Q":
                question_lines.append("")
            elif current_section in OPTION_LETTERS:
                options[current_section] += "\n"
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        marker = next((m for m in _FIELD_MARKERS if upper.startswith(f"{m}:")), None)
        if marker is not None:
            fields[marker] = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines:
        raise QuizImportError("Question text missing (Q: ...)")

    letters = OPTION_LETTERS[: len(options)]
    if set(options) != set(letters):
        raise QuizImportError("Options must be lettered consecutively starting at A.")

    for marker in _FIELD_MARKERS:
        if not fields.get(marker):
            raise QuizImportError(f"{marker} is required.")

    correct_letter = fields["CORRECT"].upper()
    if correct_letter not in letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(letters)}.")

    try:
        return Question(
            question_text="\n".join(question_lines).strip(),
            options=tuple(options[letter].strip() for letter in letters),
            correct_answer_index=letters.index(correct_letter),
            category=fields["CATEGORY"],
            difficulty=fields["DIFFICULTY"],
        )
    except QuestionValidationError as exc:
        raise QuizImportError(str(exc)) from exc
