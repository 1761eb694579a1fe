"""Tests for the plain-text quiz import and export format."""

from __future__ import annotations

import pytest

from quiz_backend.constants.quiz_constants import SEED_QUESTIONS_PATH
from quiz_backend.core.errors import QuizImportError
from quiz_backend.core.quiz_exporter import save_questions_to_file, serialize_questions
from quiz_backend.core.quiz_importer import load_questions_from_file, parse_quiz_text

from factories import make_question

SAMPLE = """
Q: What is $2 + 2$?
A: 3
B: 4
C: 5
D: 22
CORRECT: B
CATEGORY: Mathematics
DIFFICULTY: Easy

---

Q: Is the sky blue?
Explain briefly.
A: Yes
B: No
CORRECT: a
CATEGORY: Science
DIFFICULTY: Medium
"""


def test_parse_blocks():
    first, second = parse_quiz_text(SAMPLE)
    assert first.question_text == "What is $2 + 2$?"
    assert first.options == ("3", "4", "5", "22")
    assert first.correct_answer_index == 1
    assert (first.category, first.difficulty) == ("Mathematics", "Easy")
    assert second.question_text == "Is the sky blue?\nExplain briefly."
    assert second.options == ("Yes", "No")
    assert second.correct_answer_index == 0


def test_blank_text_yields_no_questions():
    assert parse_quiz_text("\n\n---\n") == []


@pytest.mark.parametrize(
    "block, message",
    [
        ("A: x\nB: y\nCORRECT: A\nCATEGORY: c\nDIFFICULTY: d", "Question text missing"),
        ("Q: q\nA: x\nC: y\nCORRECT: A\nCATEGORY: c\nDIFFICULTY: d", "consecutively"),
        ("Q: q\nA: x\nB: y\nCORRECT: C\nCATEGORY: c\nDIFFICULTY: d", "CORRECT must be one of"),
        ("Q: q\nA: x\nB: y\nCORRECT: A\nDIFFICULTY: d", "CATEGORY is required"),
        ("Q: q\nA: x\nCORRECT: A\nCATEGORY: c\nDIFFICULTY: d", "at least 2 options"),
    ],
)
def test_malformed_blocks_raise(block, message):
    with pytest.raises(QuizImportError, match=message):
        parse_quiz_text(block)


def test_error_names_the_block():
    text = SAMPLE + "\n---\nQ: broken\nA: only\n"
    with pytest.raises(QuizImportError, match="Question block 3"):
        parse_quiz_text(text)


def test_seed_catalog_loads():
    questions = load_questions_from_file(SEED_QUESTIONS_PATH)
    assert len(questions) == 44
    assert {q.category for q in questions} == {"Programming", "Science", "Mathematics", "History", "Geography"}


def test_load_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n", encoding="utf-8")
    with pytest.raises(QuizImportError):
        load_questions_from_file(path)


def test_export_then_import_preserves_content(tmp_path):
    questions = parse_quiz_text(SAMPLE)
    path = tmp_path / "nested" / "quiz.txt"
    save_questions_to_file(path, questions)
    assert load_questions_from_file(path) == questions


def test_serialize_question_layout():
    text = serialize_questions([make_question(options=("x", "y"), correct=1, category="Math", difficulty="Hard")])
    assert text == "Q: What is 2 + 2?\nA: x\nB: y\nCORRECT: B\nCATEGORY: Math\nDIFFICULTY: Hard\n"
    assert serialize_questions([]) == ""


def test_save_empty_list_raises(tmp_path):
    with pytest.raises(ValueError):
        save_questions_to_file(tmp_path / "quiz.txt", [])


def test_blank_lines_inside_a_block_are_paragraph_breaks():
    question = make_question(
        text="Consider:\n\n$x^2 = 4$\n\nWhich $x$ is positive?",
        options=("-2", "2\n\nthe positive root"),
        correct=1,
    )
    (parsed,) = parse_quiz_text(serialize_questions([question]))
    assert parsed.question_text == question.question_text
    assert parsed.options == question.options


def test_blank_line_separated_blocks_still_parse():
    text = (
        "Q: one\nA: x\nB: y\nCORRECT: A\nCATEGORY: c\nDIFFICULTY: d\n"
        "\n"
        "Q: two\nA: x\nB: y\nCORRECT: B\nCATEGORY: c\nDIFFICULTY: d\n"
    )
    first, second = parse_quiz_text(text)
    assert (first.question_text, second.question_text) == ("one", "two")
    assert second.correct_answer_index == 1
