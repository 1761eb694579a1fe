"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

import app_main
from quiz_backend.core.quiz_importer import load_questions_from_file


def test_export_writes_seed_bank_without_serving(tmp_path, monkeypatch):
    def fail_to_serve(*args, **kwargs):
        raise AssertionError("the server must not start when exporting")

    monkeypatch.setattr(app_main, "run_api_server", fail_to_serve)
    target = tmp_path / "out" / "bank.txt"

    app_main.main(["--export", str(target)])

    questions = load_questions_from_file(target)
    assert len(questions) == 44
    assert {q.category for q in questions} == {"Programming", "Science", "Mathematics", "History", "Geography"}


def test_export_of_empty_bank_fails(tmp_path):
    with pytest.raises(ValueError):
        app_main.main(["--no-seed", "--export", str(tmp_path / "bank.txt")])
