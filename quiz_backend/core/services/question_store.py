"""Service owning the bank of quiz questions."""

from __future__ import annotations

from dataclasses import replace
import random
from threading import Lock

from quiz_backend.core.models import Question
from quiz_backend.core.services.id_allocator import IdAllocator, IdSpace


class QuestionStore:
    """Stores questions by id and serves filtered, shuffled views of them."""

    def __init__(self, id_allocator: IdAllocator, rng: random.Random | None = None) -> None:
        self._lock = Lock()
        self._id_allocator = id_allocator
        self._questions: dict[int, Question] = {}
        self._shuffle_rng = rng or random.Random()

    def insert(self, question: Question) -> Question:
        """Store ``question`` under a freshly allocated id and return the stored copy."""
        with self._lock:
            stored = replace(question, id=self._id_allocator.next_id(IdSpace.QUESTIONS))
            self._questions[stored.id] = stored
            return stored

    def remove(self, question_id: int) -> bool:
        """Delete a question. Unknown ids are ignored; returns whether one was removed."""
        with self._lock:
            return self._questions.pop(question_id, None) is not None

    def get_by_id(self, question_id: int) -> Question | None:
        with self._lock:
            return self._questions.get(question_id)

    def get_all(self) -> list[Question]:
        """Return a copy of all questions in insertion order."""
        with self._lock:
            return list(self._questions.values())

    def count(self) -> int:
        with self._lock:
            return len(self._questions)

    def get_by_category(self, category: str) -> list[Question]:
        """Return the questions of ``category`` in a fresh random order."""
        with self._lock:
            matches = [q for q in self._questions.values() if q.matches_category(category)]
            self._shuffle_rng.shuffle(matches)
        return matches

    def get_by_category_and_difficulty(self, category: str, difficulty: str) -> list[Question]:
        """Return the questions matching both filters in a fresh random order."""
        with self._lock:
            matches = [
                q
                for q in self._questions.values()
                if q.matches_category(category) and q.matches_difficulty(difficulty)
            ]
            self._shuffle_rng.shuffle(matches)
        return matches

    def list_categories(self) -> list[str]:
        """Return the distinct category names, sorted ascending."""
        with self._lock:
            return sorted({q.category for q in self._questions.values()})

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._shuffle_rng.seed(seed)

