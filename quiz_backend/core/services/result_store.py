"""Service owning the append-only record of quiz attempts."""

from __future__ import annotations

from dataclasses import replace
from threading import Lock

from quiz_backend.core.models import QuizResult
from quiz_backend.core.services.id_allocator import IdAllocator, IdSpace


class ResultStore:
    """Append-only collection of saved quiz results."""

    def __init__(self, id_allocator: IdAllocator) -> None:
        self._lock = Lock()
        self._id_allocator = id_allocator
        self._results: list[QuizResult] = []

    def save(self, result: QuizResult) -> QuizResult:
        """Assign a fresh id to ``result``, append it and return the stored copy."""
        with self._lock:
            stored = replace(result, id=self._id_allocator.next_id(IdSpace.RESULTS))
            self._results.append(stored)
            return stored

    def get_all(self) -> list[QuizResult]:
        """Return a copy of all results in save order."""
        with self._lock:
            return list(self._results)

    def count(self) -> int:
        with self._lock:
            return len(self._results)
