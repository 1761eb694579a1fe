"""Thread-safe allocation of question and result identifiers."""

from __future__ import annotations

from enum import Enum
from threading import Lock


class IdSpace(Enum):
    """Independent identifier sequences."""

    QUESTIONS = "questions"
    RESULTS = "results"


class IdAllocator:
    """Issues strictly increasing ids, starting at 1, per id space.

    Ids are never reused, even after the entity that held one is deleted.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._last_issued: dict[IdSpace, int] = {space: 0 for space in IdSpace}

    def next_id(self, space: IdSpace) -> int:
        with self._lock:
            self._last_issued[space] += 1
            return self._last_issued[space]

    def peek(self, space: IdSpace) -> int:
        """Return the id the next call to :meth:`next_id` would issue."""
        with self._lock:
            return self._last_issued[space] + 1
