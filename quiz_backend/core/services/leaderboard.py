"""Ranked views over the saved quiz results."""

from __future__ import annotations

from datetime import datetime

from quiz_backend.constants.quiz_constants import DEFAULT_LEADERBOARD_LIMIT
from quiz_backend.core.models import QuizResult
from quiz_backend.core.services.result_store import ResultStore


def _rank_key(result: QuizResult) -> tuple[int, datetime]:
    return (result.score, result.completed_at)


class LeaderboardRanker:
    """Produces sorted, optionally filtered and truncated result listings."""

    def __init__(self, result_store: ResultStore) -> None:
        self._result_store = result_store

    def top_overall(self, limit: int = DEFAULT_LEADERBOARD_LIMIT) -> list[QuizResult]:
        """Return the best results, highest score first and newest first on ties."""
        return self._rank(self._result_store.get_all(), limit)

    def top_by_category(self, category: str, limit: int = DEFAULT_LEADERBOARD_LIMIT) -> list[QuizResult]:
        wanted = category.casefold()
        results = [r for r in self._result_store.get_all() if r.category.casefold() == wanted]
        return self._rank(results, limit)

    def by_user(self, user_email: str) -> list[QuizResult]:
        """Return every attempt of ``user_email``, newest first."""
        results = [r for r in self._result_store.get_all() if r.matches_email(user_email)]
        return sorted(results, key=lambda r: r.completed_at, reverse=True)

    @staticmethod
    def _rank(results: list[QuizResult], limit: int) -> list[QuizResult]:
        if limit < 0:
            raise ValueError("Leaderboard limit must not be negative.")
        ranked = sorted(results, key=_rank_key, reverse=True)
        return ranked[:limit]
