"""Scoring of submitted answer sets against the question bank."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from quiz_backend.core.errors import AnswerCountError
from quiz_backend.core.models import AnswerPair
from quiz_backend.core.services.question_store import QuestionStore


def pair_answers(user_answers: Sequence[int], question_ids: Sequence[int]) -> list[AnswerPair]:
    """Pair answers with question ids positionally.

    Raises :class:`AnswerCountError` when there are fewer answers than ids.
    Trailing answers beyond the last question id are ignored.
    """
    if len(user_answers) < len(question_ids):
        raise AnswerCountError(len(user_answers), len(question_ids))
    return [AnswerPair(question_id, answer) for question_id, answer in zip(question_ids, user_answers)]


class ScoringEngine:
    """Counts correct answers using the questions currently in the store."""

    def __init__(self, question_store: QuestionStore) -> None:
        self._question_store = question_store

    def calculate_score(self, user_answers: Sequence[int], question_ids: Sequence[int]) -> int:
        """Return how many of ``user_answers`` match the correct option of ``question_ids``.

        ``user_answers[i]`` is the answer for ``question_ids[i]``. Unknown
        question ids score nothing.
        """
        return self.score_pairs(pair_answers(user_answers, question_ids))

    def score_pairs(self, pairs: Iterable[AnswerPair]) -> int:
        score = 0
        for question_id, answer_index in pairs:
            question = self._question_store.get_by_id(question_id)
            if question is not None and question.correct_answer_index == answer_index:
                score += 1
        return score
