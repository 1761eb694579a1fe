"""Business logic shared by the API layer: questions, scoring and leaderboards."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import random

from quiz_backend.constants.quiz_constants import (
    DEFAULT_LEADERBOARD_LIMIT,
    FALLBACK_SCORE_MESSAGE,
    PASS_PERCENTAGE,
    SCORE_MESSAGES,
    SEED_QUESTIONS_PATH,
)
from quiz_backend.core.models import (
    Question,
    QuizResult,
    QuizStats,
    QuizSubmission,
    SubmissionOutcome,
    calculate_percentage,
)
from quiz_backend.core.quiz_exporter import serialize_questions
from quiz_backend.core.quiz_importer import load_questions_from_file, parse_quiz_text
from quiz_backend.core.services.id_allocator import IdAllocator
from quiz_backend.core.services.leaderboard import LeaderboardRanker
from quiz_backend.core.services.question_store import QuestionStore
from quiz_backend.core.services.result_store import ResultStore
from quiz_backend.core.services.scoring_engine import ScoringEngine


def get_score_message(percentage: float) -> str:
    for threshold, message in SCORE_MESSAGES:
        if percentage >= threshold:
            return message
    return FALLBACK_SCORE_MESSAGE


class QuizManager:
    """Facade for quiz services: question bank, results, scoring and leaderboard.

    Each store guards its own collection, so the manager holds no lock of its
    own. Scoring and saving a submission are two separate steps; the score is
    final before the result is saved.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._id_allocator = IdAllocator()
        self._questions = QuestionStore(self._id_allocator, rng=rng)
        self._results = ResultStore(self._id_allocator)
        self._scoring = ScoringEngine(self._questions)
        self._leaderboard = LeaderboardRanker(self._results)

    # --- Question Bank ---

    def load_seed(self, file_path: Path = SEED_QUESTIONS_PATH) -> list[Question]:
        """Insert the questions of a quiz file and return them as stored."""
        return [self._questions.insert(q) for q in load_questions_from_file(file_path)]

    def import_questions(self, text: str) -> list[Question]:
        """Parse quiz text and insert every question.

        Nothing is inserted when any block fails to parse.
        """
        parsed = parse_quiz_text(text)
        return [self._questions.insert(q) for q in parsed]

    def export_questions(self) -> str:
        return serialize_questions(self._questions.get_all())

    def add_question(self, question: Question) -> Question:
        return self._questions.insert(question)

    def delete_question(self, question_id: int) -> bool:
        return self._questions.remove(question_id)

    def get_question(self, question_id: int) -> Question | None:
        return self._questions.get_by_id(question_id)

    def get_all_questions(self) -> list[Question]:
        return self._questions.get_all()

    def get_questions_by_category(self, category: str) -> list[Question]:
        return self._questions.get_by_category(category)

    def get_questions_by_category_and_difficulty(self, category: str, difficulty: str) -> list[Question]:
        return self._questions.get_by_category_and_difficulty(category, difficulty)

    def get_categories(self) -> list[str]:
        return self._questions.list_categories()

    def get_question_count(self) -> int:
        return self._questions.count()

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._questions.set_shuffle_seed(seed)

    # --- Scoring & Results ---

    def calculate_score(self, user_answers: Sequence[int], question_ids: Sequence[int]) -> int:
        return self._scoring.calculate_score(user_answers, question_ids)

    def submit_quiz(self, submission: QuizSubmission) -> SubmissionOutcome:
        """Score a submission, save the attempt and describe the outcome.

        Raises :class:`ZeroQuestionsError` for a submission without answers;
        nothing is saved in that case.
        """
        score = self._scoring.score_pairs(submission.answers)
        total = len(submission.answers)
        percentage = calculate_percentage(score, total)
        result = self._results.save(
            QuizResult(
                user_name=submission.user_name,
                user_email=submission.user_email,
                score=score,
                total_questions=total,
                category=submission.category,
                difficulty=submission.difficulty,
                time_taken_seconds=submission.time_taken_seconds,
            )
        )
        return SubmissionOutcome(
            result=result,
            percentage=percentage,
            passed=percentage >= PASS_PERCENTAGE,
            message=get_score_message(percentage),
        )

    def get_all_results(self) -> list[QuizResult]:
        return self._results.get_all()

    # --- Leaderboard ---

    def get_leaderboard(self, limit: int = DEFAULT_LEADERBOARD_LIMIT) -> list[QuizResult]:
        return self._leaderboard.top_overall(limit)

    def get_leaderboard_by_category(self, category: str, limit: int = DEFAULT_LEADERBOARD_LIMIT) -> list[QuizResult]:
        return self._leaderboard.top_by_category(category, limit)

    def get_user_results(self, user_email: str) -> list[QuizResult]:
        return self._leaderboard.by_user(user_email)

    # --- Stats ---

    def get_stats(self) -> QuizStats:
        return QuizStats(
            total_questions=self._questions.count(),
            categories=self._questions.list_categories(),
            total_attempts=self._results.count(),
        )
