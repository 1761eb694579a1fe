"""Quiz-related constants shared across the core and API layers."""

from pathlib import Path

MIN_OPTION_COUNT: int = 2
DEFAULT_LEADERBOARD_LIMIT: int = 10
PASS_PERCENTAGE: float = 50.0

# Checked top-down; the first threshold the percentage reaches wins.
SCORE_MESSAGES: tuple[tuple[float, str], ...] = (
    (90.0, "Outstanding! 🎉"),
    (70.0, "Great job! 👏"),
    (50.0, "Good effort! 👍"),
)
FALLBACK_SCORE_MESSAGE: str = "Keep practicing! 📚"

SEED_QUESTIONS_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "seed_questions.txt"
