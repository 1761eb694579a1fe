"""Static metadata describing the quiz backend."""

APP_NAME = "Quiz Backend"
APP_VERSION = "0.1.0"
APP_ABOUT_TEXT = (
    "Quiz Backend serves a bank of multiple-choice questions over HTTP, "
    "scores submitted attempts and keeps a leaderboard of past results."
)
