"""Application entry point for the quiz backend."""

from __future__ import annotations

import argparse
from pathlib import Path

from quiz_backend.constants.network_constants import API_PREFIX, DEFAULT_HOST, DEFAULT_PORT
from quiz_backend.constants.quiz_constants import SEED_QUESTIONS_PATH
from quiz_backend.core.quiz_exporter import save_questions_to_file
from quiz_backend.core.quiz_manager import QuizManager
from quiz_backend.server.api_server import run_api_server
from quiz_backend.utils.logging_config import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the quiz backend API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--seed-file",
        type=Path,
        default=SEED_QUESTIONS_PATH,
        help="Quiz text file used to pre-populate the question bank.",
    )
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty question bank.")
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="Write the loaded question bank to PATH in the quiz text format and exit.",
    )
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, seed the question bank and serve the API."""
    args = _parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting quiz backend…")

    quiz_manager = QuizManager()
    if not args.no_seed:
        seeded = quiz_manager.load_seed(args.seed_file)
        logger.info("%d sample questions loaded from %s", len(seeded), args.seed_file)

    if args.export is not None:
        questions = quiz_manager.get_all_questions()
        save_questions_to_file(args.export, questions)
        logger.info("Exported %d questions to %s", len(questions), args.export)
        return

    logger.info("API available at http://%s:%d%s/", args.host, args.port, API_PREFIX)
    run_api_server(quiz_manager, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
