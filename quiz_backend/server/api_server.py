"""FastAPI server that exposes the quiz endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
import uvicorn

from quiz_backend.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from quiz_backend.constants.network_constants import (
    API_PREFIX,
    CORS_ALLOWED_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from quiz_backend.constants.quiz_constants import DEFAULT_LEADERBOARD_LIMIT, MIN_OPTION_COUNT
from quiz_backend.core.errors import QuestionValidationError, QuizError, QuizImportError
from quiz_backend.core.markdown_math_renderer import renderer
from quiz_backend.core.models import Question, QuizResult, QuizSubmission
from quiz_backend.core.quiz_manager import QuizManager
from quiz_backend.core.services.scoring_engine import pair_answers

logger = logging.getLogger(__name__)


class _CamelPayload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class QuestionPayload(_CamelPayload):
    """Payload schema for adding a question."""

    question_text: str = Field(min_length=1, validation_alias=AliasChoices("questionText", "text"))
    options: list[str] = Field(min_length=MIN_OPTION_COUNT)
    correct_answer_index: int = Field(
        ge=0, validation_alias=AliasChoices("correctAnswerIndex", "correctAnswer")
    )
    category: str = Field(min_length=1)
    difficulty: str = Field(min_length=1)

    def to_question(self) -> Question:
        return Question(
            question_text=self.question_text,
            options=tuple(self.options),
            correct_answer_index=self.correct_answer_index,
            category=self.category,
            difficulty=self.difficulty,
        )


class SubmissionPayload(_CamelPayload):
    """Payload schema for a completed quiz attempt."""

    user_name: str = Field(min_length=1)
    user_email: str = Field(min_length=1)
    category: str
    difficulty: str
    time_taken_seconds: int = Field(
        validation_alias=AliasChoices("timeTakenSeconds", "timeTaken")
    )
    user_answers: list[int]
    question_ids: list[int]

    @model_validator(mode="after")
    def check_answer_count(self) -> "SubmissionPayload":
        if len(self.user_answers) != len(self.question_ids):
            raise ValueError(
                f"userAnswers has {len(self.user_answers)} entries but questionIds has "
                f"{len(self.question_ids)}; they must be the same length."
            )
        return self

    def to_submission(self) -> QuizSubmission:
        return QuizSubmission(
            user_name=self.user_name,
            user_email=self.user_email,
            category=self.category,
            difficulty=self.difficulty,
            time_taken_seconds=self.time_taken_seconds,
            answers=tuple(pair_answers(self.user_answers, self.question_ids)),
        )


def _question_to_dict(question: Question) -> dict[str, object]:
    return {
        "id": question.id,
        "questionText": question.question_text,
        "questionHtml": renderer.render_fragment(question.question_text),
        "options": list(question.options),
        "correctAnswerIndex": question.correct_answer_index,
        "category": question.category,
        "difficulty": question.difficulty,
    }


def _result_to_dict(result: QuizResult) -> dict[str, object]:
    return {
        "id": result.id,
        "userName": result.user_name,
        "userEmail": result.user_email,
        "score": result.score,
        "totalQuestions": result.total_questions,
        "category": result.category,
        "difficulty": result.difficulty,
        "completedAt": result.completed_at.isoformat(),
        "timeTakenSeconds": result.time_taken_seconds,
    }


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(
    quiz_manager: QuizManager,
    allowed_origins: tuple[str, ...] = CORS_ALLOWED_ORIGINS,
) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION, description=APP_ABOUT_TEXT)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)
    router = APIRouter(prefix=API_PREFIX)

    @router.get("/", response_class=PlainTextResponse)
    def welcome(manager: QuizManager = Depends(quiz_manager_dep)) -> str:
        return f"🎯 Quiz Application API is running! Total questions: {manager.get_question_count()}"

    # --- Questions ---

    @router.get("/questions")
    def get_all_questions(manager: QuizManager = Depends(quiz_manager_dep)) -> list[dict[str, object]]:
        return [_question_to_dict(q) for q in manager.get_all_questions()]

    @router.get("/questions/export", response_class=PlainTextResponse)
    def export_questions(manager: QuizManager = Depends(quiz_manager_dep)) -> str:
        return manager.export_questions()

    @router.get("/questions/category/{category}")
    def get_questions_by_category(
        category: str,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        return [_question_to_dict(q) for q in manager.get_questions_by_category(category)]

    @router.get("/questions/category/{category}/difficulty/{difficulty}")
    def get_questions_by_category_and_difficulty(
        category: str,
        difficulty: str,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        questions = manager.get_questions_by_category_and_difficulty(category, difficulty)
        return [_question_to_dict(q) for q in questions]

    @router.get("/questions/{question_id}")
    def get_question(question_id: int, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        question = manager.get_question(question_id)
        if question is None:
            raise HTTPException(status_code=404, detail=f"Question {question_id} not found")
        return _question_to_dict(question)

    @router.get("/categories")
    def get_categories(manager: QuizManager = Depends(quiz_manager_dep)) -> list[str]:
        return manager.get_categories()

    @router.post("/questions", status_code=201)
    def add_question(
        payload: QuestionPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            question = manager.add_question(payload.to_question())
        except QuestionValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        logger.info("Added question %d in category %s", question.id, question.category)
        return _question_to_dict(question)

    @router.post("/questions/import", status_code=201)
    async def import_questions(
        request: Request,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        raw = await request.body()
        try:
            imported = manager.import_questions(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail="Quiz text must be UTF-8 encoded.") from exc
        except QuizImportError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info("Imported %d question(s)", len(imported))
        return [_question_to_dict(q) for q in imported]

    @router.delete("/questions/{question_id}")
    def delete_question(question_id: int, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        removed = manager.delete_question(question_id)
        if removed:
            logger.info("Deleted question %d", question_id)
        return {"message": "Question deleted successfully", "deleted": removed}

    # --- Submissions & Results ---

    @router.post("/submit")
    def submit_quiz(
        payload: SubmissionPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            outcome = manager.submit_quiz(payload.to_submission())
        except QuizError as exc:
            raise HTTPException(status_code=400, detail=f"Failed to submit quiz: {exc}") from exc
        result = outcome.result
        logger.info(
            "Saved result %d for %s: %d/%d",
            result.id,
            result.user_email,
            result.score,
            result.total_questions,
        )
        return {
            "resultId": result.id,
            "score": result.score,
            "total": result.total_questions,
            "percentage": outcome.percentage,
            "passed": outcome.passed,
            "message": outcome.message,
        }

    @router.get("/leaderboard")
    def get_leaderboard(
        limit: int = Query(DEFAULT_LEADERBOARD_LIMIT, ge=0),
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        return [_result_to_dict(r) for r in manager.get_leaderboard(limit)]

    @router.get("/leaderboard/category/{category}")
    def get_leaderboard_by_category(
        category: str,
        limit: int = Query(DEFAULT_LEADERBOARD_LIMIT, ge=0),
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        return [_result_to_dict(r) for r in manager.get_leaderboard_by_category(category, limit)]

    @router.get("/results/user/{user_email}")
    def get_user_results(
        user_email: str,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, object]]:
        return [_result_to_dict(r) for r in manager.get_user_results(user_email)]

    @router.get("/results")
    def get_all_results(manager: QuizManager = Depends(quiz_manager_dep)) -> list[dict[str, object]]:
        return [_result_to_dict(r) for r in manager.get_all_results()]

    @router.get("/stats")
    def get_stats(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        stats = manager.get_stats()
        return {
            "totalQuestions": stats.total_questions,
            "totalCategories": stats.total_categories,
            "categories": stats.categories,
            "totalAttempts": stats.total_attempts,
        }

    app.include_router(router)
    return app


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    log_level: str = "info",
) -> None:
    """Serve the API with uvicorn until the process is stopped."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level=log_level)
    server = uvicorn.Server(config)
    server.run()
