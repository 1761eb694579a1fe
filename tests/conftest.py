"""Pytest configuration and fixtures."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from quiz_backend.core.quiz_manager import QuizManager
from quiz_backend.core.services.id_allocator import IdAllocator
from quiz_backend.core.services.question_store import QuestionStore
from quiz_backend.core.services.result_store import ResultStore
from quiz_backend.server.api_server import create_api_app


@pytest.fixture
def id_allocator() -> IdAllocator:
    return IdAllocator()


@pytest.fixture
def question_store(id_allocator: IdAllocator) -> QuestionStore:
    return QuestionStore(id_allocator, rng=random.Random(1234))


@pytest.fixture
def result_store(id_allocator: IdAllocator) -> ResultStore:
    return ResultStore(id_allocator)


@pytest.fixture
def manager() -> QuizManager:
    return QuizManager(rng=random.Random(1234))


@pytest.fixture
def seeded_manager(manager: QuizManager) -> QuizManager:
    manager.load_seed()
    return manager


@pytest.fixture
def client(seeded_manager: QuizManager) -> TestClient:
    return TestClient(create_api_app(seeded_manager))
