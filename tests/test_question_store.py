"""Tests for the question store."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
import random

from quiz_backend.core.services.id_allocator import IdAllocator
from quiz_backend.core.services.question_store import QuestionStore

from factories import make_question


def test_insert_assigns_fresh_ids_overwriting_caller_id(question_store):
    first = question_store.insert(replace(make_question(), id=99))
    second = question_store.insert(make_question(text="Another?"))
    assert first.id == 1
    assert second.id == 2


def test_insert_then_get_by_id_round_trips(question_store):
    original = make_question(text="Capital of France?", options=("Paris", "Rome"), correct=0, category="Geo")
    stored = question_store.insert(original)
    assert question_store.get_by_id(stored.id) == replace(original, id=stored.id)


def test_get_by_id_unknown_returns_none(question_store):
    assert question_store.get_by_id(42) is None


def test_remove_is_idempotent_and_ids_are_not_reused(question_store):
    stored = question_store.insert(make_question())
    assert question_store.remove(stored.id) is True
    assert question_store.remove(stored.id) is False
    assert question_store.remove(12345) is False
    assert question_store.get_by_id(stored.id) is None
    assert question_store.insert(make_question()).id == stored.id + 1


def test_get_all_returns_independent_copy(question_store):
    question_store.insert(make_question())
    snapshot = question_store.get_all()
    snapshot.clear()
    assert question_store.count() == 1
    assert len(question_store.get_all()) == 1


def test_get_by_category_is_case_insensitive(question_store):
    a = question_store.insert(make_question(text="A?", correct=0, category="Math"))
    b = question_store.insert(make_question(text="B?", correct=2, category="Math"))
    question_store.insert(make_question(text="C?", category="Science"))

    found = question_store.get_by_category("math")
    assert sorted(q.id for q in found) == sorted([a.id, b.id])
    assert question_store.get_by_category("History") == []


def test_get_by_category_and_difficulty(question_store):
    easy = question_store.insert(make_question(text="Easy?", difficulty="Easy"))
    question_store.insert(make_question(text="Hard?", difficulty="Hard"))
    question_store.insert(make_question(text="Other?", category="Science", difficulty="Easy"))

    assert question_store.get_by_category_and_difficulty("MATH", "easy") == [easy]
    assert question_store.get_by_category_and_difficulty("Math", "Medium") == []


def test_category_filter_shuffles_without_touching_stored_order():
    store = QuestionStore(IdAllocator(), rng=random.Random(7))
    inserted = [store.insert(make_question(text=f"Q{i}?")) for i in range(20)]

    orders = {tuple(q.id for q in store.get_by_category("Math")) for _ in range(10)}
    assert len(orders) > 1
    assert all(sorted(order) == [q.id for q in inserted] for order in orders)
    assert store.get_all() == inserted


def test_shuffle_seed_makes_order_reproducible(question_store):
    for i in range(10):
        question_store.insert(make_question(text=f"Q{i}?"))
    question_store.set_shuffle_seed(3)
    first = question_store.get_by_category("Math")
    question_store.set_shuffle_seed(3)
    assert question_store.get_by_category("Math") == first


def test_list_categories_sorted_and_distinct(question_store):
    for category in ("Science", "Math", "History", "Math", "Science"):
        question_store.insert(make_question(category=category))
    categories = question_store.list_categories()
    assert categories == ["History", "Math", "Science"]
    assert len(categories) == len(set(categories))


def test_stored_questions_keep_valid_correct_index(question_store):
    for correct in range(4):
        question_store.insert(make_question(correct=correct))
    assert all(0 <= q.correct_answer_index < len(q.options) for q in question_store.get_all())


def test_concurrent_inserts_and_reads(question_store):
    def work(i: int) -> int:
        question_store.get_by_category("Math")
        return question_store.insert(make_question(text=f"Q{i}?")).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(work, range(500)))

    assert len(set(ids)) == 500
    assert sorted(q.id for q in question_store.get_all()) == sorted(ids)
