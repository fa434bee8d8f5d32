import threading
from datetime import datetime

import pytest
from pydantic import ValidationError

from todosaas.repositories.memory_todo_repository import InMemoryTodoRepository


def test_new_repository_is_empty(repository):
    assert repository.list_todos() == []
    assert repository.count() == 0
    assert repository.next_id == 1


def test_insert_assigns_increasing_ids(repository):
    first = repository.insert("a")
    second = repository.insert("b")

    assert (first.id, second.id) == (1, 2)
    assert repository.next_id == 3
    assert isinstance(first.created_at, datetime)


def test_ids_are_not_reused_after_delete(repository):
    repository.insert("a")
    repository.insert("b")
    assert repository.delete(1) is True

    third = repository.insert("c")

    assert third.id == 3
    assert [todo.id for todo in repository.list_todos()] == [2, 3]


def test_list_preserves_insertion_order_after_delete(repository):
    for text in ["a", "b", "c", "d"]:
        repository.insert(text)

    repository.delete(2)

    assert [todo.text for todo in repository.list_todos()] == ["a", "c", "d"]


def test_delete_missing_id_leaves_store_unchanged(repository):
    repository.insert("a")

    assert repository.delete(42) is False
    assert repository.count() == 1
    assert repository.next_id == 2


def test_delete_does_not_touch_counter(repository):
    repository.insert("a")
    repository.delete(1)

    assert repository.count() == 0
    assert repository.next_id == 2


def test_list_returns_snapshot(repository):
    repository.insert("a")

    snapshot = repository.list_todos()
    snapshot.clear()

    assert repository.count() == 1


def test_records_are_immutable(repository):
    todo = repository.insert("a")

    with pytest.raises(ValidationError):
        todo.text = "changed"

    assert repository.list_todos()[0].text == "a"


def test_repositories_do_not_share_state():
    first = InMemoryTodoRepository()
    second = InMemoryTodoRepository()
    first.insert("only in first")

    assert second.count() == 0
    assert second.next_id == 1


def test_concurrent_inserts_get_unique_ids(repository):
    threads = [
        threading.Thread(target=lambda: [repository.insert("t") for _ in range(50)])
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [todo.id for todo in repository.list_todos()]
    assert len(ids) == 400
    assert len(set(ids)) == 400
    assert ids == sorted(ids)
    assert repository.next_id == 401
