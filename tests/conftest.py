import pytest
from fastapi.testclient import TestClient

from todosaas.repositories.memory_todo_repository import InMemoryTodoRepository
from todosaas.server import create_app
from todosaas.services.todo_service import TodoService
from todosaas.util.settings import load_settings


@pytest.fixture
def settings():
    return load_settings(environ={})


@pytest.fixture
def repository():
    return InMemoryTodoRepository()


@pytest.fixture
def service(repository):
    return TodoService(repository)


@pytest.fixture
def app(settings, repository):
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
