from datetime import datetime

from fastapi.testclient import TestClient

from todosaas.server import create_app
from todosaas.util.settings import load_settings


def test_health_check_defaults(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["app"] == "Todo SaaS"
    assert body["description"] == "Simple, clean, and efficient task management"
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_health_check_ignores_store_contents(client):
    for text in ["a", "b", "c"]:
        client.post("/api/todos", json={"text": text})

    assert client.get("/api/health").json()["status"] == "OK"


def test_health_check_uses_deployment_values():
    settings = load_settings(environ={"APP_NAME": "Acme Tasks", "APP_DESCRIPTION": "Team board"})

    with TestClient(create_app(settings=settings)) as client:
        body = client.get("/api/health").json()

    assert body["app"] == "Acme Tasks"
    assert body["description"] == "Team board"
