from datetime import datetime

from fastapi.testclient import TestClient

from todosaas.server import create_app


def _iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_list_starts_empty(client):
    response = client.get("/api/todos")

    assert response.status_code == 200
    assert response.json() == []


def test_list_serializes_todos_by_alias(client):
    created = client.post("/api/todos", json={"text": "a"}).json()

    listed = client.get("/api/todos").json()

    assert listed == [created]
    assert set(listed[0]) == {"id", "text", "createdAt"}
    assert listed[0]["createdAt"].endswith("Z")


def test_create_todo(client):
    response = client.post("/api/todos", json={"text": "  buy milk  "})

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "text", "createdAt"}
    assert body["id"] == 1
    assert body["text"] == "buy milk"
    assert body["createdAt"].endswith("Z")
    _iso(body["createdAt"])


def test_create_rejects_blank_text(client, repository):
    for payload in [{"text": ""}, {"text": "   "}, {}, {"text": 5}, {"text": None}]:
        response = client.post("/api/todos", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Text is required and must be a non-empty string"}

    assert repository.count() == 0
    assert repository.next_id == 1


def test_create_rejects_missing_or_malformed_body(client):
    missing = client.post("/api/todos")
    malformed = client.post(
        "/api/todos", content="not json", headers={"Content-Type": "application/json"}
    )
    not_an_object = client.post("/api/todos", json=["a"])

    for response in (missing, malformed, not_an_object):
        assert response.status_code == 400
        assert response.json() == {"error": "Text is required and must be a non-empty string"}


def test_delete_todo(client, repository):
    client.post("/api/todos", json={"text": "a"})

    response = client.delete("/api/todos/1")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/todos").json() == []
    assert repository.next_id == 2


def test_delete_missing_todo(client):
    client.post("/api/todos", json={"text": "a"})

    response = client.delete("/api/todos/2")

    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}
    assert len(client.get("/api/todos").json()) == 1


def test_delete_invalid_id(client):
    response = client.delete("/api/todos/abc")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid todo ID"}


def test_delete_uses_leading_integer_of_id(client):
    client.post("/api/todos", json={"text": "a"})
    client.post("/api/todos", json={"text": "b"})

    assert client.delete("/api/todos/1abc").status_code == 204
    assert client.delete("/api/todos/2.0").status_code == 204
    assert client.get("/api/todos").json() == []


def test_create_rejects_byte_order_mark_only_text(client, repository):
    response = client.post("/api/todos", json={"text": "\ufeff \ufeff"})

    assert response.status_code == 400
    assert repository.count() == 0

    created = client.post("/api/todos", json={"text": "\ufeffx\ufeff"}).json()
    assert created["text"] == "x"


def test_full_scenario(client):
    client.post("/api/todos", json={"text": "a"})
    client.post("/api/todos", json={"text": "b"})
    listed = client.get("/api/todos").json()
    assert [(t["id"], t["text"]) for t in listed] == [(1, "a"), (2, "b")]

    assert client.delete("/api/todos/1").status_code == 204
    listed = client.get("/api/todos").json()
    assert [(t["id"], t["text"]) for t in listed] == [(2, "b")]

    created = client.post("/api/todos", json={"text": "c"}).json()
    assert created["id"] == 3


def test_success_responses_have_no_error_field(client):
    created = client.post("/api/todos", json={"text": "a"}).json()
    listed = client.get("/api/todos").json()

    assert "error" not in created
    assert all("error" not in todo for todo in listed)


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert "error" in response.json()


def test_cors_allows_any_origin(client):
    response = client.get("/api/todos", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    response = client.options(
        "/api/todos/1",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "DELETE",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_apps_have_independent_stores(settings):
    with TestClient(create_app(settings=settings)) as first, TestClient(
        create_app(settings=settings)
    ) as second:
        first.post("/api/todos", json={"text": "replica one"})

        assert len(first.get("/api/todos").json()) == 1
        assert second.get("/api/todos").json() == []
