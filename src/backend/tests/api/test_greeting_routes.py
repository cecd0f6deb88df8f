# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
from fastapi.testclient import TestClient

GREETING = b"Hello from the Backend API!"


def test_root_returns_greeting(client: TestClient) -> None:
    """GET / answers with the plain-text greeting and nothing else."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.content == GREETING
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["content-length"] == str(len(GREETING))


def test_root_is_idempotent(client: TestClient) -> None:
    bodies = {client.get("/").content for _ in range(100)}
    assert bodies == {GREETING}


def test_head_root_is_allowed(client: TestClient) -> None:
    response = client.head("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_path_returns_404(client: TestClient) -> None:
    response = client.get("/nonexistent")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_post_root_is_rejected(client: TestClient) -> None:
    """Only GET/HEAD are registered on /."""
    response = client.post("/")
    assert response.status_code == 405


def test_no_generated_docs_routes(client: TestClient) -> None:
    for path in ("/docs", "/redoc", "/openapi.json"):
        assert client.get(path).status_code == 404
