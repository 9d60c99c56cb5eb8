"""Tests for request logging and CORS middleware helpers."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_api.config import Settings
from user_api.middleware import get_allowed_origins, get_cors_headers


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "url", "expected"),
    [
        ("GET", "/users", "testclient:50000 GET /users 200"),
        ("POST", "/users", "testclient:50000 POST /users 400"),
        ("PUT", "/users/123", "testclient:50000 PUT /users/123 400"),
        ("DELETE", "/users/456", "testclient:50000 DELETE /users/456 404"),
        ("GET", "/users?page=1&limit=10", "testclient:50000 GET /users?page=1&limit=10 200"),
        ("GET", "/api/v1/users/123/profile", "testclient:50000 GET /api/v1/users/123/profile 404"),
    ],
)
def test_request_logging(
    client: TestClient, caplog: pytest.LogCaptureFixture, method: str, url: str, expected: str
) -> None:
    """Test that every request is logged with client, method, target and status."""
    caplog.set_level(logging.INFO, logger="user_api.middleware")

    client.request(method, url, json={} if method in {"POST", "PUT"} else None)

    messages = [r.getMessage() for r in caplog.records if r.name == "user_api.middleware"]
    assert any(m.startswith(expected) and m.endswith("ms") for m in messages), messages


@pytest.mark.unit
def test_failed_request_is_logged_as_500(app: FastAPI, caplog: pytest.LogCaptureFixture) -> None:
    """Test that a request whose handler raises still gets an access log line."""

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    caplog.set_level(logging.INFO, logger="user_api.middleware")
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    messages = [r.getMessage() for r in caplog.records if r.name == "user_api.middleware"]
    assert any(m.startswith("testclient:50000 GET /boom 500 ") for m in messages), messages


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
def test_allowed_origins_include_both_schemes() -> None:
    origins = get_allowed_origins(_settings(ui_url="https://app.example.com/", environment="production"))
    assert origins == ["https://app.example.com", "http://app.example.com"]


@pytest.mark.unit
def test_allowed_origins_add_local_origins_in_development() -> None:
    """Test that development allows local UI dev servers and the API's own port."""
    origins = get_allowed_origins(_settings(ui_url="http://localhost:5173", environment="development", api_port=9000))

    assert origins[0] == "http://localhost:5173"
    assert "http://localhost:3000" in origins
    assert "http://127.0.0.1:9000" in origins
    assert len(origins) == len(set(origins))


@pytest.mark.unit
def test_production_has_no_local_origins() -> None:
    origins = get_allowed_origins(_settings(ui_url="https://app.example.com", environment="production"))
    assert not any("localhost" in o or "127.0.0.1" in o for o in origins)


@pytest.mark.unit
def test_cors_headers_only_for_allowed_origin() -> None:
    settings = _settings(ui_url="https://app.example.com", environment="production")

    headers = get_cors_headers("https://app.example.com", settings)
    assert headers["Access-Control-Allow-Origin"] == "https://app.example.com"

    assert get_cors_headers("https://other.example.com", settings) == {}
    assert get_cors_headers(None, settings) == {}


@pytest.mark.unit
def test_cors_preflight(client: TestClient) -> None:
    response = client.options(
        "/users",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
