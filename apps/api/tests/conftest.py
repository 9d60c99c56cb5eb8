"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_api.config import Settings
from user_api.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        environment="test",
        static_dir=str(tmp_path / "static"),
        seed_sample_users=True,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create a FastAPI application with its own user store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a FastAPI test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
