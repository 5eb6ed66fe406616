from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from budget_server.app import create_app
from budget_server.config import Settings


@pytest.fixture
def sqlite_url() -> str:
    return "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build settings that ignore any local .env file."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return _make


@pytest.fixture
def create_test_app(make_settings: Callable[..., Settings]) -> Callable[..., FastAPI]:
    def _create(**overrides) -> FastAPI:
        return create_app(make_settings(**overrides))

    return _create


@pytest.fixture
def client(create_test_app: Callable[..., FastAPI]):
    with TestClient(create_test_app()) as test_client:
        yield test_client
