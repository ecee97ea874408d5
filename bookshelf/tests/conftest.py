from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from bookshelf.app import create_app
from bookshelf.shared.config import AppConfig, RateLimitConfig

SEED_BOOKS = [
    {"id": 1, "title": "Dune", "author": "Frank Herbert"},
    {"id": 2, "title": "Solaris", "author": "Stanislaw Lem"},
    {"id": 3, "title": "Kindred", "author": "Octavia E. Butler"},
]


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_config(tmp_path: Path) -> Callable[..., AppConfig]:
    books_file = tmp_path / "books.json"
    books_file.write_text(json.dumps(SEED_BOOKS), encoding="utf-8")

    def _make(
        *, skip_rate_limit: bool = True, max_attempts: int = 5, trust_proxy: bool = False
    ) -> AppConfig:
        return AppConfig(  # type: ignore[call-arg]
            USERS_FILE=tmp_path / "users.json",
            BOOKS_FILE=books_file,
            SECRET_KEY="test_secret",
            SKIP_RATE_LIMIT=skip_rate_limit,
            TRUST_PROXY=trust_proxy,
            LOG_FILE=tmp_path / "app.log",
            rate_limit=RateLimitConfig(  # type: ignore[call-arg]
                RL_MAX_ATTEMPTS=max_attempts, RL_WINDOW_MS=60_000
            ),
        )

    return _make


@pytest.fixture()
def app(make_config: Callable[..., AppConfig]) -> Flask:
    return create_app(make_config())


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def rate_limited_client(make_config: Callable[..., AppConfig]) -> FlaskClient:
    return create_app(make_config(skip_rate_limit=False)).test_client()


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    creds = {"username": "reader", "password": "readerpass"}
    assert client.post("/api/register", json=creds).status_code == 201
    token = client.post("/api/login", json=creds).get_json()["token"]
    return {"Authorization": f"Bearer {token}"}
