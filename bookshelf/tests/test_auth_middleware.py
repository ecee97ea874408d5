from __future__ import annotations

import time

import pytest
from flask import Flask, jsonify
from flask.testing import FlaskClient

from bookshelf.domain.users.entities import User
from bookshelf.infrastructure.auth.tokens import JwtTokenIssuer
from bookshelf.shared.middleware.auth import BearerAuth, current_user
from bookshelf.shared.middleware.error_handler import configure_error_handling

ISSUER = JwtTokenIssuer("middleware_secret", ttl_seconds=60)


@pytest.fixture()
def guarded_client() -> FlaskClient:
    app = Flask(__name__)
    configure_error_handling(app)
    auth = BearerAuth(ISSUER)
    calls: list[str] = []

    @app.get("/protected")
    @auth.required
    def protected():
        calls.append(current_user().username)
        return jsonify({"user": current_user().username})

    app.config["calls"] = calls
    return app.test_client()


def test_missing_token_is_rejected(guarded_client: FlaskClient) -> None:
    response = guarded_client.get("/protected")

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_missing"
    assert guarded_client.application.config["calls"] == []


def test_non_bearer_scheme_counts_as_missing(guarded_client: FlaskClient) -> None:
    token = ISSUER.issue(User(username="alice", password_hash="x"))

    response = guarded_client.get("/protected", headers={"Authorization": f"Basic {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_missing"


def test_invalid_token_is_rejected(guarded_client: FlaskClient) -> None:
    response = guarded_client.get("/protected", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_invalid"
    assert guarded_client.application.config["calls"] == []


def test_expired_token_is_rejected(guarded_client: FlaskClient) -> None:
    past = JwtTokenIssuer("middleware_secret", ttl_seconds=60, clock=lambda: time.time() - 120)
    token = past.issue(User(username="alice", password_hash="x"))

    response = guarded_client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_invalid"


def test_valid_token_reaches_handler_with_identity(guarded_client: FlaskClient) -> None:
    token = ISSUER.issue(User(username="alice", password_hash="x"))

    response = guarded_client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == {"user": "alice"}
    assert guarded_client.application.config["calls"] == ["alice"]
