from __future__ import annotations

import jwt
from flask.testing import FlaskClient


def test_list_books_is_public(client: FlaskClient) -> None:
    response = client.get("/api/books")

    assert response.status_code == 200
    assert [b["title"] for b in response.get_json()] == ["Dune", "Solaris", "Kindred"]


def test_get_book_by_id(client: FlaskClient) -> None:
    assert client.get("/api/books/2").get_json()["author"] == "Stanislaw Lem"

    missing = client.get("/api/books/99")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "book_not_found"


def test_add_book_requires_token(client: FlaskClient) -> None:
    response = client.post("/api/books", json={"title": "Ubik", "author": "Philip K. Dick"})

    assert response.status_code == 401


def test_add_book_assigns_next_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/books",
        json={"title": "  Ubik ", "author": "Philip K. Dick"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.get_json() == {"id": 4, "title": "Ubik", "author": "Philip K. Dick"}
    assert len(client.get("/api/books").get_json()) == 4


def test_add_book_validates_fields(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    response = client.post("/api/books", json={"title": ""}, headers=auth_headers)

    assert response.status_code == 400
    assert "title" in response.get_json()["context"]["fields"]


def test_favorites_require_token(client: FlaskClient) -> None:
    assert client.get("/api/favorites").status_code == 401
    assert client.post("/api/favorites", json={"bookId": 1}).status_code == 401
    assert client.delete("/api/favorites/1").status_code == 401


def test_favorites_add_list_remove(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    assert client.get("/api/favorites", headers=auth_headers).get_json() == []

    added = client.post("/api/favorites", json={"bookId": 3}, headers=auth_headers)
    assert added.status_code == 201
    assert [b["id"] for b in added.get_json()] == [3]

    again = client.post("/api/favorites", json={"bookId": 3}, headers=auth_headers)
    assert [b["id"] for b in again.get_json()] == [3]

    client.post("/api/favorites", json={"bookId": 1}, headers=auth_headers)
    listed = client.get("/api/favorites", headers=auth_headers).get_json()
    assert [b["title"] for b in listed] == ["Kindred", "Dune"]

    removed = client.delete("/api/favorites/3", headers=auth_headers)
    assert removed.status_code == 200
    assert [b["id"] for b in removed.get_json()] == [1]


def test_favorite_unknown_book_returns_404(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.post("/api/favorites", json={"bookId": 42}, headers=auth_headers)

    assert response.status_code == 404


def test_favorite_requires_book_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    response = client.post("/api/favorites", json={}, headers=auth_headers)

    assert response.status_code == 400


def test_favorites_reject_token_with_non_numeric_expiry(client: FlaskClient) -> None:
    token = jwt.encode({"sub": "reader", "iat": 1, "exp": "never"}, "test_secret", algorithm="HS256")

    response = client.get("/api/favorites", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_invalid"
