from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from bookshelf.domain.users.exceptions import UserAlreadyExistsError
from bookshelf.infrastructure.repositories import (JsonBookRepository,
                                                   JsonFavoritesRepository,
                                                   JsonUserRepository)
from bookshelf.infrastructure.storage import JsonCollection


@pytest.fixture()
def users_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "users.json"


def test_missing_file_reads_as_empty(users_path: Path) -> None:
    repo = JsonUserRepository(JsonCollection(users_path))

    assert repo.find_by_username("alice") is None
    assert not users_path.exists()


def test_add_rewrites_whole_collection(users_path: Path) -> None:
    repo = JsonUserRepository(JsonCollection(users_path))

    repo.add("alice", "hash-a")
    repo.add("bob", "hash-b")

    stored = json.loads(users_path.read_text(encoding="utf-8"))
    assert [u["username"] for u in stored] == ["alice", "bob"]
    assert stored[0] == {"username": "alice", "password": "hash-a", "favorites": []}
    assert repo.find_by_username("bob").password_hash == "hash-b"


def test_duplicate_username_raises_conflict(users_path: Path) -> None:
    repo = JsonUserRepository(JsonCollection(users_path))
    repo.add("alice", "hash-a")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        repo.add("alice", "other")

    assert exc_info.value.status == 409
    assert len(json.loads(users_path.read_text(encoding="utf-8"))) == 1


def test_concurrent_registration_of_same_username_admits_one(users_path: Path) -> None:
    repo = JsonUserRepository(JsonCollection(users_path))
    outcomes: list[str] = []
    barrier = threading.Barrier(8)

    def _register() -> None:
        barrier.wait()
        try:
            repo.add("alice", "hash")
            outcomes.append("created")
        except UserAlreadyExistsError:
            outcomes.append("conflict")

    threads = [threading.Thread(target=_register) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("created") == 1
    assert outcomes.count("conflict") == 7


def test_non_array_file_reads_as_empty(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    users_path.write_text('{"username": "alice"}', encoding="utf-8")

    assert JsonCollection(users_path).read() == []


def test_book_ids_continue_from_max(tmp_path: Path) -> None:
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps([{"id": 7, "title": "A", "author": "B"}, "junk", {"id": "x"}]),
        encoding="utf-8",
    )
    repo = JsonBookRepository(JsonCollection(path))

    book = repo.add("Ubik", "Philip K. Dick")

    assert book.id == 8
    assert [b.id for b in repo.list_all()] == [7, 8]


def test_favorites_share_users_file(users_path: Path) -> None:
    collection = JsonCollection(users_path)
    users = JsonUserRepository(collection)
    favorites = JsonFavoritesRepository(collection)
    users.add("alice", "hash-a")

    assert favorites.add("alice", 2) == [2]
    assert favorites.add("alice", 2) == [2]
    assert favorites.add("alice", 5) == [2, 5]
    assert favorites.remove("alice", 2) == [5]
    assert favorites.list_for("alice") == [5]
    assert favorites.list_for("nobody") == []
    assert users.find_by_username("alice").password_hash == "hash-a"
