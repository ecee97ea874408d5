# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from bookshelf.domain.users.entities import User
from bookshelf.domain.users.exceptions import UserAlreadyExistsError
from bookshelf.domain.users.repositories import UserRepository
from bookshelf.infrastructure.storage import JsonCollection, Records
from bookshelf.shared.logging import logger


def _to_entity(record: dict[str, Any]) -> User:
    return User(username=str(record["username"]), password_hash=str(record["password"]))


def _find(records: Records, username: str) -> dict[str, Any] | None:
    return next((r for r in records if r.get("username") == username), None)


class JsonUserRepository(UserRepository):
    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    def find_by_username(self, username: str) -> User | None:
        record = _find(self._collection.read(), username)
        if record is None or "password" not in record:
            return None
        return _to_entity(record)

    def add(self, username: str, password_hash: str) -> User:
        def _insert(records: Records) -> User:
            if _find(records, username) is not None:
                raise UserAlreadyExistsError()
            records.append({"username": username, "password": password_hash, "favorites": []})
            return User(username=username, password_hash=password_hash)

        user = self._collection.mutate(_insert)
        logger.info(f"users.add: ok username={username}")
        return user
