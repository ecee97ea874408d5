# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.repositories import BookRepository, FavoritesRepository
from bookshelf.infrastructure.storage import JsonCollection, Records
from bookshelf.shared.logging import logger


def _to_entity(record: dict[str, Any]) -> Book | None:
    try:
        return Book(
            id=int(record["id"]),
            title=str(record["title"]),
            author=str(record["author"]),
        )
    except (KeyError, TypeError, ValueError):
        logger.warning(f"books: skipping malformed record {record!r}")
        return None


class JsonBookRepository(BookRepository):
    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    def list_all(self) -> list[Book]:
        books = (_to_entity(r) for r in self._collection.read())
        return [b for b in books if b is not None]

    def find_by_id(self, book_id: int) -> Book | None:
        return next((b for b in self.list_all() if b.id == book_id), None)

    def add(self, title: str, author: str) -> Book:
        def _insert(records: Records) -> Book:
            ids = [b.id for b in (_to_entity(r) for r in records) if b is not None]
            book = Book(id=max(ids, default=0) + 1, title=title, author=author)
            records.append(book.to_dict())
            return book

        book = self._collection.mutate(_insert)
        logger.info(f"books.add: ok book_id={book.id}")
        return book


class JsonFavoritesRepository(FavoritesRepository):
    """Favorite book ids kept under the ``favorites`` key of each user record."""

    def __init__(self, users: JsonCollection) -> None:
        self._users = users

    @staticmethod
    def _ids(record: dict[str, Any] | None) -> list[int]:
        if record is None:
            return []
        raw = record.get("favorites")
        if not isinstance(raw, list):
            return []
        return [int(x) for x in raw if isinstance(x, int) and not isinstance(x, bool)]

    @staticmethod
    def _record(records: Records, username: str) -> dict[str, Any] | None:
        return next((r for r in records if r.get("username") == username), None)

    def list_for(self, username: str) -> list[int]:
        return self._ids(self._record(self._users.read(), username))

    def add(self, username: str, book_id: int) -> list[int]:
        def _add(records: Records) -> list[int]:
            record = self._record(records, username)
            if record is None:
                return []
            ids = self._ids(record)
            if book_id not in ids:
                ids.append(book_id)
            record["favorites"] = ids
            return list(ids)

        return self._users.mutate(_add)

    def remove(self, username: str, book_id: int) -> list[int]:
        def _remove(records: Records) -> list[int]:
            record = self._record(records, username)
            if record is None:
                return []
            ids = [x for x in self._ids(record) if x != book_id]
            record["favorites"] = ids
            return list(ids)

        return self._users.mutate(_remove)
