# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Book


class BookRepository(Protocol):
    def list_all(self) -> list[Book]: ...
    def find_by_id(self, book_id: int) -> Book | None: ...
    def add(self, title: str, author: str) -> Book: ...


class FavoritesRepository(Protocol):
    def list_for(self, username: str) -> list[int]: ...
    def add(self, username: str, book_id: int) -> list[int]: ...
    def remove(self, username: str, book_id: int) -> list[int]: ...
