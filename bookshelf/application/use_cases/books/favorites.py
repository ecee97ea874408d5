# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-cases for a user's favorite books."""

from __future__ import annotations

from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.repositories import BookRepository, FavoritesRepository
from bookshelf.shared.errors.base import BookNotFoundError


def _resolve(books: BookRepository, ids: list[int]) -> list[Book]:
    by_id = {book.id: book for book in books.list_all()}
    return [by_id[book_id] for book_id in ids if book_id in by_id]


class ListFavoritesUseCase:
    def __init__(self, *, books: BookRepository, favorites: FavoritesRepository) -> None:
        self._books = books
        self._favorites = favorites

    def execute(self, username: str) -> list[Book]:
        return _resolve(self._books, self._favorites.list_for(username))


class AddFavoriteUseCase:
    def __init__(self, *, books: BookRepository, favorites: FavoritesRepository) -> None:
        self._books = books
        self._favorites = favorites

    def execute(self, username: str, book_id: int) -> list[Book]:
        if self._books.find_by_id(book_id) is None:
            raise BookNotFoundError(book_id)
        return _resolve(self._books, self._favorites.add(username, book_id))


class RemoveFavoriteUseCase:
    def __init__(self, *, books: BookRepository, favorites: FavoritesRepository) -> None:
        self._books = books
        self._favorites = favorites

    def execute(self, username: str, book_id: int) -> list[Book]:
        return _resolve(self._books, self._favorites.remove(username, book_id))
