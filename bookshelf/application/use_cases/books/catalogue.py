# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.repositories import BookRepository
from bookshelf.shared.errors.base import BookNotFoundError


class ListBooksUseCase:
    def __init__(self, *, books: BookRepository) -> None:
        self._books = books

    def execute(self) -> list[Book]:
        return self._books.list_all()


class GetBookUseCase:
    def __init__(self, *, books: BookRepository) -> None:
        self._books = books

    def execute(self, book_id: int) -> Book:
        book = self._books.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book


class AddBookUseCase:
    def __init__(self, *, books: BookRepository) -> None:
        self._books = books

    def execute(self, title: str, author: str) -> Book:
        return self._books.add(title.strip(), author.strip())
