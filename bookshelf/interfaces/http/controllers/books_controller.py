# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from bookshelf.application.use_cases.books.catalogue import (AddBookUseCase,
                                                             GetBookUseCase,
                                                             ListBooksUseCase)
from bookshelf.application.use_cases.books.favorites import (
    AddFavoriteUseCase, ListFavoritesUseCase, RemoveFavoriteUseCase)
from bookshelf.domain.books.entities import Book
from bookshelf.interfaces.http.dto.books import (AddBookRequestDTO,
                                                 AddFavoriteRequestDTO, BookDTO)
from bookshelf.shared.errors.validation import raise_bad_request
from bookshelf.shared.logging import logger
from bookshelf.shared.middleware.auth import BearerAuth, current_user


def _dump(books: list[Book]) -> list[dict[str, object]]:
    return [BookDTO.from_entity(book).model_dump() for book in books]


class BooksController:
    def __init__(
        self,
        *,
        auth: BearerAuth,
        list_books: ListBooksUseCase,
        get_book: GetBookUseCase,
        add_book: AddBookUseCase,
    ) -> None:
        self._auth = auth
        self._list_books = list_books
        self._get_book = get_book
        self._add_book = add_book

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("books", __name__, url_prefix="/api")
        bp.add_url_rule("/books", view_func=self.list_books, methods=["GET"])
        bp.add_url_rule("/books/<int:book_id>", view_func=self.get_book, methods=["GET"])
        bp.add_url_rule(
            "/books",
            endpoint="add_book",
            view_func=self._auth.required(self.add_book),
            methods=["POST"],
        )
        return bp

    def list_books(self) -> Response:
        return jsonify(_dump(self._list_books.execute()))

    def get_book(self, book_id: int) -> Response:
        return jsonify(BookDTO.from_entity(self._get_book.execute(book_id)).model_dump())

    def add_book(self) -> tuple[Response, int]:
        try:
            dto = AddBookRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_bad_request(exc, message="Title and author are required")

        book = self._add_book.execute(dto.title, dto.author)
        logger.info(f"books.add: ok (user={current_user().username}, book_id={book.id})")
        return jsonify(BookDTO.from_entity(book).model_dump()), 201


class FavoritesController:
    def __init__(
        self,
        *,
        auth: BearerAuth,
        list_favorites: ListFavoritesUseCase,
        add_favorite: AddFavoriteUseCase,
        remove_favorite: RemoveFavoriteUseCase,
    ) -> None:
        self._auth = auth
        self._list_favorites = list_favorites
        self._add_favorite = add_favorite
        self._remove_favorite = remove_favorite

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("favorites", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/favorites",
            endpoint="list_favorites",
            view_func=self._auth.required(self.list_favorites),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/favorites",
            endpoint="add_favorite",
            view_func=self._auth.required(self.add_favorite),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/favorites/<int:book_id>",
            endpoint="remove_favorite",
            view_func=self._auth.required(self.remove_favorite),
            methods=["DELETE"],
        )
        return bp

    def list_favorites(self) -> Response:
        return jsonify(_dump(self._list_favorites.execute(current_user().username)))

    def add_favorite(self) -> tuple[Response, int]:
        try:
            dto = AddFavoriteRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_bad_request(exc, message="bookId is required")

        username = current_user().username
        books = self._add_favorite.execute(username, dto.book_id)
        logger.info(f"favorites.add: ok (user={username}, book_id={dto.book_id})")
        return jsonify(_dump(books)), 201

    def remove_favorite(self, book_id: int) -> Response:
        username = current_user().username
        books = self._remove_favorite.execute(username, book_id)
        logger.info(f"favorites.remove: ok (user={username}, book_id={book_id})")
        return jsonify(_dump(books))
