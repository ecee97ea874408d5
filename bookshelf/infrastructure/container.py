# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from bookshelf.application.services.password_hashing import \
    WerkzeugPasswordHasher
from bookshelf.application.use_cases.books.catalogue import (AddBookUseCase,
                                                             GetBookUseCase,
                                                             ListBooksUseCase)
from bookshelf.application.use_cases.books.favorites import (
    AddFavoriteUseCase, ListFavoritesUseCase, RemoveFavoriteUseCase)
from bookshelf.application.use_cases.users.login_user import LoginUserUseCase
from bookshelf.application.use_cases.users.register_user import \
    RegisterUserUseCase
from bookshelf.infrastructure.auth.tokens import JwtTokenIssuer
from bookshelf.infrastructure.repositories import (JsonBookRepository,
                                                   JsonFavoritesRepository,
                                                   JsonUserRepository)
from bookshelf.infrastructure.storage import JsonCollection
from bookshelf.interfaces.http.controllers.auth_controller import AuthController
from bookshelf.interfaces.http.controllers.books_controller import (
    BooksController, FavoritesController)
from bookshelf.interfaces.http.controllers.misc_controller import MiscController
from bookshelf.shared.config import AppConfig
from bookshelf.shared.middleware.auth import BearerAuth
from bookshelf.shared.middleware.rate_limit import (FixedWindowRateLimiter,
                                                    RateLimitPolicy)


class Container:
    """Per-application object graph; one instance per Flask app."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Storage

    @cached_property
    def users_collection(self) -> JsonCollection:
        return JsonCollection(self.config.users_file)

    @cached_property
    def books_collection(self) -> JsonCollection:
        return JsonCollection(self.config.books_file)

    @cached_property
    def user_repository(self) -> JsonUserRepository:
        return JsonUserRepository(self.users_collection)

    @cached_property
    def book_repository(self) -> JsonBookRepository:
        return JsonBookRepository(self.books_collection)

    @cached_property
    def favorites_repository(self) -> JsonFavoritesRepository:
        return JsonFavoritesRepository(self.users_collection)

    # Auth

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.config.secret_key, ttl_seconds=self.config.token_ttl)

    @cached_property
    def rate_limiter(self) -> FixedWindowRateLimiter:
        policy = RateLimitPolicy(
            max_attempts=self.config.rate_limit.max_attempts,
            window_ms=self.config.rate_limit.window_ms,
            enabled=not self.config.skip_rate_limit,
        )
        return FixedWindowRateLimiter(policy)

    @cached_property
    def bearer_auth(self) -> BearerAuth:
        return BearerAuth(self.token_issuer)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_books_use_case(self) -> ListBooksUseCase:
        return ListBooksUseCase(books=self.book_repository)

    @cached_property
    def get_book_use_case(self) -> GetBookUseCase:
        return GetBookUseCase(books=self.book_repository)

    @cached_property
    def add_book_use_case(self) -> AddBookUseCase:
        return AddBookUseCase(books=self.book_repository)

    @cached_property
    def list_favorites_use_case(self) -> ListFavoritesUseCase:
        return ListFavoritesUseCase(
            books=self.book_repository, favorites=self.favorites_repository
        )

    @cached_property
    def add_favorite_use_case(self) -> AddFavoriteUseCase:
        return AddFavoriteUseCase(
            books=self.book_repository, favorites=self.favorites_repository
        )

    @cached_property
    def remove_favorite_use_case(self) -> RemoveFavoriteUseCase:
        return RemoveFavoriteUseCase(
            books=self.book_repository, favorites=self.favorites_repository
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            rate_limiter=self.rate_limiter,
        )

    @cached_property
    def books_controller(self) -> BooksController:
        return BooksController(
            auth=self.bearer_auth,
            list_books=self.list_books_use_case,
            get_book=self.get_book_use_case,
            add_book=self.add_book_use_case,
        )

    @cached_property
    def favorites_controller(self) -> FavoritesController:
        return FavoritesController(
            auth=self.bearer_auth,
            list_favorites=self.list_favorites_use_case,
            add_favorite=self.add_favorite_use_case,
            remove_favorite=self.remove_favorite_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.users_collection, books=self.books_collection)
