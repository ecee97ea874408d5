# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bookshelf.domain.users.exceptions import InvalidCredentialsError
from bookshelf.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from bookshelf.shared.logging import logger

_DUMMY_PASSWORD = "bookshelf-dummy-password"


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        # Unknown users still pay for one hash check so timing does not reveal them.
        stored_hash = user.password_hash if user is not None else self._unknown_user_hash()
        matches = self._password_hasher.verify(password, stored_hash)
        if user is None or not matches:
            logger.warning(f"auth.login: invalid credentials username={username}")
            raise InvalidCredentialsError()

        return self._tokens.issue(user)

    def _unknown_user_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash(_DUMMY_PASSWORD)
        return self._dummy_hash
