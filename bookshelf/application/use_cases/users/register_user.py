# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bookshelf.domain.users.entities import User
from bookshelf.domain.users.exceptions import UserAlreadyExistsError
from bookshelf.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        return self._users.add(username, hashed)
