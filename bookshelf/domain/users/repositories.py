# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, username: str, password_hash: str) -> User: ...


class TokenIssuer(Protocol):
    def issue(self, user: User) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
