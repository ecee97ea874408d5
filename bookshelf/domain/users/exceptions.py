# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from bookshelf.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"


class InvalidTokenError(DomainError):
    code = "token_invalid"
    status = HTTPStatus.UNAUTHORIZED
