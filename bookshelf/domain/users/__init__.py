# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaims, User
from .exceptions import InvalidCredentialsError, InvalidTokenError, UserAlreadyExistsError

__all__ = [
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenClaims",
    "User",
    "UserAlreadyExistsError",
]
