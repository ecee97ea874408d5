# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime

import jwt

from bookshelf.domain.users.entities import TokenClaims, User
from bookshelf.domain.users.exceptions import InvalidTokenError
from bookshelf.domain.users.repositories import TokenIssuer
from bookshelf.shared.logging import logger

_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class JwtTokenIssuer(TokenIssuer):
    """Signs and verifies HS256 bearer tokens carrying the username."""

    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int = 3600,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret = secret_key
        self._ttl = int(ttl_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, user: User) -> str:
        issued_at = int(self._clock())
        payload = {
            "sub": user.username,
            "username": user.username,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.info(f"tokens.issue: user={user.username} exp={payload['exp']}")
        return token

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": _REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        # Time-based claims are checked against the injected clock.
        try:
            expires_at = int(payload["exp"])
            issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
            expires = datetime.fromtimestamp(expires_at, UTC)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            logger.debug(f"tokens.verify: malformed time claims ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        if int(self._clock()) >= expires_at:
            logger.debug(f"tokens.verify: expired user={payload.get('sub')}")
            raise InvalidTokenError(message="Token expired")

        username = payload.get("username") or payload["sub"]
        if not isinstance(username, str) or not username:
            raise InvalidTokenError()

        return TokenClaims(
            username=username,
            issued_at=issued_at,
            expires_at=expires,
        )


__all__ = ["JwtTokenIssuer"]
