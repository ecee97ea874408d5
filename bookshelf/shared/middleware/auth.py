# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Request, g, request

from bookshelf.domain.users.entities import TokenClaims
from bookshelf.domain.users.exceptions import InvalidTokenError
from bookshelf.domain.users.repositories import TokenIssuer
from bookshelf.shared.errors.base import UnauthorizedError
from bookshelf.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token(req: Request) -> str:
    auth = req.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def current_user() -> TokenClaims:
    """Return the claims attached by :meth:`BearerAuth.required`."""
    return cast(TokenClaims, g.current_user)


class BearerAuth:
    """Admits a request only when it carries a valid bearer token."""

    def __init__(self, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def authenticate(self, req: Request) -> TokenClaims:
        token = bearer_token(req)
        if not token:
            logger.warning(f"auth: no bearer token on {req.method} {req.path}")
            raise UnauthorizedError("token_missing", message="No token provided")

        try:
            claims = self._tokens.verify(token)
        except InvalidTokenError as exc:
            logger.warning(f"auth: token rejected on {req.method} {req.path} ({exc.message or exc.code})")
            raise UnauthorizedError(
                "token_invalid", message=exc.message or "Invalid or expired token"
            ) from exc

        logger.debug(f"auth: ok user={claims.username} {req.method} {req.path}")
        return claims

    def required(self, f: F) -> F:
        @wraps(f)
        def inner(*args: Any, **kwargs: Any) -> Any:
            g.current_user = self.authenticate(request)
            return f(*args, **kwargs)

        return cast(F, inner)


__all__ = ["BearerAuth", "bearer_token", "current_user"]
