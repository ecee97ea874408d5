# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from bookshelf.shared.logging import clear_correlation_id, logger, set_correlation_id

from .rate_limit import client_key


def _get_username() -> str | None:
    claims = getattr(g, "current_user", None)
    return getattr(claims, "username", None)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.info(
                f"Request started: {request.method} {request.path} "
                f"from {client_key(request)}, query={dict(request.args)}, "
                f"body_size={len(request.get_data(cache=True))}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {client_key(request)}")

    @app.after_request
    def _after_request(response: Response) -> Response:
        duration = time.perf_counter() - getattr(g, "request_start_time", time.perf_counter())
        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, duration={duration:.3f}s, user={_get_username()}"
        )
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging"]
