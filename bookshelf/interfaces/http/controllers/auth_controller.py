# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from bookshelf.application.use_cases.users.login_user import LoginUserUseCase
from bookshelf.application.use_cases.users.register_user import RegisterUserUseCase
from bookshelf.domain.users.exceptions import InvalidCredentialsError
from bookshelf.interfaces.http.dto.auth import (LoginRequestDTO, RegisteredDTO,
                                                RegisterRequestDTO, TokenDTO)
from bookshelf.shared.errors.validation import raise_bad_request
from bookshelf.shared.logging import logger
from bookshelf.shared.middleware.rate_limit import FixedWindowRateLimiter, client_key


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        rate_limiter: FixedWindowRateLimiter,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._rate_limiter = rate_limiter

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            logger.warning("auth.register: missing fields")
            raise_bad_request(exc, message="Username and password are required")

        self._rate_limiter.check(client_key(request), "register")

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok username={user.username}")
        return jsonify(RegisteredDTO(username=user.username).model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            # Missing fields answer 401 here, unlike register's 400.
            logger.warning("auth.login: missing fields")
            raise InvalidCredentialsError() from exc

        self._rate_limiter.check(client_key(request), "login")

        token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
