# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from bookreviews.application.use_cases.users.login_user import LoginUserUseCase
from bookreviews.application.use_cases.users.register_user import RegisterUserUseCase
from bookreviews.interfaces.http.dto.auth import (AuthSuccessDTO, LoginRequestDTO,
                                                  LoginSuccessDTO, RegisterRequestDTO)
from bookreviews.interfaces.http.session import SESSION_COOKIE
from bookreviews.shared.config import SecurityConfig
from bookreviews.shared.errors.validation import raise_validation_error
from bookreviews.shared.logging import logger
from bookreviews.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig,
        session_ttl_seconds: int,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security
        self._session_ttl = session_ttl_seconds

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        payload = AuthSuccessDTO(message="User successfully registered. Now you can login")
        logger.info(f"auth.register: ok user={user.username}")
        return jsonify(payload.model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._login_use_case.execute(dto.username, dto.password)

        payload = LoginSuccessDTO(
            message="Login success!",
            token=session.token,
            expires_at=session.expires_at,
        )
        response = jsonify(payload.model_dump(mode="json"))
        response.set_cookie(
            SESSION_COOKIE,
            session.token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=self._session_ttl,
        )
        logger.info(f"auth.login: ok user={dto.username}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(self._security)
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=limited(self.register), methods=["POST"])
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["POST"])
        return bp
