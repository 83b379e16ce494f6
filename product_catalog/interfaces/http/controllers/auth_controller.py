# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from product_catalog.application.use_cases.users.login_user import LoginUserUseCase
from product_catalog.application.use_cases.users.register_user import RegisterUserUseCase
from product_catalog.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    RegisterRequestDTO,
    TokenDTO,
)
from product_catalog.shared.errors.validation import raise_validation_error
from product_catalog.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="User registered successfully").model_dump()
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except Exception:
            logger.warning(f"auth.login: failed username={dto.username}")
            raise

        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
