# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message or self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str | None, getattr(self, "message", None))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, message=message, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "invalid_input",
        *,
        message: str | None = "Invalid request body",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class UnauthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="unauthenticated",
            status=HTTPStatus.UNAUTHORIZED,
            message="Access denied, no token provided",
        )


class ForbiddenError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="forbidden",
            status=HTTPStatus.FORBIDDEN,
            message="Invalid or expired token",
        )


class StorageUnavailableError(InfrastructureError):
    def __init__(self, collection: str) -> None:
        super().__init__(
            "storage_unavailable",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Storage is temporarily unavailable",
            context={"collection": collection},
        )
