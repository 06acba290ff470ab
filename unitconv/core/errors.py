# unitconv/core/errors.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from unitconv.core.exceptions import BaseAppError, ConversionError, ValidationError

__all__ = ["register_exception_handlers", "status_for"]


def _build_error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    detail: Any | None = None,
) -> JSONResponse:
    """애플리케이션 공통 에러 응답 포맷 생성: {"error", "code"[, "detail"]}"""
    payload: dict[str, Any] = {
        "error": message,
        "code": code,
    }
    if detail is not None:
        payload["detail"] = detail

    return JSONResponse(status_code=status_code, content=payload)


def _convert_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """FastAPI RequestValidationError → 단순화된 에러 리스트로 변환."""
    return [
        {
            "loc": list(e.get("loc") or ()),
            "msg": e.get("msg"),
            "type": e.get("type"),
        }
        for e in exc.errors()
    ]


def status_for(exc: BaseAppError) -> int:
    """ValidationError -> 400, 그 외 애플리케이션 예외(ConversionError 포함) -> 500"""
    if isinstance(exc, ValidationError):
        return 400
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    """
    FastAPI 앱 전역 예외 핸들러 등록.

    - ValidationError: 클라이언트 입력 오류(400)
    - ConversionError / 기타 BaseAppError: 서버 측 결함(500)
    - RequestValidationError: JSON 파싱/스키마 실패(422)
    - StarletteHTTPException: 일반 HTTP 에러(404 등)
    - Exception: 그 외 모든 예외(500)
    """

    @app.exception_handler(BaseAppError)
    async def app_error_handler(request: Request, exc: BaseAppError) -> JSONResponse:
        status_code = status_for(exc)
        if isinstance(exc, ConversionError) or status_code >= 500:
            logger.error(
                f"{type(exc).__name__}: {request.method} {request.url.path} -> {exc.message}"
            )
        else:
            logger.warning(
                f"Rejected input: {request.method} {request.url.path} -> {exc.message}"
            )

        return _build_error_response(
            status_code=status_code,
            code=exc.code,
            message=exc.message,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """요청 바디 파싱/검증 실패 핸들러."""
        errors = _convert_validation_errors(exc)

        logger.info(
            f"Request validation failed: {request.method} {request.url.path} ({len(errors)} errors)"
        )

        return _build_error_response(
            status_code=422,
            code="INVALID_INPUT",
            message="Invalid request body",
            detail=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """예: 404 Not Found, 405 Method Not Allowed 등"""
        logger.warning(
            f"HTTPException: {request.method} {request.url.path} -> {exc.status_code} ({exc.detail})"
        )

        return _build_error_response(
            status_code=exc.status_code,
            code="HTTP_ERROR",
            message=str(exc.detail) if exc.detail else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """최상위 핸들러: 예상치 못한 모든 예외를 500으로 포장."""
        logger.opt(exception=exc).error(
            f"Unhandled exception: {request.method} {request.url.path}"
        )

        return _build_error_response(
            status_code=500,
            code="INTERNAL_SERVER_ERROR",
            message="Internal server error",
        )
