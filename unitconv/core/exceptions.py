# unitconv/core/exceptions.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

__all__ = [
    "BaseAppError",
    "ValidationError",
    "ConversionError",
    "GitHubApiError",
    "GitHubServiceError",
]


class BaseAppError(Exception):
    """모든 애플리케이션 예외의 부모 클래스."""

    default_code = "GENERIC_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp,
        }


class ValidationError(BaseAppError):
    """입력값 검증 실패 (클라이언트 책임, 메시지 그대로 노출 가능)."""

    default_code = "VALIDATION_ERROR"


class ConversionError(BaseAppError):
    """변환 테이블에 없는 단위로 변환을 시도함 (서버 측 결함)."""

    default_code = "CONVERSION_ERROR"


class GitHubApiError(BaseAppError):
    default_code = "GITHUB_API_ERROR"


class GitHubServiceError(BaseAppError):
    default_code = "GITHUB_SERVICE_ERROR"
