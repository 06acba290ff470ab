# unitconv/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, List, Optional, Union

from pydantic import Field, AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 환경 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. 프로젝트 기본 정보
    # =========================================================
    PROJECT_NAME: str = Field(
        default="Unit Converter API", description="Swagger UI 등에 표시될 프로젝트 이름"
    )
    API_V1_STR: str = Field(default="/api/v1", description="API 버전 Prefix")

    APP_ENV: Literal["local", "dev", "test", "prod"] = Field(
        default="local",
        description="애플리케이션 실행 환경 (local/dev/test/prod)",
    )

    HOST: str = Field(default="127.0.0.1", description="uvicorn 바인딩 주소")
    PORT: int = Field(default=3000, description="uvicorn 포트")

    # =========================================================
    # 2. CORS
    # =========================================================
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = Field(
        default=[], description="CORS 허용 도메인 목록 (예: http://localhost:3000)"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """문자열로 들어온 CORS 설정을 리스트로 변환"""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # =========================================================
    # 3. 로깅
    # =========================================================
    LOG_DIR: str = Field(default=".logs", description="로그 파일 디렉터리")
    LOG_LEVEL: str = Field(default="INFO", description="콘솔 로그 레벨")
    LOG_TO_FILE: bool = Field(default=True, description="파일 로그 사용 여부")

    # =========================================================
    # 4. GitHub Activity CLI
    # =========================================================
    GITHUB_API_BASE_URL: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )
    GITHUB_TOKEN: Optional[str] = Field(
        default=None, description="선택: rate limit 완화를 위한 personal access token"
    )
    GITHUB_TIMEOUT_S: float = Field(default=30.0, description="HTTP timeout (seconds)")
    GITHUB_USER_AGENT: str = Field(default="GitHub-User-Activity-CLI/1.0")

    @property
    def log_dir_path(self) -> Path:
        """로그 디렉터리 절대 경로 (Path 객체)."""
        return Path(self.LOG_DIR).resolve()


@lru_cache
def get_settings() -> Settings:
    """FastAPI Depends용 싱글톤 Settings 인스턴스."""
    return Settings()


# 전역 설정 객체
settings = get_settings()
