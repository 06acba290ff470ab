# unitconv/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# Config & Logger
from unitconv.core.config import settings
from unitconv.core.errors import register_exception_handlers
from unitconv.core.logger import setup_logging

# Routers
from unitconv.api.v1.api import api_router


# ==============================================================================
# 1. Lifespan (수명 주기 관리)
# ==============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    서버 시작/종료 시 실행될 로직
    """
    # [Startup]
    setup_logging()
    logger.info(f"🚀 Unit Converter Server Starting... (Env: {settings.APP_ENV})")

    yield

    # [Shutdown]
    logger.info("🛑 Unit Converter Server Shutting Down...")


# ==============================================================================
# 2. FastAPI App 초기화
# ==============================================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# ==============================================================================
# 3. Middleware (CORS)
# ==============================================================================
# BACKEND_CORS_ORIGINS 미설정 시 모든 출처 허용 (로컬 개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o).rstrip("/") for o in settings.BACKEND_CORS_ORIGINS] or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==============================================================================
# 4. Exception Handlers & Router Registration
# ==============================================================================
register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_V1_STR)


# ==============================================================================
# 5. Root Endpoint
# ==============================================================================
@app.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    """서버 상태 확인용 루트 엔드포인트"""
    prefix = settings.API_V1_STR
    return {
        "message": "Welcome to Unit Converter API",
        "docs_url": "/docs",
        "endpoints": {
            "length": f"{prefix}/convert/length",
            "weight": f"{prefix}/convert/weight",
            "temperature": f"{prefix}/convert/temperature",
            "units": f"{prefix}/units",
        },
        "status": "running",
    }


@app.get("/health", include_in_schema=False)
def health_check():
    """로드밸런서용 단순 헬스 체크"""
    return {"status": "ok"}
