from fastapi import APIRouter

from unitconv.api.v1.endpoints import convert, units, health

api_router = APIRouter()

# ==============================================================================
# 1. Core (단위 변환)
# ==============================================================================
api_router.include_router(convert.router, prefix="/convert", tags=["Conversion"])

# ==============================================================================
# 2. Reference data (지원 단위 조회)
# ==============================================================================
api_router.include_router(units.router, prefix="/units", tags=["Units"])

# ==============================================================================
# 3. System (헬스 체크)
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
