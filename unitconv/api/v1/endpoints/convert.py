# unitconv/api/v1/endpoints/convert.py
from __future__ import annotations

from fastapi import APIRouter
from loguru import logger

from unitconv.schemas.conversion import ConvertIn, ConvertOut
from unitconv.services.conversion import ConversionService
from unitconv.services.units import Category

router = APIRouter(tags=["conversion"])

_ERROR_RESPONSES = {
    400: {"description": "Invalid value or unit: {error, code}"},
    500: {"description": "Conversion failed: {error, code}"},
}


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _run(category: Category, payload: ConvertIn) -> ConvertOut:
    logger.info(
        f"[Convert] {category.value}: {payload.value!r} {payload.from_unit!r} -> {payload.to_unit!r}"
    )
    # ValidationError / ConversionError 는 core.errors 핸들러가 400 / 500 으로 변환
    result = ConversionService.convert(
        category, payload.value, payload.from_unit, payload.to_unit
    )
    return ConvertOut(result=result)


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.post("/length", response_model=ConvertOut, responses=_ERROR_RESPONSES)
def convert_length(payload: ConvertIn):
    """mm, cm, m, km, in, ft, yd, mi"""
    return _run(Category.LENGTH, payload)


@router.post("/weight", response_model=ConvertOut, responses=_ERROR_RESPONSES)
def convert_weight(payload: ConvertIn):
    """mg, g, kg, t, oz, lb, st, ton"""
    return _run(Category.WEIGHT, payload)


@router.post("/temperature", response_model=ConvertOut, responses=_ERROR_RESPONSES)
def convert_temperature(payload: ConvertIn):
    """c (Celsius), f (Fahrenheit), k (Kelvin)"""
    return _run(Category.TEMPERATURE, payload)
