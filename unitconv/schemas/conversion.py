# unitconv/schemas/conversion.py
# =============================================================================
# Conversion request / response schemas (Pydantic v2)
#
# value/from/to 는 스키마 단계에서 타입을 강제하지 않는다.
# 타입/형식 검증은 전부 Validator가 담당해야 에러 메시지가 일관된다.
# =============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field

from .common import AppBaseModel


class ConvertIn(AppBaseModel):
    value: Any = None
    from_unit: Any = Field(default=None, alias="from")
    to_unit: Any = Field(default=None, alias="to")


class ConvertOut(AppBaseModel):
    result: float


class CategoryUnitsOut(AppBaseModel):
    category: str
    pivot: str
    units: List[str]


UnitsOut = Dict[str, List[str]]
