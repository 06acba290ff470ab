# unitconv/api/v1/endpoints/units.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from unitconv.schemas.conversion import CategoryUnitsOut, UnitsOut
from unitconv.services.units import PIVOT_UNITS, UNIT_LISTS, Category

router = APIRouter(tags=["units"])


@router.get("", response_model=UnitsOut)
def list_units():
    """카테고리별 지원 단위 전체"""
    return {category.value: list(units) for category, units in UNIT_LISTS.items()}


@router.get("/{category}", response_model=CategoryUnitsOut)
def list_category_units(category: str):
    try:
        c = Category(category.strip().lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")

    return CategoryUnitsOut(category=c.value, pivot=PIVOT_UNITS[c], units=list(UNIT_LISTS[c]))
