# unitconv/services/units.py
# 단위 저장소(카테고리별 지원 단위) + 변환 계수 테이블.
# 프로세스 시작 시 한 번 만들어지고 이후 절대 변경되지 않는다.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Category(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"


@dataclass(frozen=True)
class AffineTransform:
    """
    Temperature unit <-> Kelvin.

      to Kelvin:   K = (value + offset) * scale
      from Kelvin: value = K / scale - offset
    """

    offset: float
    scale: float

    def to_kelvin(self, value: float) -> float:
        return (value + self.offset) * self.scale

    def from_kelvin(self, kelvin: float) -> float:
        return kelvin / self.scale - self.offset


def _lin(scale: float, offset: float = 0.0) -> AffineTransform:
    return AffineTransform(offset=float(offset), scale=float(scale))


# ---- 단위 저장소 ----
UNIT_LISTS: Mapping[Category, Tuple[str, ...]] = MappingProxyType({
    Category.LENGTH: ("mm", "cm", "m", "km", "in", "ft", "yd", "mi"),
    Category.WEIGHT: ("mg", "g", "kg", "t", "oz", "lb", "st", "ton"),
    Category.TEMPERATURE: ("c", "f", "k"),
})

# ---- 선형 계수 (1 단위 = N pivot) ----
# Length: pivot = m
LENGTH_FACTORS: Mapping[str, float] = MappingProxyType({
    "mm": 0.001,
    "cm": 0.01,
    "m": 1.0,
    "km": 1000.0,
    "in": 0.0254,
    "ft": 0.3048,
    "yd": 0.9144,
    "mi": 1609.344,
})

# Weight: pivot = kg
WEIGHT_FACTORS: Mapping[str, float] = MappingProxyType({
    "mg": 0.000001,
    "g": 0.001,
    "kg": 1.0,
    "t": 1000.0,
    "oz": 0.0283495,
    "lb": 0.45359237,
    "st": 6.35029318,
    "ton": 1000.0,  # metric ton (= t)
})

# Temperature: pivot = K
TEMPERATURE_TRANSFORMS: Mapping[str, AffineTransform] = MappingProxyType({
    "c": _lin(1.0, 273.15),
    "f": _lin(5 / 9, 459.67),
    "k": _lin(1.0),
})

# 물리적 하한 (절대영도, 각 단위 기준)
ABSOLUTE_ZERO: Mapping[str, float] = MappingProxyType({
    "c": -273.15,
    "f": -459.67,
    "k": 0.0,
})

PIVOT_UNITS: Mapping[Category, str] = MappingProxyType({
    Category.LENGTH: "m",
    Category.WEIGHT: "kg",
    Category.TEMPERATURE: "k",
})


def get_units(category: Category | str) -> Tuple[str, ...]:
    return UNIT_LISTS[Category(category)]


def get_length_units() -> Tuple[str, ...]:
    return UNIT_LISTS[Category.LENGTH]


def get_weight_units() -> Tuple[str, ...]:
    return UNIT_LISTS[Category.WEIGHT]


def get_temperature_units() -> Tuple[str, ...]:
    return UNIT_LISTS[Category.TEMPERATURE]


def find_category(unit: str) -> Category | None:
    """단위 기호로 카테고리 추정 (대소문자/공백 무시). 없으면 None."""
    if not isinstance(unit, str):
        return None
    key = unit.strip().lower()
    for category, units in UNIT_LISTS.items():
        if key in units:
            return category
    return None
