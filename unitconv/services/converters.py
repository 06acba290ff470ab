# unitconv/services/converters.py
from __future__ import annotations

from typing import Any, Mapping

from loguru import logger

from unitconv.core.exceptions import ConversionError
from unitconv.services.units import (
    LENGTH_FACTORS,
    TEMPERATURE_TRANSFORMS,
    WEIGHT_FACTORS,
    AffineTransform,
    Category,
)


def _lookup(table: Mapping[str, Any], unit: Any) -> Any:
    # 검증을 거치지 않은 호출도 허용하므로 None/비문자열도 여기서 걸러낸다
    if not isinstance(unit, str):
        return None
    return table.get(unit)


def _linear_convert(
    table: Mapping[str, float], category: Category, value: float, from_unit: Any, to_unit: Any
) -> float:
    factor_from = _lookup(table, from_unit)
    if factor_from is None:
        raise ConversionError(f"Missing conversion factor for {category.value} unit {from_unit}")

    factor_to = _lookup(table, to_unit)
    if factor_to is None:
        raise ConversionError(f"Missing conversion factor for {category.value} unit {to_unit}")

    if from_unit == to_unit:
        return value

    # from -> pivot -> to
    return value * factor_from / factor_to


class LengthConverter:
    """
    Length conversions routed through meters.

    Metric: mm, cm, m, km / Imperial: in, ft, yd, mi

    >>> LengthConverter.convert(1, "m", "cm")
    100.0
    """

    @staticmethod
    def convert(value: float, from_unit: str, to_unit: str) -> float:
        return _linear_convert(LENGTH_FACTORS, Category.LENGTH, value, from_unit, to_unit)


class WeightConverter:
    """Weight conversions routed through kilograms (mg, g, kg, t, oz, lb, st, ton)."""

    @staticmethod
    def convert(value: float, from_unit: str, to_unit: str) -> float:
        return _linear_convert(WEIGHT_FACTORS, Category.WEIGHT, value, from_unit, to_unit)


class TemperatureConverter:
    """
    Celsius / Fahrenheit / Kelvin, always through Kelvin.

      K = (value + offset) * scale
      value = K / scale - offset
    """

    @staticmethod
    def convert(value: float, from_unit: str, to_unit: str) -> float:
        t_in: AffineTransform | None = _lookup(TEMPERATURE_TRANSFORMS, from_unit)
        if t_in is None:
            raise ConversionError(f"Unsupported temperature unit: {from_unit}")

        t_out: AffineTransform | None = _lookup(TEMPERATURE_TRANSFORMS, to_unit)
        if t_out is None:
            raise ConversionError(f"Unsupported temperature unit: {to_unit}")

        if from_unit == to_unit:
            return value

        kelvin = t_in.to_kelvin(value)
        logger.trace(f"temperature pivot: {value} {from_unit} -> {kelvin} K")
        return t_out.from_kelvin(kelvin)


CONVERTERS = {
    Category.LENGTH: LengthConverter,
    Category.WEIGHT: WeightConverter,
    Category.TEMPERATURE: TemperatureConverter,
}
