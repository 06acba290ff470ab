# unitconv/services/conversion.py
from __future__ import annotations

import math
from typing import Any

from loguru import logger

from unitconv.core.exceptions import ConversionError, ValidationError
from unitconv.services.converters import CONVERTERS
from unitconv.services.units import Category
from unitconv.services.validators import VALIDATORS

__all__ = [
    "ConversionService",
    "convert_length",
    "convert_weight",
    "convert_temperature",
]


def _coerce_category(category: Any) -> Category:
    try:
        return Category(category.strip().lower() if isinstance(category, str) else category)
    except ValueError:
        supported = ", ".join(c.value for c in Category)
        raise ValidationError(
            f"Unsupported category: '{category}'. Supported categories: {supported}"
        ) from None


class ConversionService:
    """
    Validate, then convert.

    ValidationError  -> 잘못된 입력 (client fault)
    ConversionError  -> 테이블 불일치 등 서버 측 결함
    """

    @staticmethod
    def convert(category: Category | str, value: Any, from_unit: Any, to_unit: Any) -> float:
        category = _coerce_category(category)
        validator = VALIDATORS[category]
        converter = CONVERTERS[category]

        # value는 출발 단위 기준으로만 검증 (온도의 절대영도 하한은 단위마다 다름)
        source = validator.validate(value, from_unit)
        target_unit = validator.validate_unit(to_unit)

        result = converter.convert(source.value, source.unit, target_unit)

        if not math.isfinite(result):
            raise ConversionError(
                f"Conversion produced a non-finite result for {category.value}: "
                f"{source.value} {source.unit} -> {target_unit}"
            )

        logger.debug(
            f"{category.value}: {source.value} {source.unit} -> {result} {target_unit}"
        )
        return result

    @classmethod
    def convert_length(cls, value: Any, from_unit: Any, to_unit: Any) -> float:
        return cls.convert(Category.LENGTH, value, from_unit, to_unit)

    @classmethod
    def convert_weight(cls, value: Any, from_unit: Any, to_unit: Any) -> float:
        return cls.convert(Category.WEIGHT, value, from_unit, to_unit)

    @classmethod
    def convert_temperature(cls, value: Any, from_unit: Any, to_unit: Any) -> float:
        return cls.convert(Category.TEMPERATURE, value, from_unit, to_unit)


convert_length = ConversionService.convert_length
convert_weight = ConversionService.convert_weight
convert_temperature = ConversionService.convert_temperature
