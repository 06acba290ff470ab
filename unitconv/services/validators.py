# unitconv/services/validators.py
# =============================================================================
# Input validators
#
# - InputValidator: 카테고리와 무관한 숫자/문자열/범위 검증
# - Length/Weight/TemperatureValidator: 단위 정규화 + 카테고리별 검증
#
# 모든 실패는 ValidationError (클라이언트 책임) 로 즉시 raise 한다.
# =============================================================================

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from unitconv.core.exceptions import ValidationError
from unitconv.services.sanitize import (
    is_number,
    sanitize_numeric_input,
    sanitize_string_input,
)
from unitconv.services.units import ABSOLUTE_ZERO, Category, get_units


@dataclass(frozen=True)
class ValidatedQuantity:
    """검증을 통과한 (value, unit) 쌍. Validator만 생성한다."""

    value: float
    unit: str

    def as_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit}


# =============================================================================
# Generic
# =============================================================================
class InputValidator:
    @staticmethod
    def validate_numeric_input(value: Any) -> float:
        if not (is_number(value) or isinstance(value, str)):
            raise ValidationError("Value must be a number or numeric string")

        value = sanitize_numeric_input(value)

        try:
            value = float(value)
        except OverflowError:
            raise ValidationError("Value must be a finite number") from None

        if not math.isfinite(value):
            raise ValidationError("Value must be a finite number")

        return value

    @staticmethod
    def validate_string_input(
        value: Any,
        *,
        required: bool = False,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        pattern: Union[str, re.Pattern, None] = None,
    ) -> str:
        if not isinstance(value, str):
            raise ValidationError("Value must be a string")

        value = sanitize_string_input(value).strip()

        if required and not value:
            raise ValidationError("String value is required and cannot be empty")

        if min_length and len(value) < min_length:
            raise ValidationError(f"String value must be at least {min_length} characters")

        if max_length and len(value) > max_length:
            raise ValidationError(f"String value must be at most {max_length} characters")

        if pattern is not None:
            regex = re.compile(pattern) if isinstance(pattern, str) else pattern
            if not regex.fullmatch(value):
                raise ValidationError("String value does not match the required pattern")

        return value

    @classmethod
    def validate_range(cls, value: Any, min_value: Any, max_value: Any) -> float:
        value = cls.validate_numeric_input(value)
        min_value = cls.validate_numeric_input(min_value)
        max_value = cls.validate_numeric_input(max_value)

        if value < min_value or value > max_value:
            raise ValidationError(
                f"Value {_fmt(value)} is out of range ({_fmt(min_value)} to {_fmt(max_value)})"
            )

        return value


def _fmt(v: float) -> str:
    # 100.0 -> "100", 2.5 -> "2.5"
    return str(int(v)) if float(v).is_integer() else repr(float(v))


def _validate_unit(unit: Any, category: Category) -> str:
    supported = get_units(category)

    def _unsupported(shown: Any) -> ValidationError:
        return ValidationError(
            f"Unsupported {category.value} unit: '{shown}'. "
            f"Supported units: {', '.join(supported)}"
        )

    try:
        normalized = InputValidator.validate_string_input(unit, required=True).lower()
    except ValidationError:
        # 비문자열/빈 문자열도 지원 목록을 담은 동일한 메시지로 거절
        raise _unsupported(sanitize_string_input(unit)) from None

    if normalized not in supported:
        raise _unsupported(normalized)
    return normalized


# =============================================================================
# Category validators
# =============================================================================
class LengthValidator:
    category = Category.LENGTH

    @staticmethod
    def validate_unit(unit: Any) -> str:
        """'CM' -> 'cm'. 미지원 단위면 지원 목록을 담은 ValidationError."""
        return _validate_unit(unit, Category.LENGTH)

    @staticmethod
    def validate_numeric_value(value: Any) -> float:
        return InputValidator.validate_numeric_input(value)

    @classmethod
    def validate(cls, value: Any, unit: Any) -> ValidatedQuantity:
        value = cls.validate_numeric_value(value)
        unit = cls.validate_unit(unit)
        return ValidatedQuantity(value=value, unit=unit)


class WeightValidator:
    category = Category.WEIGHT

    @staticmethod
    def validate_unit(unit: Any) -> str:
        return _validate_unit(unit, Category.WEIGHT)

    @staticmethod
    def validate_numeric_value(value: Any) -> float:
        return InputValidator.validate_numeric_input(value)

    @staticmethod
    def validate_value(
        value: Any, *, min_value: Any = None, max_value: Any = None
    ) -> float:
        """
        Numeric validation with optional bounds.

        Both bounds -> inclusive range check; a single bound -> one-sided
        check with its own message.
        """
        value = InputValidator.validate_numeric_input(value)

        if min_value is not None:
            min_value = InputValidator.validate_numeric_input(min_value)
        if max_value is not None:
            max_value = InputValidator.validate_numeric_input(max_value)

        if min_value is not None and max_value is not None:
            return InputValidator.validate_range(value, min_value, max_value)
        if min_value is not None and value < min_value:
            raise ValidationError(f"Value {_fmt(value)} is below minimum {_fmt(min_value)}")
        if max_value is not None and value > max_value:
            raise ValidationError(f"Value {_fmt(value)} is above maximum {_fmt(max_value)}")

        return value

    @classmethod
    def validate(
        cls, value: Any, unit: Any, *, min_value: Any = None, max_value: Any = None
    ) -> ValidatedQuantity:
        value = cls.validate_value(value, min_value=min_value, max_value=max_value)
        unit = cls.validate_unit(unit)
        return ValidatedQuantity(value=value, unit=unit)


class TemperatureValidator:
    category = Category.TEMPERATURE

    @staticmethod
    def validate_unit(unit: Any) -> str:
        return _validate_unit(unit, Category.TEMPERATURE)

    @staticmethod
    def validate_numeric_value(value: Any) -> float:
        # 단위를 모르므로 물리 범위는 validate()에서 확인
        return InputValidator.validate_numeric_input(value)

    @staticmethod
    def validate_physical_range(value: float, unit: str) -> float:
        limit = ABSOLUTE_ZERO[unit]
        if value < limit:
            raise ValidationError(
                f"Temperature {_fmt(value)} {unit} is below absolute zero ({_fmt(limit)} {unit})"
            )
        return value

    @classmethod
    def validate(cls, value: Any, unit: Any) -> ValidatedQuantity:
        value = cls.validate_numeric_value(value)
        unit = cls.validate_unit(unit)
        value = cls.validate_physical_range(value, unit)
        return ValidatedQuantity(value=value, unit=unit)


VALIDATORS = {
    Category.LENGTH: LengthValidator,
    Category.WEIGHT: WeightValidator,
    Category.TEMPERATURE: TemperatureValidator,
}
