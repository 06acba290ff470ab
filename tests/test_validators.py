# tests/test_validators.py
from __future__ import annotations

import math
import re

import pytest

from unitconv.core.exceptions import ValidationError
from unitconv.services.converters import CONVERTERS
from unitconv.services.units import (
    LENGTH_FACTORS,
    TEMPERATURE_TRANSFORMS,
    UNIT_LISTS,
    WEIGHT_FACTORS,
    Category,
)
from unitconv.services.validators import (
    InputValidator,
    LengthValidator,
    TemperatureValidator,
    ValidatedQuantity,
    WeightValidator,
)

CATEGORY_VALIDATORS = [LengthValidator, WeightValidator, TemperatureValidator]


# -----------------------------------------------------------------------------
# 1) InputValidator.validate_numeric_input
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "raw, expected",
    [
        (100, 100.0),
        (10.5, 10.5),
        (0, 0.0),
        (-5.5, -5.5),
        ("100", 100.0),
        ("-5.5", -5.5),
        ("  100  ", 100.0),
        ("$100", 100.0),
        ("25.5cm", 25.5),
        (1.5e2, 150.0),
    ],
)
def test_numeric_input_accepts(raw, expected):
    assert InputValidator.validate_numeric_input(raw) == expected


@pytest.mark.parametrize("raw", [None, {}, [], [1, 2, 3], True, False, object()])
def test_numeric_input_rejects_wrong_types(raw):
    with pytest.raises(ValidationError, match="Value must be a number or numeric string"):
        InputValidator.validate_numeric_input(raw)


@pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, "abc", "abcdef", "", 10**400])
def test_numeric_input_rejects_non_finite(raw):
    with pytest.raises(ValidationError, match="Value must be a finite number"):
        InputValidator.validate_numeric_input(raw)


# -----------------------------------------------------------------------------
# 2) InputValidator.validate_string_input
# -----------------------------------------------------------------------------
def test_string_input_trims_and_returns():
    assert InputValidator.validate_string_input("hello") == "hello"
    assert InputValidator.validate_string_input("  hello  ") == "hello"
    assert InputValidator.validate_string_input("") == ""


@pytest.mark.parametrize("raw", [123, None, {}, [], True])
def test_string_input_rejects_non_strings(raw):
    with pytest.raises(ValidationError, match="Value must be a string"):
        InputValidator.validate_string_input(raw)


@pytest.mark.parametrize("raw", ["", "   "])
def test_string_input_required(raw):
    with pytest.raises(ValidationError, match="required"):
        InputValidator.validate_string_input(raw, required=True)


def test_string_input_length_limits():
    assert InputValidator.validate_string_input("abc", min_length=3, max_length=3) == "abc"

    with pytest.raises(ValidationError, match="at least 3"):
        InputValidator.validate_string_input("ab", min_length=3)
    with pytest.raises(ValidationError, match="at most 5"):
        InputValidator.validate_string_input("abcdef", max_length=5)


def test_string_input_pattern_accepts_str_and_compiled():
    assert InputValidator.validate_string_input("abc", pattern=r"[a-z]+") == "abc"
    assert InputValidator.validate_string_input("ABC", pattern=re.compile(r"[A-Z]{3}")) == "ABC"

    with pytest.raises(ValidationError, match="pattern"):
        InputValidator.validate_string_input("ab1", pattern=r"[a-z]+")


def test_string_input_checks_required_before_length():
    with pytest.raises(ValidationError, match="required"):
        InputValidator.validate_string_input("", required=True, min_length=3)


def test_string_input_escapes_before_length_check():
    # "<" -> "&lt;" (4 chars)
    with pytest.raises(ValidationError, match="at most 3"):
        InputValidator.validate_string_input("<", max_length=3)


# -----------------------------------------------------------------------------
# 3) InputValidator.validate_range
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "value, lo, hi",
    [(5, 0, 10), ("5", 0, 10), (-5, -10, 0), (0, 0, 10), (10, 0, 10), (7, 7, 7)],
)
def test_range_inclusive(value, lo, hi):
    assert InputValidator.validate_range(value, lo, hi) == float(value)


def test_range_rejects_out_of_bounds():
    with pytest.raises(ValidationError, match=re.escape("Value 11 is out of range (0 to 10)")):
        InputValidator.validate_range(11, 0, 10)
    with pytest.raises(ValidationError, match=re.escape("Value -0.5 is out of range (0 to 10)")):
        InputValidator.validate_range(-0.5, 0, 10)


@pytest.mark.parametrize(
    "value, lo, hi", [("abc", 0, 10), (5, math.inf, 10), (5, 0, math.nan), (None, 0, 1)]
)
def test_range_rejects_non_finite_inputs(value, lo, hi):
    with pytest.raises(ValidationError):
        InputValidator.validate_range(value, lo, hi)


# -----------------------------------------------------------------------------
# 4) Category validators: unit
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("validator", CATEGORY_VALIDATORS)
def test_every_supported_unit_normalizes(validator):
    for unit in UNIT_LISTS[validator.category]:
        assert validator.validate_unit(unit.upper()) == unit
        assert validator.validate_unit(f"  {unit} ") == unit


@pytest.mark.parametrize("validator", CATEGORY_VALIDATORS)
@pytest.mark.parametrize("raw", ["xyz", "", "   ", None, 123, {}, [], "invalid", "m1", "c-"])
def test_unsupported_unit_lists_supported_units(validator, raw):
    supported = ", ".join(UNIT_LISTS[validator.category])
    with pytest.raises(ValidationError) as ei:
        validator.validate_unit(raw)
    assert f"Supported units: {supported}" in ei.value.message
    assert ei.value.code == "VALIDATION_ERROR"


def test_length_unit_error_message():
    with pytest.raises(ValidationError) as ei:
        LengthValidator.validate_unit("xyz")
    assert ei.value.message == (
        "Unsupported length unit: 'xyz'. Supported units: mm, cm, m, km, in, ft, yd, mi"
    )


def test_unit_error_message_is_html_escaped():
    with pytest.raises(ValidationError) as ei:
        TemperatureValidator.validate_unit("<b>")
    assert "&lt;b&gt;" in ei.value.message
    assert "<b>" not in ei.value.message


def test_units_do_not_cross_categories():
    with pytest.raises(ValidationError):
        LengthValidator.validate_unit("kg")
    with pytest.raises(ValidationError):
        WeightValidator.validate_unit("m")
    with pytest.raises(ValidationError):
        TemperatureValidator.validate_unit("celsius")


@pytest.mark.parametrize(
    "category, table",
    [
        (Category.LENGTH, LENGTH_FACTORS),
        (Category.WEIGHT, WEIGHT_FACTORS),
        (Category.TEMPERATURE, TEMPERATURE_TRANSFORMS),
    ],
)
def test_every_accepted_unit_has_a_factor(category, table):
    assert set(UNIT_LISTS[category]) == set(table)
    assert CONVERTERS[category] is not None


# -----------------------------------------------------------------------------
# 5) Category validators: value + validate()
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("validator", CATEGORY_VALIDATORS)
@pytest.mark.parametrize("raw", [math.inf, -math.inf, math.nan, None, {}, []])
def test_numeric_value_rejections(validator, raw):
    with pytest.raises(ValidationError):
        validator.validate_numeric_value(raw)


def test_length_validate_normalizes_case():
    q = LengthValidator.validate(100, "CM")
    assert q == ValidatedQuantity(value=100.0, unit="cm")
    assert q.as_dict() == {"value": 100, "unit": "cm"}


def test_validated_quantity_is_immutable():
    q = LengthValidator.validate("2.54", "in")
    with pytest.raises(AttributeError):
        q.value = 1.0  # type: ignore[misc]


def test_validate_value_failure_path():
    with pytest.raises(ValidationError, match="finite number"):
        LengthValidator.validate("abc", "m")


def test_validate_unit_failure_path():
    with pytest.raises(ValidationError) as ei:
        LengthValidator.validate(100, "invalid")
    assert "mm, cm, m, km, in, ft, yd, mi" in ei.value.message


def test_weight_validate_value_bounds():
    assert WeightValidator.validate_value(75, min_value=0, max_value=100) == 75
    assert WeightValidator.validate_value(25, min_value=0) == 25
    assert WeightValidator.validate_value(75, max_value=100) == 75

    with pytest.raises(ValidationError, match=re.escape("Value 150 is out of range (0 to 100)")):
        WeightValidator.validate_value(150, min_value=0, max_value=100)
    with pytest.raises(ValidationError, match="Value -5 is below minimum 0"):
        WeightValidator.validate_value(-5, min_value=0)
    with pytest.raises(ValidationError, match="Value 150 is above maximum 100"):
        WeightValidator.validate_value(150, max_value=100)


def test_weight_validate_with_options():
    q = WeightValidator.validate("50", "KG", min_value=0, max_value=100)
    assert q == ValidatedQuantity(value=50.0, unit="kg")

    with pytest.raises(ValidationError):
        WeightValidator.validate(500, "kg", max_value=100)


@pytest.mark.parametrize(
    "value, unit", [(-273.15, "c"), (-459.67, "F"), (0, "k"), (1000, "c"), (-40, "f")]
)
def test_temperature_accepts_at_or_above_absolute_zero(value, unit):
    q = TemperatureValidator.validate(value, unit)
    assert q.value == value
    assert q.unit == unit.lower()


@pytest.mark.parametrize("value, unit", [(-273.16, "c"), (-460, "f"), (-0.01, "k")])
def test_temperature_rejects_below_absolute_zero(value, unit):
    with pytest.raises(ValidationError, match="below absolute zero"):
        TemperatureValidator.validate(value, unit)


def test_temperature_numeric_value_is_unit_agnostic():
    assert TemperatureValidator.validate_numeric_value(-1000) == -1000
