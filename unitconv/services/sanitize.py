# unitconv/services/sanitize.py
from __future__ import annotations

import math
import re
from typing import Any

# 지수 표기까지 포함한 "깨끗한" 실수 리터럴
_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NON_NUMERIC = re.compile(r"[^\d.\-]")

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def is_number(value: Any) -> bool:
    # bool은 int의 하위 타입이지만 숫자로 취급하지 않음
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sanitize_numeric_input(value: Any) -> Any:
    """
    Best-effort numeric cleanup.

    - int/float: returned unchanged
    - str: a clean float literal ("1e3", "-2.5E-3") is parsed as is; anything
      else keeps only digits, "-" and "." and is parsed when well-formed
      ("$100" -> 100.0, "12.34.56" -> nan)
    - other types: returned unchanged
    """
    if is_number(value):
        return value

    if not isinstance(value, str):
        return value

    text = value.strip()
    if _FLOAT_LITERAL.fullmatch(text):
        return float(text)

    text = _NON_NUMERIC.sub("", text)
    if text in ("", "-", "."):
        return math.nan

    if text.count(".") > 1 or text.count("-") > 1:
        return math.nan
    if "-" in text and not text.startswith("-"):
        return math.nan
    if text == "-.":
        return math.nan

    return float(text)


def sanitize_string_input(value: Any) -> Any:
    """HTML-escape ``& < > " '``; non-strings pass through unchanged."""
    if not isinstance(value, str):
        return value
    for raw, entity in _HTML_ESCAPES:
        value = value.replace(raw, entity)
    return value
