"""Typed access to raw legacy rows.

Rows are plain mappings of column name to whatever the source file held:
strings from CSV, numbers and dates from Excel workbooks. Only the
numeric accessors raise; everything else degrades to ``None``.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from aton_import.common.errors import MalformedFieldError

RawRow = Mapping[str, Any]

DEFAULT_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m-%d %H:%M:%S", "%d-%m-%Y", "%d.%m.%Y")


def string_value(row: RawRow, column: str) -> str | None:
    value = row.get(column)
    if value is None:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def numeric_value(row: RawRow, column: str) -> float:
    value = row.get(column)
    if isinstance(value, bool):
        raise MalformedFieldError(column, value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise MalformedFieldError(column, value, reason="is out of range") from None
    else:
        text = string_value(row, column)
        if text is None:
            raise MalformedFieldError(column, value, reason="is missing")
        # Danish spreadsheet exports use a decimal comma.
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            raise MalformedFieldError(column, value) from None
    if not math.isfinite(number):
        raise MalformedFieldError(column, value)
    return number


def int_value(row: RawRow, column: str) -> int:
    return int(numeric_value(row, column))


def date_value_or_null(
    row: RawRow,
    column: str,
    formats: Iterable[str] = DEFAULT_DATE_FORMATS,
) -> datetime | None:
    value = row.get(column)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    text = string_value(row, column)
    if text is None:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
