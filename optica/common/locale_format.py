"""pt-BR display helpers for money and dates."""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

CURRENCY_SYMBOL = "R$"
INVALID_DATE = "Invalid Date"

Number = Union[int, float, Decimal, str, None]
DateLike = Union[date, datetime, str, None]

# Leading numeric literal, same prefix rules as a lenient float parser:
# "12.5abc" -> 12.5, "abc" -> no match.
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY = re.compile(r"^\s*([+-]?)Infinity")
_DATE_PART = re.compile(r"[0-9]+")

# Enough digits for any finite float plus the two cents places.
_CURRENCY_PRECISION = 400


def parse_number(value: Number) -> float:
    """Best-effort float conversion; anything unreadable becomes NaN."""
    if value is None:
        return math.nan
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return -math.inf if value < 0 else math.inf

    text = str(value)
    match = _FLOAT_PREFIX.match(text)
    if match:
        return float(match.group(1))
    match = _INFINITY.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return math.nan


def _group_thousands(amount: Decimal) -> str:
    text = f"{amount:,.2f}"
    return text.replace(",", "X").replace(".", ",").replace("X", ".")


def format_currency(amount: Number) -> str:
    value = parse_number(amount)
    if math.isnan(value):
        return f"{CURRENCY_SYMBOL} NaN"

    sign = "-" if value < 0 else ""
    if math.isinf(value):
        return f"{sign}{CURRENCY_SYMBOL} ∞"

    with localcontext() as ctx:
        ctx.prec = _CURRENCY_PRECISION
        quantized = Decimal(str(abs(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if quantized == 0:
        sign = ""
    return f"{sign}{CURRENCY_SYMBOL} {_group_thousands(quantized)}"


def _calendar_date(value: str) -> date:
    # Only the calendar part matters; avoids shifting the day across timezones.
    raw = value.strip().split("T", 1)[0]
    parts = raw.split("-")
    if len(parts) != 3 or not all(_DATE_PART.fullmatch(part) for part in parts):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    year, month, day = (int(part) for part in parts)
    return date(year, month, day)


def _parse_datetime(value: str) -> datetime:
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = f"{raw[:-1]}+00:00"
    return datetime.fromisoformat(raw)


def _dmy(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_date(value: DateLike) -> str:
    if isinstance(value, date):
        return _dmy(value)
    if not isinstance(value, str):
        return INVALID_DATE
    try:
        return _dmy(_calendar_date(value))
    except (ValueError, OverflowError):
        return INVALID_DATE


def format_datetime(value: DateLike) -> str:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            moment = _parse_datetime(value)
        except (ValueError, OverflowError):
            return INVALID_DATE
    else:
        return INVALID_DATE
    return f"{_dmy(moment)} {moment.hour:02d}:{moment.minute:02d}"
