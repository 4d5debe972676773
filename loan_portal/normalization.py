"""Input normalization applied to a validated form before it is sent."""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Union

from loan_portal.contracts import DIGIT_FIELDS, NUMERIC_FIELDS

_NON_DIGIT_RE = re.compile(r"\D")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def strip_non_digits(value: Any) -> str:
    """Drop every character outside 0-9 ("555-111-2222" -> "5551112222")."""
    return _NON_DIGIT_RE.sub("", _as_str(value))


def is_numeric(value: Any) -> bool:
    """Plain decimal text whose value fits in a float ("1e400" does not)."""
    s = _as_str(value).strip()
    return bool(_NUMBER_RE.match(s)) and math.isfinite(float(s))


def to_number(value: Any) -> Union[int, float]:
    """Parse validated numeric text.

    Whole numbers come back as ``int`` so they serialize as ``25000`` rather
    than ``25000.0``. Empty, non-numeric or out-of-range text is a caller bug
    and raises ``ValueError``; validate before normalizing.
    """
    s = _as_str(value).strip()
    if not s:
        raise ValueError("Cannot convert an empty string to a number")
    if not _NUMBER_RE.match(s):
        raise ValueError(f"Not a numeric value: {value!r}")
    number = float(s)
    if not math.isfinite(number):
        raise ValueError(f"Numeric value out of range: {value!r}")
    if number.is_integer() and "." not in s and "e" not in s.lower():
        return int(s)
    return number


def build_payload(form: Dict[str, Any]) -> Dict[str, Any]:
    """Return a fresh request body; the form itself is left untouched."""
    payload = dict(form)
    for name in DIGIT_FIELDS:
        if name in payload:
            payload[name] = strip_non_digits(payload[name])
    for name in NUMERIC_FIELDS:
        if name in payload:
            payload[name] = to_number(payload[name])
    return payload
