from __future__ import annotations

import math
import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _clean(text: object) -> str:
    if isinstance(text, str):
        return text.strip()
    return ""


def parse_int(text: str | None) -> int | None:
    s = _clean(text)
    if not _INT_RE.fullmatch(s):
        return None
    return int(s)


def parse_float(text: str | None) -> float | None:
    s = _clean(text)
    if not _FLOAT_RE.fullmatch(s):
        return None
    value = float(s)
    if not math.isfinite(value):
        return None
    return value


def parse_int_or(text: str | None, default: int = 0) -> int:
    """
    Parse a base-10 integer, returning `default` for absent or malformed text.

    Every integer field in a payload goes through here so a bad value always
    degrades to the same zero value instead of raising.
    """
    value = parse_int(text)
    return default if value is None else value


def parse_float_or(text: str | None, default: float = 0.0) -> float:
    value = parse_float(text)
    return default if value is None else value


def truncate_div(value: int, divisor: int) -> int:
    # Rounds toward zero; Python's // floors negative values.
    q = abs(value) // abs(divisor)
    return -q if (value < 0) != (divisor < 0) else q
