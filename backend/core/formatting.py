"""Display rules for solved values."""

from __future__ import annotations

import math

from backend.models import Result, Target

UNEXPECTED_ERROR = "An unexpected error occurred during calculation."

DECIMALS = 2

UNITS = {
    Target.RATE: "%",
    Target.TIME: " years",
}


def _trim(number: float, decimals: int) -> str:
    text = f"{number:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_value(target: Target, value: float) -> str:
    """Round ``value`` for display and append the unit of ``target``.

    Frequency rounds half up to a whole number; everything else keeps two
    decimals with trailing zeros dropped.
    """
    if target is Target.FREQUENCY:
        return _trim(math.floor(value + 0.5), 0)
    return _trim(value, DECIMALS) + UNITS.get(target, "")


def render_result(target: Target, result: Result) -> str:
    if result.error is not None:
        return result.error
    if result.message is not None:
        return result.message
    if result.value is not None:
        return f"{target.label}: {format_value(target, result.value)}"
    return UNEXPECTED_ERROR
