"""Forgiving value coercion shared by config, setters and commands."""
from typing import Any


def coerce_int(value: Any) -> int:
    """Return `value` as an int or raise ValueError.

    Accepts ints, integral floats and numeric strings ("12", " 3 ", "4.0").
    Booleans are rejected so that `True` never silently becomes hour 1.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"not an integer: {value!r}")
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        number = float(text)
        if not number.is_integer():
            raise ValueError(f"not an integer: {value!r}")
        return int(number)


def coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {value!r}")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
