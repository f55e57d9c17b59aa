"""Input guards shared by the encoder and the connection layer."""

from __future__ import annotations

from typing import Any

from .const import MAX_TIMEOUT, MIN_TIMEOUT


def validate_numeric_input(value: Any, min_val: int, max_val: int, name: str) -> int:
    """Coerce ``value`` to int and check it lies in ``[min_val, max_val]``.

    Raises:
        ValueError: If the value is not numeric or out of range.
    """
    try:
        number = int(value)
    except (TypeError, ValueError) as err:
        raise ValueError(f"{name} must be an integer, got {value!r}") from err
    if not min_val <= number <= max_val:
        raise ValueError(f"{name} must be between {min_val} and {max_val}, got {number}")
    return number


def validate_timeout(timeout: Any) -> float:
    """Return ``timeout`` as float seconds clamped to the supported range."""
    try:
        value = float(timeout)
    except (TypeError, ValueError) as err:
        raise ValueError(f"timeout must be a number, got {timeout!r}") from err
    return max(MIN_TIMEOUT, min(MAX_TIMEOUT, value))
