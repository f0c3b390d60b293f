"""Integer arithmetic helpers with explicit error reporting."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ConfigError(Exception):
    """Raised when the multiplier configuration cannot be read or parsed."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(self.path, reason)

    def __str__(self) -> str:
        return f"config error at {self.path}: {self.reason}"


class InvalidInputError(ValueError):
    """Raised when an input value cannot be processed."""

    def __init__(self, value: int, context: str = "") -> None:
        self.value = value
        self.context = context
        super().__init__(value, context)

    def __str__(self) -> str:
        message = f"invalid input: {self.value}"
        return f"{self.context}: {message}" if self.context else message


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def divide(a: int, b: int) -> int:
    """Return a / b rounded toward zero; raise ZeroDivisionError if b is 0."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return _trunc_div(a, b)


def is_positive(a: int) -> bool:
    """Return True if a is strictly greater than zero."""
    return a > 0


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def safe_multiply(a: int, b: int) -> int:
    """Return a * b, raising OverflowError if it leaves the 64-bit range."""
    result = a * b
    if not INT64_MIN <= result <= INT64_MAX:
        raise OverflowError("multiplication overflow")
    return result


def safe_multiply2(a: int, b: int) -> int:
    """Return a * b, raising OverflowError if it leaves the 32-bit range."""
    if b == 0:
        return 0
    if a > _trunc_div(INT32_MAX, b) or a < _trunc_div(INT32_MIN, b):
        raise OverflowError("multiplication overflow")
    return a * b


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer syntax: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _read_multiplier(config_path: str | os.PathLike[str]) -> int:
    try:
        data = Path(config_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(config_path, f"read config: {exc}") from exc
    try:
        return _parse_int(data.strip())
    except ValueError as exc:
        raise ConfigError(config_path, f"parse multiplier: {exc}") from exc


def multiply_with_config(a: int, config_path: str | os.PathLike[str]) -> int:
    """Multiply a by the integer stored in the file at config_path."""
    return a * _read_multiplier(config_path)


def _fits(value: int, multiplier: int) -> bool:
    if multiplier > 0:
        return (
            _trunc_div(INT32_MIN, multiplier)
            <= value
            <= _trunc_div(INT32_MAX, multiplier)
        )
    if multiplier < 0:
        return (
            _trunc_div(INT32_MAX, multiplier)
            <= value
            <= _trunc_div(INT32_MIN, multiplier)
        )
    return True


def multiply_slice(
    numbers: Sequence[int], config_path: str | os.PathLike[str]
) -> list[int]:
    """Multiply every number by the configured multiplier, checking 32-bit bounds."""
    if not numbers:
        raise InvalidInputError(0)
    multiplier = _read_multiplier(config_path)
    result = []
    for index, number in enumerate(numbers):
        if not _fits(number, multiplier):
            raise InvalidInputError(number, f"overflow at index {index}")
        result.append(number * multiplier)
    return result


def multiply_map(
    values: Mapping[str, int], config_path: str | os.PathLike[str]
) -> dict[str, int]:
    """Multiply every mapped value by the configured multiplier, checking 32-bit bounds."""
    if not values:
        raise InvalidInputError(0)
    multiplier = _read_multiplier(config_path)
    result = {}
    for key, value in values.items():
        if not _fits(value, multiplier):
            raise InvalidInputError(value, f"overflow for key {key}")
        result[key] = value * multiplier
    return result