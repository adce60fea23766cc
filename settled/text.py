"""
Text helpers
============

Small string and size formatting utilities.
"""

from __future__ import annotations

import json
import logging
import math
import re
import typing
from collections.abc import Callable
from urllib.parse import unquote

logger = logging.getLogger("settled.text")

_MISSING: typing.Any = object()

_FILE_UNSAFE = re.compile(r"[#:/?\\]+")

SIZE_UNITS = ("bytes", "KB", "MB", "GB", "TB")


def ucfirst(text: str) -> str:
    """Uppercase the first character only."""
    return text[:1].upper() + text[1:]


def concatenate_paths(left: str, right: str) -> str:
    """Join two paths with exactly one slash between them."""
    if not left:
        return right
    if not right:
        return left

    left_slash = left.endswith("/")
    right_slash = right.startswith("/")
    if left_slash and right_slash:
        return left + right[1:]
    if not left_slash and not right_slash:
        return f"{left}/{right}"
    return left + right


def remove_special_characters_for_files(text: typing.Any) -> str:
    """Replace characters that break file names on mobile file systems with '_'."""
    if not text or not isinstance(text, str):
        return ""
    return _FILE_UNSAFE.sub("_", text)


def decode_uri_component(uri: str) -> str:
    """Percent-decode `uri`, or return it unchanged if it is not valid UTF-8."""
    try:
        return unquote(uri, errors="strict")
    except UnicodeDecodeError:
        return uri


def two_digits(number: int | float | str) -> str:
    """Left-pad single digit numbers with a zero: 5 -> '05'."""
    try:
        single = float(number) < 10
    except ValueError:
        return str(number)
    if single:
        return f"0{number}"
    return str(number)


def parse_json(
    text: str,
    default: typing.Any = _MISSING,
    on_error: Callable[[Exception], None] | None = None,
) -> typing.Any:
    """
    json.loads that never raises.

    On failure returns `default`, or `text` itself when no default is given.
    `on_error` receives the decoding exception.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.debug("could not parse JSON: %s", exc)
        if on_error is not None:
            on_error(exc)

    return text if default is _MISSING else default


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def bytes_to_size(size: float | None, precision: int = 2) -> str:
    """
    Human readable size: 1536 -> '1.5 KB'.

    Steps of 1024, largest unit is TB. Sizes under 1024 are not rounded.
    None, negative or non-finite sizes give 'error'.
    """
    if size is None or size < 0 or not math.isfinite(size):
        return "error"
    if precision < 0:
        precision = 2

    pos = 0
    value: float = size
    if value >= 1024:
        while value >= 1024 and pos < len(SIZE_UNITS) - 1:
            pos += 1
            value /= 1024
        value = round(value, precision)

    return f"{_format_number(value)} {SIZE_UNITS[pos]}"


__all__ = (
    "SIZE_UNITS",
    "bytes_to_size",
    "concatenate_paths",
    "decode_uri_component",
    "parse_json",
    "remove_special_characters_for_files",
    "two_digits",
    "ucfirst",
)
