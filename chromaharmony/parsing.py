"""
Parse free-form color strings into ColorRGB values.

Accepted inputs:
    "#RRGGBB" / "RRGGBB"   hexadecimal, case-insensitive
    "r,g,b"                decimal channels, whitespace around each allowed

A string made only of hex digits is read as hex, so "112233" means
``ColorRGB((0x11, 0x22, 0x33))`` rather than a decimal triple.
"""
from __future__ import annotations
import logging
import re
import string
from enum import Enum
from typing import Pattern, Tuple

from .colors.rgb import ColorRGB
from .types.format_type import RGB_MAX

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)
HEX_LENGTH = 6

_HEX_CHANNEL: Pattern[str] = re.compile(r"\+?[0-9A-Fa-f]+")
_DEC_CHANNEL: Pattern[str] = re.compile(r"\+?[0-9]+")


class ParseErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    INVALID_RED_COMPONENT = "invalid_red_component"
    INVALID_GREEN_COMPONENT = "invalid_green_component"
    INVALID_BLUE_COMPONENT = "invalid_blue_component"


CHANNEL_ERRORS: Tuple[ParseErrorKind, ...] = (
    ParseErrorKind.INVALID_RED_COMPONENT,
    ParseErrorKind.INVALID_GREEN_COMPONENT,
    ParseErrorKind.INVALID_BLUE_COMPONENT,
)

ERROR_MESSAGES = {
    ParseErrorKind.INVALID_RED_COMPONENT: "Invalid red component",
    ParseErrorKind.INVALID_GREEN_COMPONENT: "Invalid green component",
    ParseErrorKind.INVALID_BLUE_COMPONENT: "Invalid blue component",
}

INVALID_HEX_FORMAT = "Invalid hex color format. Expected RRGGBB or #RRGGBB"
INVALID_RGB_FORMAT = "Invalid RGB format. Expected r,g,b"


class ColorParseError(ValueError):
    """Raised when a string cannot be read as a color."""

    def __init__(self, kind: ParseErrorKind, text: str, message: str | None = None) -> None:
        self.kind = kind
        self.text = text
        super().__init__(message or ERROR_MESSAGES[kind])


def is_hex_input(text: str) -> bool:
    """Hex if it starts with '#' or consists solely of hex digits."""
    return text.startswith("#") or all(c in HEX_DIGITS for c in text)


def _parse_channel(token: str, base: int, pattern: Pattern[str], kind: ParseErrorKind, text: str) -> int:
    if not pattern.fullmatch(token):
        raise ColorParseError(kind, text)
    try:
        value = int(token, base)
    except ValueError as exc:
        raise ColorParseError(kind, text) from exc
    if value > RGB_MAX:
        raise ColorParseError(kind, text)
    return value


def _parse_hex(text: str, raw: str) -> ColorRGB:
    digits = text[1:] if text.startswith("#") else text
    if len(digits) != HEX_LENGTH:
        raise ColorParseError(ParseErrorKind.INVALID_FORMAT, raw, INVALID_HEX_FORMAT)

    groups = (digits[0:2], digits[2:4], digits[4:6])
    channels = tuple(
        _parse_channel(group, 16, _HEX_CHANNEL, kind, raw)
        for group, kind in zip(groups, CHANNEL_ERRORS)
    )
    return ColorRGB(channels)


def _parse_decimal(text: str, raw: str) -> ColorRGB:
    parts = text.split(",")
    if len(parts) != 3:
        raise ColorParseError(ParseErrorKind.INVALID_FORMAT, raw, INVALID_RGB_FORMAT)

    channels = tuple(
        _parse_channel(part.strip(), 10, _DEC_CHANNEL, kind, raw)
        for part, kind in zip(parts, CHANNEL_ERRORS)
    )
    return ColorRGB(channels)


def parse_color(text: str) -> ColorRGB:
    """
    Parse a color string into a ColorRGB.

    Args:
        text: "#RRGGBB", "RRGGBB" or "r,g,b"; surrounding whitespace is ignored

    Returns:
        The parsed color

    Raises:
        ColorParseError: with ``kind`` set to the failure category
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_color expects a str, got {type(text).__name__}")

    stripped = text.strip()
    try:
        if is_hex_input(stripped):
            logger.debug("Parsing %r as hex", stripped)
            return _parse_hex(stripped, text)
        logger.debug("Parsing %r as r,g,b", stripped)
        return _parse_decimal(stripped, text)
    except ColorParseError as exc:
        logger.debug("Rejected %r: %s (%s)", text, exc, exc.kind.value)
        raise
