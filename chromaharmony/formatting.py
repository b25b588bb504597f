"""Text rendering of colors: hex/RGB/HSL strings and 24-bit ANSI swatches."""
from __future__ import annotations
from typing import List

from .colors.rgb import ColorRGB
from .colors.hsl import ColorHSL
from .conversions import convert
from .harmony import harmonies
from .types.format_type import OutputFormat

ANSI_RESET = "\x1b[0m"
SWATCH_WIDTH = 8


def to_hex(color: ColorRGB) -> str:
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def format_rgb(color: ColorRGB) -> str:
    return f"RGB({color.r}, {color.g}, {color.b})"


def format_hsl(color: ColorHSL) -> str:
    return f"HSL({color.h:.1f}, {color.s:.1f}%, {color.l:.1f}%)"


def ansi_block(color: ColorRGB) -> str:
    """A swatch of spaces painted with the color as a 24-bit background."""
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m{' ' * SWATCH_WIDTH}{ANSI_RESET}"


def _with_swatch(color: ColorRGB, text: str, swatch: bool) -> str:
    return f"{ansi_block(color)} {text}" if swatch else text


def display_with_color(color: ColorRGB, swatch: bool = True) -> str:
    return _with_swatch(color, to_hex(color), swatch)


def format_color(color: ColorRGB, fmt: OutputFormat, swatch: bool = True) -> str:
    """
    Render a color in the requested output format.

    Args:
        color: Color to render
        fmt: Target representation
        swatch: Prefix the text with an ANSI color block

    Returns:
        e.g. "#FF0000", "RGB(255, 0, 0)" or "HSL(0.0, 100.0%, 50.0%)"
    """
    fmt = OutputFormat(fmt)
    value = convert(color, fmt)
    if fmt is OutputFormat.HEX:
        text = to_hex(value)
    elif fmt is OutputFormat.RGB:
        text = format_rgb(value)
    elif fmt is OutputFormat.HSL:
        text = format_hsl(value)
    else:
        raise ValueError(f"Unsupported output format: {fmt!r}")
    return _with_swatch(color, text, swatch)


def format_harmonies(color: ColorRGB, swatch: bool = True) -> List[str]:
    """Report lines listing the complement, triads and tetrads of a color."""
    result = harmonies(color)
    lines = [
        "",
        f"Color Harmonies for Input: {display_with_color(color, swatch)}",
        f"Complement: {display_with_color(result.complement, swatch)}",
        "",
        "Triads:",
    ]
    lines.extend(f"  {display_with_color(c, swatch)}" for c in result.triads)
    lines.extend(["", "Tetrads:"])
    lines.extend(f"  {display_with_color(c, swatch)}" for c in result.tetrads)
    return lines
