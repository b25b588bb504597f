"""Chromaharmony: color parsing, RGB/HSL conversion and color harmonies."""

__version__ = "1.0.0"

from .colors import ColorBase, ColorRGB, ColorHSL

# Friendly aliases
RGB = ColorRGB
HSL = ColorHSL

from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    convert,
)
from .harmony import (
    Harmonies,
    complement,
    rotate_hue,
    triads,
    tetrads,
    harmonies,
    np_rotate_hue,
)
from .parsing import parse_color, ColorParseError, ParseErrorKind
from .types.format_type import FormatType, OutputFormat

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "RGB",
    "HSL",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_hsl_to_unit_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "convert",
    # harmonies
    "Harmonies",
    "complement",
    "rotate_hue",
    "triads",
    "tetrads",
    "harmonies",
    "np_rotate_hue",
    # parsing
    "parse_color",
    "ColorParseError",
    "ParseErrorKind",
    # enums
    "FormatType",
    "OutputFormat",
    "__version__",
]
