"""
Chromaharmony Color Space Conversions
=====================================

RGB ↔ HSL conversion with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar conversion, channels in [0, 1]
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized conversion

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Scalar conversion, hue in degrees, s/l in [0, 1]
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized conversion

High-Level API
-------------
    rgb_to_hsl(ColorRGB) -> ColorHSL
    hsl_to_rgb(ColorHSL) -> ColorRGB
    convert(ColorRGB, OutputFormat) -> ColorRGB | ColorHSL
    np_rgb_to_hsl(array), np_hsl_to_rgb(array)
        Same conversions over (..., 3) arrays of 8-bit RGB / percent HSL

Examples
--------
>>> from chromaharmony.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
"""

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# HSL → RGB conversions
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb

# High-level API
from .wrapper import rgb_to_hsl, hsl_to_rgb, convert, np_rgb_to_hsl, np_hsl_to_rgb

# Types and enums
from ..types.format_type import FormatType, OutputFormat

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # High-level API
    'rgb_to_hsl',
    'hsl_to_rgb',
    'convert',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Types
    'FormatType',
    'OutputFormat',
]
