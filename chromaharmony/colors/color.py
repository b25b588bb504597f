"""Bind conversion and harmony operations onto the color value types."""
from .rgb import ColorRGB
from .hsl import ColorHSL
from ..conversions import rgb_to_hsl, hsl_to_rgb
from .. import harmony

ColorRGB.to_hsl = rgb_to_hsl
ColorHSL.to_rgb = hsl_to_rgb

ColorRGB.complement = harmony.complement
ColorRGB.rotate_hue = harmony.rotate_hue
ColorRGB.triads = harmony.triads
ColorRGB.tetrads = harmony.tetrads
ColorRGB.harmonies = harmony.harmonies
