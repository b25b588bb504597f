"""
Color harmonies derived from a base RGB color.

The complement here is the arithmetic inverse of each channel, not a 180°
hue rotation; triads and tetrads rotate the hue in HSL space.

>>> from chromaharmony import ColorRGB, harmonies
>>> result = harmonies(ColorRGB((255, 0, 0)))
>>> result.complement
ColorRGB((0, 255, 255))
"""
from __future__ import annotations
import math
from typing import NamedTuple, Tuple

import numpy as np

from .colors.rgb import ColorRGB
from .conversions.wrapper import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .types.format_type import RGB_MAX, HUE_360

TRIAD_OFFSETS: Tuple[float, ...] = (120.0, 240.0)
TETRAD_OFFSETS: Tuple[float, ...] = (90.0, 180.0, 270.0)


class Harmonies(NamedTuple):
    complement: ColorRGB
    triads: Tuple[ColorRGB, ...]
    tetrads: Tuple[ColorRGB, ...]


def complement(color: ColorRGB) -> ColorRGB:
    """Channel-wise inverse: ``255 - channel``."""
    return ColorRGB(tuple(RGB_MAX - c for c in color))


def rotate_hue(color: ColorRGB, degrees: float) -> ColorRGB:
    """
    Rotate the hue of a color by ``degrees``.

    The rotated hue is reduced with a truncated remainder (``math.fmod``), so
    its sign follows ``hue + degrees``: a negative sum stays negative.
    """
    hsl = rgb_to_hsl(color)
    return hsl_to_rgb(hsl.with_hue(math.fmod(hsl.h + degrees, HUE_360)))


def _rotations(color: ColorRGB, offsets: Tuple[float, ...]) -> Tuple[ColorRGB, ...]:
    return (color,) + tuple(rotate_hue(color, offset) for offset in offsets)


def triads(color: ColorRGB) -> Tuple[ColorRGB, ...]:
    """The color followed by its 120° and 240° rotations."""
    return _rotations(color, TRIAD_OFFSETS)


def tetrads(color: ColorRGB) -> Tuple[ColorRGB, ...]:
    """The color followed by its 90°, 180° and 270° rotations."""
    return _rotations(color, TETRAD_OFFSETS)


def harmonies(color: ColorRGB) -> Harmonies:
    return Harmonies(
        complement=complement(color),
        triads=triads(color),
        tetrads=tetrads(color),
    )


def np_rotate_hue(rgb: np.ndarray, degrees: float) -> np.ndarray:
    """
    Vectorized rotate_hue.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]
        degrees: hue offset applied to every color

    Returns:
        uint8 array of the same shape
    """
    hsl = np_rgb_to_hsl(rgb)
    hsl[..., 0] = np.fmod(hsl[..., 0] + degrees, HUE_360)
    return np_hsl_to_rgb(hsl)
