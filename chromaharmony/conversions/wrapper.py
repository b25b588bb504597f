from __future__ import annotations
import numpy as np
from typing import Callable, Dict, Union

from boundednumbers import clamp

from ..types.format_type import FormatType, OutputFormat, max_non_hue, RGB_MAX
from ..colors.rgb import ColorRGB
from ..colors.hsl import ColorHSL

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb

PERCENT = max_non_hue[FormatType.PERCENTAGE]

ConvertedColor = Union[ColorRGB, ColorHSL]


def _scale_channel(unit: float) -> int:
    # saturating: values that overshoot [0, 1] pin to the 8-bit bounds
    return clamp(round(unit * RGB_MAX), 0, RGB_MAX)


def rgb_to_hsl(color: ColorRGB) -> ColorHSL:
    """Convert an 8-bit RGB color to HSL (hue in degrees, saturation/lightness in percent)."""
    if not isinstance(color, ColorRGB):
        raise TypeError(f"rgb_to_hsl expects a ColorRGB, got {type(color).__name__}")
    h, s, l = unit_rgb_to_hsl(*color.unit_values)
    return ColorHSL((h, s * PERCENT, l * PERCENT))


def hsl_to_rgb(color: ColorHSL) -> ColorRGB:
    """Convert an HSL color back to 8-bit RGB, rounding each channel to the nearest integer."""
    if not isinstance(color, ColorHSL):
        raise TypeError(f"hsl_to_rgb expects a ColorHSL, got {type(color).__name__}")
    h, s, l = color.value
    r, g, b = hsl_to_unit_rgb(h, s / PERCENT, l / PERCENT)
    return ColorRGB((_scale_channel(r), _scale_channel(g), _scale_channel(b)))


CONVERTERS: Dict[OutputFormat, Callable[[ColorRGB], ConvertedColor]] = {
    OutputFormat.HEX: lambda rgb: rgb,
    OutputFormat.RGB: lambda rgb: rgb,
    OutputFormat.HSL: rgb_to_hsl,
}


def convert(color: ColorRGB, target: OutputFormat) -> ConvertedColor:
    """
    Produce the numeric value behind a textual output format.

    HEX and RGB are both renderings of the RGB channels, so they return the
    color itself; HSL returns the converted ColorHSL.
    """
    try:
        converter = CONVERTERS[OutputFormat(target)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unsupported output format: {target!r}") from exc
    return converter(color)


def np_rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """
    Vectorized rgb_to_hsl.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        array of shape (..., 3): (hue in degrees, saturation %, lightness %)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    unit = rgb / RGB_MAX
    hsl = np_unit_rgb_to_hsl(unit[..., 0], unit[..., 1], unit[..., 2])
    return np.stack([hsl[..., 0], hsl[..., 1] * PERCENT, hsl[..., 2] * PERCENT], axis=-1)


def np_hsl_to_rgb(hsl: np.ndarray) -> np.ndarray:
    """
    Vectorized hsl_to_rgb.

    Args:
        hsl: array of shape (..., 3): (hue in degrees, saturation %, lightness %)

    Returns:
        uint8 array of shape (..., 3)
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    if hsl.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {hsl.shape}")
    unit = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1] / PERCENT, hsl[..., 2] / PERCENT)
    scaled = np.clip(np.round(unit * RGB_MAX), 0, RGB_MAX)
    return np.asarray(scaled).astype(np.uint8)
