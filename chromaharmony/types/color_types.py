from __future__ import annotations
from typing import Literal, Optional, Tuple, Union

Scalar = int | float
IntVector = Tuple[int, int, int]
FloatVector = Tuple[float, float, float]
ColorElement = Union[IntVector, FloatVector]
ColorSpace = Literal["rgb", "hsl"]
HUE_SPACES = {"hsl"}

# Per-channel upper bound; None leaves the channel unbounded (hue).
ChannelMaxima = Tuple[Optional[Scalar], ...]


def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is a hue-based space.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
