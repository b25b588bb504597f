from __future__ import annotations
from typing import TYPE_CHECKING, Callable, ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property

if TYPE_CHECKING:
    from .hsl import ColorHSL
    from ..harmony import Harmonies


class ColorRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "rgb"
    maxima:      ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    r = channel_property(0, "Red channel in [0, 255].")
    g = channel_property(1, "Green channel in [0, 255].")
    b = channel_property(2, "Blue channel in [0, 255].")

    # bound in colors.color
    to_hsl:     Callable[[ColorRGB], ColorHSL]
    complement: Callable[[ColorRGB], ColorRGB]
    rotate_hue: Callable[[ColorRGB, float], ColorRGB]
    triads:     Callable[[ColorRGB], Tuple[ColorRGB, ...]]
    tetrads:    Callable[[ColorRGB], Tuple[ColorRGB, ...]]
    harmonies:  Callable[[ColorRGB], Harmonies]

    @property
    def unit_values(self) -> Tuple[float, float, float]:
        """Channels normalized to [0, 1]."""
        r, g, b = self._value
        return r / 255.0, g / 255.0, b / 255.0


RGB = ColorRGB
