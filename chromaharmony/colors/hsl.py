from __future__ import annotations
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property

if TYPE_CHECKING:
    from .rgb import ColorRGB


class ColorHSL(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsl"
    # hue is left unbounded: a rotation may carry it below zero
    maxima:      ClassVar[Tuple[Optional[float], float, float]] = (None, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE

    h = channel_property(0, "Hue in degrees.")
    s = channel_property(1, "Saturation in percent.")
    l = channel_property(2, "Lightness in percent.")

    # bound in colors.color
    to_rgb: Callable[[ColorHSL], ColorRGB]

    def with_hue(self, hue: float) -> ColorHSL:
        """Return a copy with the hue replaced."""
        _, s, l = self._value
        return self.__class__((hue, s, l))


HSL = ColorHSL
