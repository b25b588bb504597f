from .color_base import ColorBase
from .rgb import ColorRGB, RGB
from .hsl import ColorHSL, HSL
from . import color  # binds to_hsl/to_rgb and the harmony methods

__all__ = [
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "RGB",
    "HSL",
]
