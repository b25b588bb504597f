from .format_type import FormatType, OutputFormat, max_non_hue, RGB_MAX, HUE_360
from .color_types import ColorSpace, ColorElement, Scalar

__all__ = [
    "FormatType",
    "OutputFormat",
    "max_non_hue",
    "RGB_MAX",
    "HUE_360",
    "ColorSpace",
    "ColorElement",
    "Scalar",
]
