# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


class OutputFormat(str, Enum):
    """Textual representations a parsed color can be converted to."""
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

RGB_MAX = max_non_hue[FormatType.INT]
HUE_360 = 360.0
