import numpy as np
from numpy import ndarray as NDArray

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    The hue is taken from whichever channel holds the maximum, checked in the
    order red, green, blue, and is not wrapped back into [0, 360).

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue in degrees, saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # achromatic
    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    if max_c == r:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif max_c == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return hue * 60.0, saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue in degrees, saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    chromatic = delta != 0

    # Saturation
    saturation = np.zeros(out_shape)
    mask_dark = chromatic & (lightness < 0.5)
    mask_light = chromatic & ~(lightness < 0.5)
    saturation[mask_dark] = delta[mask_dark] / (max_c[mask_dark] + min_c[mask_dark])
    saturation[mask_light] = delta[mask_light] / (2.0 - max_c[mask_light] - min_c[mask_light])

    # Hue: the first matching channel wins, as in the scalar version
    hue = np.zeros(out_shape)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0

    return np.stack([hue * 60.0, saturation, lightness], axis=-1)
