import numpy as np
from numpy import ndarray as NDArray

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0

## HSL to RGB conversions

def _hue_to_channel(p: float, q: float, t: float) -> float:
    # one correction only; callers keep t within a single turn of [0, 1]
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0

    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), nominally in [0, 1]
    """
    h = h / 360.0

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    return (
        _hue_to_channel(p, q, h + ONE_THIRD),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - ONE_THIRD),
    )


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)

    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6.0],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b), nominally in [0, 1]
    """
    h = np.asarray(h, dtype=np.float64) / 360.0
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    r = _np_hue_to_channel(p, q, h + ONE_THIRD)
    g = _np_hue_to_channel(p, q, h)
    b = _np_hue_to_channel(p, q, h - ONE_THIRD)

    return np.stack([r, g, b], axis=-1)
