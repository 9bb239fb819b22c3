import math
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import CHANNEL_MAX, HUE_DEGREES, PERCENT_MAX
from ..utils import round_half_up

## HSL to RGB conversions

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel of an HSL color at hue offset ``t`` (a fraction of a turn)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to normalized RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h /= HUE_DEGREES
    s /= PERCENT_MAX
    l /= PERCENT_MAX

    if s == 0:
        return l, l, l

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return hue_to_rgb(p, q, h + 1 / 3), hue_to_rgb(p, q, h), hue_to_rgb(p, q, h - 1 / 3)

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert HSL (degrees, percent, percent) to integer 0-255 RGB, rounding halves up."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return (
        round_half_up(r * CHANNEL_MAX),
        round_half_up(g * CHANNEL_MAX),
        round_half_up(b * CHANNEL_MAX),
    )

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert unit HSV to normalized RGB with the six-sector algorithm.

    Args:
        h: Hue as a fraction of a turn, [0, 1)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if not all(math.isfinite(x) for x in (h, s, v)):
        return math.nan, math.nan, math.nan

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert unit HSV to 0-255 RGB.

    The channels are scaled but not rounded, so the result may hold fractions.
    """
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to 0-255 RGB, rounding halves up.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: float array of shape (..., 3) holding whole numbers in [0, 255]
    """
    h = np.asarray(h, dtype=float) / HUE_DEGREES
    s = np.asarray(s, dtype=float) / PERCENT_MAX
    l = np.asarray(l, dtype=float) / PERCENT_MAX

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    def channel(t: NDArray) -> NDArray:
        t = np.where(t < 0, t + 1, t)
        t = np.where(t > 1, t - 1, t)
        return np.select(
            [t < 1 / 6, t < 1 / 2, t < 2 / 3],
            [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
            default=p,
        )

    rgb = np.stack([channel(h + 1 / 3), channel(h), channel(h - 1 / 3)], axis=-1)
    achromatic = (s == 0)[..., None]
    rgb = np.where(achromatic, l[..., None], rgb)
    return np.floor(rgb * CHANNEL_MAX + 0.5)

def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert unit HSV to unrounded 0-255 RGB.

    Args:
        h, s, v: array-like or scalar, each in [0, 1]

    Returns:
        rgb: array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    i = np.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    sector = np.mod(i, 6).astype(int)

    # one (r, g, b) permutation of {v, p, q, t} per hue sector
    conditions = [sector == k for k in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1) * CHANNEL_MAX
