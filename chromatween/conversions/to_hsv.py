import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import CHANNEL_MAX, PERCENT_MAX

## RGB to HSV conversions

def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert normalized RGB to HSV.

    Unlike HSL, every HSV component stays in the unit range; the hue is a
    fraction of a full turn rather than degrees.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    v = max_c
    d = max_c - min_c
    s = 0.0 if max_c == 0 else d / max_c

    if max_c == min_c:
        h = 0.0
    else:
        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return h, s, v

def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 0-255 RGB to unit HSV."""
    return unit_rgb_to_hsv(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

def brightness(r: float, g: float, b: float) -> float:
    """Brightness in percent of a normalized RGB color (its largest channel)."""
    return max(r, g, b) * PERCENT_MAX

def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert normalized RGB to unit HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3), every component in [0, 1]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    s = np.zeros(out_shape)
    nonzero = max_c != 0
    s[nonzero] = delta[nonzero] / max_c[nonzero]

    h = np.zeros(out_shape)
    chroma = delta > 0
    mask_r = chroma & (max_c == r)
    mask_g = chroma & ~mask_r & (max_c == g)
    mask_b = chroma & ~mask_r & ~mask_g

    h[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    h[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    h[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    h /= 6

    return np.stack([h, s, np.array(max_c, dtype=float)], axis=-1)
