import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import CHANNEL_MAX, PERCENT_MAX

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert normalized RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        # achromatic
        h = s = 0.0
    else:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h *= 60

    return h, s * PERCENT_MAX, l * PERCENT_MAX

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 0-255 RGB to HSL (degrees, percent, percent)."""
    return unit_rgb_to_hsl(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

def lightness(r: float, g: float, b: float) -> float:
    """Lightness in percent of a normalized RGB color: the mean of its max and min channels."""
    return (max(r, g, b) + min(r, g, b)) / 2 * PERCENT_MAX

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert normalized RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
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
    l = (max_c + min_c) / 2.0

    s = np.zeros(out_shape)
    h = np.zeros(out_shape)
    chroma = delta > 0

    bright = chroma & (l > 0.5)
    dark = chroma & ~(l > 0.5)
    s[bright] = delta[bright] / (2 - max_c[bright] - min_c[bright])
    s[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # same precedence as the scalar branch chain: red, then green, then blue
    mask_r = chroma & (max_c == r)
    mask_g = chroma & ~mask_r & (max_c == g)
    mask_b = chroma & ~mask_r & ~mask_g

    h[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    h[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    h[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    h *= 60

    return np.stack([h, s * PERCENT_MAX, l * PERCENT_MAX], axis=-1)
