import numpy as np
from typing import Callable, Dict, cast

from ..types.color_types import (
    CHANNEL_MAX, ColorElement, ColorSpace, NUMERIC_SPACES, ScalarVector,
    element_to_array, to_color_space,
)
from .to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb
from .to_hsl import rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_unit_rgb_to_hsv
from .hex import hex_to_rgb, rgb_to_hex

# Every conversion pivots through 0-255 RGB
TO_RGB: Dict[ColorSpace, Callable[[ColorElement], ScalarVector]] = {
    ColorSpace.RGB: lambda c: cast(ScalarVector, tuple(c)),
    ColorSpace.HSL: lambda c: hsl_to_rgb(*c),
    ColorSpace.HSV: lambda c: hsv_to_rgb(*c),
    ColorSpace.HEX: lambda c: hex_to_rgb(cast(str, c)),
}

FROM_RGB: Dict[ColorSpace, Callable[[float, float, float], ColorElement]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HEX: rgb_to_hex,
}

NP_TO_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda c: c,
    ColorSpace.HSL: lambda c: np_hsl_to_rgb(c[..., 0], c[..., 1], c[..., 2]),
    ColorSpace.HSV: lambda c: np_hsv_to_rgb(c[..., 0], c[..., 1], c[..., 2]),
}

NP_FROM_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda c: c,
    ColorSpace.HSL: lambda c: np_unit_rgb_to_hsl(c[..., 0], c[..., 1], c[..., 2]),
    ColorSpace.HSV: lambda c: np_unit_rgb_to_hsv(c[..., 0], c[..., 1], c[..., 2]),
}


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ColorElement:
    """
    Convert a single color between rgb, hsl, hsv and hex.

    Hex colors are strings, the other spaces are 3-tuples in their native
    ranges (see ``chromatween.conversions``).
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    r, g, b = TO_RGB[fs](color)
    return FROM_RGB[ts](r, g, b)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """Vectorized ``convert`` for ``(..., 3)`` arrays of rgb, hsl or hsv colors."""
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    for space in (fs, ts):
        if space not in NUMERIC_SPACES:
            raise ValueError(f"np_convert does not support space: {space.value}")

    arr = element_to_array(color)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    if fs == ts:
        return arr

    rgb = NP_TO_RGB[fs](arr)
    if ts == ColorSpace.RGB:
        return rgb
    return NP_FROM_RGB[ts](rgb / CHANNEL_MAX)
