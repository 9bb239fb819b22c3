from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, Scalar, Scalar]
ColorElement = Union[ScalarVector, str]

CHANNEL_MAX = 255
HUE_DEGREES = 360
PERCENT_MAX = 100


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HEX = "hex"


NUMERIC_SPACES = {ColorSpace.RGB, ColorSpace.HSL, ColorSpace.HSV}


def to_color_space(space: ColorSpace | str) -> ColorSpace:
    """
    Resolve a space name (case-insensitive) to a ColorSpace.

    Raises:
        ValueError: if the name is not one of rgb, hsl, hsv, hex.
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown space: {space}") from None


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple, list or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
