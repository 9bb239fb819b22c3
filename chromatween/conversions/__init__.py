"""
Chromatween Color Space Conversions
===================================

Pure conversion functions between RGB, HSL, HSV and hex, in scalar and
vectorized (numpy) flavours.

Ranges
------
- RGB: channels in [0, 255]
- Normalized ("unit") RGB: channels in [0, 1]
- HSL: hue in degrees [0, 360), saturation and lightness in percent [0, 100]
- HSV: hue, saturation and value all in [0, 1]
- Hex: ``#rrggbb``, ``rrggbb`` or 3-digit shorthand ``#rgb``

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b), rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)

RGB → HSV:
    unit_rgb_to_hsv(r, g, b), rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Integer channels, halves rounded up
    hsl_to_unit_rgb(h, s, l), np_hsl_to_rgb(h, s, l)

HSV → RGB:
    hsv_to_rgb(h, s, v)
        Scaled to 0-255 but not rounded
    hsv_to_unit_rgb(h, s, v), np_hsv_to_rgb(h, s, v)

Hex:
    hex_to_rgb(value), rgb_to_hex(r, g, b), expand_shorthand(value),
    channel_to_hex(value), name_to_hex(name)

Single values:
    lightness(r, g, b), brightness(r, g, b)  (normalized RGB in, percent out)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(colors, from_space, to_space)

Examples
--------
>>> from chromatween.conversions import rgb_to_hsl, convert
>>> rgb_to_hsl(255, 0, 0)
(0.0, 100.0, 50.0)
>>> convert((0, 100, 50), "hsl", "hex")
'#ff0000'
"""

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    rgb_to_hsl,
    np_unit_rgb_to_hsl,
    lightness,
)

# RGB → HSV conversions
from .to_hsv import (
    unit_rgb_to_hsv,
    rgb_to_hsv,
    np_unit_rgb_to_hsv,
    brightness,
)

# HSL/HSV → RGB conversions
from .to_rgb import (
    hue_to_rgb,
    hsl_to_unit_rgb,
    hsl_to_rgb,
    hsv_to_unit_rgb,
    hsv_to_rgb,
    np_hsl_to_rgb,
    np_hsv_to_rgb,
)

# Hex and named colors
from .hex import (
    expand_shorthand,
    hex_to_rgb,
    channel_to_hex,
    rgb_to_hex,
    name_to_hex,
)

# High-level API
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'lightness',

    # RGB → HSV
    'unit_rgb_to_hsv',
    'rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'brightness',

    # → RGB
    'hue_to_rgb',
    'hsl_to_unit_rgb',
    'hsl_to_rgb',
    'hsv_to_unit_rgb',
    'hsv_to_rgb',
    'np_hsl_to_rgb',
    'np_hsv_to_rgb',

    # Hex
    'expand_shorthand',
    'hex_to_rgb',
    'channel_to_hex',
    'rgb_to_hex',
    'name_to_hex',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorSpace',
]
