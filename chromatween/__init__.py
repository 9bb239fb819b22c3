"""
Chromatween - Animatable Color Values
=====================================

A small Python library for colors that change over time: a mutable ``Color``
whose RGB channels can tween between values, plus the conversion functions
behind it.

Key Features
------------
- Set and read colors as RGB, normalized RGB, HSL, HSV, hex or CSS names
- Smooth per-channel tweening with easing curves and completion callbacks
- Scalar and vectorized (numpy) color space conversions
- Permissive parsing: malformed input degrades to NaN with a warning

Quick Start
-----------
>>> from chromatween import Color
>>> Color("hsl", 0, 100, 50).get_hex()
'#ff0000'
>>> Color("#00ff00").get_hsl()
(120.0, 100.0, 50.0)

Modules
-------
- colors: the Color class
- conversions: color space conversion functions
- transitions: Transitionable channel values, Transition specs and easing curves
- normalizers: tagged color inputs and positional-argument parsing
- samples: the CSS named-color table
"""

from .colors import Color
from .conversions import (
    convert, np_convert,
    rgb_to_hsl, rgb_to_hsv, hsl_to_rgb, hsv_to_rgb,
    hex_to_rgb, rgb_to_hex,
    ColorSpace,
)
from .transitions import Transition, Transitionable, CURVES
from .normalizers import (
    RGBInput, HSLInput, HSVInput, HexInput, NamedInput, InstanceInput,
    ColorInput, parse_color_input, is_color_instance,
)
from .samples import COLOR_NAMES
from .exceptions import ChromatweenWarning, UnrecognizedColorInputWarning, MalformedColorWarning

__version__ = "1.0.0"

__all__ = [
    # Color
    "Color",

    # Conversions
    "convert", "np_convert",
    "rgb_to_hsl", "rgb_to_hsv", "hsl_to_rgb", "hsv_to_rgb",
    "hex_to_rgb", "rgb_to_hex",
    "ColorSpace",

    # Transitions
    "Transition", "Transitionable", "CURVES",

    # Inputs
    "RGBInput", "HSLInput", "HSVInput", "HexInput", "NamedInput", "InstanceInput",
    "ColorInput", "parse_color_input", "is_color_instance",

    # Data
    "COLOR_NAMES",

    # Warnings
    "ChromatweenWarning", "UnrecognizedColorInputWarning", "MalformedColorWarning",

    # Version
    "__version__",
]
