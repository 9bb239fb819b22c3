from .color_normalizer import (
    RGBInput,
    HSLInput,
    HSVInput,
    HexInput,
    NamedInput,
    InstanceInput,
    ColorInput,
    is_color_instance,
    parse_color_input,
)

__all__ = [
    "RGBInput",
    "HSLInput",
    "HSVInput",
    "HexInput",
    "NamedInput",
    "InstanceInput",
    "ColorInput",
    "is_color_instance",
    "parse_color_input",
]
