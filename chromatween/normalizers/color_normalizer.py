import math
import warnings
from typing import Any, NamedTuple, Optional, Union

from ..exceptions import UnrecognizedColorInputWarning
from ..samples.colors import COLOR_NAMES
from ..types.color_types import ColorSpace


class RGBInput(NamedTuple):
    r: float
    g: float
    b: float

class HSLInput(NamedTuple):
    h: float
    s: float
    l: float

class HSVInput(NamedTuple):
    h: float
    s: float
    v: float

class HexInput(NamedTuple):
    value: str

class NamedInput(NamedTuple):
    name: str

class InstanceInput(NamedTuple):
    color: Any


ColorInput = Union[RGBInput, HSLInput, HSVInput, HexInput, NamedInput, InstanceInput]
COLOR_INPUT_TYPES = (RGBInput, HSLInput, HSVInput, HexInput, NamedInput, InstanceInput)

_TRIPLE_INPUTS = {
    ColorSpace.RGB: RGBInput,
    ColorSpace.HSL: HSLInput,
    ColorSpace.HSV: HSVInput,
}


def is_color_instance(value: Any) -> bool:
    """Anything exposing a callable ``get_color`` counts as a color."""
    return callable(getattr(value, "get_color", None))

def _triple(values: tuple) -> tuple:
    # missing positional channels read as NaN, extras are dropped
    if len(values) > 3:
        warnings.warn(
            f"Ignoring extra color arguments {tuple(values[3:])!r}; pass transition= and callback= by keyword",
            UnrecognizedColorInputWarning,
            stacklevel=3,
        )
    values = tuple(values[:3])
    return values + (math.nan,) * (3 - len(values))

def parse_color_input(first: Any, *rest: Any) -> Optional[ColorInput]:
    """
    Classify positional color arguments into a tagged ColorInput.

    Checks run in order and the first match wins:

    1. a color instance                     -> InstanceInput(first)
    2. a string starting with ``#``         -> HexInput(first)
    3. a key of COLOR_NAMES                 -> NamedInput(first)
    4. a tuple or list on its own           -> RGBInput(*first)
       anything else that is not a string  -> RGBInput(first, *rest[:2])
    5. ``rgb``/``hsl``/``hsv`` (any case)   -> that space, from ``rest[:3]``
       ``hex`` (any case)                   -> HexInput(rest[0])

    Returns:
        The parsed input, or None when nothing matched (``None``, ``"Red"``,
        ``"cmyk"``, or ``"hex"`` without a value).
    """
    if isinstance(first, COLOR_INPUT_TYPES):
        return first
    if is_color_instance(first):
        return InstanceInput(first)
    if isinstance(first, str) and first.startswith("#"):
        return HexInput(first)
    if isinstance(first, str) and first in COLOR_NAMES:
        return NamedInput(first)
    if first is None:
        return None
    if isinstance(first, (tuple, list)) and not rest:
        return RGBInput(*_triple(tuple(first)))
    if not isinstance(first, str):
        return RGBInput(*_triple((first,) + rest))

    token = first.lower()
    if token == ColorSpace.HEX.value:
        if rest and isinstance(rest[0], str):
            return HexInput(rest[0])
        return None
    for space, input_type in _TRIPLE_INPUTS.items():
        if token == space.value:
            return input_type(*_triple(rest))
    return None
