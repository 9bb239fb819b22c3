import math
import re
import warnings
from typing import Optional
from ..exceptions import MalformedColorWarning
from ..samples.colors import COLOR_NAMES
from ..utils import round_half_up

_HEX_GROUP = re.compile(r"[0-9a-fA-F]{1,2}")


def strip_hash(value: str) -> str:
    return value[1:] if value.startswith("#") else value

def expand_shorthand(value: str) -> str:
    """Expand 3-digit hex (``abc``) to its 6-digit form (``aabbcc``); other lengths pass through."""
    value = strip_hash(value)
    if len(value) == 3:
        return "".join(ch * 2 for ch in value)
    return value

def _parse_group(group: str) -> float:
    if _HEX_GROUP.fullmatch(group):
        return int(group, 16)
    return math.nan

def hex_to_rgb(value: str) -> tuple[float, float, float]:
    """
    Parse ``#rrggbb``, ``rrggbb`` or the 3-digit shorthand into 0-255 RGB.

    Parsing is permissive: every 2-digit group that is not hexadecimal comes
    back as ``nan`` and a MalformedColorWarning is issued instead of raising.
    """
    digits = expand_shorthand(value)
    r, g, b = (_parse_group(digits[i:i + 2]) for i in (0, 2, 4))
    if len(digits) != 6 or any(math.isnan(c) for c in (r, g, b)):
        warnings.warn(
            f"Malformed hex color {value!r}; unparsable channels are NaN",
            MalformedColorWarning,
            stacklevel=2,
        )
    return r, g, b

def channel_to_hex(value: float) -> str:
    """Format one channel as 2 lowercase hex digits. Fractions round half up; NaN and infinities format as ``nan``/``inf``."""
    if not math.isfinite(value):
        return str(float(value))
    return format(round_half_up(value), "02x")

def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format 0-255 RGB as ``#rrggbb``."""
    return "#" + channel_to_hex(r) + channel_to_hex(g) + channel_to_hex(b)

def name_to_hex(name: str) -> Optional[str]:
    """Look up a CSS color keyword; ``None`` when the name is unknown."""
    return COLOR_NAMES.get(name)
