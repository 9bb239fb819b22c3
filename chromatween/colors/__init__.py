"""
Chromatween Color Classes
=========================

``Color`` is a mutable color made of three animatable RGB channels.
Setters accept RGB, HSL, HSV, hex, CSS color names or another color, and may
tween to the new value; getters convert the current (possibly mid-tween)
channels on demand.

Usage
-----
>>> from chromatween import Color, Transition
>>> color = Color("hsl", 0, 100, 50)
>>> color.get_hex()
'#ff0000'
>>> _ = color.change_to("#00ff00", transition=Transition(0.5, "ease_out"))
>>> color.is_active()
True

Notes
-----
- Channels are not clamped; use ``Color.clamp`` explicitly.
- Unknown names and malformed hex strings produce NaN channels and a
  MalformedColorWarning rather than an exception.
- ``from_color`` shares channel objects with its source once it completes;
  ``copy`` does not.
"""

from .color import Color, Channels

__all__ = ['Color', 'Channels']
