from __future__ import annotations
import math
import warnings
from typing import Any, Callable, Dict, Optional, Self, Tuple

from boundednumbers.functions import clamp as _clamp

from ..conversions import (
    brightness,
    channel_to_hex,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    lightness,
    name_to_hex,
    rgb_to_hex,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
)
from ..exceptions import MalformedColorWarning, UnrecognizedColorInputWarning
from ..normalizers.color_normalizer import (
    ColorInput,
    HexInput,
    HSLInput,
    HSVInput,
    InstanceInput,
    NamedInput,
    RGBInput,
    is_color_instance,
    parse_color_input,
)
from ..transitions import Clock, Transitionable, TransitionLike
from ..types.color_types import CHANNEL_MAX, ColorElement, ColorSpace, ScalarVector, to_color_space
from ..utils import Callback, join_callbacks

Channels = Tuple[Transitionable, Transitionable, Transitionable]


class Color:
    """
    A mutable color backed by three animatable RGB channels.

    Any setter accepts an optional ``transition`` (a Transition, a
    ``{"duration": ..., "curve": ...}`` mapping or a duration in seconds) and
    an optional ``callback`` run once the new color has settled. Setters
    return ``self`` so calls can be chained.

    The constructor and ``set`` take the same arguments, all of these are red:

        Color(255, 0, 0)
        Color("rgb", 255, 0, 0)
        Color("hsl", 0, 100, 50)
        Color("hsv", 0, 1, 1)
        Color("hex", "#ff0000")
        Color("#f00")
        Color("red")
        Color(red_color)

    Args:
        *args: Initial color, see ``parse_color_input``. No arguments means black.
        transition: Optional tween for the initial color.
        callback: Optional completion callback for the initial color.
        clock: Time source handed to the channels (defaults to ``time.monotonic``).
    """

    def __init__(
        self,
        *args: Any,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock = clock
        self._r = Transitionable(0, clock)
        self._g = Transitionable(0, clock)
        self._b = Transitionable(0, clock)
        if args:
            self.set(*args, transition=transition, callback=callback)

    # ------------------ DISPATCH ------------------
    def set(
        self,
        *args: Any,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """
        Set the color from any supported input shape.

        Arguments that match no shape leave the color unchanged and issue an
        UnrecognizedColorInputWarning.
        """
        parsed = parse_color_input(*args) if args else None
        if parsed is None:
            warnings.warn(
                f"Unrecognized color input {args!r}; color left unchanged",
                UnrecognizedColorInputWarning,
                stacklevel=2,
            )
            return self
        return self._apply(parsed, transition, callback)

    def _apply(self, parsed: ColorInput, transition: TransitionLike, callback: Optional[Callback]) -> Self:
        if isinstance(parsed, InstanceInput):
            return self.from_color(parsed.color, transition, callback)
        if isinstance(parsed, HexInput):
            return self.set_hex(parsed.value, transition, callback)
        if isinstance(parsed, NamedInput):
            return self.set_color_name(parsed.name, transition, callback)
        if isinstance(parsed, HSLInput):
            return self.set_hsl(*parsed, transition, callback)
        if isinstance(parsed, HSVInput):
            return self.set_hsv(*parsed, transition, callback)
        return self.set_rgb(*parsed, transition, callback)

    def change_to(
        self,
        *args: Any,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """Tween to another color; same inputs as ``set``. An empty call does nothing."""
        if args:
            self.set(*args, transition=transition, callback=callback)
        return self

    def get_color(self, space: ColorSpace | str | None = None) -> ColorElement:
        """
        Return the current color in ``space`` (rgb, hsl, hsv or hex, any case).

        Missing or unknown spaces fall back to RGB.
        """
        if space is None:
            return self.get_rgb()
        try:
            resolved = to_color_space(space)
        except ValueError:
            return self.get_rgb()
        getters: Dict[ColorSpace, Callable[[], ColorElement]] = {
            ColorSpace.RGB: self.get_rgb,
            ColorSpace.HSL: self.get_hsl,
            ColorSpace.HSV: self.get_hsv,
            ColorSpace.HEX: self.get_hex,
        }
        return getters[resolved]()

    # ------------------ INSTANCES ------------------
    def from_color(
        self,
        color: Any,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """
        Take over another color's values.

        Tweens to ``color``'s current RGB, then adopts ``color``'s channel
        objects: from then on both colors share the same channels, and
        setting either one changes both until one of them is copied from a
        third color. Use ``copy()`` for an independent duplicate.
        Non-color arguments are ignored.
        """
        if not is_color_instance(color):
            return self
        r, g, b = color.get_rgb()

        def adopt() -> None:
            channels = getattr(color, "channels", None)
            if channels is not None:
                self._r, self._g, self._b = channels
            if callback is not None:
                callback()

        return self.set_rgb(r, g, b, transition, adopt)

    def copy(self) -> Color:
        """An independent color holding this color's current RGB."""
        return Color(RGBInput(*self.get_rgb()), clock=self._clock)

    @property
    def channels(self) -> Channels:
        return self._r, self._g, self._b

    # ------------------ RGB ------------------
    def set_r(self, r: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        self.update()
        self._r.set(r, transition, callback)
        return self

    def set_g(self, g: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        self.update()
        self._g.set(g, transition, callback)
        return self

    def set_b(self, b: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        self.update()
        self._b.set(b, transition, callback)
        return self

    def set_rgb(
        self,
        r: float,
        g: float,
        b: float,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """
        Set all three channels.

        ``callback`` runs once, after the last of the three channels has
        settled.
        """
        # settle finished tweens, including a pending from_color adoption
        self.update()
        done_r, done_g, done_b = join_callbacks(callback, 3)
        self.set_r(r, transition, done_r)
        self.set_g(g, transition, done_g)
        self.set_b(b, transition, done_b)
        return self

    def get_r(self) -> float:
        return self._r.get()

    def get_g(self) -> float:
        return self._g.get()

    def get_b(self) -> float:
        return self._b.get()

    def get_rgb(self) -> ScalarVector:
        self.update()
        return self.get_r(), self.get_g(), self.get_b()

    def get_normalized_rgb(self) -> ScalarVector:
        """RGB scaled to [0, 1]."""
        r, g, b = self.get_rgb()
        return r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX

    # ------------------ HEX / NAMES ------------------
    def set_hex(self, value: str, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        r, g, b = hex_to_rgb(value)
        return self.set_rgb(r, g, b, transition, callback)

    def get_hex(self) -> str:
        return rgb_to_hex(*self.get_rgb())

    def set_color_name(self, name: str, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        """
        Set the color from a CSS keyword such as ``"rebeccapurple"``.

        Unknown names are not an error: the channels become NaN and a
        MalformedColorWarning is issued.
        """
        value = name_to_hex(name)
        if value is None:
            warnings.warn(
                f"Unknown color name {name!r}; channels set to NaN",
                MalformedColorWarning,
                stacklevel=2,
            )
            return self.set_rgb(math.nan, math.nan, math.nan, transition, callback)
        return self.set_hex(value, transition, callback)

    # ------------------ HSL ------------------
    def set_hsl(
        self,
        h: float,
        s: float,
        l: float,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """Set from hue in degrees and saturation/lightness in percent."""
        r, g, b = hsl_to_rgb(h, s, l)
        return self.set_rgb(r, g, b, transition, callback)

    def get_hsl(self) -> ScalarVector:
        return unit_rgb_to_hsl(*self.get_normalized_rgb())

    def get_hue(self) -> float:
        return self.get_hsl()[0]

    def set_hue(self, h: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        _, s, l = self.get_hsl()
        return self.set_hsl(h, s, l, transition, callback)

    def get_saturation(self) -> float:
        return self.get_hsl()[1]

    def set_saturation(self, s: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        h, _, l = self.get_hsl()
        return self.set_hsl(h, s, l, transition, callback)

    def get_lightness(self) -> float:
        return lightness(*self.get_normalized_rgb())

    def set_lightness(self, l: float, transition: TransitionLike = None, callback: Optional[Callback] = None) -> Self:
        h, s, _ = self.get_hsl()
        return self.set_hsl(h, s, l, transition, callback)

    def get_brightness(self) -> float:
        """Largest normalized channel in percent (the HSV value), unlike lightness."""
        return brightness(*self.get_normalized_rgb())

    # ------------------ HSV ------------------
    def set_hsv(
        self,
        h: float,
        s: float,
        v: float,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """Set from unit HSV. Channels receive unrounded floats."""
        r, g, b = hsv_to_rgb(h, s, v)
        return self.set_rgb(r, g, b, transition, callback)

    def get_hsv(self) -> ScalarVector:
        return unit_rgb_to_hsv(*self.get_normalized_rgb())

    # ------------------ ANIMATION ------------------
    def is_active(self) -> bool:
        """True while any channel is still tweening."""
        # evaluate every channel so each one gets to settle and fire
        active = [channel.is_active() for channel in self.channels]
        return any(active)

    def update(self, timestamp: Optional[float] = None) -> Self:
        """Advance all channel tweens, firing any completions that are due."""
        for channel in self.channels:
            channel.update(timestamp)
        return self

    # ------------------ HELPERS ------------------
    is_color_instance = staticmethod(is_color_instance)

    @staticmethod
    def clamp(value: float, minimum: float = 0, maximum: float = CHANNEL_MAX) -> float:
        """Clamp ``value`` into [minimum, maximum]. Never applied automatically."""
        return _clamp(value, minimum, maximum)

    @staticmethod
    def to_hex(value: float) -> str:
        """One channel as 2 hex digits."""
        return channel_to_hex(value)

    def __repr__(self) -> str:
        r, g, b = self.get_rgb()
        return f"Color(r={r!r}, g={g!r}, b={b!r})"
