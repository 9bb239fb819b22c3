"""
Easing curves
=============

Each curve maps tween progress ``t`` (0.0 = start, 1.0 = end) to eased
progress. Curves return 0.0 at ``t = 0`` and 1.0 at ``t = 1``; overshooting
curves such as ``ease_out_back`` may leave [0, 1] in between.
"""
from types import MappingProxyType
from typing import Callable, Mapping

Curve = Callable[[float], float]


def linear(t: float) -> float:
    """Constant speed."""
    return t


def ease_in(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_out_back(t: float) -> float:
    """Overshoots the target slightly before settling."""
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * (t - 1) ** 3 + c1 * (t - 1) ** 2


def ease_out_bounce(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


CURVES: Mapping[str, Curve] = MappingProxyType({
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_out_back": ease_out_back,
    "ease_out_bounce": ease_out_bounce,
})

DEFAULT_CURVE = "linear"


def get_curve(curve: str | Curve) -> Curve:
    """
    Resolve a curve name or pass a callable through.

    Raises:
        ValueError: for an unknown curve name.
    """
    if callable(curve):
        return curve
    try:
        return CURVES[curve]
    except KeyError:
        raise ValueError(
            f"Invalid easing curve: {curve!r}. Expected one of {sorted(CURVES)} or a callable"
        ) from None
