from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Mapping, Optional, Union

from .curves import Curve, DEFAULT_CURVE, get_curve


@dataclass(frozen=True)
class Transition:
    """
    How a channel travels from its current value to a new target.

    Attributes:
        duration: Length of the tween in seconds. Zero or less applies the value instantly.
        curve: Easing curve name (see ``CURVES``) or a callable ``t -> eased t``.

    Examples:
        # Half-second fade with a soft landing
        Transition(0.5, "ease_out")

        # Equivalent shorthands accepted wherever a transition is expected
        {"duration": 0.5, "curve": "ease_out"}
        0.5   # linear
    """
    duration: float
    curve: Union[str, Curve] = DEFAULT_CURVE
    _ease: Curve = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ease", get_curve(self.curve))

    @property
    def is_instant(self) -> bool:
        return self.duration <= 0

    def ease(self, t: float) -> float:
        return self._ease(t)


TransitionLike = Union[Transition, Mapping[str, Any], Real, None]


def as_transition(transition: TransitionLike) -> Optional[Transition]:
    """
    Normalize the accepted transition shorthands to a Transition.

    Returns ``None`` for ``None``; raises TypeError for anything else that is
    not a Transition, a mapping or a number.
    """
    if transition is None or isinstance(transition, Transition):
        return transition
    if isinstance(transition, Mapping):
        return Transition(
            duration=float(transition.get("duration", 0.0)),
            curve=transition.get("curve", DEFAULT_CURVE),
        )
    if isinstance(transition, Real) and not isinstance(transition, bool):
        return Transition(duration=float(transition))
    raise TypeError(f"Unsupported transition: {transition!r}")
