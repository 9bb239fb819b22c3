"""
Chromatween Transitions
=======================

Time-driven scalar values used as color channels.

>>> from chromatween.transitions import Transitionable, Transition
>>> channel = Transitionable(0)
>>> _ = channel.set(255, Transition(0.25, "ease_in_out"), callback=lambda: print("done"))
>>> channel.is_active()
True
"""
from .curves import CURVES, DEFAULT_CURVE, Curve, get_curve
from .transition import Transition, TransitionLike, as_transition
from .transitionable import Transitionable, Clock

__all__ = [
    "CURVES",
    "DEFAULT_CURVE",
    "Curve",
    "get_curve",
    "Transition",
    "TransitionLike",
    "as_transition",
    "Transitionable",
    "Clock",
]
