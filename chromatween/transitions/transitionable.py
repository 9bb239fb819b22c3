from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Optional, Self

from .transition import Transition, TransitionLike, as_transition
from ..utils import Callback

Clock = Callable[[], float]


@dataclass(frozen=True)
class _Tween:
    start: float
    end: float
    started_at: float
    transition: Transition


class Transitionable:
    """
    A single numeric value that can be moved to a new target over time.

    Tweens are advanced lazily: nothing runs in the background, the value is
    recomputed from the clock whenever it is sampled through ``get``,
    ``is_active`` or ``update``. A tween that is found finished settles on its
    target and then fires its completion callback, exactly once.

    Calling ``set`` while a tween is running replaces it. The new tween starts
    from the current interpolated value (no velocity is carried over) and the
    replaced tween's callback is dropped.

    Args:
        value: Initial value.
        clock: Zero-argument callable returning the current time in seconds.
            Defaults to ``time.monotonic``.
    """

    def __init__(self, value: float = 0.0, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock if clock is not None else time.monotonic
        self._value = value
        self._tween: Optional[_Tween] = None
        self._callback: Optional[Callback] = None

    @property
    def clock(self) -> Clock:
        return self._clock

    def set(
        self,
        value: float,
        transition: TransitionLike = None,
        callback: Optional[Callback] = None,
    ) -> Self:
        """
        Move toward ``value``, instantly or over ``transition``.

        Returns immediately; with no transition (or a zero duration) the value
        is applied and ``callback`` runs before this call returns.
        """
        resolved = as_transition(transition)
        now = self._clock()
        # let a tween that already ran out fire before it gets replaced
        self.update(now)
        self._callback = None

        if resolved is None or resolved.is_instant:
            self._tween = None
            self._value = value
            if callback is not None:
                callback()
            return self

        self._tween = _Tween(start=self._value, end=value, started_at=now, transition=resolved)
        self._callback = callback
        return self

    def update(self, timestamp: Optional[float] = None) -> Self:
        tween = self._tween
        if tween is None:
            return self

        now = self._clock() if timestamp is None else timestamp
        progress = (now - tween.started_at) / tween.transition.duration
        if progress < 1:
            eased = tween.transition.ease(max(progress, 0.0))
            self._value = tween.start + (tween.end - tween.start) * eased
            return self

        self._value = tween.end
        self._tween = None
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
        return self

    def get(self, timestamp: Optional[float] = None) -> float:
        """Current value, interpolated if a tween is in flight."""
        self.update(timestamp)
        return self._value

    def is_active(self, timestamp: Optional[float] = None) -> bool:
        """True while a tween has not reached its target."""
        self.update(timestamp)
        return self._tween is not None

    def halt(self) -> Self:
        """Stop at the current interpolated value without firing the pending callback."""
        self.update()
        self._tween = None
        self._callback = None
        return self

    def __repr__(self) -> str:
        state = "active" if self._tween is not None else "idle"
        return f"Transitionable({self._value!r}, {state})"
