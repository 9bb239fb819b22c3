from chromatween.transitions import Transitionable, Transition
import pytest

def test_initial_value_is_idle(clock):
    channel = Transitionable(42, clock)
    assert channel.get() == 42
    assert not channel.is_active()

def test_instant_set_applies_and_fires_synchronously(clock, counter):
    channel = Transitionable(0, clock)
    channel.set(10, callback=counter)
    assert channel.get() == 10
    assert counter.calls == 1
    assert not channel.is_active()

def test_zero_duration_is_instant(clock, counter):
    channel = Transitionable(0, clock)
    channel.set(10, Transition(0), counter)
    assert channel.get() == 10
    assert counter.calls == 1

def test_linear_tween(clock, counter):
    channel = Transitionable(0, clock)
    channel.set(100, Transition(1.0), counter)

    assert channel.get() == 0
    assert channel.is_active()

    clock.advance(0.5)
    assert channel.get() == pytest.approx(50.0)
    assert channel.is_active()
    assert counter.calls == 0

    clock.advance(0.5)
    assert channel.get() == 100
    assert not channel.is_active()
    assert counter.calls == 1

def test_callback_fires_exactly_once(clock, counter):
    channel = Transitionable(0, clock)
    channel.set(100, 1.0, counter)
    clock.advance(5)
    channel.get()
    channel.get()
    channel.is_active()
    channel.update()
    assert counter.calls == 1

def test_callback_fires_after_value_settles(clock):
    channel = Transitionable(0, clock)
    seen = []
    channel.set(100, 1.0, lambda: seen.append(channel.get()))
    clock.advance(1.0)
    channel.update()
    assert seen == [100]

def test_eased_tween(clock):
    channel = Transitionable(0, clock)
    channel.set(100, Transition(1.0, "ease_in"))
    clock.advance(0.5)
    assert channel.get() == pytest.approx(25.0)

def test_mapping_and_number_transitions(clock):
    channel = Transitionable(0, clock)
    channel.set(100, {"duration": 2.0, "curve": "linear"})
    clock.advance(1.0)
    assert channel.get() == pytest.approx(50.0)

    other = Transitionable(0, clock)
    other.set(10, 4)
    clock.advance(1.0)
    assert other.get() == pytest.approx(2.5)

def test_explicit_timestamp(clock):
    channel = Transitionable(0, clock)
    channel.set(100, 2.0)
    assert channel.get(timestamp=0.5) == pytest.approx(25.0)
    assert channel.is_active(timestamp=1.0)
    assert not channel.is_active(timestamp=2.0)

def test_superseded_tween_starts_from_current_value(clock, make_counter):
    first, second = make_counter(), make_counter()
    channel = Transitionable(0, clock)
    channel.set(100, 1.0, first)
    clock.advance(0.5)

    channel.set(0, 1.0, second)
    assert channel.get() == pytest.approx(50.0)

    clock.advance(0.5)
    assert channel.get() == pytest.approx(25.0)

    clock.advance(0.5)
    assert channel.get() == 0
    assert first.calls == 0
    assert second.calls == 1

def test_finished_but_unsampled_tween_fires_before_replacement(clock, make_counter):
    first, second = make_counter(), make_counter()
    channel = Transitionable(0, clock)
    channel.set(100, 1.0, first)
    clock.advance(2.0)

    channel.set(50, callback=second)
    assert first.calls == 1
    assert second.calls == 1
    assert channel.get() == 50

def test_halt_freezes_and_drops_callback(clock, counter):
    channel = Transitionable(0, clock)
    channel.set(100, 1.0, counter)
    clock.advance(0.25)
    channel.halt()

    assert channel.get() == pytest.approx(25.0)
    assert not channel.is_active()
    clock.advance(1.0)
    assert channel.get() == pytest.approx(25.0)
    assert counter.calls == 0

def test_callback_may_restart_channel(clock):
    channel = Transitionable(0, clock)
    channel.set(100, 1.0, lambda: channel.set(0, 1.0))
    clock.advance(1.0)
    assert channel.get() == 100
    assert channel.is_active()
    clock.advance(1.0)
    assert channel.get() == 0

def test_set_is_chainable(clock):
    channel = Transitionable(0, clock)
    assert channel.set(1) is channel
    assert channel.update() is channel
    assert channel.halt() is channel

def test_nan_target_propagates(clock):
    channel = Transitionable(0, clock)
    channel.set(float("nan"))
    assert channel.get() != channel.get()

def test_default_clock_is_monotonic():
    import time
    assert Transitionable().clock is time.monotonic

def test_repr(clock):
    channel = Transitionable(3, clock)
    assert repr(channel) == "Transitionable(3, idle)"
    channel.set(5, 1.0)
    assert repr(channel) == "Transitionable(3, active)"
