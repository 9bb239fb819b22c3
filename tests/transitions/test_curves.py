from chromatween.transitions import CURVES, Transition, as_transition, get_curve
from chromatween.transitions.curves import linear, ease_in, ease_out, ease_in_out
import pytest

@pytest.mark.parametrize("name", sorted(CURVES))
def test_curves_hit_endpoints(name):
    curve = CURVES[name]
    assert curve(0.0) == pytest.approx(0.0)
    assert curve(1.0) == pytest.approx(1.0)

@pytest.mark.parametrize("name", ["linear", "ease_in", "ease_out", "ease_in_out", "ease_in_cubic", "ease_out_cubic"])
def test_monotonic_curves(name):
    curve = CURVES[name]
    samples = [curve(i / 20) for i in range(21)]
    assert samples == sorted(samples)

def test_quadratic_midpoints():
    assert linear(0.5) == 0.5
    assert ease_in(0.5) == 0.25
    assert ease_out(0.5) == 0.75
    assert ease_in_out(0.5) == 0.5

def test_ease_out_back_overshoots():
    assert max(CURVES["ease_out_back"](i / 20) for i in range(21)) > 1.0

def test_get_curve():
    assert get_curve("ease_in") is ease_in
    custom = lambda t: t ** 0.5
    assert get_curve(custom) is custom
    with pytest.raises(ValueError):
        get_curve("wobble")

def test_transition_rejects_unknown_curve():
    with pytest.raises(ValueError):
        Transition(1.0, "wobble")

def test_transition_ease_uses_curve():
    assert Transition(1.0, "ease_in").ease(0.5) == 0.25
    assert Transition(1.0, lambda t: 1.0).ease(0.0) == 1.0

def test_transition_is_instant():
    assert Transition(0).is_instant
    assert Transition(-1).is_instant
    assert not Transition(0.1).is_instant

def test_as_transition():
    fade = Transition(0.3, "ease_out")
    assert as_transition(None) is None
    assert as_transition(fade) is fade
    assert as_transition({"duration": 0.3, "curve": "ease_out"}) == fade
    assert as_transition(2) == Transition(2.0)
    assert as_transition({}) == Transition(0.0)

@pytest.mark.parametrize("bad", ["fast", True, [1.0]])
def test_as_transition_rejects_other_types(bad):
    with pytest.raises(TypeError):
        as_transition(bad)
