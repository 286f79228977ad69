import pytest

from demofw import easing

GRID = [i / 20 for i in range(21)]


def _assert_monotonic(values):
    for earlier, later in zip(values, values[1:]):
        assert earlier <= later
    assert values[0] == pytest.approx(0.0, abs=1e-9)
    assert values[-1] == pytest.approx(1.0, abs=1e-9)


def test_polynomial_endpoints_exact():
    assert easing.linear_interpolation(0.0) == 0.0
    assert easing.linear_interpolation(1.0) == 1.0
    assert easing.quadratic_ease_in(0.0) == 0.0
    assert easing.quadratic_ease_in(1.0) == 1.0
    assert easing.quadratic_ease_out(0.0) == 0.0
    assert easing.quadratic_ease_out(1.0) == 1.0
    assert easing.quadratic_ease_in_out(0.0) == 0.0
    assert easing.quadratic_ease_in_out(1.0) == 1.0
    assert easing.cubic_ease_in(0.0) == 0.0
    assert easing.cubic_ease_in(1.0) == 1.0
    assert easing.cubic_ease_out(0.0) == 0.0
    assert easing.cubic_ease_out(1.0) == 1.0
    assert easing.cubic_ease_in_out(0.0) == 0.0
    assert easing.cubic_ease_in_out(1.0) == 1.0
    assert easing.quartic_ease_in(0.0) == 0.0
    assert easing.quartic_ease_in(1.0) == 1.0
    assert easing.quartic_ease_out(0.0) == 0.0
    assert easing.quartic_ease_out(1.0) == 1.0
    assert easing.quartic_ease_in_out(0.0) == 0.0
    assert easing.quartic_ease_in_out(1.0) == 1.0
    assert easing.quintic_ease_in(0.0) == 0.0
    assert easing.quintic_ease_in(1.0) == 1.0
    assert easing.quintic_ease_out(0.0) == 0.0
    assert easing.quintic_ease_out(1.0) == 1.0
    assert easing.quintic_ease_in_out(0.0) == 0.0
    assert easing.quintic_ease_in_out(1.0) == 1.0


def test_polynomial_monotonic():
    samples = {
        "linear": [easing.linear_interpolation(p) for p in GRID],
        "quadratic_in": [easing.quadratic_ease_in(p) for p in GRID],
        "quadratic_out": [easing.quadratic_ease_out(p) for p in GRID],
        "quadratic_in_out": [easing.quadratic_ease_in_out(p) for p in GRID],
        "cubic_in": [easing.cubic_ease_in(p) for p in GRID],
        "cubic_out": [easing.cubic_ease_out(p) for p in GRID],
        "cubic_in_out": [easing.cubic_ease_in_out(p) for p in GRID],
        "quartic_in": [easing.quartic_ease_in(p) for p in GRID],
        "quartic_out": [easing.quartic_ease_out(p) for p in GRID],
        "quartic_in_out": [easing.quartic_ease_in_out(p) for p in GRID],
        "quintic_in": [easing.quintic_ease_in(p) for p in GRID],
        "quintic_out": [easing.quintic_ease_out(p) for p in GRID],
        "quintic_in_out": [easing.quintic_ease_in_out(p) for p in GRID],
    }
    for values in samples.values():
        _assert_monotonic(values)


def test_polynomial_pinned_midpoints():
    assert easing.quadratic_ease_in(0.5) == pytest.approx(0.25)
    assert easing.quadratic_ease_out(0.5) == pytest.approx(0.75)
    assert easing.cubic_ease_in(0.5) == pytest.approx(0.125)
    assert easing.cubic_ease_out(0.5) == pytest.approx(0.875)


def test_ease_out_mirrors_ease_in():
    for p in GRID:
        q = 1 - p
        assert easing.quadratic_ease_out(p) == pytest.approx(
            1 - easing.quadratic_ease_in(q), abs=1e-9)
        assert easing.cubic_ease_out(p) == pytest.approx(
            1 - easing.cubic_ease_in(q), abs=1e-9)
        assert easing.quartic_ease_out(p) == pytest.approx(
            1 - easing.quartic_ease_in(q), abs=1e-9)
        assert easing.quintic_ease_out(p) == pytest.approx(
            1 - easing.quintic_ease_in(q), abs=1e-9)
        assert easing.bounce_ease_out(p) == pytest.approx(
            1 - easing.bounce_ease_in(q), abs=1e-9)


def test_in_out_passes_midpoint():
    assert easing.quadratic_ease_in_out(0.5) == pytest.approx(0.5)
    assert easing.cubic_ease_in_out(0.5) == pytest.approx(0.5)
    assert easing.quartic_ease_in_out(0.5) == pytest.approx(0.5)
    assert easing.quintic_ease_in_out(0.5) == pytest.approx(0.5)


def test_exponential_endpoints_exact():
    assert easing.exponential_ease_in(0.0) == 0.0
    assert easing.exponential_ease_in(1.0) == 1.0
    assert easing.exponential_ease_out(1.0) == 1.0
    assert easing.exponential_ease_in_out(0.0) == 0.0
    assert easing.exponential_ease_in_out(1.0) == 1.0


def test_exponential_ease_in_grows():
    values = [easing.exponential_ease_in(p) for p in (0.1, 0.3, 0.6, 0.9)]
    assert values == sorted(values)


def test_back_endpoints():
    assert easing.back_ease_in(0.0) == 0.0
    assert easing.back_ease_out(1.0) == 1.0
    assert easing.back_ease_in(1.0) == pytest.approx(1.0, abs=1e-3)


def test_bounce_endpoints():
    assert easing.bounce_ease_out(0.0) == 0.0
    assert easing.bounce_ease_out(1.0) == pytest.approx(1.0)
    assert easing.bounce_ease_in(0.0) == pytest.approx(0.0)
    assert easing.bounce_ease_in_out(1.0) == pytest.approx(1.0)


def test_bounce_in_out_halves():
    for p in (0.1, 0.25, 0.4):
        assert easing.bounce_ease_in_out(p) == 0.5 * easing.bounce_ease_in(p * 2)


def test_sine_curves_near_endpoints():
    assert easing.sine_ease_out(1.0) == pytest.approx(1.0, abs=0.01)
    assert easing.sine_ease_in_out(0.0) == pytest.approx(0.0, abs=0.01)
    assert easing.sine_ease_in_out(1.0) == pytest.approx(1.0, abs=0.01)


def test_circular_curves_near_endpoints():
    assert easing.circular_ease_in(0.0) == pytest.approx(0.0, abs=0.01)
    assert easing.circular_ease_out(1.0) == pytest.approx(1.0, abs=0.01)
    assert easing.circular_ease_in_out(1.0) == pytest.approx(1.0, abs=0.01)


def test_elastic_ease_in_starts_near_zero():
    assert easing.elastic_ease_in(0.0) == pytest.approx(0.0, abs=1e-6)