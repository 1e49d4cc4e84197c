import pytest

from wavegen.types import (
    SAWTOOTH,
    SINE,
    SQUARE,
    TRIANGLE,
    SawtoothParams,
    SineParams,
    SquareParams,
    TriangleParams,
)
from wavegen.waveforms import base_amplitude, sample_base


def test_sine_periodicity():
    p = SineParams(frequency=3.0, amplitude=2.0, phase=0.3)
    period = 1.0 / p.frequency
    for i in range(50):
        t = i * 0.0137
        assert sample_base(SINE, p, t + period) == pytest.approx(sample_base(SINE, p, t), abs=1e-9)


def test_sine_phase_enters_argument():
    p = SineParams(frequency=1.0, amplitude=1.5, phase=1.0)
    assert sample_base(SINE, p, 0.0) == pytest.approx(1.5 * 0.8414709848)


def test_square_duty_split():
    p = SquareParams(frequency=2.0, amplitude=1.5, duty_cycle=0.25)
    period = 0.5
    for i in range(100):
        t = i * period / 100
        expected = 1.5 if i < 25 else -1.5
        assert sample_base(SQUARE, p, t) == expected


def test_square_single_transition_per_period():
    p = SquareParams(frequency=1.0, amplitude=1.0, duty_cycle=0.3)
    ys = [sample_base(SQUARE, p, i / 200) for i in range(200)]
    changes = sum(1 for a, b in zip(ys, ys[1:]) if a != b)
    assert changes == 1


@pytest.mark.parametrize("duty, level", [(0.0, -1.0), (1.0, 1.0)])
def test_square_extreme_duty(duty, level):
    p = SquareParams(frequency=1.0, amplitude=1.0, duty_cycle=duty)
    assert {sample_base(SQUARE, p, i / 50) for i in range(50)} == {level}


def test_triangle_landmarks():
    p = TriangleParams(frequency=1.0, amplitude=2.0)
    assert sample_base(TRIANGLE, p, 0.0) == pytest.approx(-2.0)
    assert sample_base(TRIANGLE, p, 0.25) == pytest.approx(0.0)
    assert sample_base(TRIANGLE, p, 0.5) == pytest.approx(2.0)
    assert sample_base(TRIANGLE, p, 0.75) == pytest.approx(0.0)


def test_triangle_continuous_at_fold():
    p = TriangleParams(frequency=4.0, amplitude=1.0)
    half = 0.125
    eps = 1e-9
    assert sample_base(TRIANGLE, p, half - eps) == pytest.approx(1.0, abs=1e-6)
    assert sample_base(TRIANGLE, p, half + eps) == pytest.approx(1.0, abs=1e-6)


def test_sawtooth_ramp_and_jump():
    p = SawtoothParams(jump_amplitude=3.0, frequency=4.0)
    period = 0.25
    assert sample_base(SAWTOOTH, p, 0.0) == pytest.approx(-3.0)
    assert sample_base(SAWTOOTH, p, period * (1 - 1e-9)) == pytest.approx(3.0, abs=1e-6)
    assert sample_base(SAWTOOTH, p, period) == pytest.approx(-3.0)
    assert sample_base(SAWTOOTH, p, period / 2) == pytest.approx(0.0)


def test_sawtooth_slope_does_not_change_samples():
    a = SawtoothParams(slope=1.0)
    b = SawtoothParams(slope=-7.0)
    assert sample_base(SAWTOOTH, a, 0.3) == sample_base(SAWTOOTH, b, 0.3)


@pytest.mark.parametrize(
    "kind, params",
    [
        (SQUARE, SquareParams(frequency=0.0)),
        (TRIANGLE, TriangleParams(frequency=-1.0)),
        (SAWTOOTH, SawtoothParams(frequency=0.0)),
    ],
)
def test_non_positive_frequency_samples_zero(kind, params):
    assert sample_base(kind, params, 0.3) == 0.0


def test_unknown_kind_is_zero():
    assert sample_base("noise", SineParams(), 0.1) == 0.0


def test_base_amplitude():
    assert base_amplitude(SINE, SineParams(amplitude=2.0)) == 2.0
    assert base_amplitude(SQUARE, SquareParams(amplitude=3.0)) == 3.0
    assert base_amplitude(TRIANGLE, TriangleParams(amplitude=4.0)) == 4.0
    assert base_amplitude(SAWTOOTH, SawtoothParams(jump_amplitude=5.0)) == 5.0
    assert base_amplitude("noise", SineParams()) == 1.0
