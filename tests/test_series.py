import math

import pytest

from wavegen.config import PLOT_SAMPLES, TABLE_SAMPLES
from wavegen.series import (
    NonPositiveFrequencyError,
    generate,
    modulated_series,
    plot_series,
    reference_amplitude,
    sine_time_shift,
    table_series,
)
from wavegen.types import (
    SAWTOOTH,
    SINE,
    SQUARE,
    TRIANGLE,
    AMParams,
    PWMParams,
    SawtoothParams,
    SineParams,
    SquareParams,
    TriangleParams,
)


def test_table_series_covers_one_period():
    s = table_series(TRIANGLE, TriangleParams(frequency=2.0, amplitude=1.0))
    assert len(s) == TABLE_SAMPLES
    assert list(s.times) == pytest.approx([i * 0.5 / 8 for i in range(8)])
    assert s.values[0] == pytest.approx(-1.0)
    assert s.values[4] == pytest.approx(1.0)


def test_plot_series_length():
    s = plot_series(SQUARE, SquareParams())
    assert len(s) == PLOT_SAMPLES
    assert s.times[0] == 0.0


def test_series_is_ascending():
    s = generate(SAWTOOTH, SawtoothParams(frequency=3.0), 17)
    ts = list(s.times)
    assert ts == sorted(ts)
    assert len(set(ts)) == len(ts)


def test_values_are_single_precision():
    s = table_series(SINE, SineParams(frequency=1.0, amplitude=1.0, phase=0.1))
    assert s.values.typecode == "f"
    assert s.times.typecode == "f"


@pytest.mark.parametrize("freq", [0.0, -2.0])
@pytest.mark.parametrize(
    "kind, make",
    [
        (SINE, lambda f: SineParams(frequency=f)),
        (SQUARE, lambda f: SquareParams(frequency=f)),
        (TRIANGLE, lambda f: TriangleParams(frequency=f)),
        (SAWTOOTH, lambda f: SawtoothParams(frequency=f)),
    ],
)
def test_non_positive_frequency_is_refused(kind, make, freq):
    with pytest.raises(NonPositiveFrequencyError):
        table_series(kind, make(freq))
    with pytest.raises(NonPositiveFrequencyError):
        plot_series(kind, make(freq))


def test_frequency_error_message():
    with pytest.raises(ValueError, match="Frequenz muss > 0 sein"):
        generate(SQUARE, SquareParams(frequency=0.0), 8)


def test_resolution_must_be_positive():
    with pytest.raises(ValueError):
        generate(SQUARE, SquareParams(), 0)
    with pytest.raises(ValueError):
        modulated_series(SQUARE, SquareParams(), AMParams(), 0)


def test_time_shift_offsets_start():
    s = generate(TRIANGLE, TriangleParams(), 4, time_shift=0.1)
    assert list(s.times) == pytest.approx([0.1, 0.35, 0.6, 0.85])


def test_sine_plot_bakes_phase_into_time_shift():
    p = SineParams(frequency=2.0, amplitude=1.5, phase=math.pi / 3)
    shift = sine_time_shift(p)
    assert shift == pytest.approx((math.pi / 3) / (4.0 * math.pi))

    s = plot_series(SINE, p)
    assert s.times[0] == pytest.approx(shift)
    for t, y in s:
        assert y == pytest.approx(1.5 * math.sin(2.0 * math.pi * 2.0 * t), abs=1e-5)


def test_sine_table_and_plot_agree_at_shared_points():
    p = SineParams(frequency=1.0, amplitude=2.0, phase=0.7)
    table = table_series(SINE, p)
    plot = plot_series(SINE, p)
    # Tabelle i/8 entspricht Plot 100*i/8, ganzzahlig für gerade i
    for k in range(4):
        assert table.values[2 * k] == pytest.approx(plot.values[25 * k], abs=1e-5)


def test_sine_table_uses_phase_directly():
    p = SineParams(frequency=1.0, amplitude=1.0, phase=math.pi / 2)
    s = table_series(SINE, p)
    assert s.times[0] == 0.0
    assert s.values[0] == pytest.approx(1.0)


def test_modulated_series_spans_carrier_period():
    s = modulated_series(SINE, SineParams(), PWMParams(carrier_frequency=50.0), 10)
    assert len(s) == 10
    assert s.times[1] == pytest.approx(0.002)


def test_modulated_series_falls_back_to_one_second():
    s = modulated_series(SINE, SineParams(), AMParams(carrier_frequency=0.0), 4)
    assert list(s.times) == pytest.approx([0.0, 0.25, 0.5, 0.75])
    assert list(s.values) == pytest.approx([0.0] * 4)


def test_modulation_does_not_need_positive_base_frequency():
    s = modulated_series(SQUARE, SquareParams(frequency=0.0), AMParams(index=0.5), 8)
    assert len(s) == 8


def test_reference_amplitude():
    assert reference_amplitude(SAWTOOTH, SawtoothParams(jump_amplitude=2.5)) == 2.5
    assert reference_amplitude(SINE, SineParams(amplitude=0.3)) == 0.3
