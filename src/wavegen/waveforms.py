from __future__ import annotations

import math

from .types import SAWTOOTH, SINE, SQUARE, TRIANGLE, WaveParams


def _position(t: float, frequency: float) -> float:
    """Normierte Lage innerhalb der Periode, 0..1 für t >= 0."""

    period = 1.0 / frequency
    return math.fmod(t, period) / period


def sample_base(kind: str, params: WaveParams, t: float) -> float:
    """Unmodulierte Amplitude zur Zeit t (Sekunden ab Start).

    Bei Frequenz <= 0 liefern Rechteck, Dreieck und Sägezahn 0; die
    Ablehnung passiert erst beim Erzeugen einer Reihe.

    Gerechnet wird in double; auf Single Precision gerundet wird erst beim
    Ablegen in ``SampleSeries``.
    """

    if kind == SINE:
        return params.amplitude * math.sin(2.0 * math.pi * params.frequency * t + params.phase)

    if kind == SQUARE:
        if params.frequency <= 0.0:
            return 0.0
        pos = _position(t, params.frequency)
        return params.amplitude if pos < params.duty_cycle else -params.amplitude

    if kind == TRIANGLE:
        if params.frequency <= 0.0:
            return 0.0
        a = params.amplitude
        pos = _position(t, params.frequency)
        # steigende / fallende Flanke, Spitze bei pos = 0.5
        if pos < 0.5:
            return -a + 4.0 * a * pos
        return 3.0 * a - 4.0 * a * pos

    if kind == SAWTOOTH:
        if params.frequency <= 0.0:
            return 0.0
        a = params.jump_amplitude
        return -a + 2.0 * a * _position(t, params.frequency)

    return 0.0


def base_amplitude(kind: str, params: WaveParams) -> float:
    """Amplitude, auf die das Signal für die Modulation normiert wird."""

    if kind in (SINE, SQUARE, TRIANGLE):
        return params.amplitude
    if kind == SAWTOOTH:
        return params.jump_amplitude
    return 1.0
