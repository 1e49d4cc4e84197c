from __future__ import annotations

import math
from dataclasses import replace

from .config import PLOT_SAMPLES, TABLE_SAMPLES
from .modulation import carrier_period, modulate
from .types import SINE, ModParams, SampleSeries, WaveParams
from .waveforms import base_amplitude, sample_base


class NonPositiveFrequencyError(ValueError):
    def __init__(self, frequency: float) -> None:
        super().__init__(f"Frequenz muss > 0 sein (ist {frequency:g} Hz).")
        self.frequency = frequency


def _check_resolution(resolution: int) -> None:
    if resolution <= 0:
        raise ValueError(f"Auflösung muss > 0 sein (ist {resolution}).")


def generate(
    kind: str,
    params: WaveParams,
    resolution: int,
    time_shift: float = 0.0,
) -> SampleSeries:
    """Tastet eine Periode der Basiswelle mit ``resolution`` Punkten ab.

    Anders als ``sample_base`` wird eine Frequenz <= 0 hier abgelehnt,
    bevor irgendetwas erzeugt wird.
    """

    if params.frequency <= 0.0:
        raise NonPositiveFrequencyError(params.frequency)
    _check_resolution(resolution)

    step = (1.0 / params.frequency) / resolution
    series = SampleSeries()
    for i in range(resolution):
        t = i * step + time_shift
        series.append(t, sample_base(kind, params, t))
    return series


def sine_time_shift(params: WaveParams) -> float:
    return params.phase / (2.0 * math.pi * params.frequency)


def table_series(kind: str, params: WaveParams, resolution: int = TABLE_SAMPLES) -> SampleSeries:
    return generate(kind, params, resolution)


def plot_series(kind: str, params: WaveParams, resolution: int = PLOT_SAMPLES) -> SampleSeries:
    """Plot-Reihe; beim Sinus steckt die Phase in einer Zeitverschiebung.

    Abgetastet wird ein Sinus ohne Phase ab t = phase / (2 pi f); die Werte
    sind dieselben wie mit Phase im Argument, nur die Zeitachse verschiebt sich.
    """

    if kind == SINE:
        if params.frequency <= 0.0:
            raise NonPositiveFrequencyError(params.frequency)
        shift = sine_time_shift(params)
        return generate(kind, replace(params, phase=0.0), resolution, time_shift=shift)
    return generate(kind, params, resolution)


def modulated_series(
    kind: str,
    params: WaveParams,
    mod: ModParams,
    resolution: int,
) -> SampleSeries:
    _check_resolution(resolution)

    step = carrier_period(mod) / resolution
    series = SampleSeries()
    for i in range(resolution):
        t = i * step
        series.append(t, modulate(kind, params, mod, t))
    return series


def reference_amplitude(kind: str, params: WaveParams) -> float:
    return base_amplitude(kind, params)
