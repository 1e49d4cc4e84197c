from __future__ import annotations

import math

from .types import AMParams, FMParams, ModParams, PWMParams, WaveParams
from .waveforms import base_amplitude, sample_base


def normalized(kind: str, params: WaveParams, t: float) -> float:
    """Basissignal geteilt durch seine Amplitude; 0 bei Amplitude 0."""

    amp = base_amplitude(kind, params)
    if amp == 0.0:
        return 0.0
    return sample_base(kind, params, t) / amp


def _period(frequency: float) -> float:
    return 1.0 / frequency if frequency > 0.0 else 1.0


def sample_am(kind: str, params: WaveParams, mod: AMParams, t: float) -> float:
    envelope = 1.0 + mod.index * normalized(kind, params, t)
    carrier = math.sin(2.0 * math.pi * mod.carrier_frequency * t)
    return mod.carrier_amplitude * envelope * carrier


def sample_fm(kind: str, params: WaveParams, mod: FMParams, t: float) -> float:
    # Basissignal wirkt direkt als Phasenoffset (keine Integration der Frequenz)
    inst_phase = 2.0 * math.pi * mod.carrier_frequency * t + mod.index * normalized(kind, params, t)
    return mod.carrier_amplitude * math.sin(inst_phase)


def sample_pwm(kind: str, params: WaveParams, mod: PWMParams, t: float) -> float:
    """Komparator gegen einen Sägezahn-Träger von -1 bis +1."""

    period = _period(mod.carrier_frequency)
    tri = -1.0 + 2.0 * (math.fmod(t, period) / period)
    if normalized(kind, params, t) > tri:
        return mod.output_amplitude
    return -mod.output_amplitude


def modulate(kind: str, params: WaveParams, mod: ModParams, t: float) -> float:
    if isinstance(mod, AMParams):
        return sample_am(kind, params, mod, t)
    if isinstance(mod, FMParams):
        return sample_fm(kind, params, mod, t)
    if isinstance(mod, PWMParams):
        return sample_pwm(kind, params, mod, t)
    raise TypeError(f"Unbekannte Modulation: {type(mod).__name__}")


def carrier_period(mod: ModParams) -> float:
    """Periode, über die das modulierte Signal abgetastet wird (1 s bei f <= 0)."""

    return _period(mod.carrier_frequency)


def plot_scale(mod: ModParams) -> float:
    """Referenzamplitude für den ASCII-Plot; bei AM die Spitze der Hüllkurve."""

    if isinstance(mod, AMParams):
        return mod.carrier_amplitude * (1.0 + abs(mod.index))
    if isinstance(mod, FMParams):
        return mod.carrier_amplitude
    if isinstance(mod, PWMParams):
        return mod.output_amplitude
    raise TypeError(f"Unbekannte Modulation: {type(mod).__name__}")
