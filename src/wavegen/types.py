from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from typing import Iterator

SINE = "sine"
SQUARE = "square"
TRIANGLE = "triangle"
SAWTOOTH = "sawtooth"

# Reihenfolge = Menünummern 1..4
KINDS = (SINE, SQUARE, TRIANGLE, SAWTOOTH)

AM = "am"
FM = "fm"
PWM = "pwm"

MODULATIONS = (AM, FM, PWM)


@dataclass(frozen=True, slots=True)
class SineParams:
    frequency: float = 1.0
    amplitude: float = 1.0
    phase: float = 0.0


@dataclass(frozen=True, slots=True)
class SquareParams:
    frequency: float = 1.0
    amplitude: float = 1.0
    duty_cycle: float = 0.5


@dataclass(frozen=True, slots=True)
class TriangleParams:
    frequency: float = 1.0
    amplitude: float = 1.0


@dataclass(frozen=True, slots=True)
class SawtoothParams:
    """Sägezahn. ``slope`` wird nur angezeigt, nicht zum Abtasten benutzt."""

    jump_amplitude: float = 1.0
    slope: float = 1.0
    frequency: float = 1.0


WaveParams = SineParams | SquareParams | TriangleParams | SawtoothParams


@dataclass(frozen=True, slots=True)
class AMParams:
    carrier_amplitude: float = 1.0
    carrier_frequency: float = 1.0
    index: float = 0.5


@dataclass(frozen=True, slots=True)
class FMParams:
    carrier_amplitude: float = 1.0
    carrier_frequency: float = 1.0
    index: float = 1.0  # beta in rad


@dataclass(frozen=True, slots=True)
class PWMParams:
    carrier_frequency: float = 50.0
    output_amplitude: float = 1.0


ModParams = AMParams | FMParams | PWMParams


@dataclass(slots=True)
class SampleSeries:
    """Zeit/Amplituden-Paare einer Periode, beides in Single Precision."""

    times: array = field(default_factory=lambda: array("f"))
    values: array = field(default_factory=lambda: array("f"))

    def append(self, t: float, y: float) -> None:
        self.times.append(t)
        self.values.append(y)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self.times, self.values, strict=True)
