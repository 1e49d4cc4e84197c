from __future__ import annotations

from dataclasses import dataclass, field

from .types import (
    KINDS,
    SawtoothParams,
    SineParams,
    SquareParams,
    TriangleParams,
    WaveParams,
)

TABLE_SAMPLES = 8  # Punkte in der Wertetabelle
PLOT_SAMPLES = 100  # Spalten im ASCII-Plot
ASCII_ROWS = 21  # ungerade -> Nulllinie genau in der Mitte


@dataclass(slots=True)
class Settings:
    """Aktuelle Einstellungen pro Wellenform; gehört der Shell bzw. dem CLI.

    Die Records selbst sind unveränderlich, geändert wird nur, welcher Record
    hier hängt.
    """

    sine: SineParams = field(default_factory=SineParams)
    square: SquareParams = field(default_factory=SquareParams)
    triangle: TriangleParams = field(default_factory=TriangleParams)
    sawtooth: SawtoothParams = field(default_factory=SawtoothParams)

    def get(self, kind: str) -> WaveParams:
        if kind not in KINDS:
            raise KeyError(f"Unbekannte Wellenform: {kind!r}")
        return getattr(self, kind)

    def set(self, kind: str, params: WaveParams) -> None:
        if kind not in KINDS:
            raise KeyError(f"Unbekannte Wellenform: {kind!r}")
        setattr(self, kind, params)


def clamp_duty(duty: float) -> float:
    return min(max(duty, 0.0), 1.0)
