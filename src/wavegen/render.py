from __future__ import annotations

import math
from typing import Sequence

MARK = "*"
AXIS = "-"
BLANK = " "


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def _finite_reference(reference: float) -> float:
    # inf/nan wie Referenz 0: Punkte mittig, Nulllinie oben
    return reference if math.isfinite(reference) else 0.0


def axis_row(reference: float, rows: int) -> int:
    """Zeile der Nulllinie; hängt nur von ``reference`` ab, nicht von den Werten."""

    reference = _finite_reference(reference)
    ref = reference if reference != 0.0 else 1.0
    row = _round_half_up((reference / (2.0 * ref)) * (rows - 1))
    return int(_clamp(row, 0, rows - 1))


def value_row(y: float, reference: float, rows: int) -> int:
    reference = _finite_reference(reference)
    frac = 0.5
    if reference != 0.0:
        frac = (reference - y) / (2.0 * reference)
    frac = 0.5 if math.isnan(frac) else _clamp(frac, 0.0, 1.0)
    row = _round_half_up(frac * (rows - 1))
    return int(_clamp(row, 0, rows - 1))


def render(
    amplitudes: Sequence[float] | None,
    cols: int,
    rows: int,
    reference: float,
) -> list[str] | None:
    """Rastert eine Amplitudenfolge in ein Zeichenraster (oberste Zeile zuerst).

    Ein Wert pro Spalte, ``*`` für den Punkt, ``-`` für die Nulllinie.
    Leere Eingabe oder Maße <= 0: kein Raster (``None``).
    """

    if not amplitudes or cols <= 0 or rows <= 0:
        return None

    canvas = [[BLANK] * cols for _ in range(rows)]

    for c, y in enumerate(amplitudes[:cols]):
        if math.isnan(y):
            continue
        canvas[value_row(y, reference, rows)][c] = MARK

    mid = canvas[axis_row(reference, rows)]
    for c in range(cols):
        if mid[c] == BLANK:
            mid[c] = AXIS

    return ["".join(row) for row in canvas]
