from __future__ import annotations

import csv
from pathlib import Path

from .types import SampleSeries


def write_csv(path: Path, series: SampleSeries) -> None:
    """Schreibt index, t, y als CSV. Datei darf nicht existieren."""

    if path.exists():
        raise FileExistsError(f"CSV-Datei existiert bereits: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["index", "t", "y"])
        for i, (t, y) in enumerate(series):
            w.writerow([i, f"{t:.6f}", f"{y:.6f}"])
