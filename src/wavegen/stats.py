from __future__ import annotations

import math
from typing import Sequence

from .types import SampleSeries


def mean(xs: Sequence[float]) -> float:
    return sum(xs) / len(xs)


def rms(xs: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in xs) / len(xs))


def summary(series: SampleSeries) -> str:
    ys = series.values
    return (
        f"N={len(ys)}  min={min(ys):.6g}  max={max(ys):.6g}  "
        f"µ={mean(ys):.6g}  rms={rms(ys):.6g}"
    )
