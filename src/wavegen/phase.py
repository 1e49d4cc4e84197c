from __future__ import annotations

import math
import re

# Wie scanf("%lf"): führende Leerzeichen, dann das längste Dezimal-Literal.
# Anders als scanf: kein inf, nan oder Hex-Float.
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class PhaseParseError(ValueError):
    pass


def scan_float(text: str) -> float | None:
    """Liest eine Zahl am Anfang von ``text``; Rest wird ignoriert ("1.5abc" -> 1.5)."""

    m = _FLOAT_PREFIX.match(text)
    if not m:
        return None
    return float(m.group(1))


def _degrees(text: str) -> float | None:
    deg = scan_float(text)
    if deg is None:
        return None
    return deg * math.pi / 180.0


def _parse(s: str) -> float | None:
    if s[:2] in ("r:", "R:"):
        return scan_float(s[2:])
    if s[:2] in ("d:", "D:"):
        return _degrees(s[2:])

    i = s.find("deg")
    if i != -1:
        return _degrees(s[:i])
    if s.endswith(("d", "D")):
        return _degrees(s[:-1])

    if "/" in s:
        num, den = s.split("/", 1)
        a = scan_float(num)
        b = scan_float(den)
        if a is None or b is None or b == 0.0:
            return None
        return a / b

    return scan_float(s)


def parse_phase(text: str) -> float:
    """Phase als Text -> Radiant.

    Erlaubt sind ``r:1.57``, ``d:90``, ``90deg``, ``90d``, Brüche wie
    ``3.14/2`` und einfache Zahlen (Radiant). Es wird nie ein Ersatzwert
    eingesetzt; das entscheidet der Aufrufer.
    """

    rad = _parse(text.strip())
    if rad is None:
        raise PhaseParseError(f"Phase nicht lesbar: {text!r}")
    return rad
