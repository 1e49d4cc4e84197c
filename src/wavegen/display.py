from __future__ import annotations

from .config import ASCII_ROWS, PLOT_SAMPLES, TABLE_SAMPLES
from .modulation import plot_scale
from .render import render
from .series import modulated_series, plot_series, reference_amplitude, table_series
from .types import (
    AM,
    FM,
    PWM,
    SAWTOOTH,
    SINE,
    SQUARE,
    TRIANGLE,
    AMParams,
    FMParams,
    ModParams,
    SampleSeries,
    WaveParams,
)

NAMES = {
    SINE: "Sinus",
    SQUARE: "Rechteck",
    TRIANGLE: "Dreieck",
    SAWTOOTH: "Sägezahn",
}

MOD_NAMES = {
    AM: "AM (Amplitudenmodulation)",
    FM: "FM (Frequenzmodulation)",
    PWM: "PWM (Pulsweitenmodulation)",
}

RULE = "=" * 47


def mod_label(mod: ModParams) -> str:
    if isinstance(mod, AMParams):
        return "AM"
    if isinstance(mod, FMParams):
        return "FM"
    return "PWM"


def format_table(series: SampleSeries) -> list[str]:
    lines = ["t(sec)\t\ty"]
    lines.extend(f"{t:.6f}\t{y:.6f}" for t, y in series)
    return lines


def _params_line(kind: str, p: WaveParams) -> str:
    if kind == SINE:
        return f"Frequenz = {p.frequency:.6f} Hz, Amplitude = {p.amplitude:.6f}, Phase = {p.phase:.6f} rad"
    if kind == SQUARE:
        return f"Frequenz = {p.frequency:.6f} Hz, Amplitude = {p.amplitude:.6f}, Duty = {p.duty_cycle:.6f}"
    if kind == TRIANGLE:
        return f"Frequenz = {p.frequency:.6f} Hz, Amplitude = {p.amplitude:.6f}"
    return (
        f"Frequenz = {p.frequency:.6f} Hz, Sprungamplitude = {p.jump_amplitude:.6f}, "
        f"Steigung = {p.slope:.6f}"
    )


def settings_menu(kind: str, p: WaveParams) -> list[str]:
    lines = [f"----------- {NAMES[kind]} Einstellungen -----------"]
    if kind == SAWTOOTH:
        lines.append(f"| 1. Sprungamplitude: {p.jump_amplitude:.6f} V")
        lines.append(f"| 2. Steigung:        {p.slope:.6f}")
    else:
        lines.append(f"| 1. Frequenz:  {p.frequency:.6f} Hz")
        lines.append(f"| 2. Amplitude: {p.amplitude:.6f} V")
        if kind == SINE:
            lines.append(f"| 3. Phase:     {p.phase:.6f} rad")
        elif kind == SQUARE:
            lines.append(f"| 3. Duty:      {p.duty_cycle:.6f}")
    lines.append("-" * 41)
    return lines


def _plot(series: SampleSeries, reference: float, rows: int) -> list[str]:
    return render(series.values, len(series), rows, reference) or []


def waveform_report(
    kind: str,
    params: WaveParams,
    table_samples: int = TABLE_SAMPLES,
    plot_samples: int = PLOT_SAMPLES,
    rows: int = ASCII_ROWS,
) -> list[str]:
    """Tabelle + ASCII-Plot einer Basiswelle.

    Wirft ``NonPositiveFrequencyError`` bevor irgendetwas ausgegeben wird.
    """

    table = table_series(kind, params, table_samples)
    plot = plot_series(kind, params, plot_samples)
    name = NAMES[kind]

    lines = [
        f"========== {name} Tabelle (eine Periode, {table_samples} Samples) ==========",
        _params_line(kind, params),
        "",
    ]
    lines += format_table(table)
    lines += ["", f"========== {name} ASCII-Plot =========="]
    lines += _plot(plot, reference_amplitude(kind, params), rows)
    lines.append(RULE)
    return lines


def modulation_report(
    kind: str,
    params: WaveParams,
    mod: ModParams,
    table_samples: int = TABLE_SAMPLES,
    plot_samples: int = PLOT_SAMPLES,
    rows: int = ASCII_ROWS,
) -> list[str]:
    label = mod_label(mod)
    table = modulated_series(kind, params, mod, table_samples)
    plot = modulated_series(kind, params, mod, plot_samples)

    lines = [f"=== {label} Tabelle (eine Periode, {table_samples} Samples) ==="]
    lines += format_table(table)
    lines += ["", f"=== {label} ASCII-Plot ==="]
    lines += _plot(plot, plot_scale(mod), rows)
    lines.append(RULE)
    return lines
