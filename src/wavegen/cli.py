from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import PLOT_SAMPLES, Settings, clamp_duty
from .display import modulation_report, waveform_report
from .io import write_csv
from .phase import PhaseParseError, parse_phase
from .series import NonPositiveFrequencyError, modulated_series, plot_series
from .shell import run_shell
from .stats import summary
from .types import (
    AM,
    FM,
    KINDS,
    MODULATIONS,
    SAWTOOTH,
    SINE,
    SQUARE,
    AMParams,
    FMParams,
    ModParams,
    PWMParams,
    WaveParams,
)
from .viewer import Viewer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="wavegen",
        description=(
            "Erzeugt Sinus, Rechteck, Dreieck oder Sägezahn, optional mit AM/FM/PWM, "
            "und gibt Wertetabelle + ASCII-Plot aus. Ohne --wave startet das interaktive Menü."
        ),
    )

    p.add_argument("--wave", choices=KINDS, help="Wellenform (sonst interaktives Menü).")
    p.add_argument("--frequency", type=float, help="Frequenz in Hz (Standard 1).")
    p.add_argument("--amplitude", type=float, help="Amplitude bzw. Sprungamplitude in V (Standard 1).")
    p.add_argument(
        "--phase",
        help="Phase (nur Sinus), z.B. 1.57, 3.14/2, 90deg, d:90, r:1.57.",
    )
    p.add_argument("--duty", type=float, help="Duty Cycle 0..1 (nur Rechteck).")
    p.add_argument("--slope", type=float, help="Steigung (nur Sägezahn, reine Anzeige).")

    p.add_argument("--mod", choices=MODULATIONS, help="Modulation anwenden.")
    p.add_argument("--carrier-amplitude", type=float, help="Trägeramplitude Ac bzw. PWM-Ausgangsamplitude.")
    p.add_argument("--carrier-frequency", type=float, help="Trägerfrequenz fc bzw. fpwm in Hz.")
    p.add_argument("--index", type=float, help="Modulationsindex m (AM) bzw. beta in rad (FM).")

    p.add_argument(
        "--csv",
        metavar="DATEI",
        help="Optional: Plot-Reihe (100 Punkte) als CSV speichern (index,t,y). Datei darf nicht existieren.",
    )
    p.add_argument(
        "--png",
        metavar="DATEI",
        help="Optional: Plot als PNG speichern (z.B. out.png).",
    )
    p.add_argument("--show", action="store_true", help="Plot-Fenster (matplotlib) öffnen.")
    p.add_argument("--debug-keys", action="store_true", help="Gibt empfangene Key-Events aus")
    p.add_argument("-v", "--verbose", action="store_true", help="Mehr Ausgaben (Debug).")

    return p.parse_args(argv)


def _wave_params(args: argparse.Namespace, settings: Settings) -> WaveParams:
    kind = args.wave
    p = settings.get(kind)
    changes: dict[str, float] = {}

    if args.frequency is not None:
        changes["frequency"] = args.frequency
    if args.amplitude is not None:
        changes["jump_amplitude" if kind == SAWTOOTH else "amplitude"] = args.amplitude
    if args.slope is not None and kind == SAWTOOTH:
        changes["slope"] = args.slope
    if args.duty is not None and kind == SQUARE:
        changes["duty_cycle"] = clamp_duty(args.duty)
    if args.phase is not None and kind == SINE:
        try:
            changes["phase"] = parse_phase(args.phase)
        except PhaseParseError as e:
            print(f"WARNING: {e} Setze Phase auf 0.", file=sys.stderr)
            changes["phase"] = 0.0

    return replace(p, **changes)


def _mod_params(args: argparse.Namespace) -> ModParams:
    defaults: ModParams
    if args.mod == AM:
        defaults = AMParams()
    elif args.mod == FM:
        defaults = FMParams()
    else:
        defaults = PWMParams()

    changes: dict[str, float] = {}
    if args.carrier_frequency is not None:
        changes["carrier_frequency"] = args.carrier_frequency
    if args.carrier_amplitude is not None:
        key = "output_amplitude" if isinstance(defaults, PWMParams) else "carrier_amplitude"
        changes[key] = args.carrier_amplitude
    if args.index is not None:
        if isinstance(defaults, PWMParams):
            print("WARNING: --index wird bei PWM ignoriert.", file=sys.stderr)
        else:
            changes["index"] = args.index

    return replace(defaults, **changes)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.wave is None:
        if args.mod or args.csv or args.png or args.show:
            print("ERROR: --mod/--csv/--png/--show brauchen --wave.", file=sys.stderr)
            sys.exit(2)
        run_shell()
        return

    settings = Settings()
    kind = args.wave
    params = _wave_params(args, settings)
    settings.set(kind, params)
    mod = _mod_params(args) if args.mod else None

    try:
        print("\n".join(waveform_report(kind, params)))
        base = plot_series(kind, params)
    except NonPositiveFrequencyError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    modulated = None
    if mod is not None:
        print()
        print("\n".join(modulation_report(kind, params, mod)))
        modulated = modulated_series(kind, params, mod, PLOT_SAMPLES)

    if args.verbose:
        print(f"Basis:     {summary(base)}", file=sys.stderr)
        if modulated is not None:
            print(f"Moduliert: {summary(modulated)}", file=sys.stderr)

    if args.csv:
        out = modulated if modulated is not None else base
        try:
            write_csv(Path(args.csv), out)
            print(f"Wrote CSV: {args.csv} (N={len(out)})")
        except FileExistsError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            sys.exit(2)

    if not (args.png or args.show):
        return

    viewer = Viewer(base, modulated, title=kind, debug_keys=args.debug_keys)
    # Wichtig: starke Referenz, sonst werden Key-Callbacks manchmal "komisch"
    viewer.fig._viewer_ref = viewer  # type: ignore[attr-defined]

    import matplotlib.pyplot as plt

    if args.png:
        try:
            Path(args.png).parent.mkdir(parents=True, exist_ok=True)
            plt.savefig(args.png, dpi=150)
            print(f"Wrote PNG: {args.png}")
        except Exception as e:
            print(f"ERROR: Konnte PNG nicht schreiben: {e}", file=sys.stderr)
            sys.exit(2)

    if args.show:
        plt.show()
