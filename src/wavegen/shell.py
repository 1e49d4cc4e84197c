from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable

from .config import Settings, clamp_duty
from .display import MOD_NAMES, NAMES, modulation_report, settings_menu, waveform_report
from .phase import PhaseParseError, parse_phase, scan_float
from .series import NonPositiveFrequencyError
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

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_INTEGER = re.compile(r"[+-]?\d+")

PHASE_HINT = "Phase eingeben (rad). Beispiele: 1.57    3.14/2    90deg    d:90    r:1.57\n"


def is_integer(text: str) -> bool:
    """Nur Ziffern mit optionalem Vorzeichen, z.B. "3" oder "-2"."""

    return _INTEGER.fullmatch(text) is not None


def main_menu() -> list[str]:
    lines = ["", "----------- Wellenform-Generator -----------"]
    lines += [f"|   {i}. {NAMES[k]}" for i, k in enumerate(KINDS, start=1)]
    lines.append("-" * 44)
    return lines


def modulation_menu() -> list[str]:
    lines = ["", "----------- Modulation -----------"]
    lines += [f"| {i}. {MOD_NAMES[m]}" for i, m in enumerate(MODULATIONS, start=1)]
    lines.append("-" * 34)
    return lines


def select_menu_item(read: Reader, write: Writer, items: int) -> int:
    while True:
        s = read(f"\nWellenform wählen (1-{items}): ").strip()
        if not is_integer(s):
            write("Bitte eine ganze Zahl eingeben!")
            continue
        choice = int(s)
        if 1 <= choice <= items:
            return choice
        write("Ungültiger Menüpunkt!")


def ask_float(read: Reader, prompt: str, default: float) -> float:
    """Zahl einlesen; bei unlesbarer Eingabe gilt ``default``."""

    value = scan_float(read(prompt))
    return default if value is None else value


def ask_phase(read: Reader, write: Writer) -> float:
    try:
        return parse_phase(read(PHASE_HINT))
    except PhaseParseError:
        write("Phase nicht lesbar, setze 0.")
        return 0.0


def configure(kind: str, current: WaveParams, read: Reader, write: Writer) -> WaveParams:
    """Fragt die Parameter einer Wellenform ab und liefert den neuen Record."""

    p = current

    def show() -> None:
        write("\n".join(["", *settings_menu(kind, p)]))

    if kind == SAWTOOTH:
        p = replace(p, jump_amplitude=ask_float(read, "\nSprungamplitude eingeben (V): ", 1.0))
        show()
        p = replace(p, slope=ask_float(read, "\nSteigung eingeben: ", 1.0))
        show()
        return p

    p = replace(p, frequency=ask_float(read, "\nFrequenz eingeben (Hz): ", 1.0))
    show()
    p = replace(p, amplitude=ask_float(read, "\nAmplitude eingeben (V): ", 1.0))
    show()

    if kind == SINE:
        p = replace(p, phase=ask_phase(read, write))
        show()
    elif kind == SQUARE:
        duty = ask_float(read, "\nDuty Cycle eingeben (0..1): ", 0.5)
        p = replace(p, duty_cycle=clamp_duty(duty))
        show()
    return p


def ask_modulation(mode: str, read: Reader) -> ModParams:
    if mode == AM:
        return AMParams(
            carrier_amplitude=ask_float(read, "Trägeramplitude Ac: ", 1.0),
            carrier_frequency=ask_float(read, "Trägerfrequenz fc (Hz): ", 1.0),
            index=ask_float(read, "Modulationsindex m (0..1 empfohlen): ", 0.5),
        )
    if mode == FM:
        return FMParams(
            carrier_amplitude=ask_float(read, "Trägeramplitude Ac: ", 1.0),
            carrier_frequency=ask_float(read, "Trägerfrequenz fc (Hz): ", 1.0),
            index=ask_float(read, "Modulationsindex beta (rad, bestimmt den Hub): ", 1.0),
        )
    return PWMParams(
        carrier_frequency=ask_float(read, "PWM-Trägerfrequenz fpwm (Hz): ", 50.0),
        output_amplitude=ask_float(read, "Ausgangsamplitude Ac (High-Pegel): ", 1.0),
    )


def run_modulation(kind: str, params: WaveParams, read: Reader, write: Writer) -> None:
    answer = read("\nModulation auf diese Wellenform anwenden? (y/n): ").strip()
    if answer[:1] not in ("y", "Y"):
        return

    write("\n".join(modulation_menu()))
    s = read(f"\nModulationsart wählen (1-{len(MODULATIONS)}): ").strip()
    if not is_integer(s):
        write("Ungültige Eingabe")
        return
    choice = int(s)
    if not 1 <= choice <= len(MODULATIONS):
        write("Ungültige Modulationsauswahl")
        return

    mode = MODULATIONS[choice - 1]
    write(f"\n=== {mode.upper()} ===")
    mod = ask_modulation(mode, read)
    write("\n".join(["", *modulation_report(kind, params, mod)]))


def back_to_main(read: Reader) -> bool:
    """True = zurück ins Hauptmenü, False = beenden."""

    while True:
        s = read("\n'b' für Hauptmenü, 'q' zum Beenden: ").strip()
        if s[:1] in ("b", "B"):
            return True
        if s[:1] in ("q", "Q"):
            return False


def run_shell(
    read: Reader = input,
    write: Writer = print,
    settings: Settings | None = None,
) -> Settings:
    """Interaktive Menüschleife. Einstellungen bleiben bis zum Beenden erhalten."""

    settings = settings if settings is not None else Settings()

    try:
        while True:
            write("\n".join(main_menu()))
            kind = KINDS[select_menu_item(read, write, len(KINDS)) - 1]
            write(f"\n>> {NAMES[kind]}")

            params = configure(kind, settings.get(kind), read, write)
            settings.set(kind, params)

            try:
                report = waveform_report(kind, params)
            except NonPositiveFrequencyError:
                write("\nFrequenz muss > 0 sein!")
            else:
                write("\n".join(["", *report]))
                run_modulation(kind, params, read, write)

            if not back_to_main(read):
                break
    except EOFError:
        # Eingabe zu Ende (Ctrl-D / Pipe leer)
        write("")

    return settings
