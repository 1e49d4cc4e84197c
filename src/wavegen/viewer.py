from __future__ import annotations

import matplotlib.pyplot as plt

from .stats import mean, rms, summary
from .types import SampleSeries


class Viewer:
    VIEW_BOTH = 1
    VIEW_BASE = 2
    VIEW_MOD = 3

    def __init__(
        self,
        base: SampleSeries,
        modulated: SampleSeries | None = None,
        title: str = "",
        debug_keys: bool = False,
    ) -> None:
        self.base = base
        self.modulated = modulated
        self.title = title
        self.debug_keys = debug_keys
        self.view = self.VIEW_BOTH if modulated is not None else self.VIEW_BASE

        print(summary(base))
        if modulated is not None:
            print(summary(modulated))

        self.fig = plt.figure()
        self.fig.canvas.mpl_connect("key_press_event", self.on_key)

        # Zwei Achsen – werden je nach Ansicht nur umpositioniert / versteckt
        self.ax_base = self.fig.add_axes([0.08, 0.55, 0.90, 0.37])
        self.ax_mod = self.fig.add_axes([0.08, 0.10, 0.90, 0.37])

        self._draw(self.ax_base, base, "Basiswelle")
        if modulated is not None:
            self._draw(self.ax_mod, modulated, "Moduliertes Signal")

        self.set_view(self.view)

    def on_key(self, event) -> None:
        k = (event.key or "").lower()
        if self.debug_keys:
            print("key:", repr(event.key))

        if self.modulated is None:
            if k in ("q", "escape"):
                plt.close(self.fig)
            return

        if k in ("n", "right"):
            self.set_view(1 + (self.view % 3))
        elif k in ("p", "left"):
            self.set_view(3 if self.view == 1 else (self.view - 1))
        elif k in ("1", "kp1"):
            self.set_view(self.VIEW_BOTH)
        elif k in ("2", "kp2"):
            self.set_view(self.VIEW_BASE)
        elif k in ("3", "kp3"):
            self.set_view(self.VIEW_MOD)
        elif k in ("q", "escape"):
            plt.close(self.fig)

    def set_view(self, v: int) -> None:
        if self.modulated is None:
            v = self.VIEW_BASE
        self.view = v

        if v == self.VIEW_BOTH:
            self.ax_base.set_visible(True)
            self.ax_mod.set_visible(True)
            self.ax_base.set_position([0.08, 0.55, 0.90, 0.37])
            self.ax_mod.set_position([0.08, 0.10, 0.90, 0.37])
            label = "Ansicht 1/3: Basis + moduliert  (1/2/3, n/p, q)"
        elif v == self.VIEW_BASE:
            self.ax_base.set_visible(True)
            self.ax_mod.set_visible(False)
            self.ax_base.set_position([0.08, 0.10, 0.90, 0.82])
            label = "Ansicht 2/3: Basiswelle  (1/2/3, n/p, q)"
        else:
            self.ax_mod.set_visible(True)
            self.ax_base.set_visible(False)
            self.ax_mod.set_position([0.08, 0.10, 0.90, 0.82])
            label = "Ansicht 3/3: Moduliertes Signal  (1/2/3, n/p, q)"

        if self.modulated is None:
            label = "Basiswelle  (q)"
        self.fig.suptitle(f"{self.title}: {label}" if self.title else label)

        # TkAgg ist manchmal erst mit draw() wirklich glücklich:
        self.fig.canvas.draw()
        self.fig.canvas.flush_events()

    def _draw(self, ax, series: SampleSeries, title: str) -> None:
        ax.clear()
        ax.plot(list(series.times), list(series.values))
        ax.axhline(0.0, linewidth=0.5, color="gray")
        ax.set_title(title)
        ax.set_xlabel("t [s]")
        ax.set_ylabel("Amplitude [V]")
        ax.text(
            0.98,
            0.95,
            f"µ = {mean(series.values):.6g} V\nrms = {rms(series.values):.6g} V\nN = {len(series)}",
            transform=ax.transAxes,
            ha="right",
            va="top",
        )
