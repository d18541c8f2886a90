"""
Віджет з графіками покрокового підйому у темному стилі.

Показує один графік за раз:
    - теплова карта f(x1, x2) з траєкторією та точками current / next / test
      обраної ітерації;
    - графік f(k).

Під графіками — повзунок для перегляду вже обчислених ітерацій
(сигнал iterationChanged(int)).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QStackedWidget,
    QComboBox,
)

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ascent.functions import HEATMAP_RESOLUTION, HEATMAP_SIZE, sample_grid
from ascent.iteration import IterationState
from ascent.vector import Objective
from .styles import MARGIN, SPACING, HEATMAP_CMAP, PALETTE, POINT_MARKERS, ROLE_CARD, set_role

_CANVAS_BG = PALETTE.raised
_TEXT = PALETTE.text
_MUTED = PALETTE.muted


class PlotPage:
    def __init__(self, figure: Figure, canvas: FigureCanvas, axes):
        self.figure = figure
        self.canvas = canvas
        self.axes = axes


class HeatmapView(QWidget):
    iterationChanged = pyqtSignal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("heatmapView")
        self.pages_order = ["heatmap", "fk"]
        self.pages: dict[str, PlotPage] = {}

        self._func: Optional[Objective] = None
        self._grid: Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]] = None
        self._colorbar = None

        self._build_ui()

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        set_role(self, ROLE_CARD)

        nav = QHBoxLayout()
        nav.setSpacing(SPACING)
        nav.setContentsMargins(0, 0, 0, 0)
        nav.addWidget(QLabel("Графік:", self))

        self.combo_mode = QComboBox(self)
        self.combo_mode.addItems(["Теплова карта та точки", "Графік f(k)"])
        self.combo_mode.currentIndexChanged.connect(self._on_combo_changed)
        nav.addWidget(self.combo_mode, stretch=1)
        layout.addLayout(nav)

        self.stacked = QStackedWidget(self)
        layout.addWidget(self.stacked, stretch=1)

        slider_row = QHBoxLayout()
        slider_row.setSpacing(SPACING)
        self.label_iteration = QLabel("k = –", self)
        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setRange(0, 0)
        self.slider.setEnabled(False)
        self.slider.valueChanged.connect(self.iterationChanged.emit)
        slider_row.addWidget(self.label_iteration)
        slider_row.addWidget(self.slider, stretch=1)
        layout.addLayout(slider_row)

        for key in self.pages_order:
            figure = Figure(facecolor=_CANVAS_BG)
            ax = figure.add_subplot(111)
            canvas = FigureCanvas(figure)
            canvas.setStyleSheet("background-color: transparent;")
            self.pages[key] = PlotPage(figure, canvas, ax)
            self.stacked.addWidget(canvas)

        self.show_placeholder()

    def _on_combo_changed(self, index: int) -> None:
        self.stacked.setCurrentIndex(index)

    def _style_axes(self, ax) -> None:
        ax.set_facecolor(_CANVAS_BG)
        ax.tick_params(colors=_MUTED, labelsize=9)
        for spine in ax.spines.values():
            spine.set_color(PALETTE.line)
            spine.set_linewidth(0.8)
        ax.title.set_color(_TEXT)
        ax.xaxis.label.set_color(_TEXT)
        ax.yaxis.label.set_color(_TEXT)

    def _redraw(self, key: str) -> None:
        page = self.pages[key]
        page.figure.tight_layout()
        page.canvas.draw_idle()

    # ------------------------------------------------------------------
    # Сітка теплової карти
    # ------------------------------------------------------------------
    def _grid_covers(self, xs: np.ndarray, ys: np.ndarray) -> bool:
        if self._grid is None:
            return False
        gx, gy, _ = self._grid
        tick = gx[1] - gx[0] if gx.size > 1 else HEATMAP_SIZE
        return (
            xs.min() >= gx[0] and xs.max() <= gx[-1] + tick
            and ys.min() >= gy[0] and ys.max() <= gy[-1] + tick
        )

    def _ensure_grid(self, states: List[IterationState]) -> None:
        """Перерахувати сітку, якщо траєкторія вийшла за її межі."""
        pts = np.array([s.current.vector.tolist() for s in states], dtype=float)
        xs, ys = pts[:, 0], pts[:, 1]
        if self._grid_covers(xs, ys):
            return

        span = max(xs.max() - xs.min(), ys.max() - ys.min())
        size = max(HEATMAP_SIZE, 1.2 * span + 0.5)
        center = ((xs.max() + xs.min()) / 2.0, (ys.max() + ys.min()) / 2.0)
        self._grid = sample_grid(self._func, center, size, HEATMAP_RESOLUTION)

    # ------------------------------------------------------------------
    # Публічні методи
    # ------------------------------------------------------------------
    def reset(self, func: Objective) -> None:
        """Нова функція / новий старт: сітку буде обчислено заново."""
        self._func = func
        self._grid = None
        self.show_placeholder()

    def show_placeholder(self) -> None:
        messages = {
            "heatmap": "Теплова карта з'явиться після старту",
            "fk": "Графік f(k) з'явиться після старту",
        }
        for key, msg in messages.items():
            page = self.pages[key]
            page.figure.clf()
            page.axes = page.figure.add_subplot(111)
            self._style_axes(page.axes)
            page.axes.text(0.5, 0.5, msg, ha="center", va="center",
                           transform=page.axes.transAxes, color=_MUTED)
            page.canvas.draw_idle()
        self._colorbar = None

        self.slider.blockSignals(True)
        self.slider.setRange(0, 0)
        self.slider.blockSignals(False)
        self.slider.setEnabled(False)
        self.label_iteration.setText("k = –")

    def set_states(self, states: List[IterationState], selected: int) -> None:
        """Оновити обидва графіки для траси states з виділеною ітерацією selected."""
        if not states or self._func is None:
            self.show_placeholder()
            return

        selected = max(0, min(selected, len(states) - 1))

        self.slider.blockSignals(True)
        self.slider.setRange(0, len(states) - 1)
        self.slider.setValue(selected)
        self.slider.blockSignals(False)
        self.slider.setEnabled(len(states) > 1)
        self.label_iteration.setText(f"k = {states[selected].index}")

        self._plot_heatmap(states, selected)
        self._plot_fk(states, selected)

    def _plot_heatmap(self, states: List[IterationState], selected: int) -> None:
        self._ensure_grid(states)
        gx, gy, Z = self._grid
        tick = gx[1] - gx[0] if gx.size > 1 else HEATMAP_SIZE

        page = self.pages["heatmap"]
        page.figure.clf()
        ax = page.figure.add_subplot(111)
        page.axes = ax
        self._style_axes(ax)

        image = ax.imshow(
            Z,
            origin="lower",
            extent=(gx[0], gx[-1] + tick, gy[0], gy[-1] + tick),
            cmap=HEATMAP_CMAP,
            aspect="auto",
        )
        self._colorbar = page.figure.colorbar(image, ax=ax)
        self._colorbar.ax.tick_params(colors=_MUTED, labelsize=8)

        path = np.array([s.current.vector.tolist() for s in states[: selected + 1]], dtype=float)
        ax.plot(path[:, 0], path[:, 1], linestyle="-", linewidth=1.0,
                color=PALETTE.accent, alpha=0.7)

        state = states[selected]
        for key, point in (("current", state.current), ("next", state.next), ("test", state.test)):
            v = point.vector
            if not v.is_finite():
                continue
            color, marker, size = POINT_MARKERS[key]
            ax.scatter([v[0]], [v[1]], color=color, marker=marker, s=size,
                       zorder=6 if key == "current" else 5, label=key)

        ax.legend(loc="upper right", fontsize=8, facecolor=_CANVAS_BG, labelcolor=_TEXT)
        ax.set_xlabel("x₁")
        ax.set_ylabel("x₂")
        ax.set_title(f"Ітерація {state.index}: λ = {state.step_size:g}")

        self._redraw("heatmap")

    def _plot_fk(self, states: List[IterationState], selected: int) -> None:
        page = self.pages["fk"]
        page.figure.clf()
        ax = page.figure.add_subplot(111)
        page.axes = ax
        self._style_axes(ax)
        ax.grid(True, color=PALETTE.line, linestyle="--", linewidth=0.5, alpha=0.6)

        ks = [s.index for s in states]
        fs = [s.current.value for s in states]
        ax.plot(ks, fs, marker="o", linestyle="-", linewidth=1.5, markersize=4, color=PALETTE.point_next)
        ax.scatter([ks[selected]], [fs[selected]], color=PALETTE.accent, s=70, zorder=5)
        ax.set_xlabel("k (номер ітерації)")
        ax.set_ylabel("f(xₖ)")
        ax.set_title("Графік f(k)")

        self._redraw("fk")
