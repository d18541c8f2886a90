"""
Головне вікно покрокового інспектора:
    - зліва: панель керування;
    - справа: теплова карта / f(k) над таблицею ітерацій.
"""

from __future__ import annotations
from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStatusBar,
    QSplitter,
)

from ascent.iteration import IterationState
from ascent.vector import Objective
from .control_panel import ControlPanelWidget, SteppingConfig
from .table_view import IterationsTableWidget
from .heatmap_view import HeatmapView
from .dialogs import show_about
from .styles import MARGIN, SPACING


class MainWindow(QMainWindow):
    """
    Головне вікно. Пересилає наміри користувача контролеру через сигнали
    і показує трасу, яку контролер передає в show_states().
    """

    resetRequested = pyqtSignal(SteppingConfig)
    stepRequested = pyqtSignal()
    runToEndRequested = pyqtSignal()
    iterationSelected = pyqtSignal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.setWindowTitle("Градієнтний підйом")
        self.resize(1280, 820)

        self._create_actions()
        self._create_menu()
        self._create_status_bar()
        self._create_content()
        self._connect_signals()

    def _create_actions(self) -> None:
        self.action_exit = QAction("Вихід", self, shortcut="Ctrl+Q")
        self.action_about = QAction("Про програму", self)

    def _create_menu(self) -> None:
        menu = self.menuBar()
        menu.addMenu("Файл").addAction(self.action_exit)
        menu.addMenu("Довідка").addAction(self.action_about)

    def _create_status_bar(self) -> None:
        status = QStatusBar(self)
        self.setStatusBar(status)
        status.showMessage("Оберіть функцію та натисніть \"Почати\"")

    def _create_content(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        left = QWidget(self)
        left.setMinimumWidth(340)
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)
        self.control_panel = ControlPanelWidget(left)
        left_layout.addWidget(self.control_panel)
        left_layout.addStretch()

        splitter = QSplitter(Qt.Orientation.Vertical, self)
        splitter.setHandleWidth(6)
        self.heatmap_view = HeatmapView(splitter)
        self.iterations_table = IterationsTableWidget(splitter)
        splitter.addWidget(self.heatmap_view)
        splitter.addWidget(self.iterations_table)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        root.addWidget(left, stretch=2)
        root.addWidget(splitter, stretch=5)

    def _connect_signals(self) -> None:
        self.action_exit.triggered.connect(self.close)
        self.action_about.triggered.connect(lambda: show_about(self))

        self.control_panel.exitRequested.connect(self.close)
        self.control_panel.resetRequested.connect(self.resetRequested.emit)
        self.control_panel.stepRequested.connect(self.stepRequested.emit)
        self.control_panel.runToEndRequested.connect(self.runToEndRequested.emit)

        self.heatmap_view.iterationChanged.connect(self.iterationSelected.emit)
        self.iterations_table.stateSelected.connect(self.iterationSelected.emit)

    # ------------------------------------------------------------------
    # PUBLIC API (для app.py)
    # ------------------------------------------------------------------
    def start_run(self, func: Objective) -> None:
        self.iterations_table.clear_table()
        self.heatmap_view.reset(func)

    def show_states(self, states: List[IterationState], selected: int) -> None:
        """Показати трасу states і виділити ітерацію selected."""
        if self.iterations_table.table.rowCount() != len(states):
            self.iterations_table.populate(states)
        self.iterations_table.select_row(selected)
        self.heatmap_view.set_states(states, selected)
        self.control_panel.set_stepping_enabled(bool(states) and not states[-1].done())

    def clear_results(self) -> None:
        """Прибрати показану трасу, наприклад після некоректних параметрів запуску."""
        self.iterations_table.clear_table()
        self.heatmap_view.show_placeholder()
        self.control_panel.set_stepping_enabled(False)
