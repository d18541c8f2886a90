"""
app.py

Контролер GUI покрокового інспектора градієнтного підйому.

Зв'язує:
    - ascent_ui.MainWindow (PyQt6)
    - ascent.iteration.IterationState (функція переходу)
    - ascent.functions.FUNCTIONS

Функціонал:
    - "Почати": будує IterationState у стартовій точці (k = 0);
    - "Крок": застосовує один перехід IterationState.from_previous();
    - "До кінця": застосовує переходи, доки done() не стане True;
    - повзунок / таблиця: перегляд вже обчислених станів без перерахунку.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from ascent_ui.main_window import MainWindow
from ascent_ui.control_panel import SteppingConfig
from ascent_ui.styles import apply_app_style
from ascent_ui.dialogs import show_error

from ascent.errors import AscentError
from ascent.functions import get_function
from ascent.iteration import IterationState
from ascent.report import format_state, humanize_stop_reason
from ascent.vector import Vector

logger = logging.getLogger(__name__)


class SteppingController:
    """
    Тримає трасу станів поточного запуску.

    Схема:
        GUI --[SteppingConfig]--> Controller -- IterationState.at_point()
        GUI --stepRequested-----> Controller -- IterationState.from_previous()
        Controller -- show_states(states, selected) --> GUI
    """

    def __init__(self, window: MainWindow) -> None:
        self.window = window
        self.states: List[IterationState] = []
        self.selected = 0

        self.window.resetRequested.connect(self.on_reset_requested)
        self.window.stepRequested.connect(self.on_step_requested)
        self.window.runToEndRequested.connect(self.on_run_to_end_requested)
        self.window.iterationSelected.connect(self.on_iteration_selected)

    # ------------------------------------------------------------------
    # Обробники сигналів
    # ------------------------------------------------------------------

    def on_reset_requested(self, cfg: SteppingConfig) -> None:
        try:
            tf = get_function(cfg.function_key)
            state = IterationState.at_point(Vector(cfg.x0), tf.func, cfg.step_size, 0)
        except AscentError as exc:
            self._report_error("Некоректні параметри запуску", exc)
            # стара траса належить попереднім параметрам
            self.states = []
            self.selected = 0
            self.window.clear_results()
            return

        self.states = [state]
        self.selected = 0
        self.window.start_run(tf.func)
        self._refresh()

    def on_step_requested(self) -> None:
        if not self.states or self.states[-1].done():
            return
        try:
            self.states.append(self.states[-1].advance())
        except AscentError as exc:
            self._report_error("Помилка під час кроку", exc)
            return
        self.selected = len(self.states) - 1
        self._refresh()

    def on_run_to_end_requested(self) -> None:
        if not self.states:
            return
        try:
            while not self.states[-1].done():
                self.states.append(self.states[-1].advance())
        except AscentError as exc:
            self._report_error("Помилка під час підйому", exc)
        self.selected = len(self.states) - 1
        self._refresh()

    def on_iteration_selected(self, k: int) -> None:
        if 0 <= k < len(self.states) and k != self.selected:
            self.selected = k
            self._refresh()

    # ------------------------------------------------------------------
    # Хелпери
    # ------------------------------------------------------------------

    def _refresh(self) -> None:
        self.window.show_states(self.states, self.selected)
        state = self.states[self.selected]
        logger.debug("%s", format_state(state))

        msg = (
            f"k = {state.index}, λ = {state.step_size:g}, "
            f"f(x) = {state.current.value:.8f}, ||∇f|| = {state.grad_norm:.3e}"
        )
        last = self.states[-1]
        if last.done():
            msg += f" | завершено: {humanize_stop_reason(last.stop_reason())}"
        self.window.statusBar().showMessage(msg)

    def _report_error(self, title: str, exc: Exception) -> None:
        logger.error("%s: %s", title, exc)
        show_error(self.window, str(exc), title=title)
        self.window.statusBar().showMessage(f"Помилка: {exc}")


# ---------------------------------------------------------------------------
# Точка входу
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(argv if argv is not None else sys.argv)
    apply_app_style(app)

    window = MainWindow()
    _controller = SteppingController(window)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
