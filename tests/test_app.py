"""
GUI controller: stepping through a run and recovering from bad parameters.
"""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

import app as gui_app
from ascent_ui.control_panel import SteppingConfig
from ascent_ui.main_window import MainWindow


@pytest.fixture
def shown_errors(monkeypatch):
    """Record error dialogs instead of opening modal message boxes."""
    errors = []
    monkeypatch.setattr(
        gui_app,
        "show_error",
        lambda parent, message, title="Помилка": errors.append((title, message)),
    )
    return errors


@pytest.fixture
def controller(qapp, shown_errors):
    window = MainWindow()
    yield gui_app.SteppingController(window)
    window.close()


def test_step_then_run_to_end(controller):
    controller.on_reset_requested(SteppingConfig("f", (0.2, -2.1), 1.0))
    controller.on_step_requested()
    assert [s.index for s in controller.states] == [0, 1]

    controller.on_run_to_end_requested()
    window = controller.window
    assert controller.states[-1].done()
    assert controller.selected == len(controller.states) - 1
    assert window.iterations_table.table.rowCount() == len(controller.states)
    assert not window.control_panel.button_step.isEnabled()


def test_selecting_iteration_keeps_trace(controller):
    controller.on_reset_requested(SteppingConfig("f", (0.2, -2.1), 1.0))
    controller.on_run_to_end_requested()
    count = len(controller.states)

    controller.on_iteration_selected(0)
    assert controller.selected == 0
    assert len(controller.states) == count


def test_failed_reset_clears_previous_trace(controller, shown_errors):
    controller.on_reset_requested(SteppingConfig("f", (0.2, -2.1), 1.0))
    controller.on_step_requested()

    controller.on_reset_requested(SteppingConfig("f", (0.2, -2.1), 0.0))

    assert [title for title, _ in shown_errors] == ["Некоректні параметри запуску"]
    assert controller.states == []
    assert controller.window.iterations_table.table.rowCount() == 0
    assert not controller.window.control_panel.button_step.isEnabled()

    # stepping without a run is ignored
    controller.on_step_requested()
    assert controller.states == []
