"""
control_panel.py

Панель керування покроковим інспектором:
    - вибір 2D-функції з реєстру;
    - стартова точка x0 = (x1, x2);
    - початковий крок λ0;
    - кнопки: Почати, Крок, До кінця, Вихід.

Видає назовні:
    - сигнал resetRequested(SteppingConfig)
    - сигнал stepRequested()
    - сигнал runToEndRequested()
    - сигнал exitRequested()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGroupBox,
    QComboBox,
    QLabel,
    QPushButton,
    QDoubleSpinBox,
)

from ascent.functions import functions_of_dim
from .styles import MARGIN, SPACING, ROLE_SECONDARY, set_role


# ---------------------------------------------------------------------------
# Конфігурація покрокового запуску
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SteppingConfig:
    function_key: str
    x0: Tuple[float, float]
    step_size: float


# ---------------------------------------------------------------------------
# Віджет панелі керування
# ---------------------------------------------------------------------------

class ControlPanelWidget(QWidget):
    """
    Ліва панель керування.

    Сигнали:
        resetRequested(SteppingConfig) – натиснуто "Почати"
        stepRequested()                – натиснуто "Крок"
        runToEndRequested()            – натиснуто "До кінця"
        exitRequested()                – натиснуто "Вихід"
    """

    resetRequested = pyqtSignal(SteppingConfig)
    stepRequested = pyqtSignal()
    runToEndRequested = pyqtSignal()
    exitRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._function_keys: List[str] = list(functions_of_dim(2))
        self._build_ui()
        self._connect_signals()
        self._on_function_changed(self.combo_function.currentIndex())
        self.set_stepping_enabled(False)

    # ------------------------------------------------------------------
    # Побудова UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.setObjectName("controlPanel")

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        main_layout.setSpacing(SPACING)

        # Блок 1. Цільова функція та стартова точка
        self.problem_group = QGroupBox("Цільова функція та старт", self)

        problem_layout = QVBoxLayout(self.problem_group)
        problem_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        problem_layout.setSpacing(SPACING)

        lbl_func = QLabel("Функція:", self.problem_group)
        lbl_func.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.combo_function = QComboBox(self.problem_group)
        functions = functions_of_dim(2)
        self.combo_function.addItems([functions[key].name for key in self._function_keys])

        x_row = QHBoxLayout()
        x_row.setSpacing(SPACING)

        self.input_x1 = QDoubleSpinBox(self.problem_group)
        self.input_x2 = QDoubleSpinBox(self.problem_group)
        for spin in (self.input_x1, self.input_x2):
            spin.setRange(-1e3, 1e3)
            spin.setDecimals(4)
            spin.setSingleStep(0.1)

        x_row.addWidget(QLabel("x₁:", self.problem_group))
        x_row.addWidget(self.input_x1)
        x_row.addSpacing(SPACING)
        x_row.addWidget(QLabel("x₂:", self.problem_group))
        x_row.addWidget(self.input_x2)

        problem_layout.addWidget(lbl_func)
        problem_layout.addWidget(self.combo_function)
        problem_layout.addLayout(x_row)

        main_layout.addWidget(self.problem_group)

        # Блок 2. Крок
        self.params_group = QGroupBox("Початковий крок", self)

        params_layout = QHBoxLayout(self.params_group)
        params_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        params_layout.setSpacing(SPACING)

        self.input_step = QDoubleSpinBox(self.params_group)
        # нуль та від'ємні значення ядро відхиляє, тому межа знизу додатна
        self.input_step.setRange(1e-6, 1e3)
        self.input_step.setDecimals(6)

        params_layout.addWidget(QLabel("λ₀:", self.params_group))
        params_layout.addWidget(self.input_step)
        params_layout.addStretch(1)

        main_layout.addWidget(self.params_group)

        # Кнопки
        buttons_row = QHBoxLayout()
        buttons_row.setContentsMargins(0, SPACING, 0, 0)
        buttons_row.setSpacing(SPACING)

        self.button_reset = QPushButton("Почати", self)
        self.button_step = QPushButton("Крок", self)
        self.button_run = QPushButton("До кінця", self)
        self.button_exit = QPushButton("Вихід", self)

        set_role(self.button_run, ROLE_SECONDARY)
        set_role(self.button_exit, ROLE_SECONDARY)

        buttons_row.addWidget(self.button_reset)
        buttons_row.addWidget(self.button_step)
        buttons_row.addWidget(self.button_run)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.button_exit)

        main_layout.addLayout(buttons_row)
        main_layout.addStretch(1)

    # ------------------------------------------------------------------
    # Сигнали
    # ------------------------------------------------------------------

    def _connect_signals(self) -> None:
        self.combo_function.currentIndexChanged.connect(self._on_function_changed)
        self.button_reset.clicked.connect(self._on_reset_clicked)
        self.button_step.clicked.connect(self.stepRequested.emit)
        self.button_run.clicked.connect(self.runToEndRequested.emit)
        self.button_exit.clicked.connect(self.exitRequested.emit)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def selected_function_key(self) -> str:
        return self._function_keys[self.combo_function.currentIndex()]

    def build_config(self) -> SteppingConfig:
        """Зібрати SteppingConfig з поточного стану контролів."""
        return SteppingConfig(
            function_key=self.selected_function_key(),
            x0=(float(self.input_x1.value()), float(self.input_x2.value())),
            step_size=float(self.input_step.value()),
        )

    def set_stepping_enabled(self, enabled: bool) -> None:
        """Кнопки "Крок" / "До кінця" активні лише поки процес не завершено."""
        self.button_step.setEnabled(enabled)
        self.button_run.setEnabled(enabled)

    # ------------------------------------------------------------------
    # Обробники
    # ------------------------------------------------------------------

    def _on_function_changed(self, index: int) -> None:
        """Підставити рекомендовані старт і крок для обраної функції."""
        if index < 0:
            return
        tf = functions_of_dim(2)[self._function_keys[index]]
        self.input_x1.setValue(tf.start[0])
        self.input_x2.setValue(tf.start[1])
        self.input_step.setValue(tf.step_size)

    def _on_reset_clicked(self) -> None:
        self.resetRequested.emit(self.build_config())
