"""
table_view.py

Таблиця ітерацій градієнтного підйому.

Функціонал:
    - відображає послідовність IterationState;
    - колонки:
        k, λ, x1, x2, f(x), ||∇f||, рішення;
    - хелпери:
        clear_table()
        add_state(state)
        populate(states)
        select_row(k)
    - сигнал stateSelected(int) при виборі рядка користувачем.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from ascent.iteration import IterationState
from .styles import MARGIN, SPACING, ROLE_MUTED, set_role

_DECISION_LABELS = {
    "test": "λ×2 → test",
    "next": "λ → next",
    "shrink": "λ/2",
}


class IterationsTableWidget(QWidget):
    """
    Обгортка над QTableWidget для траси IterationState.

    Колонки:
        0: k        – номер ітерації
        1: λ        – крок
        2: x1       – перша координата current
        3: x2       – друга координата current
        4: f(x)     – значення цільової функції в current
        5: ||∇f||   – норма градієнта
        6: рішення  – яке правило переходу буде застосовано
    """

    stateSelected = pyqtSignal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._filling = False
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        header_row = QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)
        header_row.setSpacing(SPACING)

        title = QLabel("Ітерації підйому", self)
        subtitle = QLabel("k, крок λ, x₁, x₂, f(x), ||∇f|| та рішення", self)
        subtitle.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        set_role(subtitle, ROLE_MUTED)

        header_row.addWidget(title)
        header_row.addStretch(1)
        header_row.addWidget(subtitle)
        root.addLayout(header_row)

        self.table = QTableWidget(self)
        self.table.setColumnCount(7)
        self.table.setHorizontalHeaderLabels(["k", "λ", "x₁", "x₂", "f(x)", "||∇f||", "рішення"])
        self.table.verticalHeader().hide()
        self.table.setAlternatingRowColors(True)

        h_header = self.table.horizontalHeader()
        h_header.setHighlightSections(False)
        h_header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        for col in (0, 1, 6):
            h_header.setSectionResizeMode(col, QHeaderView.ResizeMode.ResizeToContents)

        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)
        self.table.currentCellChanged.connect(self._on_current_cell_changed)

        root.addWidget(self.table)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def clear_table(self) -> None:
        self.table.setRowCount(0)

    def add_state(self, state: IterationState) -> None:
        """Додати рядок для одного IterationState."""
        row = self.table.rowCount()
        self.table.insertRow(row)

        def _item(text: Any, align: Qt.AlignmentFlag) -> QTableWidgetItem:
            it = QTableWidgetItem(str(text))
            it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)
            it.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
            return it

        x = state.current.vector
        center = Qt.AlignmentFlag.AlignHCenter
        right = Qt.AlignmentFlag.AlignRight

        self.table.setItem(row, 0, _item(state.index, center))
        self.table.setItem(row, 1, _item(f"{state.step_size:.3e}", center))
        self.table.setItem(row, 2, _item(f"{x[0]:.6f}", right))
        self.table.setItem(row, 3, _item(f"{x[1]:.6f}", right))
        self.table.setItem(row, 4, _item(f"{state.current.value:.8f}", right))
        self.table.setItem(row, 5, _item(f"{state.grad_norm:.3e}", right))
        decision = "кінець" if state.done() else _DECISION_LABELS[state.decision()]
        self.table.setItem(row, 6, _item(decision, center))

    def populate(self, states: Iterable[IterationState]) -> None:
        """Перебудувати таблицю; зміна поточної клітинки тут не є вибором користувача."""
        self._filling = True
        try:
            self.clear_table()
            for state in states:
                self.add_state(state)
        finally:
            self._filling = False

    def select_row(self, k: int) -> None:
        """Виділити рядок k без повторного сигналу stateSelected."""
        self._filling = True
        try:
            self.table.selectRow(k)
        finally:
            self._filling = False

    def _on_current_cell_changed(self, row: int, _col: int, _prev_row: int, _prev_col: int) -> None:
        if not self._filling and row >= 0:
            self.stateSelected.emit(row)
