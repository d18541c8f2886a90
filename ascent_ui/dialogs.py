"""
dialogs.py

Діалоги інспектора: повідомлення про помилку та довідка з правилами
адаптації кроку.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from ascent.iteration import GRAD_LIMIT, MAX_ITERATIONS
from .styles import MARGIN, SPACING, ROLE_MUTED, set_role

_RULES_HTML = f"""
<p>Для поточної точки x з кроком λ обчислюються
x<sub>next</sub> = x + λ·∇f(x) і x<sub>test</sub> = x + 2λ·∇f(x).</p>
<ol>
    <li>f(x<sub>test</sub>) &gt; f(x<sub>next</sub>) &gt; f(x) &rarr; λ×2, перехід у x<sub>test</sub>;</li>
    <li>f(x<sub>next</sub>) &gt; f(x) &rarr; λ без змін, перехід у x<sub>next</sub>;</li>
    <li>інакше &rarr; λ/2, x лишається.</li>
</ol>
<p>Градієнт рахується правою різницею. Підйом зупиняється, коли
||∇f(x)|| &lt; {GRAD_LIMIT:g} або після {MAX_ITERATIONS} ітерацій.</p>
"""


def show_error(parent: Optional[QWidget], message: str, title: str = "Помилка") -> None:
    QMessageBox.critical(parent, title, message)


def show_about(parent: Optional[QWidget]) -> None:
    AboutDialog(parent).exec()


class AboutDialog(QDialog):
    """Довідка: що показує інспектор і за якими правилами змінюється крок."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Про програму")
        self.setMinimumWidth(520)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        heading = QLabel("<h3>Градієнтний підйом з адаптивним кроком</h3>", self)
        note = QLabel(
            "Кнопка \"Крок\" виконує один перехід; повзунок і таблиця "
            "дозволяють повернутися до будь-якої обчисленої ітерації.",
            self,
        )
        note.setWordWrap(True)
        set_role(note, ROLE_MUTED)

        rules = QLabel(_RULES_HTML, self)
        rules.setWordWrap(True)

        close = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, parent=self)
        close.rejected.connect(self.reject)

        for widget in (heading, note, rules, close):
            layout.addWidget(widget)
