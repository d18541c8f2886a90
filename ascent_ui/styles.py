"""
styles.py

Оформлення інспектора: палітра, таблиця стилів Qt і кольори графіків.

Таблиця стилів описана як словник {селектор: {властивість: значення}}
і збирається в один рядок для QApplication. Віджети з особливим виглядом
(другорядна кнопка, приглушений підпис, картка з графіками) позначаються
динамічною властивістю "role", на яку посилаються селектори.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from matplotlib.colors import LinearSegmentedColormap
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import QApplication, QWidget

MARGIN = 12
SPACING = 10
RADIUS = 6

FONT_FAMILY = "Montserrat"
FONT_SIZE = 10

ROLE_SECONDARY = "secondary"
ROLE_MUTED = "muted"
ROLE_CARD = "card"


@dataclass(frozen=True)
class AppPalette:
    background: str = "#101318"
    surface: str = "#181c22"
    raised: str = "#20262e"
    line: str = "#2a3039"

    text: str = "#e7ebf2"
    muted: str = "#9aa4b5"
    ink: str = "#101318"  # текст на акцентному фоні

    accent: str = "#f2b84b"
    point_next: str = "#5fb3f7"
    point_test: str = "#c678dd"


PALETTE = AppPalette()

# Нейтральна шкала від фону до тексту, щоб кольорові маркери
# current / next / test не зливалися з картою.
HEATMAP_CMAP = LinearSegmentedColormap.from_list(
    "ascent_heatmap",
    [PALETTE.background, PALETTE.line, PALETTE.muted, PALETTE.text],
)

# ключ точки стану -> (колір, маркер matplotlib, розмір)
POINT_MARKERS = {
    "current": (PALETTE.accent, "o", 60),
    "next": (PALETTE.point_next, "^", 50),
    "test": (PALETTE.point_test, "s", 40),
}

Rules = Dict[str, Dict[str, str]]


def _role(selector: str, role: str) -> str:
    return f'{selector}[role="{role}"]'


def stylesheet_rules(p: AppPalette = PALETTE) -> Rules:
    frame = f"1px solid {p.line}"
    radius = f"{RADIUS}px"
    return {
        "QWidget": {
            "background-color": p.background,
            "color": p.text,
            "font-family": f'"{FONT_FAMILY}"',
            "font-size": f"{FONT_SIZE}pt",
        },
        _role("QWidget", ROLE_CARD): {
            "background-color": p.surface,
            "border": frame,
            "border-radius": radius,
        },
        _role("QLabel", ROLE_MUTED): {"color": p.muted},
        "QGroupBox": {
            "background-color": p.surface,
            "border": frame,
            "border-radius": radius,
            "margin-top": "14px",
        },
        "QGroupBox::title": {
            "subcontrol-origin": "margin",
            "left": "10px",
            "color": p.accent,
            "font-weight": "600",
        },
        "QPushButton": {
            "background-color": p.accent,
            "color": p.ink,
            "border": f"1px solid {p.accent}",
            "border-radius": radius,
            "padding": "7px 14px",
            "font-weight": "600",
        },
        _role("QPushButton", ROLE_SECONDARY): {
            "background-color": p.raised,
            "color": p.text,
            "border": frame,
            "font-weight": "normal",
        },
        _role("QPushButton", ROLE_SECONDARY) + ":hover": {"border-color": p.accent},
        # після правила ролі, щоб вимкнена кнопка завжди виглядала однаково
        "QPushButton:disabled": {
            "background-color": p.raised,
            "color": p.muted,
            "border-color": p.line,
        },
        "QDoubleSpinBox, QComboBox": {
            "background-color": p.surface,
            "border": frame,
            "border-radius": radius,
            "padding": "5px 8px",
        },
        "QDoubleSpinBox:focus, QComboBox:focus": {"border-color": p.accent},
        "QSlider::groove:horizontal": {
            "height": "4px",
            "background": p.line,
            "border-radius": "2px",
        },
        "QSlider::handle:horizontal": {
            "background": p.accent,
            "width": "14px",
            "margin": "-6px 0",
            "border-radius": "7px",
        },
        "QTableWidget": {
            "background-color": p.surface,
            "alternate-background-color": p.raised,
            "gridline-color": p.line,
            "border": frame,
            "selection-background-color": p.accent,
            "selection-color": p.ink,
        },
        "QHeaderView::section": {
            "background-color": p.raised,
            "border": "none",
            "padding": "5px",
            "font-weight": "600",
        },
        "QMenuBar::item:selected, QMenu::item:selected": {
            "background-color": p.accent,
            "color": p.ink,
        },
        "QStatusBar": {"color": p.muted, "border-top": frame},
    }


def build_app_stylesheet(p: AppPalette = PALETTE) -> str:
    blocks = []
    for selector, props in stylesheet_rules(p).items():
        body = " ".join(f"{name}: {value};" for name, value in props.items())
        blocks.append(f"{selector} {{ {body} }}")
    return "\n".join(blocks)


def set_role(widget: QWidget, role: str) -> None:
    """Позначити віджет роллю з таблиці стилів (ROLE_*)."""
    widget.setProperty("role", role)
    # без цього атрибута фон і рамка QWidget-нащадків не малюються
    widget.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)


def apply_app_style(app: QApplication) -> None:
    palette = app.palette()
    for role, color in (
        (QPalette.ColorRole.Window, PALETTE.background),
        (QPalette.ColorRole.Base, PALETTE.surface),
        (QPalette.ColorRole.AlternateBase, PALETTE.raised),
        (QPalette.ColorRole.Text, PALETTE.text),
        (QPalette.ColorRole.Highlight, PALETTE.accent),
        (QPalette.ColorRole.HighlightedText, PALETTE.ink),
    ):
        palette.setColor(role, QColor(color))

    app.setPalette(palette)
    app.setFont(QFont(FONT_FAMILY, FONT_SIZE))
    app.setStyleSheet(build_app_stylesheet())
