"""
Stylesheet rules and plot colours derived from the palette.
"""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from matplotlib.colors import to_hex

from ascent_ui.styles import (
    HEATMAP_CMAP,
    PALETTE,
    POINT_MARKERS,
    ROLE_CARD,
    ROLE_MUTED,
    ROLE_SECONDARY,
    build_app_stylesheet,
    set_role,
    stylesheet_rules,
)


def test_every_role_has_a_rule():
    selectors = " ".join(stylesheet_rules())
    for role in (ROLE_SECONDARY, ROLE_MUTED, ROLE_CARD):
        assert f'[role="{role}"]' in selectors


def test_stylesheet_has_one_block_per_rule():
    sheet = build_app_stylesheet()
    rules = stylesheet_rules()
    assert sheet.count("{") == sheet.count("}") == len(rules)
    assert f"color: {PALETTE.text};" in sheet


def test_disabled_look_wins_over_secondary_role():
    order = list(stylesheet_rules())
    assert order.index("QPushButton:disabled") > order.index('QPushButton[role="secondary"]')


def test_plot_colours_come_from_palette():
    assert to_hex(HEATMAP_CMAP(0.0)) == PALETTE.background
    assert to_hex(HEATMAP_CMAP(1.0)) == PALETTE.text
    colours = {colour for colour, _marker, _size in POINT_MARKERS.values()}
    assert colours == {PALETTE.accent, PALETTE.point_next, PALETTE.point_test}


def test_set_role_marks_widget(qapp):
    from PyQt6.QtWidgets import QLabel

    label = QLabel("λ")
    set_role(label, ROLE_MUTED)
    assert label.property("role") == ROLE_MUTED
