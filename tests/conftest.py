"""
Pytest configuration and shared fixtures for the gradient ascent tests.
"""

import os
import sys
from pathlib import Path

# Add project root to path so the ascent packages import without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from ascent.vector import Vector


class CallCounter:
    """Objective wrapper that records every evaluated vector."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


@pytest.fixture
def sphere():
    """f(x, y) = x^2 + y^2 with analytic gradient (2x, 2y)."""
    return lambda v: v[0] ** 2 + v[1] ** 2


@pytest.fixture
def concave_parabola():
    """1-D objective -(x - 1)^2 with its maximum at x = 1."""
    return lambda v: -(v[0] - 1.0) ** 2


@pytest.fixture
def counter():
    """Factory wrapping an objective into a CallCounter."""
    return CallCounter


@pytest.fixture
def start_f():
    return Vector.of(0.2, -2.1)


@pytest.fixture
def start_g():
    return Vector.of(0.0, 0.0, 0.0)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests that need Qt."""
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(sys.argv)
    yield app
