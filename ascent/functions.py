"""
functions.py

Цільові функції для максимізації та їх реєстр.
Формат:
    - усі функції приймають Vector і повертають float;
    - реалізовані:
        f(x, y)        = sin(x·y) + sin(x) + cos(y)
        g(x1, x2, x3)  = -(2x1² - 2x1x2 + x2² + x3² - 2x1 - 4x3)
        paraboloid     = -((x1 - 1)² + (x2 + 0.5)²)
    - є реєстр FUNCTIONS з рекомендованими стартовою точкою та кроком
      для GUI / консольного запуску;
    - sample_grid() обчислює значення 2D-функції на рівномірній сітці
      (для теплової карти).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError
from .vector import Objective, Vector


# ---------------------------------------------------------------------------
# Цільові функції
# ---------------------------------------------------------------------------

def f(x: Vector) -> float:
    """
    f(x, y) = sin(x·y) + sin(x) + cos(y)
    """
    x_val, y_val = x[0], x[1]
    return math.sin(x_val * y_val) + math.sin(x_val) + math.cos(y_val)


def g(x: Vector) -> float:
    """
    g(x1, x2, x3) = -(2x1² - 2x1x2 + x2² + x3² - 2x1 - 4x3)
    (увігнута квадратична форма, максимум у (1, 1, 2), g* = 5)
    """
    x1, x2, x3 = x[0], x[1], x[2]
    return -(2.0 * x1 ** 2 - 2.0 * x1 * x2 + x2 ** 2 + x3 ** 2 - 2.0 * x1 - 4.0 * x3)


def paraboloid(x: Vector) -> float:
    """
    p(x1, x2) = -((x1 - 1)² + (x2 + 0.5)²)
    """
    x1, x2 = x[0], x[1]
    return -((x1 - 1.0) ** 2 + (x2 + 0.5) ** 2)


# ---------------------------------------------------------------------------
# Реєстр функцій для вибору в GUI / консолі
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    dim: int
    func: Objective
    start: Tuple[float, ...]
    step_size: float = 1.0

    def start_vector(self) -> Vector:
        return Vector(self.start)


FUNCTIONS: Dict[str, TargetFunction] = {
    "f": TargetFunction(
        key="f",
        name="f(x, y) = sin(x·y) + sin(x) + cos(y)",
        dim=2,
        func=f,
        start=(0.2, -2.1),
        step_size=1.0,
    ),
    "g": TargetFunction(
        key="g",
        name="g(x1, x2, x3) = -(2x1² - 2x1x2 + x2² + x3² - 2x1 - 4x3)",
        dim=3,
        func=g,
        start=(0.0, 0.0, 0.0),
        step_size=0.1,
    ),
    "paraboloid": TargetFunction(
        key="paraboloid",
        name="p(x1, x2) = -((x1 - 1)² + (x2 + 0.5)²)",
        dim=2,
        func=paraboloid,
        start=(-1.5, 1.5),
        step_size=0.1,
    ),
}


def get_function(key: str) -> TargetFunction:
    try:
        return FUNCTIONS[key]
    except KeyError:
        raise InvalidArgumentError(f"Функція з ключем '{key}' не знайдена.") from None


def functions_of_dim(dim: int) -> Dict[str, TargetFunction]:
    return {k: tf for k, tf in FUNCTIONS.items() if tf.dim == dim}


# ---------------------------------------------------------------------------
# Значення на сітці (теплова карта)
# ---------------------------------------------------------------------------

HEATMAP_RESOLUTION = 64
HEATMAP_SIZE = 4.0


def sample_grid(
    func: Objective,
    center: Sequence[float] = (0.0, 0.0),
    size: float = HEATMAP_SIZE,
    resolution: int = HEATMAP_RESOLUTION,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Обчислити func на квадратній сітці resolution × resolution зі стороною
    size навколо center.

    Повертає (xs, ys, Z), де Z[j, i] = func((xs[i], ys[j])), тобто рядки
    відповідають осі y (формат matplotlib imshow / contour).
    """
    if resolution < 1:
        raise InvalidArgumentError(f"resolution має бути >= 1, отримано {resolution}")
    if not size > 0.0:
        raise InvalidArgumentError(f"size має бути > 0, отримано {size}")

    tick = size / resolution
    cx, cy = float(center[0]), float(center[1])
    xs = cx - size / 2.0 + tick * np.arange(resolution, dtype=float)
    ys = cy - size / 2.0 + tick * np.arange(resolution, dtype=float)

    Z = np.zeros((resolution, resolution), dtype=float)
    for j, y_val in enumerate(ys):
        for i, x_val in enumerate(xs):
            Z[j, i] = func(Vector.of(x_val, y_val))

    return xs, ys, Z


__all__ = [
    "f",
    "g",
    "paraboloid",
    "TargetFunction",
    "FUNCTIONS",
    "get_function",
    "functions_of_dim",
    "HEATMAP_RESOLUTION",
    "HEATMAP_SIZE",
    "sample_grid",
]
