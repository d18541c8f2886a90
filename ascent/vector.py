"""
vector.py

Вектор фіксованої розмірності N з операціями, потрібними для
градієнтного підйому:
    - поелементна сума двох векторів однакової розмірності;
    - множення вектора на скаляр;
    - евклідова норма;
    - чисельний градієнт довільної цільової функції (права різниця).

Vector незмінний: усі операції повертають новий вектор, а внутрішній
numpy-масив позначено як read-only.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

import numpy as np

from .errors import DimensionMismatchError, InvalidArgumentError

# Крок h для чисельного диференціювання. Фіксована константа.
H: float = 1.0e-7

Objective = Callable[["Vector"], float]


class Vector:
    """
    Незмінний вектор з N дійсних компонент.

    Приклади:
        v = Vector([0.2, -2.1])
        w = Vector.of(0.0, 0.0, 0.0)
        v + v, 2.0 * v, v.norm(), v.gradient(func)
    """

    __slots__ = ("_data",)

    # numpy не повинен перехоплювати бінарні операції (np.float64 * Vector),
    # інакше результатом буде ndarray замість Vector.
    __array_ufunc__ = None

    def __init__(self, values: Iterable[float]) -> None:
        data = np.array(list(values), dtype=float)
        if data.ndim != 1 or data.size == 0:
            raise InvalidArgumentError(
                "Vector очікує непорожню одновимірну послідовність чисел, "
                f"отримано форму {data.shape}"
            )
        data.setflags(write=False)
        self._data = data

    @classmethod
    def of(cls, *values: float) -> "Vector":
        """Побудувати вектор з N літеральних значень."""
        return cls(values)

    @classmethod
    def zeros(cls, dim: int) -> "Vector":
        if dim < 1:
            raise InvalidArgumentError(f"Розмірність має бути >= 1, отримано {dim}")
        return cls(np.zeros(dim, dtype=float))

    # ------------------------------------------------------------------
    # Доступ до компонент
    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return int(self._data.size)

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        return (float(e) for e in self._data)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def to_array(self) -> np.ndarray:
        """Повернути копію компонент як numpy-масив (доступний для запису)."""
        return self._data.copy()

    def tolist(self) -> List[float]:
        return [float(e) for e in self._data]

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self._data)))

    def with_component(self, index: int, value: float) -> "Vector":
        """Копія вектора, в якій компоненту index замінено на value."""
        data = self._data.copy()
        data[index] = value
        return Vector(data)

    # ------------------------------------------------------------------
    # Арифметика
    # ------------------------------------------------------------------

    def _check_dim(self, other: "Vector") -> None:
        if self.dim != other.dim:
            raise DimensionMismatchError(self.dim, other.dim)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dim(other)
        return Vector(self._data + other._data)

    def __mul__(self, scalar: object) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        try:
            lam = float(scalar)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return NotImplemented
        return Vector(self._data * lam)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return "Vector(" + ", ".join(repr(float(e)) for e in self._data) + ")"

    # ------------------------------------------------------------------
    # Норма та градієнт
    # ------------------------------------------------------------------

    def norm(self) -> float:
        """
        Евклідова норма sqrt(sum(e_i^2)).

        Компоненти попередньо масштабуються на max|e_i|, тому дуже малі
        ненульові значення не дають нуль через underflow.
        """
        scale_ = float(np.max(np.abs(self._data)))
        if scale_ == 0.0 or not np.isfinite(scale_):
            return scale_
        return scale_ * float(np.linalg.norm(self._data / scale_))

    def gradient(self, func: Objective, fx: Optional[float] = None) -> "Vector":
        """Чисельний градієнт func у цій точці, див. gradient()."""
        return gradient(func, self, fx)


# ---------------------------------------------------------------------------
# Функціональна форма операцій
# ---------------------------------------------------------------------------

def add(a: Vector, b: Vector) -> Vector:
    return a + b


def scale(lam: float, a: Vector) -> Vector:
    return lam * a


def norm(a: Vector) -> float:
    return a.norm()


def gradient(func: Objective, x: Vector, fx: Optional[float] = None) -> Vector:
    """
    Чисельний градієнт за правою (forward) різницею.

        ∂f/∂x_i ≈ (f(x + H e_i) - f(x)) / H

    Значення f(x) спільне для всіх осей: без fx функція викликається
    рівно N + 1 разів, з переданим fx = f(x) — N разів.
    """
    if fx is None:
        fx = float(func(x))

    grad = np.zeros(x.dim, dtype=float)
    for i in range(x.dim):
        x_fwd = x.with_component(i, x[i] + H)
        grad[i] = (float(func(x_fwd)) - fx) / H

    return Vector(grad)


__all__ = [
    "H",
    "Objective",
    "Vector",
    "add",
    "scale",
    "norm",
    "gradient",
]
