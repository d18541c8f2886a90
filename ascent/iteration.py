"""
iteration.py

Дані однієї ітерації градієнтного підйому та функція переходу між ними.

IterationState будується у точці x з кроком λ:
    current = (x, f(x)),  grad = ∇f(x)
    next    = (x + λ·grad,  f(next))
    test    = (x + 2λ·grad, f(test))

Правила переходу до наступної ітерації (перевіряються по порядку):
    1. use_test()  -> крок ×2, рухаємося в test;
    2. use_next()  -> крок не змінюється, рухаємося в next;
    3. інакше      -> крок /2, залишаємось у current.

Кожен стан незмінний; наступний стан завжди новий об'єкт.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidArgumentError
from .vector import Objective, Vector

logger = logging.getLogger(__name__)

# Максимальна кількість ітерацій.
MAX_ITERATIONS: int = 25

# Поріг норми градієнта: нижче нього точку вважаємо стаціонарною.
GRAD_LIMIT: float = 1.0e-5

DECISION_TEST = "test"
DECISION_NEXT = "next"
DECISION_SHRINK = "shrink"

STOP_GRAD_NORM = "grad_norm"
STOP_MAX_ITER = "max_iter"


@dataclass(frozen=True)
class Point:
    """
    Точка області визначення разом зі значенням цільової функції.

    Атрибути:
        vector - положення x
        value  - f(x)
    """
    vector: Vector
    value: float

    @classmethod
    def evaluate(cls, vector: Vector, func: Objective) -> "Point":
        return cls(vector=vector, value=float(func(vector)))

    def is_finite(self) -> bool:
        return math.isfinite(self.value)


def _check_step_size(step_size: float) -> None:
    if not (math.isfinite(step_size) and step_size > 0.0):
        raise InvalidArgumentError(
            f"Крок має бути додатним скінченним числом, отримано {step_size!r}"
        )


@dataclass(frozen=True)
class IterationState:
    """
    Знімок однієї ітерації градієнтного підйому.

    Атрибути:
        index        - номер ітерації (0, 1, 2, ...)
        step_size    - поточний крок λ > 0
        current      - поточна точка (x, f(x))
        current_grad - чисельний градієнт у current
        next         - точка після кроку λ вздовж градієнта
        test         - точка після кроку 2λ вздовж градієнта
        func         - цільова функція, з якої побудовано стан
    """
    index: int
    step_size: float
    current: Point
    current_grad: Vector
    next: Point
    test: Point
    func: Objective = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise InvalidArgumentError(
                f"Номер ітерації не може бути від'ємним, отримано {self.index}"
            )
        _check_step_size(self.step_size)

    # ------------------------------------------------------------------
    # Конструктори
    # ------------------------------------------------------------------

    @classmethod
    def at_point(
        cls,
        start: Vector,
        func: Objective,
        step_size: float,
        index: int = 0,
    ) -> "IterationState":
        """
        Обчислити дані ітерації в точці start.

        Функція викликається 1 + N + 2 разів: f(x), N зміщених точок
        для градієнта, next і test.
        """
        step_size = float(step_size)
        _check_step_size(step_size)

        current = Point.evaluate(start, func)
        grad = start.gradient(func, fx=current.value)

        next_point = Point.evaluate(start + step_size * grad, func)
        test_point = Point.evaluate(start + (2.0 * step_size) * grad, func)

        state = cls(
            index=int(index),
            step_size=step_size,
            current=current,
            current_grad=grad,
            next=next_point,
            test=test_point,
            func=func,
        )

        if not state.values_finite():
            logger.warning(
                "Ітерація %d: нескінченне або NaN значення функції "
                "(current=%r, next=%r, test=%r); крок буде зменшено",
                state.index,
                current.value,
                next_point.value,
                test_point.value,
            )
        logger.debug(
            "Ітерація %d: λ=%g, f(x)=%.12g, ||grad||=%.3e",
            state.index,
            state.step_size,
            current.value,
            state.grad_norm,
        )
        return state

    @classmethod
    def from_previous(cls, previous: "IterationState") -> "IterationState":
        """Побудувати наступну ітерацію з попередньої."""
        if previous.use_test():
            step_size = previous.step_size * 2.0
            vector = previous.test.vector
        elif previous.use_next():
            step_size = previous.step_size
            vector = previous.next.vector
        else:
            # повтор з меншим кроком
            step_size = previous.step_size / 2.0
            vector = previous.current.vector

        return cls.at_point(vector, previous.func, step_size, previous.index + 1)

    def advance(self) -> "IterationState":
        return IterationState.from_previous(self)

    # ------------------------------------------------------------------
    # Предикати
    # ------------------------------------------------------------------

    def values_finite(self) -> bool:
        return self.current.is_finite() and self.next.is_finite() and self.test.is_finite()

    def use_next(self) -> bool:
        """Крок λ покращив значення функції."""
        return self.next.is_finite() and self.next.value > self.current.value

    def use_test(self) -> bool:
        """Подвоєний крок покращив значення ще більше, ніж next."""
        return self.use_next() and self.test.is_finite() and self.test.value > self.next.value

    def done(self) -> bool:
        """Досягнуто максимум ітерацій або градієнт став досить малим."""
        return self.index == MAX_ITERATIONS or self.grad_norm < GRAD_LIMIT

    @property
    def grad_norm(self) -> float:
        return self.current_grad.norm()

    def decision(self) -> str:
        if self.use_test():
            return DECISION_TEST
        if self.use_next():
            return DECISION_NEXT
        return DECISION_SHRINK

    def stop_reason(self) -> Optional[str]:
        if self.grad_norm < GRAD_LIMIT:
            return STOP_GRAD_NORM
        if self.index >= MAX_ITERATIONS:
            return STOP_MAX_ITER
        return None


__all__ = [
    "MAX_ITERATIONS",
    "GRAD_LIMIT",
    "DECISION_TEST",
    "DECISION_NEXT",
    "DECISION_SHRINK",
    "STOP_GRAD_NORM",
    "STOP_MAX_ITER",
    "Point",
    "IterationState",
]
