"""
optimizer.py

Ітераційний двигун градієнтного підйому.

Функціонал:
    - будує IterationState у стартовій точці та застосовує функцію переходу,
      доки IterationState.done() не поверне True;
    - формує трасу станів (для таблиць, графіків, текстового звіту);
    - рахує кількість викликів цільової функції;
    - фіксує причину зупинки ("grad_norm" або "max_iter");
    - підтримує observer, який викликається з кожним станом з k < MAX_ITERATIONS
      до перевірки done(); граничний стан k = MAX_ITERATIONS лише повертається.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

from .errors import InvalidArgumentError
from .iteration import MAX_ITERATIONS, STOP_MAX_ITER, IterationState
from .vector import Objective, Vector

logger = logging.getLogger(__name__)

# Тип observer'а для GUI/логів; значення, яке він повертає, ігнорується.
IterationObserver = Callable[[IterationState], Any]


class CountingObjective:
    """Обгортка над цільовою функцією, що рахує кількість викликів."""

    def __init__(self, func: Objective) -> None:
        self.func = func
        self.calls = 0

    def __call__(self, x: Vector) -> float:
        self.calls += 1
        return float(self.func(x))


@dataclass
class AscentRunResult:
    """
    Підсумок одного запуску градієнтного підйому.

    Атрибути:
        states      - траса IterationState (k = 0, 1, ...)
        x_star      - знайдена точка максимуму (current останнього стану)
        f_star      - f(x_star)
        n_iter      - кількість переходів (без урахування k = 0)
        func_evals  - кількість викликів цільової функції
        stopped_by  - причина зупинки ("grad_norm", "max_iter")
    """
    states: List[IterationState]
    x_star: Vector
    f_star: float
    n_iter: int
    func_evals: int
    stopped_by: str

    @property
    def final_state(self) -> IterationState:
        return self.states[-1]


def _as_start_vector(start: Any) -> Vector:
    vector = start if isinstance(start, Vector) else Vector(start)
    if not vector.is_finite():
        raise InvalidArgumentError(
            f"Стартова точка повинна мати скінченні компоненти, отримано {vector!r}"
        )
    return vector


def iterate_states(
    start: Any,
    func: Objective,
    initial_step_size: float = 1.0,
) -> Iterator[IterationState]:
    """
    Генератор станів від k = 0 до першого стану, для якого done() = True.

    Видає не більше MAX_ITERATIONS + 1 станів. Споживач може зупинитися
    будь-коли, просто перестаючи читати генератор.
    """
    state = IterationState.at_point(
        _as_start_vector(start), func, initial_step_size, 0
    )
    for _ in range(MAX_ITERATIONS + 1):
        yield state
        if state.done():
            return
        state = IterationState.from_previous(state)


def run_ascent(
    start: Any,
    func: Objective,
    initial_step_size: float = 1.0,
    observer: Optional[IterationObserver] = None,
) -> AscentRunResult:
    """
    Запустити градієнтний підйом і повернути повну трасу.
    """
    counted = CountingObjective(func)
    states: List[IterationState] = []

    for state in iterate_states(start, counted, initial_step_size):
        states.append(state)
        if observer is not None and state.index < MAX_ITERATIONS:
            observer(state)

    last = states[-1]
    stopped_by = last.stop_reason() or STOP_MAX_ITER

    result = AscentRunResult(
        states=states,
        x_star=last.current.vector,
        f_star=last.current.value,
        n_iter=len(states) - 1,
        func_evals=counted.calls,
        stopped_by=stopped_by,
    )
    logger.info(
        "Підйом завершено: %s після %d ітерацій, f* = %.12g, викликів f: %d",
        result.stopped_by,
        result.n_iter,
        result.f_star,
        result.func_evals,
    )
    return result


def optimize(
    start: Any,
    func: Objective,
    initial_step_size: float = 1.0,
    observer: Optional[IterationObserver] = None,
) -> Vector:
    """
    Максимізувати func градієнтним підйомом із точки start.

    Повертає current.vector останнього стану: або точку з малим градієнтом,
    або точку після MAX_ITERATIONS ітерацій.
    """
    return run_ascent(start, func, initial_step_size, observer).x_star


__all__ = [
    "IterationObserver",
    "CountingObjective",
    "AscentRunResult",
    "iterate_states",
    "run_ascent",
    "optimize",
]
