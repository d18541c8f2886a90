"""
report.py

Текстовий звіт про процес підйому:
    - format_vector / format_point  – компактний запис вектора та точки;
    - format_state                  – багаторядковий дамп однієї ітерації;
    - format_run                    – підсумок запуску (AscentRunResult);
    - LoggingObserver               – observer, що пише дамп кожної ітерації в лог.
"""

from __future__ import annotations

import logging
from typing import Optional

from .iteration import IterationState, Point
from .optimizer import AscentRunResult
from .vector import Vector

_STOP_REASONS = {
    "grad_norm": "Норма градієнта стала меншою за поріг",
    "max_iter": "Досягнуто граничної кількості ітерацій",
}

_DECISIONS = {
    "test": "крок ×2 → x_test",
    "next": "крок без змін → x_next",
    "shrink": "крок /2, точка без змін",
}


def format_vector(v: Vector, precision: int = 8) -> str:
    return "(" + ", ".join(f"{e:.{precision}f}" for e in v) + ")"


def format_point(p: Point, precision: int = 8) -> str:
    return f"{format_vector(p.vector, precision)}, f = {p.value:.{precision}f}"


def format_state(state: IterationState) -> str:
    lines = [
        f"Ітерація {state.index}",
        f"\tx             {format_point(state.current)}",
        f"\tλ             {state.step_size:g}",
        f"\tgrad f(x)     {format_vector(state.current_grad)}",
        f"\t||grad f(x)|| {state.grad_norm:.6e}",
        f"\tx_next        {format_point(state.next)}",
        f"\tx_test        {format_point(state.test)}",
        f"\tрішення       {_DECISIONS[state.decision()]}",
    ]
    return "\n".join(lines)


def humanize_stop_reason(code: Optional[str]) -> str:
    if not code:
        return "Невідомо"
    return _STOP_REASONS.get(code, f"Інша причина ({code})")


def format_run(result: AscentRunResult, title: Optional[str] = None) -> str:
    lines = []
    if title:
        lines.append(title)
    lines.extend(
        [
            f"\tx*            {format_vector(result.x_star)}",
            f"\tf(x*)         {result.f_star:.12f}",
            f"\tітерацій      {result.n_iter}",
            f"\tвикликів f    {result.func_evals}",
            f"\tзупинка       {humanize_stop_reason(result.stopped_by)}",
        ]
    )
    return "\n".join(lines)


class LoggingObserver:
    """
    Observer для run_ascent()/optimize(): пише format_state() кожної
    ітерації в заданий логер.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def __call__(self, state: IterationState) -> None:
        self.logger.log(self.level, "%s", format_state(state))


__all__ = [
    "format_vector",
    "format_point",
    "format_state",
    "humanize_stop_reason",
    "format_run",
    "LoggingObserver",
]
