"""
Text report formatting and the logging observer.
"""

import logging

from ascent.functions import g
from ascent.iteration import MAX_ITERATIONS, IterationState
from ascent.optimizer import run_ascent
from ascent.report import (
    LoggingObserver,
    format_point,
    format_run,
    format_state,
    format_vector,
    humanize_stop_reason,
)
from ascent.vector import Vector


def test_format_vector_and_point():
    v = Vector.of(1.0, -2.5)
    assert format_vector(v, precision=2) == "(1.00, -2.50)"
    state = IterationState.at_point(v, lambda x: x[0], 1.0, 0)
    assert format_point(state.current, precision=1) == "(1.0, -2.5), f = 1.0"


def test_format_state_lists_all_candidates():
    state = IterationState.at_point(Vector.of(0.0, 0.0, 0.0), g, 0.1, 0)
    text = format_state(state)

    assert text.startswith("Ітерація 0")
    for label in ("x ", "λ", "grad f(x)", "||grad f(x)||", "x_next", "x_test"):
        assert label in text
    assert "крок ×2" in text


def test_format_run_and_stop_reason():
    result = run_ascent(Vector.of(0.0, 0.0, 0.0), g, 0.1)
    text = format_run(result, title="g")

    assert text.splitlines()[0] == "g"
    assert humanize_stop_reason(result.stopped_by) in text
    assert str(result.n_iter) in text
    assert humanize_stop_reason(None) == "Невідомо"
    assert humanize_stop_reason("other") == "Інша причина (other)"


def test_logging_observer_writes_each_state(caplog):
    logger = logging.getLogger("ascent.tests.report")
    observer = LoggingObserver(logger, level=logging.INFO)

    with caplog.at_level(logging.INFO, logger="ascent.tests.report"):
        result = run_ascent(Vector.of(0.0, 0.0, 0.0), g, 0.1, observer=observer)

    messages = [r.getMessage() for r in caplog.records if r.name == "ascent.tests.report"]
    # the capped state k = MAX_ITERATIONS is returned but not reported
    assert result.final_state.index == MAX_ITERATIONS
    assert len(messages) == MAX_ITERATIONS
    assert messages[0].startswith("Ітерація 0")
    assert messages[-1].startswith(f"Ітерація {MAX_ITERATIONS - 1}")
