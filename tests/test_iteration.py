"""
IterationState construction, decision predicates and transition rules.
"""

import logging
import math

import pytest

from ascent.errors import InvalidArgumentError
from ascent.iteration import (
    GRAD_LIMIT,
    MAX_ITERATIONS,
    IterationState,
    Point,
)
from ascent.vector import Vector


def make_state(current, next_, test, step_size=0.5, index=0, func=None):
    """Build a 1-D state with literal values at x = 0, grad = 1."""
    return IterationState(
        index=index,
        step_size=step_size,
        current=Point(Vector.of(0.0), current),
        current_grad=Vector.of(1.0),
        next=Point(Vector.of(step_size), next_),
        test=Point(Vector.of(2.0 * step_size), test),
        func=func or (lambda v: -(v[0] - 1.0) ** 2),
    )


def test_constants():
    assert MAX_ITERATIONS == 25
    assert GRAD_LIMIT == 1.0e-5


def test_at_point_invariants(sphere):
    x = Vector.of(1.0, 2.0)
    state = IterationState.at_point(x, sphere, 0.25, 3)

    assert state.index == 3
    assert state.step_size == 0.25
    assert state.current == Point(x, 5.0)
    assert state.current_grad == x.gradient(sphere)
    assert state.next.vector == x + 0.25 * state.current_grad
    assert state.test.vector == x + 0.5 * state.current_grad
    assert state.next.value == sphere(state.next.vector)
    assert state.test.value == sphere(state.test.vector)


def test_at_point_evaluation_count(counter, sphere):
    func = counter(sphere)
    IterationState.at_point(Vector.of(1.0, 2.0), func, 1.0, 0)
    # f(x) + one per axis + next + test
    assert len(func.calls) == 2 + 3


def test_literal_values_keep_step_and_move_to_next():
    state = make_state(current=1.0, next_=2.0, test=1.5)

    assert state.use_next() is True
    assert state.use_test() is False
    assert state.decision() == "next"

    following = IterationState.from_previous(state)
    assert following.step_size == 0.5
    assert following.current.vector == state.next.vector
    assert following.index == 1


def test_doubling_rule_moves_to_test():
    state = make_state(current=1.0, next_=2.0, test=3.0)

    assert state.use_test() is True
    assert state.decision() == "test"

    following = state.advance()
    assert following.step_size == 1.0
    assert following.current.vector == state.test.vector


def test_shrinking_rule_stays_put():
    state = make_state(current=1.0, next_=0.5, test=3.0)

    assert state.use_next() is False
    assert state.use_test() is False
    assert state.decision() == "shrink"

    following = state.advance()
    assert following.step_size == 0.25
    assert following.current.vector == state.current.vector


def test_equal_values_do_not_count_as_improvement():
    state = make_state(current=1.0, next_=1.0, test=5.0)
    assert state.use_next() is False
    assert state.advance().step_size == 0.25


def test_done_by_iteration_cap():
    state = make_state(current=1.0, next_=2.0, test=1.5, index=MAX_ITERATIONS)
    assert state.done() is True
    assert state.stop_reason() == "max_iter"

    state = make_state(current=1.0, next_=2.0, test=1.5, index=MAX_ITERATIONS - 1)
    assert state.done() is False
    assert state.stop_reason() is None


def test_done_by_small_gradient(concave_parabola):
    state = IterationState.at_point(Vector.of(1.0), concave_parabola, 1.0, 0)
    # forward difference at the maximum is -H, below the tolerance
    assert state.grad_norm < GRAD_LIMIT
    assert state.done() is True
    assert state.stop_reason() == "grad_norm"


@pytest.mark.parametrize("step_size", [0.0, -1.0, math.nan, math.inf])
def test_invalid_step_size_is_rejected(sphere, step_size):
    with pytest.raises(InvalidArgumentError):
        IterationState.at_point(Vector.of(1.0, 2.0), sphere, step_size, 0)


def test_negative_index_is_rejected(sphere):
    with pytest.raises(InvalidArgumentError):
        IterationState.at_point(Vector.of(1.0, 2.0), sphere, 1.0, -1)


def test_states_are_immutable(sphere):
    state = IterationState.at_point(Vector.of(1.0, 2.0), sphere, 1.0, 0)
    with pytest.raises(AttributeError):
        state.step_size = 2.0


def test_replaying_transition_is_deterministic(sphere):
    state = IterationState.at_point(Vector.of(0.3, -0.2), lambda v: -sphere(v), 1.0, 0)
    assert state.advance() == state.advance()


def test_nan_candidates_fall_back_to_shrinking(caplog):
    def func(v):
        return math.nan if v[0] > 0.5 else -(v[0] - 1.0) ** 2

    with caplog.at_level(logging.WARNING, logger="ascent.iteration"):
        state = IterationState.at_point(Vector.of(0.0), func, 1.0, 0)

    assert math.isnan(state.next.value)
    assert math.isnan(state.test.value)
    assert state.use_next() is False
    assert state.use_test() is False
    assert any("NaN" in rec.getMessage() for rec in caplog.records)

    following = state.advance()
    assert following.step_size == 0.5
    assert following.current.vector == Vector.of(0.0)


def test_infinite_candidate_is_not_accepted():
    def func(v):
        return math.inf if v[0] > 0.5 else -(v[0] - 1.0) ** 2

    state = IterationState.at_point(Vector.of(0.0), func, 1.0, 0)
    assert state.next.value == math.inf
    assert state.use_next() is False
    assert state.advance().step_size == 0.5


def test_nan_test_point_blocks_doubling_only():
    state = make_state(current=1.0, next_=2.0, test=math.nan)
    assert state.use_next() is True
    assert state.use_test() is False
    assert state.advance().step_size == 0.5
