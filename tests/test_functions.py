"""
Objective registry and heatmap grid sampling.
"""

import math

import numpy as np
import pytest

from ascent.errors import InvalidArgumentError
from ascent.functions import (
    FUNCTIONS,
    HEATMAP_RESOLUTION,
    HEATMAP_SIZE,
    f,
    functions_of_dim,
    g,
    get_function,
    paraboloid,
    sample_grid,
)
from ascent.vector import Vector


def test_reference_values():
    assert f(Vector.of(0.0, 0.0)) == pytest.approx(1.0)
    assert f(Vector.of(0.2, -2.1)) == pytest.approx(
        math.sin(-0.42) + math.sin(0.2) + math.cos(-2.1)
    )
    assert g(Vector.of(1.0, 1.0, 2.0)) == pytest.approx(5.0)
    assert g(Vector.of(0.0, 0.0, 0.0)) == 0.0
    assert paraboloid(Vector.of(1.0, -0.5)) == 0.0


def test_registry_presets():
    assert set(FUNCTIONS) == {"f", "g", "paraboloid"}

    tf = get_function("f")
    assert tf.dim == 2
    assert tf.start_vector() == Vector.of(0.2, -2.1)
    assert tf.step_size == 1.0

    tg = get_function("g")
    assert tg.dim == 3
    assert tg.start_vector() == Vector.zeros(3)
    assert tg.step_size == 0.1

    for key, target in FUNCTIONS.items():
        assert target.key == key
        assert len(target.start) == target.dim


def test_unknown_function_key():
    with pytest.raises(InvalidArgumentError):
        get_function("rosenbrock")


def test_functions_of_dim():
    assert set(functions_of_dim(2)) == {"f", "paraboloid"}
    assert set(functions_of_dim(3)) == {"g"}
    assert functions_of_dim(7) == {}


def test_sample_grid_layout():
    xs, ys, Z = sample_grid(f)

    assert xs.shape == (HEATMAP_RESOLUTION,)
    assert ys.shape == (HEATMAP_RESOLUTION,)
    assert Z.shape == (HEATMAP_RESOLUTION, HEATMAP_RESOLUTION)
    assert xs[0] == pytest.approx(-HEATMAP_SIZE / 2.0)
    assert xs[1] - xs[0] == pytest.approx(HEATMAP_SIZE / HEATMAP_RESOLUTION)

    # rows follow the y axis
    assert Z[5, 9] == pytest.approx(f(Vector.of(xs[9], ys[5])))
    assert Z[40, 3] == pytest.approx(f(Vector.of(xs[3], ys[40])))


def test_sample_grid_around_center():
    xs, ys, Z = sample_grid(paraboloid, center=(1.0, -0.5), size=2.0, resolution=4)
    np.testing.assert_allclose(xs, [0.0, 0.5, 1.0, 1.5])
    np.testing.assert_allclose(ys, [-1.5, -1.0, -0.5, 0.0])
    assert Z.max() == 0.0
    assert Z[2, 2] == 0.0


@pytest.mark.parametrize("kwargs", [{"resolution": 0}, {"size": 0.0}, {"size": -1.0}])
def test_sample_grid_rejects_bad_arguments(kwargs):
    with pytest.raises(InvalidArgumentError):
        sample_grid(f, **kwargs)
