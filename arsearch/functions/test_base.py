# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from arsearch.common import errors
from arsearch.common import testing
from . import base
from . import functionlib


def _sum_squares(x: np.ndarray) -> float:
    return float(np.sum(x ** 2))


class _Constant:
    """Foreign problem-like object not inheriting from Problem"""

    def __init__(self, dimension: tp.Any, domain: tp.Tuple[float, float]) -> None:
        self.dimension = dimension
        self.domain = domain


def test_function_problem() -> None:
    problem = base.FunctionProblem(_sum_squares, 3, (-1, 1), optimum=0.0)
    np.testing.assert_equal(problem.dimension, 3)
    np.testing.assert_equal(problem.domain, (-1.0, 1.0))
    np.testing.assert_equal(problem.evaluate([0.5, 0, 0]), 0.25)
    assert isinstance(problem.evaluate(np.zeros(3)), float)
    assert problem.is_optimal(0.0)
    assert not problem.is_optimal(1e-12)
    assert "function=_sum_squares" in repr(problem)


def test_evaluate_is_deterministic() -> None:
    problem = functionlib.ArtificialProblem("rastrigin", 4)
    x = np.random.uniform(-5, 5, size=4)
    np.testing.assert_equal(problem.evaluate(x), problem.evaluate(x))


@testing.parametrized(
    inside=([0.0, 0.5, -0.5], True),
    lower_edge=([-1.0, 0.0, 0.0], True),
    upper_edge=([1.0, 1.0, 1.0], True),
    above=([1.0001, 0.0, 0.0], False),
    below=([0.0, -3.0, 0.0], False),
)
def test_in_bounds(x: tp.List[float], expected: bool) -> None:
    problem = base.FunctionProblem(_sum_squares, 3, (-1, 1))
    np.testing.assert_equal(problem.in_bounds(x), expected)


@testing.parametrized(
    minimize=(False, 1.0, 2.0, True),
    minimize_worse=(False, 2.0, 1.0, False),
    minimize_equal=(False, 1.0, 1.0, False),
    maximize=(True, 2.0, 1.0, True),
    maximize_worse=(True, 1.0, 2.0, False),
    maximize_equal=(True, 1.0, 1.0, False),
)
def test_is_better(maximize: bool, a: float, b: float, expected: bool) -> None:
    problem = base.FunctionProblem(_sum_squares, 2, (-1, 1), maximize=maximize)
    np.testing.assert_equal(problem.is_better(a, b), expected)
    assert not problem.is_better(problem.worst_score, a)


def test_is_optimal_with_tolerance() -> None:
    problem = base.FunctionProblem(_sum_squares, 2, (-1, 1), optimum=1.0, tolerance=0.01)
    assert problem.is_optimal(1.005)
    assert problem.is_optimal(0.995)
    assert not problem.is_optimal(1.02)
    no_optimum = base.FunctionProblem(_sum_squares, 2, (-1, 1))
    assert not no_optimum.is_optimal(0.0)


def test_wrong_shape() -> None:
    problem = base.FunctionProblem(_sum_squares, 3, (-1, 1))
    with pytest.raises(errors.ArsValueError):
        problem.evaluate([0.0, 1.0])


@testing.parametrized(
    zero_dim=(0, (-1.0, 1.0)),
    negative_dim=(-2, (-1.0, 1.0)),
    float_dim=(2.5, (-1.0, 1.0)),
    bool_dim=(True, (-1.0, 1.0)),
    zero_width=(2, (1.0, 1.0)),
    inverted=(2, (1.0, -1.0)),
    infinite=(2, (-np.inf, 1.0)),
    nan=(2, (np.nan, 1.0)),
)
def test_invalid_problem(dimension: tp.Any, domain: tp.Tuple[float, float]) -> None:
    with pytest.raises(errors.InvalidProblemError):
        base.FunctionProblem(_sum_squares, dimension, domain)
    with pytest.raises(errors.InvalidProblemError):
        base.check_problem(_Constant(dimension, domain))  # type: ignore


def test_invalid_tolerance() -> None:
    with pytest.raises(errors.ArsValueError):
        base.FunctionProblem(_sum_squares, 2, (-1, 1), tolerance=-1.0)


def test_not_callable() -> None:
    with pytest.raises(errors.ArsTypeError):
        base.FunctionProblem(12, 2, (-1, 1))  # type: ignore


def test_base_problem_not_implemented() -> None:
    problem = base.Problem(2, (-1, 1))
    with pytest.raises(NotImplementedError):
        problem.evaluate([0, 0])


def test_artificial_problem() -> None:
    problem = functionlib.ArtificialProblem("sumpowers", 5)
    np.testing.assert_equal(problem.domain, (-5.12, 5.12))
    np.testing.assert_equal(problem.evaluate([1, 0, 0, 0, 1]), 2.0)
    assert problem.is_optimal(0.0)
    assert not problem.maximize
    custom = functionlib.ArtificialProblem("sphere", 2, domain=(-1, 1), tolerance=0.1)
    np.testing.assert_equal(custom.domain, (-1.0, 1.0))
    assert custom.is_optimal(0.05)


def test_artificial_problem_unknown_name() -> None:
    with pytest.raises(errors.ArsValueError, match="sumpowers"):
        functionlib.ArtificialProblem("blublu", 2)
