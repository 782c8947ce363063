# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from arsearch.common import errors
from arsearch.common import testing
from arsearch.functions import FunctionProblem
from . import sampling


def _sphere(x: np.ndarray) -> float:
    return float(x.dot(x))


class NeverInBounds(FunctionProblem):
    def in_bounds(self, x: np.ndarray) -> bool:
        return False


def test_as_random_state() -> None:
    rng = np.random.RandomState(12)
    assert sampling.as_random_state(rng) is rng
    np.testing.assert_equal(sampling.as_random_state(12).uniform(), np.random.RandomState(12).uniform())
    np.testing.assert_equal(sampling.as_random_state(np.int64(12)).uniform(), np.random.RandomState(12).uniform())
    assert isinstance(sampling.as_random_state(None), np.random.RandomState)
    for wrong in ["12", 1.5, True]:
        with pytest.raises(errors.ArsTypeError):
            sampling.as_random_state(wrong)  # type: ignore


def test_random_vector() -> None:
    problem = FunctionProblem(_sphere, 4, (-2.0, 3.0))
    vectors = np.array([sampling.random_vector(problem, np.random.RandomState(k)) for k in range(200)])
    np.testing.assert_equal(vectors.shape, (200, 4))
    assert np.all(vectors >= -2.0) and np.all(vectors <= 3.0)
    assert vectors.min() < -1.5 and vectors.max() > 2.5  # covers the domain
    np.testing.assert_array_equal(
        sampling.random_vector(problem, np.random.RandomState(3)), sampling.random_vector(problem, np.random.RandomState(3))
    )


def test_sample_neighbor() -> None:
    problem = FunctionProblem(_sphere, 3, (-1.0, 1.0))
    rng = np.random.RandomState(12)
    center = np.array([0.2, -0.3, 0.0])
    for _ in range(100):
        candidate = sampling.sample_neighbor(center, 0.1, problem, rng)
        assert problem.in_bounds(candidate)
        assert np.max(np.abs(candidate - center)) <= 0.1


def test_sample_neighbor_is_not_clipped() -> None:
    problem = FunctionProblem(_sphere, 1, (-1.0, 1.0))
    rng = np.random.RandomState(12)
    samples = np.array([sampling.sample_neighbor(np.array([1.0]), 0.5, problem, rng)[0] for _ in range(2000)])
    assert np.all(samples >= 0.5) and np.all(samples <= 1.0)
    assert not np.sum(samples == 1.0), "Samples should not accumulate on the boundary"
    np.testing.assert_almost_equal(np.mean(samples), 0.75, decimal=1)


def test_sample_neighbor_large_half_width_in_corner() -> None:
    # half-width 2 around the corner of [-1, 1]^3: 1 out of 8 draws is accepted on average
    problem = FunctionProblem(_sphere, 3, (-1.0, 1.0))
    rng = np.random.RandomState(12)
    for _ in range(20):
        candidate = sampling.sample_neighbor(np.ones(3), 2.0, problem, rng)
        assert problem.in_bounds(candidate)


def test_sample_neighbor_exhausted() -> None:
    problem = NeverInBounds(_sphere, 2, (-1.0, 1.0))
    with pytest.raises(errors.SamplingExhaustedError, match="3 attempts"):
        sampling.sample_neighbor(np.zeros(2), 0.1, problem, np.random.RandomState(12), max_attempts=3)


class CountingProblem(FunctionProblem):
    def __init__(self, *args: tp.Any, **kwargs: tp.Any) -> None:
        super().__init__(*args, **kwargs)
        self.num_checks = 0

    def in_bounds(self, x: np.ndarray) -> bool:
        self.num_checks += 1
        return super().in_bounds(x)


@testing.parametrized(
    jump_dim5=(5, 10.24),
    jump_dim50=(50, 10.24),
    huge_dim20=(20, 1e6),
)
def test_sample_neighbor_wider_than_domain(dimension: int, half_width: float) -> None:
    problem = CountingProblem(_sphere, dimension, (-5.12, 5.12))
    rng = np.random.RandomState(12)
    center = np.full(dimension, 5.12)  # corner
    for _ in range(10):
        candidate = sampling.sample_neighbor(center, half_width, problem, rng, max_attempts=1)
        assert problem.in_bounds(candidate)
    np.testing.assert_equal(problem.num_checks, 20)  # each draw accepted at once


def test_sample_neighbor_wider_than_domain_is_uniform() -> None:
    # the neighborhood covers the whole domain: samples are uniform over the domain
    problem = FunctionProblem(_sphere, 1, (-1.0, 1.0))
    rng = np.random.RandomState(12)
    samples = np.array([sampling.sample_neighbor(np.array([1.0]), 100.0, problem, rng)[0] for _ in range(2000)])
    assert np.all(samples >= -1.0) and np.all(samples <= 1.0)
    np.testing.assert_almost_equal(np.mean(samples), 0.0, decimal=1)
    np.testing.assert_almost_equal(np.mean(samples < 0), 0.5, decimal=1)
