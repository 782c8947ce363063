# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Random generation of points, inside the domain of a problem or in the neighborhood of a point.
"""
import numpy as np
import arsearch.common.typing as tp
from arsearch.common import errors


def as_random_state(seed: tp.RandomStateLike = None) -> np.random.RandomState:
    """Returns the provided random state, or a new one seeded with the provided int.
    None provides an unseeded random state (non-deterministic).
    """
    if isinstance(seed, np.random.RandomState):
        return seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
        raise errors.ArsTypeError(f"Random state must be None, an int or a np.random.RandomState (got {seed!r})")
    return np.random.RandomState(seed)


def random_vector(problem: tp.ProblemLike, rng: np.random.RandomState) -> np.ndarray:
    """Draws a point uniformly in the domain of the problem (one independent draw per dimension)"""
    lower, upper = problem.domain
    return lower + (upper - lower) * rng.uniform(size=problem.dimension)


def sample_neighbor(
    center: np.ndarray,
    half_width: float,
    problem: tp.ProblemLike,
    rng: np.random.RandomState,
    max_attempts: int = 10000,
) -> np.ndarray:
    """Draws a point uniformly in the hypercube of given half-width around the center,
    restricted to the points which are in the bounds of the problem.

    Coordinates are drawn in the intersection of the hypercube and the domain box,
    which yields the same distribution as drawing in the full hypercube and rejecting
    the points out of the domain, without being slowed down when the half-width exceeds
    the domain width. Draws refused by the in_bounds predicate of the problem are rejected
    and all coordinates are drawn again (clipping would bias the samples toward the boundary).
    For problems whose in_bounds predicate is exactly the domain box, the first draw is
    always accepted, so max_attempts only bounds stricter predicates.

    Parameters
    ----------
    center: np.ndarray
        center of the neighborhood (inside the domain)
    half_width: float
        half-width of the hypercube
    problem: ProblemLike
        the problem providing the domain and the in_bounds predicate
    rng: np.random.RandomState
        random state to draw from
    max_attempts: int
        maximum number of draws before giving up

    Raises
    ------
    SamplingExhaustedError
        if no in-bounds point was found in max_attempts draws
    """
    center = np.asarray(center, dtype=float)
    lower, upper = problem.domain
    low = np.maximum(lower, center - half_width)
    high = np.minimum(upper, center + half_width)
    for _ in range(max_attempts):
        candidate = rng.uniform(low, high)
        if problem.in_bounds(candidate):
            return candidate
    raise errors.SamplingExhaustedError(
        f"Could not sample an in-bounds point within {max_attempts} attempts "
        f"(half-width {half_width} around {center}, domain {problem.domain})"
    )
