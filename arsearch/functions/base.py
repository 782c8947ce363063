# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numbers
import numpy as np
import arsearch.common.typing as tp
from arsearch.common import errors


def check_problem(problem: tp.ProblemLike) -> None:
    """Raises an InvalidProblemError if the problem cannot be searched,
    i.e. its dimension is not a positive integer or its domain is empty or unbounded.
    This is checked for any object following the problem protocol, not only for Problem instances.
    """
    dimension = problem.dimension
    if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral) or dimension <= 0:
        raise errors.InvalidProblemError(f"Dimension must be a strictly positive integer (got {dimension!r})")
    lower, upper = problem.domain
    if not (np.isfinite(lower) and np.isfinite(upper)):
        raise errors.InvalidProblemError(f"Domain bounds must be finite (got [{lower}, {upper}])")
    if not lower < upper:
        raise errors.InvalidProblemError(f"Domain must have a strictly positive width (got [{lower}, {upper}])")


class Problem:
    """Bounded continuous problem, with the same interval applied to every dimension.

    Subclasses only need to implement :code:`_internal_evaluate`.

    Parameters
    ----------
    dimension: int
        number of coordinates of the searched vectors
    domain: tuple of 2 floats
        lower and upper bounds (inclusive) of each coordinate
    maximize: bool
        whether higher scores are better (default is minimization)
    optimum: float or None
        known optimal score, if any. When it is None, no score is ever considered optimal.
    tolerance: float
        absolute tolerance for a score to be considered optimal. The default 0 only suits
        synthetic problems for which the optimum is exactly reachable.
    """

    def __init__(
        self,
        dimension: int,
        domain: tp.Domain,
        *,
        maximize: bool = False,
        optimum: tp.Optional[float] = None,
        tolerance: float = 0.0,
    ) -> None:
        self._dimension = dimension
        self._domain = (float(domain[0]), float(domain[1]))
        check_problem(self)
        if not tolerance >= 0:
            raise errors.ArsValueError(f"Tolerance must be non-negative (got {tolerance})")
        self.maximize = bool(maximize)
        self.optimum = None if optimum is None else float(optimum)
        self.tolerance = float(tolerance)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def domain(self) -> tp.Domain:
        return self._domain

    @property
    def worst_score(self) -> float:
        """Score which is never better than any other (used for unusable evaluations)"""
        return -float("inf") if self.maximize else float("inf")

    def evaluate(self, x: tp.ArrayLike) -> float:
        """Computes the score of a vector (deterministic for a given vector)"""
        data = np.asarray(x, dtype=float)
        if data.shape != (self.dimension,):
            raise errors.ArsValueError(f"Expected a vector of shape ({self.dimension},) but got {data.shape}")
        return float(self._internal_evaluate(data))

    def _internal_evaluate(self, x: np.ndarray) -> float:
        raise NotImplementedError

    def in_bounds(self, x: tp.ArrayLike) -> bool:
        lower, upper = self._domain
        data = np.asarray(x, dtype=float)
        return bool(np.all((data >= lower) & (data <= upper)))

    def is_better(self, a: float, b: float) -> bool:
        """Strict comparison in the optimization direction: True if score a is better than score b"""
        return a > b if self.maximize else a < b

    def is_optimal(self, score: float) -> bool:
        if self.optimum is None:
            return False
        return bool(abs(score - self.optimum) <= self.tolerance)

    def __repr__(self) -> str:
        direction = "maximize" if self.maximize else "minimize"
        lower, upper = self._domain
        return f"{self.__class__.__name__}(dimension={self.dimension}, domain=[{lower}, {upper}], {direction})"


class FunctionProblem(Problem):
    """Problem defined by a callable mapping a 1d numpy array to a float.

    Parameters
    ----------
    function: callable
        the objective function, which must be deterministic and without side effects
    dimension: int
        number of coordinates
    domain: tuple of 2 floats
        lower and upper bounds (inclusive) of each coordinate
    maximize, optimum, tolerance:
        see :code:`Problem`

    Example
    -------
    >>> problem = FunctionProblem(lambda x: float(np.sum(x ** 2)), 3, (-1, 1), optimum=0.0, tolerance=1e-6)
    >>> problem.evaluate([0.5, 0, 0])  # 0.25
    """

    def __init__(
        self,
        function: tp.Callable[[np.ndarray], float],
        dimension: int,
        domain: tp.Domain,
        *,
        maximize: bool = False,
        optimum: tp.Optional[float] = None,
        tolerance: float = 0.0,
    ) -> None:
        if not callable(function):
            raise errors.ArsTypeError(f"Function must be callable (got {function!r})")
        super().__init__(dimension, domain, maximize=maximize, optimum=optimum, tolerance=tolerance)
        self._function = function

    @property
    def function(self) -> tp.Callable[[np.ndarray], float]:
        return self._function

    def _internal_evaluate(self, x: np.ndarray) -> float:
        return self._function(x)

    def __repr__(self) -> str:
        name = getattr(self._function, "__name__", self._function.__class__.__name__)
        return super().__repr__()[:-1] + f", function={name})"
