# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numbers
import logging
import warnings
import numpy as np
import arsearch.common.typing as tp
from arsearch.common import errors
from arsearch.functions.base import check_problem
from .solution import Solution
from . import sampling


logger = logging.getLogger(__name__)
_SearchCallBack = tp.Union[
    tp.Callable[["AdaptiveRandomSearch", Solution], None], tp.Callable[["AdaptiveRandomSearch"], None]
]
_INT_PARAMETERS = ("max_iterations", "jump_interval", "patience", "max_sampling_attempts")


def _score(solution: Solution) -> float:
    """Returns the score of an evaluated solution (the engine only compares evaluated solutions)"""
    assert solution.score is not None, f"{solution} was not evaluated"
    return solution.score


def check_config(config: tp.Dict[str, tp.Any]) -> None:
    for name, value in config.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise errors.ConfigurationError(f"{name} must be a number (got {value!r})")
        if name in _INT_PARAMETERS and not isinstance(value, numbers.Integral):
            raise errors.ConfigurationError(f"{name} must be an integer (got {value!r})")
        if not value > 0:
            raise errors.ConfigurationError(f"{name} must be strictly positive (got {value!r})")
        if not np.isfinite(value):
            raise errors.ConfigurationError(f"{name} must be finite (got {value!r})")


class AdaptiveRandomSearch:  # pylint: disable=too-many-instance-attributes
    """Adaptive Random Search: local search around the current point with a
    neighborhood size ("step size") adapted to the success of the samples.

    At each iteration, two candidates are sampled around the current point, one
    with the current step size and one with a larger step size (:code:`step_factor`
    times larger, or :code:`jump_factor` times larger every :code:`jump_interval`
    iterations). The better of the two replaces the current point if either improves on it,
    and the larger step size is kept if the larger step won. After :code:`patience`
    iterations without improvement, the step size is divided by :code:`step_factor`.

    The best solution ever evaluated is tracked independently from the current point,
    and is what the search returns.

    Parameters
    ----------
    problem: ProblemLike
        the bounded problem to optimize
    max_iterations: int
        maximum number of iterations (each iteration evaluates 2 candidates)
    step_factor: float
        factor of the usual larger step, and divisor of the step size when shrinking it
    jump_factor: float
        factor of the larger step every jump_interval iterations
    jump_interval: int
        period (in iterations) of the large jumps
    patience: int
        number of consecutive iterations without improvement before shrinking the step size
    initial_step_ratio: float
        initial step size, as a ratio of the domain width
    max_sampling_attempts: int
        maximum number of draws for sampling an in-bounds candidate (only reached when the
        in_bounds predicate of the problem is stricter than its domain box)
    random_state: int, np.random.RandomState or None
        source of randomness (seed it for a deterministic search)

    Note
    ----
    The search stops after :code:`max_iterations` iterations, or as soon as the best score is optimal
    for the problem. At least one iteration is always run.
    """

    def __init__(
        self,
        problem: tp.ProblemLike,
        max_iterations: int,
        *,
        step_factor: float = 1.3,
        jump_factor: float = 10.0,
        jump_interval: int = 100,
        patience: int = 50,
        initial_step_ratio: float = 0.1,
        max_sampling_attempts: int = 10000,
        random_state: tp.RandomStateLike = None,
    ) -> None:
        self._config = dict(
            max_iterations=max_iterations,
            step_factor=step_factor,
            jump_factor=jump_factor,
            jump_interval=jump_interval,
            patience=patience,
            initial_step_ratio=initial_step_ratio,
            max_sampling_attempts=max_sampling_attempts,
        )
        check_config(self._config)
        check_problem(problem)
        self._problem = problem
        self._rng = sampling.as_random_state(random_state)
        self.max_iterations = int(max_iterations)
        self.step_factor = float(step_factor)
        self.jump_factor = float(jump_factor)
        self.jump_interval = int(jump_interval)
        self.patience = int(patience)
        self.initial_step_ratio = float(initial_step_ratio)
        self.max_sampling_attempts = int(max_sampling_attempts)
        self.name = self.__class__.__name__  # printed name in repr
        # works for any problem following the protocol
        self._worst_score = float("inf") if problem.is_better(0.0, float("inf")) else -float("inf")
        # search state
        self._current: tp.Optional[Solution] = None
        self._best: tp.Optional[Solution] = None
        self._step_size = 0.0
        self._no_improvement_count = 0
        self._iteration = 0
        self._num_evaluations = 0
        self._verbosity = 0
        self._callbacks: tp.Dict[str, tp.List[tp.Any]] = {}

    @property
    def problem(self) -> tp.ProblemLike:
        return self._problem

    @property
    def current(self) -> tp.Optional[Solution]:
        """Solution: point around which candidates are sampled (None before initialization)"""
        return self._current

    @property
    def best_solution(self) -> tp.Optional[Solution]:
        """Solution: best solution evaluated so far (None before initialization)"""
        return self._best

    @property
    def step_size(self) -> float:
        """float: current half-width of the sampling neighborhood"""
        return self._step_size

    @property
    def no_improvement_count(self) -> int:
        return self._no_improvement_count

    @property
    def iteration(self) -> int:
        """int: number of iterations performed so far"""
        return self._iteration

    @property
    def num_evaluations(self) -> int:
        return self._num_evaluations

    @property
    def finished(self) -> bool:
        """bool: whether the stopping condition is met (iteration budget spent or optimal score found)"""
        if self._best is None:
            return False
        return self._iteration >= self.max_iterations or bool(self._problem.is_optimal(_score(self._best)))

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __repr__(self) -> str:
        return f"Instance of {self.name}(problem={self._problem!r}, max_iterations={self.max_iterations})"

    def register_callback(self, name: str, callback: _SearchCallBack) -> None:
        """Add a callback called during the search, with the engine as first argument.

        Parameters
        ----------
        name: str
            "evaluate" (called after each evaluation, with the evaluated solution), "improve" (called
            when the best solution changes, with the new best solution) or "iteration" (called at the
            end of each iteration, with no other argument)
        callback: callable
            a callable taking the engine (and the solution, except for "iteration")
        """
        assert name in ["evaluate", "improve", "iteration"], f"Unknown callback event {name}"
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def take_step(self, base: Solution, half_width: float) -> Solution:
        """Samples a new (unevaluated) solution uniformly in the neighborhood of the base solution,
        within the bounds of the problem
        """
        data = sampling.sample_neighbor(
            base.data, half_width, self._problem, self._rng, max_attempts=self.max_sampling_attempts
        )
        return Solution(data)

    def _evaluate(self, solution: Solution) -> None:
        score = float(self._problem.evaluate(solution.data))
        if np.isnan(score):
            warnings.warn(
                f"Evaluation of {solution.data} returned NaN, using {self._worst_score} instead",
                errors.BadScoreWarning,
            )
            score = self._worst_score
        solution.score = score
        self._num_evaluations += 1
        for callback in self._callbacks.get("evaluate", []):
            callback(self, solution)
        if self._best is None or self._problem.is_better(score, _score(self._best)):
            self._best = solution
            logger.debug("New best score %s at iteration %s", score, self._iteration)
            if self._verbosity:
                print(f" > iteration={self._iteration}, best={score}")
            for callback in self._callbacks.get("improve", []):
                callback(self, solution)

    def initialize(self) -> None:
        """Draws and evaluates the starting point, and sets the initial step size.
        This is a no-op if the search is already initialized.
        """
        if self._current is not None:
            return
        lower, upper = self._problem.domain
        self._step_size = self.initial_step_ratio * (upper - lower)
        self._no_improvement_count = 0
        self._iteration = 0
        current = Solution(sampling.random_vector(self._problem, self._rng))
        self._evaluate(current)
        self._current = current

    def step(self) -> None:
        """Performs one iteration of the search"""
        self.initialize()
        current = self._current
        assert current is not None
        is_better = self._problem.is_better
        factor = self.jump_factor if not self._iteration % self.jump_interval else self.step_factor
        step = self.take_step(current, self._step_size)
        self._evaluate(step)
        bigger_step = self.take_step(current, self._step_size * factor)
        self._evaluate(bigger_step)
        if is_better(_score(bigger_step), _score(current)) or is_better(_score(step), _score(current)):
            if is_better(_score(bigger_step), _score(step)):
                self._step_size *= factor
                self._current = bigger_step
                logger.debug("Step size increased to %s at iteration %s", self._step_size, self._iteration)
            else:
                self._current = step
            self._no_improvement_count = 0
        else:
            self._no_improvement_count += 1
            if self._no_improvement_count >= self.patience:
                self._step_size /= self.step_factor
                self._no_improvement_count = 0
                logger.debug("Step size decreased to %s at iteration %s", self._step_size, self._iteration)
        self._iteration += 1
        for callback in self._callbacks.get("iteration", []):
            callback(self)

    def provide_recommendation(self) -> Solution:
        """Provides the best solution evaluated so far"""
        if self._best is None:
            raise errors.ArsRuntimeError("No solution was evaluated yet, run the search first")
        return self._best

    def minimize(self, verbosity: int = 0) -> Solution:
        """Runs the search until the stopping condition is met.
        Despite its name, the optimization direction is defined by the problem.

        Parameters
        ----------
        verbosity: int
            print information about the search (0: None, 1: improvements of the best score,
            2: improvements and final summary)

        Returns
        -------
        Solution
            the best solution evaluated during the whole search
        """
        self._verbosity = verbosity
        try:
            self.initialize()
            # at least one iteration is always run
            while not (self._iteration and self.finished):
                self.step()
        finally:
            self._verbosity = 0
        best = self.provide_recommendation()
        if verbosity > 1:
            print(f"Done after {self._iteration} iterations ({self._num_evaluations} evaluations): {best}")
        return best
