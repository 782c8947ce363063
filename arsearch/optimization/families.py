# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
"""Configurations of the adaptive random search, which can be named and registered,
and then instantiated on any problem.
"""
import arsearch.common.typing as tp
from arsearch.common import tools
from arsearch.common.decorators import Registry
from .ars import AdaptiveRandomSearch
from .ars import check_config


registry: Registry["ParametrizedAdaptiveRandomSearch"] = Registry()


class ParametrizedAdaptiveRandomSearch:
    """Stores a configuration of the adaptive random search, and creates
    search engines from it through :code:`__call__`.

    Parameters
    ----------
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
        maximum number of draws for sampling an in-bounds candidate

    Example
    -------
    >>> search = ParametrizedAdaptiveRandomSearch(patience=20)(problem, max_iterations=1000, random_state=12)
    >>> search.minimize()
    """

    def __init__(
        self,
        *,
        step_factor: float = 1.3,
        jump_factor: float = 10.0,
        jump_interval: int = 100,
        patience: int = 50,
        initial_step_ratio: float = 0.1,
        max_sampling_attempts: int = 10000,
    ) -> None:
        self._config = dict(
            step_factor=step_factor,
            jump_factor=jump_factor,
            jump_interval=jump_interval,
            patience=patience,
            initial_step_ratio=initial_step_ratio,
            max_sampling_attempts=max_sampling_attempts,
        )
        check_config(self._config)  # fail at configuration time rather than at instantiation
        diff = tools.different_from_defaults(instance=self, instance_dict=self._config)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(
        self, problem: tp.ProblemLike, max_iterations: int, random_state: tp.RandomStateLike = None
    ) -> AdaptiveRandomSearch:
        """Creates a search engine for the problem

        Parameters
        ----------
        problem: ProblemLike
            the bounded problem to optimize
        max_iterations: int
            maximum number of iterations
        random_state: int, np.random.RandomState or None
            source of randomness of the search
        """
        search = AdaptiveRandomSearch(problem, max_iterations, random_state=random_state, **self._config)
        search.name = self.name
        return search

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ParametrizedAdaptiveRandomSearch":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            return self._config == other._config
        return False


ARS = ParametrizedAdaptiveRandomSearch().set_name("ARS", register=True)
NoJumpARS = ParametrizedAdaptiveRandomSearch(jump_factor=1.3).set_name("NoJumpARS", register=True)
ImpatientARS = ParametrizedAdaptiveRandomSearch(patience=10).set_name("ImpatientARS", register=True)
