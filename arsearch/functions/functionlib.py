# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import arsearch.common.typing as tp
from arsearch.common import errors
from .base import FunctionProblem
from . import corefuncs


class ArtificialProblem(FunctionProblem):
    """Benchmark problem built from one of the registered core functions.
    All of them reach their optimum 0.0 inside their default domain.

    Parameters
    ----------
    name: str
        name of the underlying function (like "sphere" or "sumpowers"). If a wrong
        name is provided, an error is raised with all existing names.
    dimension: int
        number of coordinates
    domain: tuple of 2 floats or None
        search domain, defaults to the classical domain of the function
    tolerance: float
        absolute tolerance on 0.0 for a score to be considered optimal

    Example
    -------
    >>> problem = ArtificialProblem("sumpowers", 5)
    >>> problem.domain  # (-5.12, 5.12)
    >>> problem.evaluate([1, 0, 0, 0, 1])  # 2.0
    """

    def __init__(
        self, name: str, dimension: int, domain: tp.Optional[tp.Domain] = None, tolerance: float = 0.0
    ) -> None:
        if name not in corefuncs.registry:
            raise errors.ArsValueError(f'Unknown core function "{name}" (choose among {sorted(corefuncs.registry)})')
        if domain is None:
            domain = corefuncs.registry.get_info(name)["domain"]
        assert domain is not None
        super().__init__(corefuncs.registry[name], dimension, domain, optimum=0.0, tolerance=tolerance)
        self.name = name
