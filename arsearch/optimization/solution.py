# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import arsearch.common.typing as tp
from arsearch.common import errors


class Solution:
    """Point of the search space along with its score.

    The coordinates are frozen at construction. The score is None until the solution
    is evaluated, and can then only be set once: solutions are never re-evaluated.

    Parameters
    ----------
    data: array-like
        coordinates of the point
    """

    def __init__(self, data: tp.ArrayLike) -> None:
        array = np.array(data, dtype=float)  # always a copy
        if array.ndim != 1:
            raise errors.ArsValueError(f"Solution data must be a 1d vector (got shape {array.shape})")
        array.flags.writeable = False
        self._data = array
        self._score: tp.Optional[float] = None

    @property
    def data(self) -> np.ndarray:
        """np.ndarray: read-only coordinates"""
        return self._data

    @property
    def score(self) -> tp.Optional[float]:
        """float or None: score provided by the problem, None if not evaluated yet"""
        return self._score

    @score.setter
    def score(self, score: float) -> None:
        if self._score is not None:
            raise errors.AlreadyEvaluatedError(f"{self} was already evaluated")
        self._score = float(score)

    @property
    def evaluated(self) -> bool:
        return self._score is not None

    def __len__(self) -> int:
        return self._data.size

    def __repr__(self) -> str:
        score = "unevaluated" if self._score is None else f"score={self._score}"
        return f"Solution({np.array2string(self._data, precision=4)}, {score})"
