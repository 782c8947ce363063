# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .functions import Problem as Problem
from .functions import FunctionProblem as FunctionProblem
from .functions import ArtificialProblem as ArtificialProblem
from .optimization import Solution as Solution
from .optimization import AdaptiveRandomSearch as AdaptiveRandomSearch
from .optimization import callbacks as callbacks
from .optimization import families as families


__all__ = [
    "AdaptiveRandomSearch",
    "Solution",
    "Problem",
    "FunctionProblem",
    "ArtificialProblem",
    "callbacks",
    "families",
    "errors",
    "typing",
]


__version__ = "0.1.0"
