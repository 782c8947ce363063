# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .base import Problem as Problem
from .base import FunctionProblem as FunctionProblem
from .base import check_problem as check_problem
from .functionlib import ArtificialProblem as ArtificialProblem
