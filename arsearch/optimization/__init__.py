# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .solution import Solution as Solution
from .ars import AdaptiveRandomSearch as AdaptiveRandomSearch
from . import callbacks
from . import families
