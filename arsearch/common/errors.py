# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

# base classes


class ArsError(Exception):
    """Base class for error raised by arsearch"""


class ArsWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class ArsRuntimeError(RuntimeError, ArsError):
    """Runtime error raised by arsearch"""


class ArsTypeError(TypeError, ArsError):
    """Type error raised by arsearch"""


class ArsValueError(ValueError, ArsError):
    """Value error raised by arsearch"""


class ConfigurationError(ArsValueError):
    """Search settings are invalid (non-positive factors, intervals, budgets...)"""


class InvalidProblemError(ArsValueError):
    """The problem cannot be searched: non-positive dimension or empty domain"""


class SamplingExhaustedError(ArsRuntimeError):
    """No in-bounds candidate could be drawn within the allowed number of attempts"""


class AlreadyEvaluatedError(ArsRuntimeError):
    """Raised when trying to set the score of a solution which was already evaluated"""


# warnings


class ArsRuntimeWarning(RuntimeWarning, ArsWarning):
    """Runtime warning raised by arsearch"""


class BadScoreWarning(ArsRuntimeWarning):
    """Provided score is unhelpful (NaN), it is replaced by the worst possible score"""
