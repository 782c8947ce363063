# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from math import exp, sqrt
import numpy as np
import arsearch.common.typing as tp
from arsearch.common.decorators import Registry


# all registered functions reach their minimum 0.0 at the origin,
# the info provides the classical search domain for each of them
registry: Registry[tp.Callable[[np.ndarray], float]] = Registry()


@registry.register_with_info(domain=(-5.12, 5.12))
def sphere(x: np.ndarray) -> float:
    """The most classical continuous optimization testbed.

    If you do not solve that one then you have a bug."""
    assert x.ndim == 1
    return float(x.dot(x))


@registry.register_with_info(domain=(-5.12, 5.12))
def sumpowers(x: np.ndarray) -> float:
    """Sum of the 4th powers of the coordinates.
    Flatter than the sphere close to the optimum, which makes the last digits harder to get.
    """
    x2 = x ** 2
    return float(x2.dot(x2))


@registry.register_with_info(domain=(-5.12, 5.12))
def ellipsoid(x: np.ndarray) -> float:
    """Classical function for testing ill-conditioning."""
    dim = x.size
    weights = 10 ** np.linspace(0, 6, dim)
    return float(weights.dot(x ** 2))


@registry.register_with_info(domain=(-5.12, 5.12))
def rastrigin(x: np.ndarray) -> float:
    """Classical multimodal function."""
    cosi = float(np.sum(np.cos(2 * np.pi * x)))
    return float(10 * (len(x) - cosi) + sphere(x))


@registry.register_with_info(domain=(-2.048, 2.048))
def rosenbrock(x: np.ndarray) -> float:
    """Banana-shaped valley, optimum translated to the origin (the classical one is at (1, ..., 1))."""
    y = x + 1.0
    y_m_1 = y[:-1] - 1
    y_diff = y[:-1] ** 2 - y[1:]
    return float(100 * y_diff.dot(y_diff) + y_m_1.dot(y_m_1))


@registry.register_with_info(domain=(-32.768, 32.768))
def ackley(x: np.ndarray) -> float:
    dim = x.size
    sum_cos = np.sum(np.cos(2 * np.pi * x))
    return max(0.0, -20.0 * exp(-0.2 * sqrt(sphere(x) / dim)) - exp(sum_cos / dim) + 20 + exp(1))


@registry.register_with_info(domain=(-600.0, 600.0))
def griewank(x: np.ndarray) -> float:
    """Multimodal function with many regularly distributed local minima."""
    part1 = sphere(x)
    part2 = np.prod(np.cos(x / np.sqrt(1 + np.arange(len(x)))))
    return 1 + (float(part1) / 4000.0) - float(part2)
