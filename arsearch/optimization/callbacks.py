# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import time
import logging
import arsearch.common.typing as tp
from . import ars

global_logger = logging.getLogger(__name__)


class SearchPrinter:
    """Printer to register as "iteration" callback in a search, for printing
    the best solution regularly.

    Parameters
    ----------
    print_interval_iterations: int
        max number of iterations before performing another print
    print_interval_seconds: float
        max number of seconds before performing another print
    """

    def __init__(self, print_interval_iterations: int = 1, print_interval_seconds: float = 60.0) -> None:
        assert print_interval_iterations > 0
        assert print_interval_seconds > 0
        self._print_interval_iterations = int(print_interval_iterations)
        self._print_interval_seconds = print_interval_seconds
        self._next_iteration = self._print_interval_iterations
        self._next_time = time.time() + print_interval_seconds

    def __call__(self, engine: ars.AdaptiveRandomSearch, *args: tp.Any, **kwargs: tp.Any) -> None:
        if time.time() >= self._next_time or engine.iteration >= self._next_iteration:
            self._next_time = time.time() + self._print_interval_seconds
            self._next_iteration = engine.iteration + self._print_interval_iterations
            print(f"After {engine.iteration} iterations, best is {engine.best_solution} (step size {engine.step_size})")


class SearchLogger:
    """Logger to register as "iteration" callback in a search, for logging
    the best solution regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval_iterations: int
        max number of iterations before performing another log
    log_interval_seconds:
        max number of seconds before performing another log
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval_iterations: int = 1,
        log_interval_seconds: float = 60.0,
    ) -> None:
        assert log_interval_iterations > 0
        assert log_interval_seconds > 0
        self._logger = logger
        self._log_level = log_level
        self._log_interval_iterations = int(log_interval_iterations)
        self._log_interval_seconds = log_interval_seconds
        self._next_iteration = self._log_interval_iterations
        self._next_time = time.time() + log_interval_seconds

    def __call__(self, engine: ars.AdaptiveRandomSearch, *args: tp.Any, **kwargs: tp.Any) -> None:
        if time.time() >= self._next_time or engine.iteration >= self._next_iteration:
            self._next_time = time.time() + self._log_interval_seconds
            self._next_iteration = engine.iteration + self._log_interval_iterations
            self._logger.log(
                self._log_level,
                "After %s iterations, best is %s (step size %s)",
                engine.iteration,
                engine.best_solution,
                engine.step_size,
            )


class ProgressRecorder:
    """Records the state of the search at the end of each iteration,
    to be registered as "iteration" callback.

    Each record is a dict with keys iteration, num_evaluations, best_score,
    current_score, step_size and no_improvement_count.
    """

    def __init__(self) -> None:
        self.records: tp.List[tp.Dict[str, tp.Any]] = []

    def __call__(self, engine: ars.AdaptiveRandomSearch, *args: tp.Any, **kwargs: tp.Any) -> None:
        assert engine.best_solution is not None and engine.current is not None
        self.records.append(
            dict(
                iteration=engine.iteration,
                num_evaluations=engine.num_evaluations,
                best_score=engine.best_solution.score,
                current_score=engine.current.score,
                step_size=engine.step_size,
                no_improvement_count=engine.no_improvement_count,
            )
        )

    def get(self, key: str) -> tp.List[tp.Any]:
        """Returns the list of recorded values for the key (eg: "step_size")"""
        return [record[key] for record in self.records]
