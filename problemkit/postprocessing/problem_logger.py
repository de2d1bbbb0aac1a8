"""
Logs every finished problem. Runs last so the log line matches the response.

5xx → ERROR with the cause's traceback, anything else → INFO.
Logging must not change the problem.
"""
from __future__ import annotations

import logging
from typing import Optional

from problemkit.core.logging import PROBLEM_LOGGER_NAME
from problemkit.core.problem import Problem
from problemkit.postprocessing.base import ProblemContext, ProblemPostProcessor

PROBLEM_LOGGER_PRIORITY = 1000


class ProblemLogger(ProblemPostProcessor):

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(PROBLEM_LOGGER_NAME)

    def priority(self) -> int:
        return PROBLEM_LOGGER_PRIORITY

    def apply(self, problem: Problem, context: ProblemContext) -> Problem:
        line = _serialize(problem)
        if problem.status >= 500:
            exc_info = None
            if context.cause is not None:
                exc_info = (type(context.cause), context.cause, context.cause.__traceback__)
            self._logger.error("%s", line, exc_info=exc_info)
        else:
            self._logger.info("%s", line)
        return problem


def _serialize(problem: Problem) -> str:
    parts = [f"status={int(problem.status)}"]
    for name in ("title", "detail", "instance", "type"):
        value = getattr(problem, name)
        if value is not None:
            parts.append(f'{name}="{value}"')
    for key, value in problem.parameters.items():
        parts.append(f'{key}="{value}"')
    return " ".join(parts)
