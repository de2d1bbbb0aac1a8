"""
Fills `instance` with the request path when the producer left it empty.
"""
from __future__ import annotations

from problemkit.core.problem import Problem
from problemkit.postprocessing.base import ProblemContext, ProblemPostProcessor

DEFAULTS_PROVIDER_PRIORITY = 0


class ProblemDefaultsProvider(ProblemPostProcessor):

    def priority(self) -> int:
        return DEFAULTS_PROVIDER_PRIORITY

    def apply(self, problem: Problem, context: ProblemContext) -> Problem:
        if problem.instance is not None or context.path is None:
            return problem
        return Problem.builder(problem).with_instance(context.path).build()
