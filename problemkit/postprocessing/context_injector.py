"""
Injects context properties listed in the configuration into the final problem.
Missing context values and properties already defined on the Problem are skipped.
"""
from __future__ import annotations

from typing import Iterable

from problemkit.core.problem import Problem
from problemkit.postprocessing.base import ProblemContext, ProblemPostProcessor

CONTEXT_INJECTOR_PRIORITY = 100


class ContextPropertiesInjector(ProblemPostProcessor):

    def __init__(self, properties: Iterable[str]):
        # dict.fromkeys keeps configuration order and drops duplicates
        self._properties: tuple[str, ...] = tuple(dict.fromkeys(properties))

    @property
    def properties(self) -> tuple[str, ...]:
        return self._properties

    def priority(self) -> int:
        return CONTEXT_INJECTOR_PRIORITY

    def apply(self, problem: Problem, context: ProblemContext) -> Problem:
        missing = [
            name for name in self._properties
            if name not in problem.parameters and context.lookup(name) is not None
        ]
        if not missing:
            return problem

        builder = Problem.builder(problem)
        for name in missing:
            builder.with_parameter(name, context.lookup(name))
        return builder.build()
