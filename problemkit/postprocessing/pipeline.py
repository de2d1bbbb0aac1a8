"""
Ordered post-processing of problems.

Processors are sorted once, when registered: ascending priority, ties kept in
registration order (list.sort is stable). apply() folds a Problem through
them, each stage receiving the previous stage's output.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from problemkit.core.errors import EnrichmentFailure
from problemkit.core.problem import Problem
from problemkit.postprocessing.base import ProblemContext, ProblemPostProcessor

logger = logging.getLogger(__name__)


class PostProcessingPipeline:
    """Process-wide registry of post-processors. Register at startup, read afterwards."""

    def __init__(self, processors: Optional[Iterable[ProblemPostProcessor]] = None):
        self._processors: list[ProblemPostProcessor] = []
        for processor in processors or ():
            self.register(processor)

    def register(self, processor: ProblemPostProcessor) -> "PostProcessingPipeline":
        self._processors.append(processor)
        self._processors.sort(key=lambda p: p.priority())
        logger.debug(
            "Registered post-processor %s (priority=%d)",
            type(processor).__name__, processor.priority(),
        )
        return self

    @property
    def processors(self) -> tuple[ProblemPostProcessor, ...]:
        return tuple(self._processors)

    def apply(self, problem: Problem, context: Optional[ProblemContext] = None) -> Problem:
        """
        Run every processor in order and return the final Problem.

        Raises EnrichmentFailure (chained to the original error) when a
        processor fails; `.problem` holds the last Problem produced.
        """
        context = context or ProblemContext()
        for processor in self._processors:
            try:
                problem = processor.apply(problem, context)
            except EnrichmentFailure:
                raise
            except Exception as exc:
                raise EnrichmentFailure(processor, problem) from exc
        return problem
