"""
Post-processor contract and the request-scoped context handed to it.

Post-processors implement the ProblemPostProcessor ABC. The pipeline never
knows about concrete implementations.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from problemkit.core.problem import Problem


@dataclass(frozen=True)
class ProblemContext:
    """Read-only facts about the request that produced the problem.

    Attributes:
        path: Request path, if known.
        cause: Exception the problem was created from, if any.
        properties: Correlation / diagnostic values (trace ids and the like).
    """
    path: Optional[str] = None
    cause: Optional[BaseException] = None
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))

    def lookup(self, name: str) -> Optional[Any]:
        """Return the value stored under `name`, or None when absent."""
        return self.properties.get(name)


class ProblemPostProcessor(ABC):
    """A unit of enrichment applied to a Problem before it leaves the system."""

    @abstractmethod
    def priority(self) -> int:
        """Ordering key. Lower values run first."""
        raise NotImplementedError

    @abstractmethod
    def apply(self, problem: Problem, context: ProblemContext) -> Problem:
        """Return a new Problem (or `problem` itself). Must never mutate the input."""
        raise NotImplementedError
