"""
Exception hierarchy for problemkit.

Rule: every error has a machine-readable `code` string so callers
can branch on it without parsing English messages.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from problemkit.core.problem import Problem
    from problemkit.postprocessing.base import ProblemPostProcessor


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class ProblemKitError(Exception):
    """Base class for all library-level errors."""
    code: str = "PROBLEMKIT_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidParameterError(ProblemKitError, ValueError):
    code = "INVALID_PARAMETER"

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            message=f"Property {key} is reserved",
            details={"key": key},
        )


class EnrichmentFailure(ProblemKitError):
    """
    A post-processor failed unexpectedly.

    `problem` is the last Problem produced before the failing stage, so the
    caller can fall back to it. The original exception is `__cause__`.
    """
    code = "ENRICHMENT_FAILURE"

    def __init__(self, processor: "ProblemPostProcessor", problem: "Problem"):
        self.processor = processor
        self.problem = problem
        name = type(processor).__name__
        super().__init__(
            message=f"Post-processor {name} failed.",
            details={"processor": name},
        )


class ProblemError(Exception):
    """Raise a finished Problem from application code."""

    def __init__(self, problem: "Problem"):
        self.problem = problem
        super().__init__(problem.message)
