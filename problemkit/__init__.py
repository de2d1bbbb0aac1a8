"""
RFC7807 problem details: an immutable Problem, its builder, and the
post-processing pipeline that enriches problems before they are returned.
"""
from problemkit.core.errors import (
    EnrichmentFailure,
    InvalidParameterError,
    ProblemError,
    ProblemKitError,
)
from problemkit.core.problem import MEDIA_TYPE, RESERVED_PROPERTIES, Problem, ProblemBuilder

__all__ = [
    "EnrichmentFailure",
    "InvalidParameterError",
    "MEDIA_TYPE",
    "Problem",
    "ProblemBuilder",
    "ProblemError",
    "ProblemKitError",
    "RESERVED_PROPERTIES",
]
