"""
FastAPI integration: turns exceptions into problems, post-processes them and
writes `application/problem+json` responses.

No stack traces or internal details are exposed to clients for 5xx errors.
"""
from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from problemkit.core.errors import EnrichmentFailure, ProblemError
from problemkit.core.problem import MEDIA_TYPE, Problem, reason_phrase, to_status
from problemkit.postprocessing import PostProcessingPipeline, ProblemContext
from problemkit.schemas.problem import Violation

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def problem_body(problem: Problem) -> dict[str, Any]:
    """Body document: standard fields first (absent ones omitted), then extensions."""
    body: dict[str, Any] = {
        "type": problem.type,
        "title": problem.title,
        "status": int(problem.status),
        "detail": problem.detail,
        "instance": problem.instance,
    }
    body = {key: value for key, value in body.items() if value is not None}
    body.update(problem.parameters)
    return body


class ProblemResponse(JSONResponse):
    media_type = MEDIA_TYPE

    def __init__(self, problem: Problem):
        super().__init__(
            content=problem_body(problem),
            status_code=int(problem.status),
            headers={name: str(value) for name, value in problem.headers.items()},
        )


# ---------------------------------------------------------------------------
# Pipeline plumbing
# ---------------------------------------------------------------------------

def _context(request: Request, exc: Exception) -> ProblemContext:
    return ProblemContext(
        path=request.url.path,
        cause=exc,
        properties=getattr(request.state, "problem_context", None) or {},
    )


def _respond(request: Request, exc: Exception, problem: Problem) -> ProblemResponse:
    pipeline: PostProcessingPipeline = request.app.state.problem_pipeline
    try:
        problem = pipeline.apply(problem, _context(request, exc))
    except EnrichmentFailure as failure:
        # Answer with the problem as produced, before any enrichment
        logger.exception("Problem post-processing failed: %s", failure.message)
    return ProblemResponse(problem)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def problem_error_handler(request: Request, exc: ProblemError) -> ProblemResponse:
    return _respond(request, exc, exc.problem)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ProblemResponse:
    status = to_status(exc.status_code)
    title = reason_phrase(status)
    builder = Problem.builder().with_status(status).with_title(title)
    if exc.detail and exc.detail != title:
        builder.with_detail(str(exc.detail))
    for name, value in (exc.headers or {}).items():
        builder.with_header(name, value)
    return _respond(request, exc, builder.build())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ProblemResponse:
    """Return 400 with machine-readable field violations."""
    violations = []
    for error in exc.errors():
        violations.append(Violation(
            field=".".join(str(loc) for loc in error["loc"] if loc != "body"),
            message=error["msg"],
        ).model_dump())
    problem = (
        Problem.builder()
        .with_status(HTTPStatus.BAD_REQUEST)
        .with_title(HTTPStatus.BAD_REQUEST.phrase)
        .with_parameter("violations", violations)
        .build()
    )
    return _respond(request, exc, problem)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ProblemResponse:
    return _respond(request, exc, Problem.value_of(HTTPStatus.INTERNAL_SERVER_ERROR))


def register_problem_handlers(app: FastAPI, pipeline: PostProcessingPipeline) -> None:
    """Install the pipeline and the exception handlers (most specific first)."""
    app.state.problem_pipeline = pipeline
    app.add_exception_handler(ProblemError, problem_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
