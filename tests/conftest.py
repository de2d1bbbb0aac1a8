"""
Shared pytest fixtures.

Builds a small FastAPI app with endpoints that fail in different ways, so the
handlers and the pipeline can be exercised without a real service.
"""
from http import HTTPStatus

import pytest
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.testclient import TestClient

from problemkit.core.config import Settings
from problemkit.core.errors import ProblemError
from problemkit.core.problem import Problem
from problemkit.handlers import register_problem_handlers
from problemkit.main import build_pipeline
from problemkit.postprocessing import PostProcessingPipeline, ProblemContext

SAMPLE_TITLE = "I'm a teapot"
SAMPLE_DETAIL = "A small one"


def make_app(pipeline: PostProcessingPipeline) -> FastAPI:
    app = FastAPI()
    register_problem_handlers(app, pipeline)

    @app.middleware("http")
    async def correlation(request: Request, call_next):
        trace_id = request.headers.get("X-Trace-Id")
        if trace_id:
            request.state.problem_context = {"traceId": trace_id}
        return await call_next(request)

    @app.get("/throw/generic/runtime-exception")
    def runtime_exception(message: str = ""):
        raise RuntimeError(message)

    @app.get("/throw/generic/http-problem")
    def http_problem(status: int, title: str, detail: str):
        raise ProblemError(
            Problem.builder()
            .with_status(status)
            .with_title(title)
            .with_detail(detail)
            .with_header("X-RFC7807", "IsAlive")
            .build()
        )

    @app.get("/throw/generic/http-exception")
    def http_exception():
        raise HTTPException(status_code=404, detail="No such order", headers={"X-Reason": "missing"})

    @app.get("/throw/generic/client-closed")
    def client_closed():
        raise HTTPException(status_code=499, detail="client closed")

    @app.get("/validated")
    def validated(limit: int = Query(ge=1)):
        return {"limit": limit}

    return app


@pytest.fixture()
def settings():
    return Settings(_env_file=None, PROBLEM_CONTEXT_PROPERTIES="traceId", LOG_LEVEL="DEBUG")


@pytest.fixture()
def pipeline(settings):
    return build_pipeline(settings)


@pytest.fixture()
def client(pipeline):
    # Exception handlers registered for `Exception` re-raise after responding;
    # keep the response instead.
    with TestClient(make_app(pipeline), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture()
def context():
    return ProblemContext(path="/orders/17", properties={"traceId": "abc"})


@pytest.fixture()
def teapot():
    return (
        Problem.builder()
        .with_status(HTTPStatus.TOO_MANY_REQUESTS)
        .with_title(SAMPLE_TITLE)
        .with_detail(SAMPLE_DETAIL)
        .with_header("X-RFC7807", "IsAlive")
        .build()
    )
