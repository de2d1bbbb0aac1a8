from fastapi import FastAPI

from problemkit.core.config import Settings, settings
from problemkit.core.logging import configure_logging
from problemkit.handlers import register_problem_handlers
from problemkit.postprocessing import (
    ContextPropertiesInjector,
    PostProcessingPipeline,
    ProblemDefaultsProvider,
    ProblemLogger,
)
from problemkit.schemas.problem import ProblemDocument


def build_pipeline(config: Settings) -> PostProcessingPipeline:
    pipeline = PostProcessingPipeline([ProblemDefaultsProvider()])
    if config.context_properties_list:
        pipeline.register(ContextPropertiesInjector(config.context_properties_list))
    if config.PROBLEM_LOGGING_ENABLED:
        pipeline.register(ProblemLogger())
    return pipeline


def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config.LOG_LEVEL, config.PROBLEM_LOG_LEVEL)

    app = FastAPI(
        title="problemkit",
        description=(
            "All error responses are RFC7807 problem documents "
            "(`application/problem+json`)."
        ),
        version="1.0.0",
        responses={
            "default": {"model": ProblemDocument, "description": "Problem document"},
        },
    )

    register_problem_handlers(app, build_pipeline(config))

    @app.get("/health", tags=["health"], summary="Health check")
    def health():
        return {"status": "ok", "env": config.APP_ENV}

    return app


app = create_app()
