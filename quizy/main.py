import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quizy.api.routes.health import router as health_router
from quizy.api.routes.quiz import router as quiz_router
from quizy.core.config import Settings, get_settings, parse_cors_origins
from quizy.core.logging import configure_logging
from quizy.services.gemini_model import GeminiTextModel
from quizy.services.generation_errors import MissingApiCredentialError
from quizy.services.quiz_generation import QuizGenerator

logger = structlog.get_logger(__name__)


def build_quiz_generator(settings: Settings) -> QuizGenerator:
    model = GeminiTextModel(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        request_timeout_seconds=settings.gemini_request_timeout_seconds,
    )
    return QuizGenerator(
        model=model,
        max_retries=settings.generation_max_retries,
        retry_delay_ms=settings.generation_retry_delay_ms,
        question_count=settings.quiz_question_count,
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    if not (settings.gemini_api_key or "").strip():
        logger.critical("startup_missing_api_credential", env_var="GEMINI_API_KEY")
        raise MissingApiCredentialError("Missing GEMINI_API_KEY in environment variables")

    docs_enabled = bool(getattr(settings, "enable_openapi_docs", True))
    app = FastAPI(
        title="Quizy API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.quiz_generator = build_quiz_generator(settings)
    app.include_router(health_router)
    app.include_router(quiz_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "quizy.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
