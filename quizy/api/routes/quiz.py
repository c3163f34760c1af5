from __future__ import annotations

import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from quizy.services.generation_errors import TextGenerationError
from quizy.services.quiz_generation import QuizGenerator

from .quiz_models import QuizGenerateFailure, QuizGenerateRequest, QuizGenerateResponse, QuizTextData

router = APIRouter(prefix="/api", tags=["quiz"])
logger = structlog.get_logger(__name__)


def _get_quiz_generator(request: Request) -> QuizGenerator:
    return request.app.state.quiz_generator


def _error_status(status_code: int | None) -> int:
    if status_code is not None and 400 <= int(status_code) <= 599:
        return int(status_code)
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _failure(*, status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=QuizGenerateFailure(error=error).model_dump(),
    )


@router.post("/generate-quiz", response_model=QuizGenerateResponse)
async def generate_quiz(payload: QuizGenerateRequest, request: Request) -> JSONResponse:
    role = (payload.role or "").strip()
    if not role:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Role is required"},
        )

    generator = _get_quiz_generator(request)
    logger.info("quiz_generate_requested", role=role)
    try:
        text = await generator.generate_quiz_text(role)
    except TextGenerationError as exc:
        logger.error(
            "quiz_generate_failed",
            role=role,
            status_code=exc.status_code,
            attempts=exc.attempts,
        )
        return _failure(status_code=_error_status(exc.status_code), error=exc.message)
    except Exception as exc:
        logger.exception("quiz_generate_unexpected_error", role=role, error_type=type(exc).__name__)
        return _failure(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error=str(exc))

    response = QuizGenerateResponse(data=QuizTextData(text=text, role=role))
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump())
