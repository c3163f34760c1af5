from __future__ import annotations

from typing import Any

import httpx
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
GENERATE_QUIZ_PATH = "/api/generate-quiz"
# generation may sit through several retry delays upstream
DEFAULT_TIMEOUT_SECONDS = 120.0


class QuizApiError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message") or body.get("error")
    return message if isinstance(message, str) and message else None


def _extract_text(body: Any) -> str:
    if not isinstance(body, dict) or body.get("success") is not True:
        raise QuizApiError("Invalid response format")
    data = body.get("data")
    text = data.get("text") if isinstance(data, dict) else None
    if not isinstance(text, str):
        raise QuizApiError("Invalid response format")
    return text


class QuizApiClient:
    def __init__(
        self,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def generate_quiz(self, role: str) -> str:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(GENERATE_QUIZ_PATH, json={"role": role})
        except httpx.HTTPError as exc:
            logger.warning("quiz_api_request_failed", error_type=type(exc).__name__)
            raise QuizApiError("Failed to generate quiz") from exc

        if response.is_error:
            raise QuizApiError(
                _error_message(response) or "Failed to generate quiz",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise QuizApiError("Invalid response format", status_code=response.status_code) from exc
        return _extract_text(body)
