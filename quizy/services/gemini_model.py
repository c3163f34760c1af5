from __future__ import annotations

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from quizy.services.generation_errors import MissingApiCredentialError, TextGenerationError

DEFAULT_REQUEST_TIMEOUT_SECONDS = 60.0


def _status_code(exc: google_exceptions.GoogleAPIError) -> int | None:
    if isinstance(exc, google_exceptions.RetryError):
        return getattr(exc.cause, "code", None)
    return getattr(exc, "code", None)


class GeminiTextModel:
    """Text-in, text-out wrapper over a Gemini generative model.

    The SDK's own retry is switched off; QuizGenerator owns the retry policy.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model_name: str,
        request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        model: object | None = None,
    ) -> None:
        if not api_key:
            raise MissingApiCredentialError("Missing GEMINI_API_KEY in environment variables")
        self.model_name = model_name
        self.request_timeout_seconds = request_timeout_seconds
        if model is None:
            genai.configure(api_key=api_key)
            model = genai.GenerativeModel(model_name)
        self._model = model

    async def generate_text(self, prompt: str) -> str:
        try:
            response = await self._model.generate_content_async(
                prompt,
                request_options={"retry": None, "timeout": self.request_timeout_seconds},
            )
        except google_exceptions.GoogleAPIError as exc:
            message = getattr(exc, "message", None) or str(exc)
            raise TextGenerationError(message, status_code=_status_code(exc)) from exc

        try:
            return response.text
        except ValueError as exc:
            # raised by the SDK when the candidate was blocked or carries no text parts
            raise TextGenerationError(str(exc)) from exc
