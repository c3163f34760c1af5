from __future__ import annotations

import pytest
from google.api_core import exceptions as google_exceptions

from quizy.services.gemini_model import GeminiTextModel
from quizy.services.generation_errors import MissingApiCredentialError, TextGenerationError
from quizy.services.quiz_generation import MAX_RETRIES, QuizGenerator


class _Response:
    def __init__(self, text: str | None) -> None:
        self._text = text

    @property
    def text(self) -> str:
        if self._text is None:
            raise ValueError("The response.text quick accessor requires a valid Part")
        return self._text


class _StubGenerativeModel:
    def __init__(self, *, response: _Response | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.prompts: list[str] = []
        self.request_options: list[dict[str, object] | None] = []

    async def generate_content_async(
        self,
        prompt: str,
        *,
        request_options: dict[str, object] | None = None,
    ) -> _Response:
        self.prompts.append(prompt)
        self.request_options.append(request_options)
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def _model(stub: _StubGenerativeModel) -> GeminiTextModel:
    return GeminiTextModel(api_key="key", model_name="gemini-test", request_timeout_seconds=30.0, model=stub)


@pytest.mark.asyncio
async def test_generate_text_returns_response_text() -> None:
    stub = _StubGenerativeModel(response=_Response("1. Question: hi"))

    assert await _model(stub).generate_text("prompt") == "1. Question: hi"
    assert stub.prompts == ["prompt"]


@pytest.mark.asyncio
async def test_generate_text_maps_service_unavailable_to_transient_error() -> None:
    stub = _StubGenerativeModel(error=google_exceptions.ServiceUnavailable("model overloaded"))

    with pytest.raises(TextGenerationError) as exc_info:
        await _model(stub).generate_text("prompt")

    assert exc_info.value.status_code == 503
    assert exc_info.value.is_transient is True
    assert exc_info.value.message == "model overloaded"


@pytest.mark.asyncio
async def test_generate_text_maps_other_api_errors_with_status() -> None:
    stub = _StubGenerativeModel(error=google_exceptions.PermissionDenied("API key not valid"))

    with pytest.raises(TextGenerationError) as exc_info:
        await _model(stub).generate_text("prompt")

    assert exc_info.value.status_code == 403
    assert exc_info.value.is_transient is False


@pytest.mark.asyncio
async def test_generate_text_maps_blocked_response_to_error_without_status() -> None:
    stub = _StubGenerativeModel(response=_Response(None))

    with pytest.raises(TextGenerationError) as exc_info:
        await _model(stub).generate_text("prompt")

    assert exc_info.value.status_code is None


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(MissingApiCredentialError):
        GeminiTextModel(api_key="", model_name="gemini-test")


@pytest.mark.asyncio
async def test_generate_text_disables_sdk_retry() -> None:
    stub = _StubGenerativeModel(response=_Response("text"))

    await _model(stub).generate_text("prompt")

    assert stub.request_options == [{"retry": None, "timeout": 30.0}]


@pytest.mark.asyncio
async def test_generate_text_maps_retry_error_to_cause_status() -> None:
    error = google_exceptions.RetryError(
        "Timeout of 600.0s exceeded",
        google_exceptions.ServiceUnavailable("model overloaded"),
    )
    stub = _StubGenerativeModel(error=error)

    with pytest.raises(TextGenerationError) as exc_info:
        await _model(stub).generate_text("prompt")

    assert exc_info.value.status_code == 503
    assert exc_info.value.is_transient is True
    assert exc_info.value.message == "Timeout of 600.0s exceeded"


@pytest.mark.asyncio
async def test_overloaded_endpoint_is_retried_by_quiz_generator_only() -> None:
    stub = _StubGenerativeModel(error=google_exceptions.ServiceUnavailable("model overloaded"))
    delays: list[float] = []

    async def _sleep(seconds: float) -> None:
        delays.append(seconds)

    generator = QuizGenerator(model=_model(stub), sleep=_sleep)

    with pytest.raises(TextGenerationError) as exc_info:
        await generator.generate("prompt")

    assert len(stub.prompts) == 1 + MAX_RETRIES
    assert delays == [2.0] * MAX_RETRIES
    assert exc_info.value.status_code == 503
    assert all(options == {"retry": None, "timeout": 30.0} for options in stub.request_options)
