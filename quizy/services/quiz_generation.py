from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Protocol

import structlog

from quizy.services.generation_errors import TextGenerationError
from quizy.services.quiz_prompt import DEFAULT_QUESTION_COUNT, build_quiz_prompt

logger = structlog.get_logger(__name__)

MAX_RETRIES = 3
RETRY_DELAY_MS = 2000

Sleep = Callable[[float], Awaitable[None]]


class TextModel(Protocol):
    model_name: str

    async def generate_text(self, prompt: str) -> str: ...


class QuizGenerator:
    def __init__(
        self,
        *,
        model: TextModel,
        max_retries: int = MAX_RETRIES,
        retry_delay_ms: int = RETRY_DELAY_MS,
        question_count: int = DEFAULT_QUESTION_COUNT,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.model = model
        self.max_retries = max(0, max_retries)
        self.retry_delay_ms = max(0, retry_delay_ms)
        self.question_count = question_count
        self._sleep = sleep

    async def generate(self, prompt: str) -> str:
        attempt = 1
        while True:
            try:
                return await self.model.generate_text(prompt)
            except TextGenerationError as exc:
                exc.attempts = attempt
                remaining = self.max_retries - (attempt - 1)
                if not exc.is_transient or remaining <= 0:
                    logger.warning(
                        "quiz_generation_failed",
                        attempts=attempt,
                        status_code=exc.status_code,
                        transient=exc.is_transient,
                    )
                    raise
                logger.info(
                    "quiz_generation_retry",
                    attempt=attempt,
                    remaining=remaining,
                    delay_ms=self.retry_delay_ms,
                )
                await self._sleep(self.retry_delay_ms / 1000.0)
                attempt += 1

    async def generate_quiz_text(self, role: str) -> str:
        prompt = build_quiz_prompt(role, question_count=self.question_count)
        logger.info("quiz_prompt_sent", model=self.model.model_name, question_count=self.question_count)
        return await self.generate(prompt)
