"""Front-end state for one user: role input, busy flag, inline error and the quiz attempt."""

from __future__ import annotations

from typing import Protocol

import structlog

from quizy.client.api_client import QuizApiError
from quizy.game.quiz.attempt import QuizAttempt
from quizy.game.quiz.errors import IncompleteAnswersError, QuizParseError
from quizy.game.quiz.parser import parse_quiz_text
from quizy.game.quiz.types import QuestionReview, QuizPhase, ScoreSummary

logger = structlog.get_logger(__name__)

ROLE_REQUIRED_MESSAGE = "Please enter a role"
GENERATION_FAILED_MESSAGE = "Failed to generate quiz"


class QuizSource(Protocol):
    async def generate_quiz(self, role: str) -> str: ...


class QuizSession:
    def __init__(self, *, api_client: QuizSource) -> None:
        self._api_client = api_client
        self.attempt = QuizAttempt()
        self.role = ""
        self.busy = False
        self.error: str | None = None

    @property
    def phase(self) -> QuizPhase:
        return self.attempt.phase

    def dismiss_error(self) -> None:
        self.error = None

    async def generate(self, role: str | None = None) -> bool:
        if self.busy:
            return False
        if role is not None:
            self.role = role
        if not self.role.strip():
            self.error = ROLE_REQUIRED_MESSAGE
            return False

        self.error = None
        self.busy = True
        self.attempt.reset()
        try:
            raw_text = await self._api_client.generate_quiz(self.role.strip())
            questions = parse_quiz_text(raw_text)
            self.attempt.load_quiz(questions)
        except QuizParseError as exc:
            logger.warning(
                "quiz_parse_failed",
                question_number=exc.question_number,
                defect=exc.defect.value,
            )
            self.error = exc.message
        except QuizApiError as exc:
            self.error = exc.message or GENERATION_FAILED_MESSAGE
        except Exception as exc:
            logger.exception("quiz_generate_unexpected_error", error_type=type(exc).__name__)
            self.error = GENERATION_FAILED_MESSAGE
        finally:
            self.busy = False
        return self.error is None

    def select_answer(self, index: int, letter: str) -> None:
        self.attempt.select_answer(index, letter)

    def submit(self) -> ScoreSummary | None:
        try:
            summary = self.attempt.submit()
        except IncompleteAnswersError as exc:
            self.error = str(exc)
            return None
        self.error = None
        return summary

    def review(self) -> list[QuestionReview]:
        return self.attempt.review()

    def back_to_results(self) -> ScoreSummary:
        return self.attempt.back_to_results()

    def new_quiz(self) -> None:
        self.attempt.reset()
        self.role = ""
        self.error = None
