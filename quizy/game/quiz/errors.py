from __future__ import annotations

from enum import Enum


class QuizError(Exception):
    pass


class QuizParseDefect(str, Enum):
    NO_QUESTIONS = "NO_QUESTIONS"
    MISSING_QUESTION_TEXT = "MISSING_QUESTION_TEXT"
    MISSING_OPTIONS = "MISSING_OPTIONS"
    INVALID_ANSWER = "INVALID_ANSWER"


class QuizParseError(QuizError):
    def __init__(
        self,
        message: str,
        *,
        defect: QuizParseDefect,
        question_number: int | None = None,
        missing_options: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.defect = defect
        self.question_number = question_number
        self.missing_options = missing_options


class QuizStateError(QuizError):
    pass


class InvalidSelectionError(QuizError):
    pass


class IncompleteAnswersError(QuizError):
    def __init__(self, *, answered: int, total: int) -> None:
        super().__init__("Please answer all questions before submitting")
        self.answered = answered
        self.total = total
