from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

OPTION_LETTERS: tuple[str, str, str, str] = ("A", "B", "C", "D")


@dataclass(frozen=True, slots=True)
class Question:
    id: int
    question: str
    options: Mapping[str, str]
    answer: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


class QuizPhase(str, Enum):
    IDLE = "IDLE"
    ANSWERING = "ANSWERING"
    SCORED = "SCORED"
    REVIEWING = "REVIEWING"


class OptionReviewStatus(str, Enum):
    CORRECT = "CORRECT"
    INCORRECT_SELECTION = "INCORRECT_SELECTION"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True, slots=True)
class OptionReview:
    letter: str
    text: str
    status: OptionReviewStatus


@dataclass(frozen=True, slots=True)
class QuestionReview:
    index: int
    question: Question
    selected: str | None
    options: tuple[OptionReview, ...]

    @property
    def is_correct(self) -> bool:
        return self.selected == self.question.answer


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    score: int
    total: int

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        # half-up, not banker's rounding
        return (self.score * 200 + self.total) // (self.total * 2)
