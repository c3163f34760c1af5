from __future__ import annotations

from collections.abc import Sequence

from quizy.game.quiz.errors import IncompleteAnswersError, InvalidSelectionError, QuizStateError
from quizy.game.quiz.review import build_question_reviews, count_correct_answers
from quizy.game.quiz.types import OPTION_LETTERS, Question, QuestionReview, QuizPhase, ScoreSummary


class QuizAttempt:
    """One quiz from load through scoring and review until reset.

    Transitions: IDLE -> ANSWERING (load_quiz) -> SCORED (submit) <-> REVIEWING
    (review / back_to_results); reset() returns to IDLE from any phase.
    """

    def __init__(self) -> None:
        self._phase = QuizPhase.IDLE
        self._questions: tuple[Question, ...] = ()
        self._answers: dict[int, str] = {}
        self._score: int | None = None

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def answers(self) -> dict[int, str]:
        return dict(self._answers)

    @property
    def score(self) -> int | None:
        return self._score

    @property
    def is_complete(self) -> bool:
        return len(self._answers) == len(self._questions)

    def _require_phase(self, *allowed: QuizPhase, action: str) -> None:
        if self._phase not in allowed:
            raise QuizStateError(f"cannot {action} while quiz is {self._phase.value}")

    def load_quiz(self, questions: Sequence[Question]) -> None:
        self._require_phase(QuizPhase.IDLE, action="load a quiz")
        if not questions:
            raise QuizStateError("cannot load a quiz without questions")
        self._questions = tuple(questions)
        self._answers = {}
        self._score = None
        self._phase = QuizPhase.ANSWERING

    def select_answer(self, index: int, letter: str) -> None:
        self._require_phase(QuizPhase.ANSWERING, action="select an answer")
        if not 0 <= index < len(self._questions):
            raise InvalidSelectionError(f"question index {index} is out of range")
        if letter not in OPTION_LETTERS:
            raise InvalidSelectionError(f"option {letter!r} is not one of {', '.join(OPTION_LETTERS)}")
        self._answers[index] = letter

    def submit(self) -> ScoreSummary:
        self._require_phase(QuizPhase.ANSWERING, action="submit")
        if not self.is_complete:
            raise IncompleteAnswersError(answered=len(self._answers), total=len(self._questions))
        self._score = count_correct_answers(self._questions, self._answers)
        self._phase = QuizPhase.SCORED
        return self.summary()

    def summary(self) -> ScoreSummary:
        self._require_phase(QuizPhase.SCORED, QuizPhase.REVIEWING, action="read the score")
        return ScoreSummary(score=self._score or 0, total=len(self._questions))

    def review(self) -> list[QuestionReview]:
        self._require_phase(QuizPhase.SCORED, action="review answers")
        self._phase = QuizPhase.REVIEWING
        return self.review_items()

    def review_items(self) -> list[QuestionReview]:
        self._require_phase(QuizPhase.REVIEWING, action="list reviewed answers")
        return build_question_reviews(self._questions, self._answers)

    def back_to_results(self) -> ScoreSummary:
        self._require_phase(QuizPhase.REVIEWING, action="go back to results")
        self._phase = QuizPhase.SCORED
        return self.summary()

    def reset(self) -> None:
        self._questions = ()
        self._answers = {}
        self._score = None
        self._phase = QuizPhase.IDLE
