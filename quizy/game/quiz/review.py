from __future__ import annotations

from collections.abc import Mapping, Sequence

from quizy.game.quiz.types import (
    OptionReview,
    OptionReviewStatus,
    Question,
    QuestionReview,
)


def count_correct_answers(questions: Sequence[Question], answers: Mapping[int, str]) -> int:
    return sum(1 for index, question in enumerate(questions) if answers.get(index) == question.answer)


def classify_option(*, letter: str, correct: str, selected: str | None) -> OptionReviewStatus:
    if letter == correct:
        return OptionReviewStatus.CORRECT
    if letter == selected:
        return OptionReviewStatus.INCORRECT_SELECTION
    return OptionReviewStatus.NEUTRAL


def build_question_reviews(
    questions: Sequence[Question],
    answers: Mapping[int, str],
) -> list[QuestionReview]:
    reviews: list[QuestionReview] = []
    for index, question in enumerate(questions):
        selected = answers.get(index)
        reviews.append(
            QuestionReview(
                index=index,
                question=question,
                selected=selected,
                options=tuple(
                    OptionReview(
                        letter=letter,
                        text=text,
                        status=classify_option(letter=letter, correct=question.answer, selected=selected),
                    )
                    for letter, text in question.options.items()
                ),
            )
        )
    return reviews
