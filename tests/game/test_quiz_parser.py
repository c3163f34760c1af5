from __future__ import annotations

import pytest

from quizy.game.quiz.errors import QuizParseDefect, QuizParseError
from quizy.game.quiz.parser import parse_quiz_text, split_question_blocks
from tests.game.quiz_fixtures import question_block


def test_parse_returns_records_in_source_order_with_ordinal_ids() -> None:
    raw_text = "\n".join(
        [
            question_block(1, stem="What is 2+2?"),
            question_block(2, stem="Which HTTP verb is idempotent?", answer_line="Correct Answer: C"),
            question_block(3, stem="Pick the odd one out", answer_line="Correct Answer: A"),
        ]
    )

    questions = parse_quiz_text(raw_text)

    assert [question.id for question in questions] == [1, 2, 3]
    assert [question.question for question in questions] == [
        "What is 2+2?",
        "Which HTTP verb is idempotent?",
        "Pick the odd one out",
    ]
    assert [question.answer for question in questions] == ["B", "C", "A"]
    assert questions[0].options == {"A": "3", "B": "4", "C": "5", "D": "6"}


def test_parse_discards_leading_prose_and_uses_position_not_printed_number() -> None:
    raw_text = (
        "Sure! Here are your questions about backend development.\n\n"
        + question_block(7)
        + "\n\n"
        + question_block(3, answer_line="correct answer: d")
    )

    questions = parse_quiz_text(raw_text)

    assert [question.id for question in questions] == [1, 2]
    assert questions[1].answer == "D"


def test_parse_accepts_indented_markers_and_case_insensitive_label() -> None:
    raw_text = "     1. question: What does CSS stand for?\nA) a\nB) b\nC) Cascading Style Sheets\nD) d\nCorrect Answer: C"

    questions = parse_quiz_text(raw_text)

    assert questions[0].question == "What does CSS stand for?"
    assert questions[0].answer == "C"


def test_parse_keeps_duplicate_questions() -> None:
    raw_text = question_block(1) + "\n" + question_block(2)

    questions = parse_quiz_text(raw_text)

    assert len(questions) == 2
    assert questions[0].question == questions[1].question


def test_parse_last_repeated_option_wins() -> None:
    raw_text = question_block(1) + "\nB) four"

    questions = parse_quiz_text(raw_text)

    assert questions[0].options["B"] == "four"


def test_parse_reads_first_letter_after_answer_label() -> None:
    raw_text = question_block(1, answer_line="Correct Answer: **B) 4**")

    assert parse_quiz_text(raw_text)[0].answer == "B"


def test_parse_fails_when_option_is_missing() -> None:
    raw_text = question_block(1, options={"A": "3", "B": "4", "C": "5"})

    with pytest.raises(QuizParseError) as exc_info:
        parse_quiz_text(raw_text)

    assert exc_info.value.defect is QuizParseDefect.MISSING_OPTIONS
    assert exc_info.value.question_number == 1
    assert exc_info.value.missing_options == ("D",)
    assert "Question 1" in exc_info.value.message
    assert "D" in exc_info.value.message


def test_parse_names_every_missing_option_of_the_offending_block() -> None:
    raw_text = question_block(1) + "\n" + question_block(2, options={"B": "4", "D": "6"})

    with pytest.raises(QuizParseError) as exc_info:
        parse_quiz_text(raw_text)

    assert exc_info.value.question_number == 2
    assert exc_info.value.missing_options == ("A", "C")
    assert exc_info.value.message == "Question 2 is missing option(s) A, C"


@pytest.mark.parametrize(
    "answer_line",
    [None, "Correct Answer:", "Correct Answer: E", "Correct Answer: none of these"],
)
def test_parse_fails_without_valid_answer_letter(answer_line: str | None) -> None:
    raw_text = question_block(1) + "\n" + question_block(2, answer_line=answer_line)

    with pytest.raises(QuizParseError) as exc_info:
        parse_quiz_text(raw_text)

    assert exc_info.value.defect is QuizParseDefect.INVALID_ANSWER
    assert exc_info.value.question_number == 2


def test_parse_fails_when_question_text_is_empty() -> None:
    raw_text = question_block(1, stem="")

    with pytest.raises(QuizParseError) as exc_info:
        parse_quiz_text(raw_text)

    assert exc_info.value.defect is QuizParseDefect.MISSING_QUESTION_TEXT
    assert exc_info.value.message == "Question 1 is missing question text"


@pytest.mark.parametrize("raw_text", ["", "I cannot help with that.", "1. What is 2+2?\nA) 3"])
def test_parse_fails_when_no_question_blocks_found(raw_text: str) -> None:
    with pytest.raises(QuizParseError) as exc_info:
        parse_quiz_text(raw_text)

    assert exc_info.value.defect is QuizParseDefect.NO_QUESTIONS
    assert exc_info.value.question_number is None
    assert exc_info.value.message == "Invalid response format"


def test_split_question_blocks_runs_each_block_to_next_marker() -> None:
    raw_text = "intro\n1. Question: one\nA) a\n2. Question: two\nB) b\n"

    blocks = split_question_blocks(raw_text)

    assert blocks == ["1. Question: one\nA) a\n", "2. Question: two\nB) b\n"]
