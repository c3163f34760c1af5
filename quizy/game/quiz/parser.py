"""Parser for the numbered multiple-choice layout requested by the quiz prompt.

The parser is strict: one malformed block rejects the whole response, so a quiz is
never loaded with missing options or an unscoreable answer.
"""

from __future__ import annotations

import re

from quizy.game.quiz.errors import QuizParseDefect, QuizParseError
from quizy.game.quiz.types import OPTION_LETTERS, Question

QUESTION_MARKER_RE = re.compile(r"^[ \t]*\d+\.[ \t]*Question:", re.IGNORECASE | re.MULTILINE)
QUESTION_LINE_RE = re.compile(r"^\d+\.\s*Question:(.*)$", re.IGNORECASE)
OPTION_LINE_RE = re.compile(r"^([A-D])\)\s*(.+)$")
ANSWER_LABEL_RE = re.compile(r"correct answer:", re.IGNORECASE)
ANSWER_LETTER_RE = re.compile(r"\b([A-D])\b", re.IGNORECASE)


def split_question_blocks(raw_text: str) -> list[str]:
    markers = list(QUESTION_MARKER_RE.finditer(raw_text))
    blocks: list[str] = []
    for position, marker in enumerate(markers):
        end = markers[position + 1].start() if position + 1 < len(markers) else len(raw_text)
        blocks.append(raw_text[marker.start() : end])
    return blocks


def _block_lines(block: str) -> list[str]:
    return [line.strip() for line in block.splitlines() if line.strip()]


def _extract_stem(lines: list[str]) -> str | None:
    for line in lines:
        matched = QUESTION_LINE_RE.match(line)
        if matched is not None:
            stem = matched.group(1).strip()
            return stem or None
    return None


def _extract_options(lines: list[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for line in lines:
        matched = OPTION_LINE_RE.match(line)
        if matched is not None:
            options[matched.group(1)] = matched.group(2).strip()
    return options


def _extract_answer(lines: list[str]) -> str | None:
    for line in lines:
        label = ANSWER_LABEL_RE.search(line)
        if label is None:
            continue
        letter = ANSWER_LETTER_RE.search(line, label.end())
        return letter.group(1).upper() if letter is not None else None
    return None


def parse_question_block(block: str, *, question_number: int) -> Question:
    lines = _block_lines(block)

    stem = _extract_stem(lines)
    if stem is None:
        raise QuizParseError(
            f"Question {question_number} is missing question text",
            defect=QuizParseDefect.MISSING_QUESTION_TEXT,
            question_number=question_number,
        )

    options = _extract_options(lines)
    missing = tuple(letter for letter in OPTION_LETTERS if letter not in options)
    if missing:
        raise QuizParseError(
            f"Question {question_number} is missing option(s) {', '.join(missing)}",
            defect=QuizParseDefect.MISSING_OPTIONS,
            question_number=question_number,
            missing_options=missing,
        )

    answer = _extract_answer(lines)
    if answer is None:
        raise QuizParseError(
            f"Question {question_number} has a missing or invalid correct answer",
            defect=QuizParseDefect.INVALID_ANSWER,
            question_number=question_number,
        )

    return Question(
        id=question_number,
        question=stem,
        options={letter: options[letter] for letter in OPTION_LETTERS},
        answer=answer,
    )


def parse_quiz_text(raw_text: str) -> list[Question]:
    blocks = split_question_blocks(raw_text or "")
    if not blocks:
        raise QuizParseError("Invalid response format", defect=QuizParseDefect.NO_QUESTIONS)
    return [
        parse_question_block(block, question_number=number)
        for number, block in enumerate(blocks, start=1)
    ]
