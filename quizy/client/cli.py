from __future__ import annotations

import argparse
import asyncio
import os
from collections.abc import Callable

from quizy.client.api_client import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS, QuizApiClient
from quizy.client.session import QuizSession
from quizy.core.logging import configure_logging
from quizy.game.quiz.types import (
    OPTION_LETTERS,
    OptionReviewStatus,
    Question,
    QuestionReview,
    QuizPhase,
    ScoreSummary,
)

Prompt = Callable[[str], str]
Echo = Callable[[str], None]

REVIEW_MARKERS = {
    OptionReviewStatus.CORRECT: "[+]",
    OptionReviewStatus.INCORRECT_SELECTION: "[x]",
    OptionReviewStatus.NEUTRAL: "   ",
}
QUIT_INPUTS = {"q", "quit", "exit"}


class QuitRequested(Exception):
    pass


def render_question(index: int, question: Question, *, selected: str | None = None) -> str:
    lines = [f"{index + 1}. {question.question}"]
    for letter, text in question.options.items():
        mark = "*" if letter == selected else " "
        lines.append(f"  {mark} {letter}) {text}")
    return "\n".join(lines)


def render_summary(summary: ScoreSummary) -> str:
    return f"Score: {summary.score} out of {summary.total} ({summary.percent}%)"


def render_review(review: QuestionReview) -> str:
    lines = [f"{review.index + 1}. {review.question.question}"]
    for option in review.options:
        lines.append(f"  {REVIEW_MARKERS[option.status]} {option.letter}) {option.text}")
    if review.selected is None:
        lines.append("  (not answered)")
    return "\n".join(lines)


def _ask(prompt: Prompt, label: str) -> str:
    try:
        value = prompt(label)
    except EOFError as exc:
        raise QuitRequested from exc
    if value.strip().lower() in QUIT_INPUTS:
        raise QuitRequested
    return value


def _ask_choice(prompt: Prompt, echo: Echo, label: str, choices: dict[str, str]) -> str:
    while True:
        value = _ask(prompt, label).strip().lower()
        if value in choices:
            return choices[value]
        echo(f"Please choose one of: {', '.join(sorted(choices))}")


async def _generate(session: QuizSession, prompt: Prompt, echo: Echo) -> None:
    while session.phase is QuizPhase.IDLE:
        role = session.role or _ask(prompt, "Enter your role (e.g. frontend developer): ")
        if role.strip():
            echo("Generating Quiz...")
        if not await session.generate(role):
            echo(f"Error: {session.error}")
            session.dismiss_error()
            session.role = ""


def _answer_questions(session: QuizSession, prompt: Prompt, echo: Echo) -> None:
    letters = {letter.lower(): letter for letter in OPTION_LETTERS}
    while session.phase is QuizPhase.ANSWERING:
        answers = session.attempt.answers
        for index, question in enumerate(session.attempt.questions):
            if index in answers:
                continue
            echo("")
            echo(render_question(index, question))
            session.select_answer(index, _ask_choice(prompt, echo, "Your answer: ", letters))
        if session.submit() is None:
            echo(f"Error: {session.error}")
            session.dismiss_error()


def _show_results(session: QuizSession, prompt: Prompt, echo: Echo) -> None:
    while session.phase in (QuizPhase.SCORED, QuizPhase.REVIEWING):
        if session.phase is QuizPhase.SCORED:
            echo("")
            echo("Quiz Results")
            echo(render_summary(session.attempt.summary()))
            action = _ask_choice(
                prompt, echo, "[r]eview answers, [n]ew quiz, [q]uit: ", {"r": "review", "n": "new"}
            )
            if action == "review":
                for review in session.review():
                    echo("")
                    echo(render_review(review))
                continue
        else:
            action = _ask_choice(
                prompt, echo, "[b]ack to results, [n]ew quiz, [q]uit: ", {"b": "back", "n": "new"}
            )
            if action == "back":
                session.back_to_results()
                continue
        session.new_quiz()


async def play(session: QuizSession, *, prompt: Prompt = input, echo: Echo = print) -> None:
    try:
        while True:
            await _generate(session, prompt, echo)
            _answer_questions(session, prompt, echo)
            _show_results(session, prompt, echo)
    except QuitRequested:
        echo("Bye.")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a generated multiple-choice quiz for a job role")
    parser.add_argument("--api-url", default=os.environ.get("QUIZY_API_URL", DEFAULT_API_URL))
    parser.add_argument("--role", default="")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level, json_logs=False)
    session = QuizSession(
        api_client=QuizApiClient(base_url=args.api_url, timeout_seconds=args.timeout),
    )
    session.role = args.role
    asyncio.run(play(session))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
