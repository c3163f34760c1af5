from __future__ import annotations

DEFAULT_QUESTION_COUNT = 10

# Must stay in lockstep with quizy.game.quiz.parser.
QUIZ_PROMPT_TEMPLATE = """Generate {count} multiple choice questions about {role}.
Format each question exactly like this:
1. Question: [question text]
A) [option text]
B) [option text]
C) [option text]
D) [option text]
Correct Answer: [letter]

Number the questions 1 to {count}. Every question must have exactly the four options A) to D) \
and one "Correct Answer:" line with a single letter.
Return all questions in a clear, numbered format."""


def build_quiz_prompt(role: str, *, question_count: int = DEFAULT_QUESTION_COUNT) -> str:
    normalized_role = role.strip()
    if not normalized_role:
        raise ValueError("role must not be blank")
    if question_count < 1:
        raise ValueError("question_count must be positive")
    return QUIZ_PROMPT_TEMPLATE.format(count=question_count, role=normalized_role)
