from quizy.game.quiz.attempt import QuizAttempt
from quizy.game.quiz.parser import parse_quiz_text
from quizy.game.quiz.types import Question, QuizPhase, ScoreSummary

__all__ = [
    "Question",
    "QuizAttempt",
    "QuizPhase",
    "ScoreSummary",
    "parse_quiz_text",
]
