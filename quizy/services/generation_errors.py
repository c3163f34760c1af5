from __future__ import annotations

TRANSIENT_STATUS_CODES = frozenset({503})


class QuizGenerationError(Exception):
    pass


class MissingApiCredentialError(QuizGenerationError):
    pass


class TextGenerationError(QuizGenerationError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.attempts = 1

    @property
    def is_transient(self) -> bool:
        return self.status_code in TRANSIENT_STATUS_CODES
