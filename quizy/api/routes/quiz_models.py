from __future__ import annotations

from pydantic import BaseModel


class QuizGenerateRequest(BaseModel):
    role: str | None = None


class QuizTextData(BaseModel):
    text: str
    role: str


class QuizGenerateResponse(BaseModel):
    success: bool = True
    data: QuizTextData


class QuizGenerateFailure(BaseModel):
    success: bool = False
    error: str
