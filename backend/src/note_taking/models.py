"""Pydantic models for API responses and the LanguageTool payload."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ErrorResponse(BaseModel):
    success: bool = False
    message: str


class InvalidFileTypeResponse(BaseModel):
    error: str


class UploadResponse(BaseModel):
    success: bool = True
    message: str = "File saved successfully"
    grammar_suggestions: list[str] = Field(default_factory=list)


class FileListResponse(BaseModel):
    success: bool = True
    files: list[str] = Field(default_factory=list)


# LanguageTool /v2/check response (only the fields we use)


class MatchContext(BaseModel):
    text: str = ""


class GrammarMatch(BaseModel):
    message: str = ""
    offset: int = 0
    length: int = 0
    context: MatchContext = Field(default_factory=MatchContext)


class GrammarCheckResult(BaseModel):
    matches: list[GrammarMatch] = Field(default_factory=list)

    @field_validator("matches", mode="before")
    @classmethod
    def _null_matches(cls, v):
        return [] if v is None else v
