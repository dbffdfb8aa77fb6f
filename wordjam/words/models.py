"""Data models for word validation."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single reason a submitted word was rejected."""
    code: str
    message: str
    word: Optional[str] = None


class WordCheck(BaseModel):
    """Result of checking a candidate word."""
    word: str = ""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)

    @property
    def code(self) -> Optional[str]:
        """Code of the first error, if any."""
        return self.errors[0].code if self.errors else None

    @property
    def message(self) -> str:
        return self.errors[0].message if self.errors else ""
