"""Inclusive language rule and phrase match models."""

from enum import IntEnum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Score(IntEnum):
    """Assessment score attached to a rule when one of its phrases is found."""

    NON_INCLUSIVE = 3
    POTENTIALLY_NON_INCLUSIVE = 6


class PhraseMatch(BaseModel):
    """A phrase found at token positions [start_token, end_token)."""

    model_config = ConfigDict(frozen=True)

    phrase: str
    start_token: int
    end_token: int


# Receives the full token list and the candidate matches; returns the matches it keeps.
ExceptionFilter = Callable[[list[str], list[PhraseMatch]], list[PhraseMatch]]


class InclusiveLanguageRule(BaseModel):
    """Declarative rule: phrases to flag, alternatives to suggest, and exceptions."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Stable rule id, e.g. 'normalPerson'")
    non_inclusive_phrases: tuple[str, ...] = Field(..., min_length=1)
    inclusive_alternatives: tuple[str, ...] = ()
    score: Score
    feedback_format: str = ""
    case_sensitive: bool = False
    exception_filter: Optional[ExceptionFilter] = Field(default=None, exclude=True)

    # Set once at registration time; opaque to the engine.
    category: Optional[str] = None
    learn_more_url: Optional[str] = None
