"""Data models for papers, locale configuration and match results."""

from text_assessment.models.paper import (
    CoverageResult,
    LocaleConfig,
    MatchResult,
    Paper,
    PhraseOccurrence,
    TopicForms,
)
from text_assessment.models.rule import ExceptionFilter, InclusiveLanguageRule, PhraseMatch, Score

__all__ = [
    "CoverageResult",
    "ExceptionFilter",
    "InclusiveLanguageRule",
    "LocaleConfig",
    "MatchResult",
    "Paper",
    "PhraseMatch",
    "PhraseOccurrence",
    "Score",
    "TopicForms",
]
