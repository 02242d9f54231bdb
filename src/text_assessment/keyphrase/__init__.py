"""Keyphrase assessments: exact-match requests, topic forms, keyphrase in title."""

from text_assessment.keyphrase.exact_match import ExactMatchRequest, parse_exact_match_request
from text_assessment.keyphrase.title import (
    KeyphraseInTitleAssessor,
    find_keyphrase_in_title,
    normalize_position,
)
from text_assessment.keyphrase.topic_forms import MorphologyProvider, find_topic_forms_in_string

__all__ = [
    "ExactMatchRequest",
    "KeyphraseInTitleAssessor",
    "MorphologyProvider",
    "find_keyphrase_in_title",
    "find_topic_forms_in_string",
    "normalize_position",
    "parse_exact_match_request",
]
