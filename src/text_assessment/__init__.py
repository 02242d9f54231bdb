"""Text assessment: keyphrase-in-title and inclusive language checks."""

from text_assessment.inclusive.engine import InclusiveLanguageEngine, evaluate
from text_assessment.keyphrase.title import KeyphraseInTitleAssessor, find_keyphrase_in_title

__all__ = [
    "InclusiveLanguageEngine",
    "KeyphraseInTitleAssessor",
    "evaluate",
    "find_keyphrase_in_title",
]
