"""Coverage of keyphrase content words in a text, through their morphological forms."""

import logging
from typing import Optional, Protocol

from text_assessment.matching import locate
from text_assessment.models.paper import CoverageResult, TopicForms

logger = logging.getLogger(__name__)


class MorphologyProvider(Protocol):
    """Upstream collaborator that expands a keyphrase into inflected forms per content word."""

    def get_topic_forms(self, keyphrase: str, locale: str) -> Optional[TopicForms]:
        """Return forms for the keyphrase, or None when the locale is not supported."""
        ...


def _coverage(word_forms: list[list[str]], text: str, locale: str, case_sensitive: bool) -> CoverageResult:
    """Count content words with at least one form found in text."""
    if not word_forms:
        return CoverageResult()
    count = sum(
        1
        for forms in word_forms
        if any(locate(text, form, locale, case_sensitive).count > 0 for form in forms)
    )
    return CoverageResult(count=count, percent_word_matches=count * 100 // len(word_forms))


def find_topic_forms_in_string(
    topic_forms: TopicForms,
    text: str,
    use_synonyms: bool = False,
    locale: str = "",
    case_sensitive: bool = False,
) -> CoverageResult:
    """
    Percentage of keyphrase content words that occur in text in any of their forms.
    With use_synonyms, each synonym is scored the same way and the best result wins.
    """
    best = _coverage(topic_forms.keyphrase_forms, text, locale, case_sensitive)
    synonyms = topic_forms.synonyms_forms if use_synonyms else []

    for synonym_forms in synonyms:
        if best.percent_word_matches == 100:
            break
        result = _coverage(synonym_forms, text, locale, case_sensitive)
        if result.percent_word_matches > best.percent_word_matches:
            best = result
    logger.debug("Topic forms coverage: %d%%", best.percent_word_matches)
    return best
