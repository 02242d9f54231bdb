"""Keyphrase in title: exact match, position, and content word coverage."""

import logging
from collections.abc import Sequence
from typing import Optional

from text_assessment.keyphrase.exact_match import parse_exact_match_request
from text_assessment.keyphrase.topic_forms import MorphologyProvider, find_topic_forms_in_string
from text_assessment.matching import locate, locate_relaxed
from text_assessment.models.paper import LocaleConfig, MatchResult, Paper, PhraseOccurrence, TopicForms
from text_assessment.words import BoundaryPolicy, consists_only_of_function_words, tokenize

logger = logging.getLogger(__name__)


def normalize_position(
    title: str,
    raw_position: int,
    function_words: Sequence[str],
    locale: str = "",
) -> int:
    """
    Collapse the keyphrase position to 0 when only function words precede it,
    so "kitchen sink" in "The kitchen sink" counts as the start of the title.
    Hyphens split words here, which also drops "after" from "after-school".
    """
    if raw_position <= 0 or not function_words:
        return raw_position

    before = tokenize(title[:raw_position], BoundaryPolicy.WITH_HYPHEN)
    if consists_only_of_function_words(before, function_words, locale):
        return 0
    return raw_position


def _has_edge_punctuation(keyphrase: str) -> bool:
    stripped = keyphrase.strip()
    return bool(stripped) and not (stripped[0].isalnum() and stripped[-1].isalnum())


class KeyphraseInTitleAssessor:
    """
    Checks, in order and stopping at the first hit:
    1. the exact keyphrase (unwrapped if quoted) occurs in the title;
    2. the raw keyphrase occurs when it has edge punctuation (e.g. '.rar');
    3. every content word occurs in some morphological form.
    """

    def __init__(self, morphology: Optional[MorphologyProvider] = None):
        self.morphology = morphology

    def assess(self, paper: Paper, locale_config: LocaleConfig) -> MatchResult:
        """Return the MatchResult for paper. Never raises for string input."""
        title, locale = paper.title, paper.locale
        function_words = locale_config.function_words

        request = parse_exact_match_request(paper.keyphrase)
        keyphrase = request.keyphrase

        occurrence = locate(title, keyphrase, locale)
        if occurrence.count == 0 and _has_edge_punctuation(keyphrase):
            logger.debug("Retrying keyphrase %r without word boundaries on punctuation", keyphrase)
            occurrence = locate_relaxed(title, keyphrase, locale)

        if occurrence.count > 0:
            return self._exact_match(title, occurrence, function_words, locale, request.exact_match_requested)

        if request.exact_match_requested:
            return MatchResult(exact_match_keyphrase=True)

        topic_forms = self._topic_forms(keyphrase, locale)
        if topic_forms is None:
            return MatchResult()

        # Only the keyphrase itself counts here, not its synonyms.
        coverage = find_topic_forms_in_string(topic_forms, title, use_synonyms=False, locale=locale)
        return MatchResult(all_words_found=coverage.percent_word_matches == 100)

    @staticmethod
    def _exact_match(
        title: str,
        occurrence: PhraseOccurrence,
        function_words: Sequence[str],
        locale: str,
        exact_match_keyphrase: bool,
    ) -> MatchResult:
        return MatchResult(
            exact_match_found=True,
            all_words_found=True,
            position=normalize_position(title, occurrence.position, function_words, locale),
            exact_match_keyphrase=exact_match_keyphrase,
        )

    def _topic_forms(self, keyphrase: str, locale: str) -> Optional[TopicForms]:
        """Forms from the morphology provider, or None when it has none for this locale."""
        if self.morphology is None:
            return None
        try:
            return self.morphology.get_topic_forms(keyphrase, locale)
        except (LookupError, ValueError) as e:
            logger.warning("Morphology unavailable for %r (%s): %s", keyphrase, locale, e)
            return None


def find_keyphrase_in_title(
    paper: Paper,
    locale_config: LocaleConfig,
    morphology: Optional[MorphologyProvider] = None,
) -> MatchResult:
    """Assess a single paper; see KeyphraseInTitleAssessor."""
    return KeyphraseInTitleAssessor(morphology).assess(paper, locale_config)
