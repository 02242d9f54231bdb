"""Inclusive language engine: flags configured phrases in text, with exceptions."""

import logging
from collections.abc import Sequence

from text_assessment.inclusive.rules import includes_consecutive_words
from text_assessment.models.rule import InclusiveLanguageRule, PhraseMatch
from text_assessment.words import BoundaryPolicy, tokenize

logger = logging.getLogger(__name__)


def evaluate_rule(tokens: list[str], rule: InclusiveLanguageRule) -> list[PhraseMatch]:
    """
    Matches of one rule in a token list, in text order.
    Each phrase variant is matched on its own; the exception filter then vetoes
    matches that belong to a different, separately scored phrase.
    """
    words = tokens if rule.case_sensitive else [t.lower() for t in tokens]

    matches: list[PhraseMatch] = []
    seen: set[tuple[str, ...]] = set()
    for phrase in rule.non_inclusive_phrases:
        phrase_tokens = tokenize(phrase, BoundaryPolicy.PLAIN)
        if not rule.case_sensitive:
            phrase_tokens = [t.lower() for t in phrase_tokens]
        # Variants differing only in case collapse when case is ignored.
        if tuple(phrase_tokens) in seen:
            continue
        seen.add(tuple(phrase_tokens))
        matches.extend(
            PhraseMatch(phrase=phrase, start_token=start, end_token=start + len(phrase_tokens))
            for start in includes_consecutive_words(words, phrase_tokens)
        )

    if matches and rule.exception_filter is not None:
        kept = rule.exception_filter(words, matches)
        if len(kept) < len(matches):
            logger.debug("Rule %s: %d match(es) vetoed by exceptions", rule.identifier, len(matches) - len(kept))
        matches = kept

    return sorted(matches, key=lambda m: (m.start_token, m.end_token))


class InclusiveLanguageEngine:
    """
    Evaluates a fixed rule table against texts.
    Rules without surviving matches are left out of the result.
    """

    def __init__(self, rules: Sequence[InclusiveLanguageRule]):
        self.rules = tuple(rules)

    def evaluate(self, text: str) -> dict[str, list[PhraseMatch]]:
        """Map rule identifier -> matches for every rule that matched text."""
        tokens = tokenize(text, BoundaryPolicy.PLAIN)
        results: dict[str, list[PhraseMatch]] = {}
        if not tokens:
            return results

        for rule in self.rules:
            matches = evaluate_rule(tokens, rule)
            if matches:
                results[rule.identifier] = matches
        return results

    def evaluate_many(self, texts: Sequence[str]) -> list[dict[str, list[PhraseMatch]]]:
        """Evaluate several texts; one result mapping per text."""
        return [self.evaluate(t) for t in texts]


def evaluate(text: str, rules: Sequence[InclusiveLanguageRule]) -> dict[str, list[PhraseMatch]]:
    """Evaluate rules against text; see InclusiveLanguageEngine."""
    return InclusiveLanguageEngine(rules).evaluate(text)
