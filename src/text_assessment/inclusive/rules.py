"""Rule helpers: consecutive word matching and exception filters."""

from collections.abc import Iterable, Sequence

from text_assessment.models.rule import ExceptionFilter, InclusiveLanguageRule, PhraseMatch


def includes_consecutive_words(tokens: Sequence[str], phrase_tokens: Sequence[str]) -> list[int]:
    """Start indices of every window of tokens equal to phrase_tokens."""
    width = len(phrase_tokens)
    if width == 0 or width > len(tokens):
        return []
    target = list(phrase_tokens)
    return [i for i in range(len(tokens) - width + 1) if list(tokens[i : i + width]) == target]


def _split_exceptions(exceptions: Iterable[str]) -> list[list[str]]:
    return [e.lower().split() for e in exceptions if e.strip()]


def not_preceded_by(exceptions: Iterable[str]) -> ExceptionFilter:
    """
    Veto matches directly preceded by one of the exceptions (case-insensitive).
    Exceptions may be multi-word, e.g. "not very".
    """
    split = _split_exceptions(exceptions)

    def _filter(tokens: list[str], matches: list[PhraseMatch]) -> list[PhraseMatch]:
        lowered = [t.lower() for t in tokens]
        return [
            m
            for m in matches
            if not any(
                len(e) <= m.start_token and lowered[m.start_token - len(e) : m.start_token] == e for e in split
            )
        ]

    return _filter


def not_followed_by(exceptions: Iterable[str]) -> ExceptionFilter:
    """Veto matches directly followed by one of the exceptions (case-insensitive)."""
    split = _split_exceptions(exceptions)

    def _filter(tokens: list[str], matches: list[PhraseMatch]) -> list[PhraseMatch]:
        lowered = [t.lower() for t in tokens]
        return [
            m for m in matches if not any(lowered[m.end_token : m.end_token + len(e)] == e for e in split)
        ]

    return _filter


def annotate_rules(
    rules: Iterable[InclusiveLanguageRule],
    category: str,
    learn_more_url: str,
) -> list[InclusiveLanguageRule]:
    """Copies of rules with category and learn-more URL set, for registration."""
    return [r.model_copy(update={"category": category, "learn_more_url": learn_more_url}) for r in rules]
