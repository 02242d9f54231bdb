"""Word tokenization and function word filtering."""

import re
import string
from collections.abc import Iterable, Sequence
from enum import Enum


class BoundaryPolicy(Enum):
    """Which characters separate words."""

    PLAIN = "plain"  # whitespace
    WITH_HYPHEN = "with_hyphen"  # whitespace, hyphen, en-dash


_SEPARATORS: dict[BoundaryPolicy, re.Pattern[str]] = {
    BoundaryPolicy.PLAIN: re.compile(r"\s+"),
    BoundaryPolicy.WITH_HYPHEN: re.compile(r"[\s\-–]+"),
}

_HTML_TAG = re.compile(r"<[^>]*>")

# Trimmed from token edges only, so "don't" and "e-mail" survive intact.
_EDGE_PUNCTUATION = string.punctuation + "“”„‟‘’‚‛«»‹›¿¡…—–·"

# Locales whose dotted/dotless i do not follow the default case mapping.
_DOTTED_I_LOCALES = ("tr", "az")


def locale_lower(text: str, locale: str = "") -> str:
    """Lowercase with the locale's case mapping (Turkish/Azerbaijani dotted I)."""
    if locale[:2].lower() in _DOTTED_I_LOCALES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()


def strip_tags(text: str) -> str:
    """Replace HTML tags with a space."""
    return _HTML_TAG.sub(" ", text)


def tokenize(text: str, boundary_policy: BoundaryPolicy = BoundaryPolicy.PLAIN) -> list[str]:
    """
    Split text into word tokens, in order.
    Tags are removed, edge punctuation is trimmed, and empty tokens are dropped.
    """
    if not text:
        return []
    tokens: list[str] = []
    for raw in _SEPARATORS[boundary_policy].split(strip_tags(text)):
        token = raw.strip(_EDGE_PUNCTUATION)
        if token:
            tokens.append(token)
    return tokens


def consists_only_of_function_words(
    tokens: Iterable[str],
    function_words: Sequence[str],
    locale: str = "",
) -> bool:
    """
    True when every token is a function word. An empty token sequence is True,
    so nothing before the keyphrase counts the same as only function words.
    """
    known = {locale_lower(w.strip(), locale) for w in function_words}
    return all(locale_lower(t.strip(), locale) in known for t in tokens)
