"""Locale-aware phrase matching shared by the keyphrase assessments."""

import re
import unicodedata

from text_assessment.models.paper import PhraseOccurrence
from text_assessment.words import locale_lower

# Characters that may surround a matched phrase.
_BOUNDARY = r"\s.,'()\"+\-;!?:/»«‹›<>"

# Length-preserving replacements, so offsets in the folded text stay valid.
_QUOTES = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‛": "'",
        "“": '"',
        "”": '"',
        "„": '"',
        "‟": '"',
        "\u00a0": " ",
    }
)


def _fold_char(char: str, locale: str) -> str:
    """Lowercase and strip diacritics from one character, keeping it one character long."""
    lowered = locale_lower(char, locale)
    base = "".join(c for c in unicodedata.normalize("NFD", lowered) if not unicodedata.combining(c))
    if len(base) == 1:
        return base
    return lowered if len(lowered) == 1 else char


def _fold_with_offsets(text: str, locale: str, case_sensitive: bool) -> tuple[str, list[int]]:
    """
    Fold text and map each folded character back to its offset in text.
    Combining marks are dropped, so decomposed "é" (e + U+0301) folds to "e".
    """
    text = text.translate(_QUOTES)
    if case_sensitive:
        return text, list(range(len(text)))
    chars: list[str] = []
    offsets: list[int] = []
    for i, char in enumerate(text):
        if unicodedata.combining(char):
            continue
        chars.append(_fold_char(char, locale))
        offsets.append(i)
    return "".join(chars), offsets


def fold(text: str, locale: str = "", case_sensitive: bool = False) -> str:
    """Normalize quotes, and unless case_sensitive, case and diacritics."""
    return _fold_with_offsets(text, locale, case_sensitive)[0]


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _phrase_pattern(phrase: str, relaxed: bool) -> re.Pattern[str]:
    """Escape the phrase literally and wrap it in word boundaries."""
    body = r"\s+".join(re.escape(part) for part in phrase.split())
    left = rf"(?:^|(?<=[{_BOUNDARY}]))"
    right = rf"(?=[{_BOUNDARY}]|$)"
    if relaxed:
        # Only demand a boundary where the phrase edge could run into a longer word.
        left = left if _is_word_char(phrase[0]) else ""
        right = right if _is_word_char(phrase[-1]) else ""
    return re.compile(left + body + right)


def _original_span(haystack: str, offsets: list[int], start: int, end: int) -> tuple[int, int]:
    """Span in haystack for a folded match, including trailing combining marks."""
    original_start = offsets[start]
    original_end = offsets[end - 1] + 1
    while original_end < len(haystack) and unicodedata.combining(haystack[original_end]):
        original_end += 1
    return original_start, original_end


def _search(haystack: str, phrase: str, locale: str, case_sensitive: bool, relaxed: bool) -> PhraseOccurrence:
    phrase = fold(phrase, locale, case_sensitive).strip()
    if not haystack or not phrase:
        return PhraseOccurrence()

    folded, offsets = _fold_with_offsets(haystack, locale, case_sensitive)
    spans = [
        _original_span(haystack, offsets, m.start(), m.end())
        for m in _phrase_pattern(phrase, relaxed).finditer(folded)
    ]
    if not spans:
        return PhraseOccurrence()
    return PhraseOccurrence(
        count=len(spans),
        position=spans[0][0],
        matches=[haystack[start:end] for start, end in spans],
    )


def locate(haystack: str, phrase: str, locale: str = "", case_sensitive: bool = False) -> PhraseOccurrence:
    """
    Find all non-overlapping occurrences of phrase as whole words in haystack.
    Regex metacharacters in phrase are matched literally. Returns the count and
    the character offset of the first occurrence (-1 when there is none).
    """
    return _search(haystack, phrase, locale, case_sensitive, relaxed=False)


def locate_relaxed(haystack: str, phrase: str, locale: str = "", case_sensitive: bool = False) -> PhraseOccurrence:
    """
    Like locate, but punctuation at the phrase edges may touch the surrounding text.
    '.rar' is found in 'file.rar', which locate rejects.
    """
    return _search(haystack, phrase, locale, case_sensitive, relaxed=True)
