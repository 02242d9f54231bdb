"""Detection of keyphrases the author quoted to request an exact match."""

from typing import NamedTuple

DOUBLE_QUOTES = frozenset('"“”„‟〝〞〟')


class ExactMatchRequest(NamedTuple):
    exact_match_requested: bool
    keyphrase: str


def parse_exact_match_request(raw_keyphrase: str) -> ExactMatchRequest:
    """
    '"kitchen sink"' -> (True, 'kitchen sink'); 'kitchen sink' -> (False, 'kitchen sink').
    Only a quote pair wrapping the whole keyphrase counts; inner quotes do not.
    """
    stripped = raw_keyphrase.strip()
    if len(stripped) > 2 and stripped[0] in DOUBLE_QUOTES and stripped[-1] in DOUBLE_QUOTES:
        return ExactMatchRequest(True, stripped[1:-1])
    return ExactMatchRequest(False, raw_keyphrase)
