"""Paper, locale configuration and keyphrase match models."""

from collections.abc import Mapping, Sequence
from pathlib import Path

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for locale config loading. Run: pip install pyyaml"
    ) from e
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Paper(BaseModel):
    """Content unit to assess. Not mutated by any assessment."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    keyphrase: str = ""
    locale: str = Field(default="en_US", description="e.g. 'en_US', 'tr_TR'")


class LocaleConfig(BaseModel):
    """Per-locale configuration supplied by the caller on every assessment."""

    locale: str = "en_US"
    function_words: list[str] = Field(
        default_factory=list,
        description="Articles, prepositions etc. stripped before the keyphrase",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LocaleConfig":
        """
        Load config from a YAML file. Supports nested (config:) or flat structure.
        Hyphenated function words (e.g. 'vis-à-vis') also contribute each part,
        since titles are tokenized on hyphens before filtering.
        """
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        nested = data.get("config") or {}

        words: list[str] = []
        for word in nested.get("function_words", data.get("function_words")) or []:
            word = str(word).strip()
            if not word:
                continue
            words.append(word)
            if "-" in word:
                words.extend(part for part in word.split("-") if part)

        return cls.model_validate(
            {
                "locale": nested.get("locale", data.get("locale", "en_US")),
                "function_words": list(dict.fromkeys(words)),
            }
        )


class TopicForms(BaseModel):
    """Morphological forms of the keyphrase content words, from a morphology provider."""

    keyphrase_forms: list[list[str]] = Field(
        default_factory=list,
        description="One list of forms per content word, in keyphrase order",
    )
    synonyms_forms: list[list[list[str]]] = Field(default_factory=list)

    @classmethod
    def from_mapping(
        cls,
        forms: Mapping[str, Sequence[str]],
        synonyms: Sequence[Mapping[str, Sequence[str]]] = (),
    ) -> "TopicForms":
        """Build from {content word: [forms]}; the word itself is always included."""

        def _word_forms(mapping: Mapping[str, Sequence[str]]) -> list[list[str]]:
            return [list(dict.fromkeys([word, *variants])) for word, variants in mapping.items()]

        return cls(
            keyphrase_forms=_word_forms(forms),
            synonyms_forms=[_word_forms(s) for s in synonyms],
        )


class PhraseOccurrence(BaseModel):
    """Occurrences of a phrase in a text: how many, and where the first one starts."""

    count: int = 0
    position: int = -1
    matches: list[str] = Field(default_factory=list)


class CoverageResult(BaseModel):
    """How many keyphrase content words were found through any of their forms."""

    count: int = 0
    percent_word_matches: int = 0


class MatchResult(BaseModel):
    """Outcome of looking for the keyphrase in a title."""

    exact_match_found: bool = False
    all_words_found: bool = False
    position: int = -1
    exact_match_keyphrase: bool = False

    @model_validator(mode="after")
    def _position_requires_exact_match(self) -> "MatchResult":
        if self.position >= 0 and not self.exact_match_found:
            raise ValueError("position is only set when an exact match was found")
        return self
