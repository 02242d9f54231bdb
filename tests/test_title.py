"""Tests for the keyphrase-in-title assessment."""

import unicodedata
from unittest.mock import Mock

import pytest

from text_assessment.keyphrase.title import KeyphraseInTitleAssessor, find_keyphrase_in_title, normalize_position
from text_assessment.keyphrase.topic_forms import MorphologyProvider
from text_assessment.models.paper import LocaleConfig, MatchResult, Paper


def _make_paper(title: str, keyphrase: str = "kitchen sink", locale: str = "en_US") -> Paper:
    """Paper for testing."""
    return Paper(title=title, keyphrase=keyphrase, locale=locale)


class TestNormalizePosition:
    """Tests for normalize_position."""

    def test_leading_function_word_collapses(self) -> None:
        """'The Kitchen Sink Guide': raw position 4 becomes 0."""
        assert normalize_position("The Kitchen Sink Guide", 4, ["the"], "en_US") == 0

    def test_no_function_words_unchanged(self) -> None:
        """Without function words every position is returned as is."""
        for position in (0, 4, 17):
            assert normalize_position("The Kitchen Sink Guide", position, [], "en_US") == position

    def test_content_word_before_keeps_position(self) -> None:
        """A content word before the keyphrase keeps the raw position."""
        assert normalize_position("Best Kitchen Sink", 5, ["the"], "en_US") == 5

    def test_hyphenated_function_words(self) -> None:
        """Function words joined by hyphens or en-dashes are stripped too."""
        assert normalize_position("A–Z kitchen sink guide", 4, ["a", "z"], "en_US") == 0


class TestFindKeyphraseInTitle:
    """Tests for find_keyphrase_in_title."""

    def test_exact_match(self, english_config: LocaleConfig) -> None:
        """Keyphrase inside the title is found at its offset."""
        result = find_keyphrase_in_title(_make_paper("Best Kitchen Sink Reviews"), english_config)
        assert result == MatchResult(
            exact_match_found=True, all_words_found=True, position=5, exact_match_keyphrase=False
        )

    def test_position_after_function_word(self, english_config: LocaleConfig) -> None:
        """Only function words before the keyphrase give position 0."""
        result = find_keyphrase_in_title(_make_paper("The Kitchen Sink Guide"), english_config)
        assert result.exact_match_found is True
        assert result.position == 0

    def test_position_without_function_words(self, empty_config: LocaleConfig) -> None:
        """A locale without function words keeps the raw offset."""
        result = find_keyphrase_in_title(_make_paper("The Kitchen Sink Guide", locale="xx_XX"), empty_config)
        assert result.position == 4

    def test_quoted_keyphrase(self, english_config: LocaleConfig) -> None:
        """Quoted keyphrase is unwrapped and flagged."""
        result = find_keyphrase_in_title(_make_paper("Best Kitchen Sink Reviews", '"kitchen sink"'), english_config)
        assert result.exact_match_found is True
        assert result.exact_match_keyphrase is True
        assert result.position == 5

    def test_quoted_keyphrase_skips_morphology(self, english_config: LocaleConfig) -> None:
        """Missing exact match for a quoted keyphrase does not consult forms."""
        morphology = Mock()
        result = find_keyphrase_in_title(
            _make_paper("Sinks for Kitchens", '"kitchen sink"'), english_config, morphology
        )
        assert result == MatchResult(exact_match_keyphrase=True)
        morphology.get_topic_forms.assert_not_called()

    def test_coverage_only(self, english_config: LocaleConfig, kitchen_sink_morphology: MorphologyProvider) -> None:
        """All content words in some form: all words found, no position."""
        result = find_keyphrase_in_title(_make_paper("Sinks for Kitchens"), english_config, kitchen_sink_morphology)
        assert result == MatchResult(exact_match_found=False, all_words_found=True, position=-1)
        assert kitchen_sink_morphology.calls == [("kitchen sink", "en_US")]

    def test_partial_coverage(self, english_config: LocaleConfig, kitchen_sink_morphology: MorphologyProvider) -> None:
        """Missing content word: nothing found."""
        result = find_keyphrase_in_title(_make_paper("Kitchens of the World"), english_config, kitchen_sink_morphology)
        assert result == MatchResult()

    def test_synonyms_not_used(self, english_config: LocaleConfig, make_morphology) -> None:
        """Synonym forms do not count toward coverage."""
        morphology = make_morphology({"kitchen": ["kitchens"], "sink": ["sinks"]}, [{"basin": ["basins"]}])
        result = find_keyphrase_in_title(_make_paper("Stone basins"), english_config, morphology)
        assert result.all_words_found is False

    def test_no_morphology_provider(self, english_config: LocaleConfig) -> None:
        """Without a provider the coverage check is negative."""
        assert find_keyphrase_in_title(_make_paper("Sinks for Kitchens"), english_config) == MatchResult()

    def test_unsupported_locale(self, kitchen_sink_morphology: MorphologyProvider, empty_config: LocaleConfig) -> None:
        """Provider without forms for the locale: all words not found."""
        result = find_keyphrase_in_title(
            _make_paper("Sinks for Kitchens", locale="xx_XX"), empty_config, kitchen_sink_morphology
        )
        assert result.all_words_found is False

    def test_provider_error_degrades(self, english_config: LocaleConfig) -> None:
        """Lookup errors from the provider do not fail the assessment."""
        morphology = Mock()
        morphology.get_topic_forms.side_effect = LookupError("no morphology data")
        result = find_keyphrase_in_title(_make_paper("Sinks for Kitchens"), english_config, morphology)
        assert result == MatchResult()

    def test_punctuated_keyphrase_fallback(self, english_config: LocaleConfig) -> None:
        """'.rar' attached to a file name is found by the second search."""
        result = find_keyphrase_in_title(_make_paper("Extract archive.rar files", ".rar"), english_config)
        assert result.exact_match_found is True
        assert result.all_words_found is True
        assert result.position == 15

    def test_decomposed_title(self, english_config: LocaleConfig) -> None:
        """A title with decomposed accents still gives an exact match."""
        title = unicodedata.normalize("NFD", "Best Café Reviews")
        result = find_keyphrase_in_title(_make_paper(title, "café"), english_config)
        assert result == MatchResult(exact_match_found=True, all_words_found=True, position=5)

    def test_idempotent(self, english_config: LocaleConfig, kitchen_sink_morphology: MorphologyProvider) -> None:
        """Same inputs, same result; the paper is not modified."""
        assessor = KeyphraseInTitleAssessor(kitchen_sink_morphology)
        paper = _make_paper("The Kitchen Sink Guide")
        first = assessor.assess(paper, english_config)
        second = assessor.assess(paper, english_config)
        assert first == second
        assert paper.title == "The Kitchen Sink Guide"

    def test_configs_do_not_leak_between_calls(self, english_config: LocaleConfig, empty_config: LocaleConfig) -> None:
        """Function words from one call do not affect the next."""
        paper = _make_paper("The Kitchen Sink Guide")
        assert find_keyphrase_in_title(paper, english_config).position == 0
        assert find_keyphrase_in_title(paper, empty_config).position == 4
        assert find_keyphrase_in_title(paper, english_config).position == 0

    @pytest.mark.parametrize("title", ["", "Unrelated title"])
    def test_empty_or_unrelated_title(self, title: str, english_config: LocaleConfig) -> None:
        """No occurrence at all gives an all-false result."""
        assert find_keyphrase_in_title(_make_paper(title), english_config) == MatchResult()
