"""Pytest fixtures for text-assessment tests."""

from typing import Optional

import pytest

from text_assessment.models.paper import LocaleConfig, TopicForms


class FakeMorphology:
    """Morphology provider returning fixed forms per locale."""

    def __init__(self, forms: dict[str, list[str]], synonyms: Optional[list[dict[str, list[str]]]] = None):
        self.forms = forms
        self.synonyms = synonyms or []
        self.calls: list[tuple[str, str]] = []

    def get_topic_forms(self, keyphrase: str, locale: str) -> Optional[TopicForms]:
        self.calls.append((keyphrase, locale))
        if not locale.startswith("en"):
            return None
        return TopicForms.from_mapping(self.forms, self.synonyms)


@pytest.fixture
def english_config() -> LocaleConfig:
    """English config with a handful of function words."""
    return LocaleConfig(locale="en_US", function_words=["the", "a", "an", "of", "for", "z"])


@pytest.fixture
def empty_config() -> LocaleConfig:
    """Config for a locale without function words."""
    return LocaleConfig(locale="xx_XX")


@pytest.fixture
def kitchen_sink_morphology() -> FakeMorphology:
    """Forms for the keyphrase 'kitchen sink'."""
    return FakeMorphology({"kitchen": ["kitchen", "kitchens"], "sink": ["sink", "sinks"]})


@pytest.fixture
def make_morphology():
    """Factory for providers with custom forms and synonyms."""
    return FakeMorphology
