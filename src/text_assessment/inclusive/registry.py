"""Registry of inclusive language rule tables by category."""

from text_assessment.inclusive.configuration import OTHER_RULES
from text_assessment.models.rule import InclusiveLanguageRule


class RuleRegistry:
    """Provides the shipped rule tables. Tables are built once at import and never modified."""

    _tables: dict[str, tuple[InclusiveLanguageRule, ...]] = {
        "other": OTHER_RULES,
    }

    @classmethod
    def get(cls, category: str) -> tuple[InclusiveLanguageRule, ...]:
        """Get the rule table for a category."""
        rules = cls._tables.get(category.lower())
        if rules is None:
            raise ValueError(f"Unknown category: {category}. Available: {list(cls._tables.keys())}")
        return rules

    @classmethod
    def all_rules(cls) -> tuple[InclusiveLanguageRule, ...]:
        """Every registered rule, grouped by category in registration order."""
        return tuple(rule for rules in cls._tables.values() for rule in rules)

    @classmethod
    def find(cls, identifier: str) -> InclusiveLanguageRule:
        """Look up a single rule by its identifier (case-sensitive, e.g. 'normalPerson')."""
        for rule in cls.all_rules():
            if rule.identifier == identifier:
                return rule
        raise ValueError(f"Unknown rule: {identifier}")

    @classmethod
    def available_categories(cls) -> list[str]:
        """Return list of registered categories."""
        return list(cls._tables.keys())
