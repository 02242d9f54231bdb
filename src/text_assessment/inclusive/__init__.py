"""Inclusive language assessment: rule engine, rule helpers and shipped rule tables."""

from text_assessment.inclusive.engine import InclusiveLanguageEngine, evaluate, evaluate_rule
from text_assessment.inclusive.registry import RuleRegistry

__all__ = ["InclusiveLanguageEngine", "RuleRegistry", "evaluate", "evaluate_rule"]
