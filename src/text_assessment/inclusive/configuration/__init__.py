"""Shipped inclusive language rule tables."""

from text_assessment.inclusive.configuration.other import OTHER_RULES

__all__ = ["OTHER_RULES"]
