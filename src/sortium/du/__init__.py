"""Dialogue understanding: prompt rendering and intent classification."""

from sortium.du.classifier import LMIntentClassifier, extract_first_candidate
from sortium.du.prompt import PLACEHOLDERS, PromptTemplate, format_option_list

__all__ = [
    "LMIntentClassifier",
    "extract_first_candidate",
    "PromptTemplate",
    "format_option_list",
    "PLACEHOLDERS",
]
