"""
Progressive profiling: field extraction and per-session tracking.
"""

from finbot.core.profiling.ask_classifier import AskClassifier, KeywordAskClassifier
from finbot.core.profiling.extractor import FieldExtractor, extract_with_patterns
from finbot.core.profiling.profile import (
    PROFILE_FIELDS,
    ExtractionResult,
    ProfileField,
    SessionProfile,
)
from finbot.core.profiling.tracker import ProfileTracker

__all__ = [
    "AskClassifier",
    "ExtractionResult",
    "FieldExtractor",
    "KeywordAskClassifier",
    "PROFILE_FIELDS",
    "ProfileField",
    "ProfileTracker",
    "SessionProfile",
    "extract_with_patterns",
]
