"""Placeholder document content keyed by document name."""

from .templates import SummaryProfile
from .synthesizer import (
    ContentSource,
    DocumentCategory,
    TemplateContentSource,
    classify,
    estimate_word_count,
    synthesize_content,
    synthesize_quick_summary,
    summary_profile,
)

__all__ = [
    "ContentSource",
    "DocumentCategory",
    "SummaryProfile",
    "TemplateContentSource",
    "classify",
    "estimate_word_count",
    "synthesize_content",
    "synthesize_quick_summary",
    "summary_profile",
]
