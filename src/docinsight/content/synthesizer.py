"""Keyword classification of documents and the text synthesized for each class."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from . import templates


class DocumentCategory(str, Enum):
    """Coarse document classes recognised from the file name."""

    SOFTWARE_ENGINEERING = "software_engineering"
    RESEARCH = "research"
    POLICY = "policy"
    GENERAL = "general"


def classify(name: str) -> DocumentCategory:
    """Map a document name onto a category by case-insensitive substring match.

    Rules are checked in order; the first hit wins and anything unmatched is
    ``GENERAL``.
    """

    lowered = name.lower()
    if "unit" in lowered and "se" in lowered:
        return DocumentCategory.SOFTWARE_ENGINEERING
    if "research" in lowered or "paper" in lowered:
        return DocumentCategory.RESEARCH
    if "policy" in lowered or "guideline" in lowered:
        return DocumentCategory.POLICY
    return DocumentCategory.GENERAL


def synthesize_content(name: str, type: str) -> str:  # noqa: A002 - mirrors Document.type
    """Return the full placeholder body for a document."""

    category = classify(name)
    if category is DocumentCategory.GENERAL:
        return templates.GENERAL_CONTENT.format(name=name)
    return templates.CONTENT[category.value]


def synthesize_quick_summary(name: str, type: str) -> str:  # noqa: A002 - mirrors Document.type
    """Return a one-sentence description of a document."""

    return templates.QUICK_SUMMARIES[classify(name).value]


def estimate_word_count(content: str) -> int:
    return len(content) // 5


class ContentSource(Protocol):
    """Protocol for anything able to produce descriptive text for a document."""

    def content(self, name: str, type: str) -> str:  # noqa: A002
        """Return non-empty body text for the named document."""

    def quick_summary(self, name: str, type: str) -> str:  # noqa: A002
        """Return a one-sentence description of the named document."""


class TemplateContentSource:
    """Deterministic content source used until real extraction is wired in."""

    def content(self, name: str, type: str) -> str:  # noqa: A002
        return synthesize_content(name, type)

    def quick_summary(self, name: str, type: str) -> str:  # noqa: A002
        return synthesize_quick_summary(name, type)


def summary_profile(name: str) -> templates.SummaryProfile:
    """Canned summary, key points and topics for the document's category."""

    return templates.SUMMARY_PROFILES[classify(name).value]
