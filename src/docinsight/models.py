"""Shared domain models used across the DocInsight pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence


class DocumentStatus(str, Enum):
    """Lifecycle state of an uploaded document."""

    PROCESSING = "processing"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Document:
    """Uploaded document as handed over by the caller. Never mutated here."""

    id: str
    name: str
    type: str
    size: int = 0
    status: DocumentStatus = DocumentStatus.READY
    content: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.status == DocumentStatus.READY


@dataclass(frozen=True)
class Citation:
    """Supporting excerpt located by page and paragraph."""

    paragraph: int
    text: str
    page: int | None = None


@dataclass(frozen=True)
class QueryResult:
    """Answer extracted from a single document."""

    document_id: str
    document_name: str
    answer: str
    citations: Sequence[Citation]
    confidence: float
    summary: str = ""


@dataclass(frozen=True)
class Theme:
    """Pattern observed across several documents."""

    title: str
    summary: str
    supporting_documents: Sequence[str]
    confidence: float


@dataclass(frozen=True)
class QueryResponse:
    """Per-document answers plus cross-document themes for one query."""

    results: Sequence[QueryResult] = field(default_factory=tuple)
    themes: Sequence[Theme] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentSummary:
    """Structured summary of one document."""

    document_id: str
    document_name: str
    summary: str
    key_points: Sequence[str]
    word_count: int
    topics: Sequence[str]
    confidence: float


def to_payload(value: Any) -> Any:
    """Render domain objects as the camelCase JSON structure used by clients."""

    if isinstance(value, QueryResponse):
        return {
            "results": [to_payload(result) for result in value.results],
            "themes": [to_payload(theme) for theme in value.themes],
        }
    if isinstance(value, QueryResult):
        return {
            "documentId": value.document_id,
            "documentName": value.document_name,
            "answer": value.answer,
            "summary": value.summary,
            "citations": [to_payload(citation) for citation in value.citations],
            "confidence": value.confidence,
        }
    if isinstance(value, Citation):
        payload: dict[str, Any] = {"paragraph": value.paragraph, "text": value.text}
        if value.page is not None:
            payload["page"] = value.page
        return payload
    if isinstance(value, Theme):
        return {
            "title": value.title,
            "summary": value.summary,
            "supportingDocuments": list(value.supporting_documents),
            "confidence": value.confidence,
        }
    if isinstance(value, DocumentSummary):
        return {
            "documentId": value.document_id,
            "documentName": value.document_name,
            "summary": value.summary,
            "keyPoints": list(value.key_points),
            "wordCount": value.word_count,
            "topics": list(value.topics),
            "confidence": value.confidence,
        }
    raise TypeError(f"Unsupported payload type: {type(value).__name__}")
