"""Parsing and validation of free-form model replies into result structures."""

from __future__ import annotations

import json
import math
import random
import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from docinsight.metrics.observability import PipelineMetrics, get_logger
from docinsight.models import Citation, Document, DocumentSummary, QueryResponse, QueryResult, Theme
from docinsight.services.fallback import FallbackSynthesizer

# Greedy: first "{" through last "}". Braces inside string literals in any
# surrounding prose will widen the match; keep every caller on
# extract_json_object so the strategy can be swapped in one place.
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

UNKNOWN_DOCUMENT_NAME = "Unknown Document"
DEFAULT_CITATION_TEXT = "Supporting evidence from document"
DEFAULT_THEME_SUMMARY = "Theme identified across documents"
DEFAULT_DOCUMENT_SUMMARY = "Document summary not available"


class ParseError(ValueError):
    """Raised when no usable JSON object can be recovered from model text."""


@dataclass(frozen=True)
class ConfidenceRange:
    lower: float
    upper: float
    default: float


@dataclass(frozen=True)
class ValidationLimits:
    """Bounds applied to every parsed structure."""

    max_citations: int = 3
    max_themes: int = 3
    max_supporting_documents: int = 4
    max_key_points: int = 5
    max_topics: int = 4
    result_confidence: ConfidenceRange = ConfidenceRange(0.5, 0.95, 0.7)
    theme_confidence: ConfidenceRange = ConfidenceRange(0.6, 0.95, 0.75)
    summary_confidence: ConfidenceRange = ConfidenceRange(0.6, 0.95, 0.8)
    max_synthetic_page: int = 10
    max_synthetic_paragraph: int = 5


def extract_json_object(raw: str) -> dict[str, Any]:
    """Return the JSON object embedded in ``raw``.

    Raises ``ParseError`` when there is no brace-delimited span or the span is
    not a valid JSON object.
    """

    match = JSON_OBJECT_PATTERN.search(raw or "")
    if match is None:
        raise ParseError("No JSON object found in model response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON in model response: {exc.msg} at position {exc.pos}") from exc
    except RecursionError as exc:
        raise ParseError("Model response JSON is nested too deeply") from exc
    if not isinstance(parsed, dict):
        raise ParseError("Model response JSON is not an object")
    return parsed


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if math.isnan(number):
        return None
    return number


def clamp_confidence(value: Any, bounds: ConfidenceRange) -> float:
    """Clamp a model-supplied confidence into ``bounds``.

    Absent and non-numeric values take the range default; out-of-range numbers
    are pinned to the nearest boundary.
    """

    number = _as_number(value)
    if number is None:
        number = bounds.default
    return min(max(number, bounds.lower), bounds.upper)


def _as_text(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_positive_int(value: Any) -> int | None:
    number = _as_number(value)
    if number is None or math.isinf(number) or number < 1 or not number.is_integer():
        return None
    return int(number)


def _text_list(value: Any, limit: int) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    items: list[str] = []
    for item in value:
        text = _as_text(item)
        if text is not None:
            items.append(text)
    return tuple(items[:limit])


class ResponseParser:
    """Turns raw model text into validated results.

    The public ``parse_*`` methods never raise: when the text holds no valid
    JSON object the request is answered by the fallback synthesizer instead.
    """

    def __init__(
        self,
        fallback: FallbackSynthesizer | None = None,
        *,
        seed: int | None = None,
        limits: ValidationLimits | None = None,
    ) -> None:
        self._fallback = fallback or FallbackSynthesizer(seed=seed)
        self._seed = seed
        self._limits = limits or ValidationLimits()
        self._logger = get_logger("parsing")

    def parse_query_response(self, raw: str, query: str, documents: Sequence[Document]) -> QueryResponse:
        try:
            payload = extract_json_object(raw)
        except ParseError as exc:
            self._logger.warning("parse.failed", operation="query", detail=str(exc))
            PipelineMetrics.observe_fallback("query", "parse")
            return self._fallback.fallback_query(query, documents)
        response = self.validate_query_payload(payload)
        self._logger.info(
            "parse.complete",
            operation="query",
            result_count=len(response.results),
            theme_count=len(response.themes),
        )
        return response

    def parse_summary_response(self, raw: str, document: Document, content: str | None = None) -> DocumentSummary:
        try:
            payload = extract_json_object(raw)
        except ParseError as exc:
            self._logger.warning("parse.failed", operation="summary", document_id=document.id, detail=str(exc))
            PipelineMetrics.observe_fallback("summary", "parse")
            return self._fallback.fallback_summary(document, content)
        return self.validate_summary_payload(payload, document)

    def validate_query_payload(self, payload: Mapping[str, Any]) -> QueryResponse:
        rng = random.Random(self._seed)
        raw_results = payload.get("results")
        raw_themes = payload.get("themes")
        results = [
            self._validate_result(entry, rng)
            for entry in (raw_results if isinstance(raw_results, list) else [])
            if self._is_valid_result(entry)
        ]
        themes = [
            self._validate_theme(entry)
            for entry in (raw_themes if isinstance(raw_themes, list) else [])
            if isinstance(entry, dict) and _as_text(entry.get("title")) is not None
        ]
        return QueryResponse(results=tuple(results), themes=tuple(themes[: self._limits.max_themes]))

    def validate_summary_payload(self, payload: Mapping[str, Any], document: Document) -> DocumentSummary:
        word_count = _as_number(payload.get("wordCount"))
        if word_count is None or math.isinf(word_count):
            word_count = 0
        return DocumentSummary(
            document_id=_as_text(payload.get("documentId")) or document.id,
            document_name=_as_text(payload.get("documentName")) or document.name,
            summary=_as_text(payload.get("summary")) or DEFAULT_DOCUMENT_SUMMARY,
            key_points=_text_list(payload.get("keyPoints"), self._limits.max_key_points),
            word_count=max(int(word_count), 0),
            topics=_text_list(payload.get("topics"), self._limits.max_topics),
            confidence=clamp_confidence(payload.get("confidence"), self._limits.summary_confidence),
        )

    @staticmethod
    def _is_valid_result(entry: Any) -> bool:
        if not isinstance(entry, dict):
            return False
        return _as_text(entry.get("documentId")) is not None and _as_text(entry.get("answer")) is not None

    def _validate_result(self, entry: Mapping[str, Any], rng: random.Random) -> QueryResult:
        raw_citations = entry.get("citations")
        if not isinstance(raw_citations, list):
            raw_citations = []
        citations = tuple(
            self._validate_citation(cite, rng) for cite in raw_citations[: self._limits.max_citations]
        )
        return QueryResult(
            document_id=_as_text(entry.get("documentId")) or "",
            document_name=_as_text(entry.get("documentName")) or UNKNOWN_DOCUMENT_NAME,
            answer=_as_text(entry.get("answer")) or "",
            summary=_as_text(entry.get("summary")) or "",
            citations=citations,
            confidence=clamp_confidence(entry.get("confidence"), self._limits.result_confidence),
        )

    def _validate_citation(self, cite: Any, rng: random.Random) -> Citation:
        if not isinstance(cite, dict):
            cite = {}
        page = _as_positive_int(cite.get("page"))
        paragraph = _as_positive_int(cite.get("paragraph"))
        return Citation(
            page=page if page is not None else rng.randint(1, self._limits.max_synthetic_page),
            paragraph=paragraph if paragraph is not None else rng.randint(1, self._limits.max_synthetic_paragraph),
            text=_as_text(cite.get("text")) or DEFAULT_CITATION_TEXT,
        )

    def _validate_theme(self, entry: Mapping[str, Any]) -> Theme:
        return Theme(
            title=_as_text(entry.get("title")) or "",
            summary=_as_text(entry.get("summary")) or DEFAULT_THEME_SUMMARY,
            supporting_documents=_text_list(
                entry.get("supportingDocuments"),
                self._limits.max_supporting_documents,
            ),
            confidence=clamp_confidence(entry.get("confidence"), self._limits.theme_confidence),
        )
