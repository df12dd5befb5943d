"""Deterministic answers and summaries produced without the generative backend."""

from __future__ import annotations

import random
from typing import Sequence

from docinsight.content import ContentSource, TemplateContentSource, estimate_word_count, summary_profile
from docinsight.models import Citation, Document, DocumentSummary, QueryResponse, QueryResult, Theme

RESULT_CONFIDENCE_BASE = 0.72
RESULT_CONFIDENCE_JITTER = 0.18
PRIMARY_THEME_CONFIDENCE = 0.84
SECONDARY_THEME_CONFIDENCE = 0.76
SUMMARY_CONFIDENCE = 0.85


class FallbackSynthesizer:
    """Builds schema-valid responses from document metadata alone.

    Each call draws from its own ``random.Random`` so concurrent callers share
    no state. With a fixed ``seed`` every call is reproducible.
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        max_results: int = 4,
        content_source: ContentSource | None = None,
    ) -> None:
        self._seed = seed
        self._max_results = max_results
        self._content = content_source or TemplateContentSource()

    def _rng(self) -> random.Random:
        return random.Random(self._seed)

    def fallback_query(self, query: str, documents: Sequence[Document]) -> QueryResponse:
        rng = self._rng()
        results = [self._result(query, document, rng) for document in documents[: self._max_results]]
        names = [document.name for document in documents]
        themes = [
            Theme(
                title=f"Primary Research Theme: {query}",
                summary=(
                    f"The dominant theme across your document collection centers on {query}. "
                    "This theme emerges consistently with supporting evidence, detailed analysis, and "
                    "coverage of key aspects. Cross-document analysis reveals correlations and "
                    "complementary findings that reinforce the primary research focus."
                ),
                supporting_documents=tuple(names[:3]),
                confidence=PRIMARY_THEME_CONFIDENCE,
            ),
            Theme(
                title="Methodological and Analytical Frameworks",
                summary=(
                    "Secondary themes identify common methodological approaches and analytical "
                    "frameworks used across the documents. These patterns show consistent research "
                    "rigor and provide multiple perspectives on the core research question."
                ),
                supporting_documents=tuple(names[1:4]),
                confidence=SECONDARY_THEME_CONFIDENCE,
            ),
        ]
        return QueryResponse(results=tuple(results), themes=tuple(themes))

    def fallback_summary(self, document: Document, content: str | None = None) -> DocumentSummary:
        if content is None:
            content = self._content.content(document.name, document.type)
        profile = summary_profile(document.name)
        return DocumentSummary(
            document_id=document.id,
            document_name=document.name,
            summary=profile.summary,
            key_points=tuple(profile.key_points),
            word_count=estimate_word_count(content),
            topics=tuple(profile.topics),
            confidence=SUMMARY_CONFIDENCE,
        )

    @staticmethod
    def _result(query: str, document: Document, rng: random.Random) -> QueryResult:
        name = document.name
        citations = (
            Citation(
                page=rng.randint(1, 15),
                paragraph=rng.randint(1, 12),
                text=(
                    f'"Key finding from {name}: This document presents data and analysis that '
                    f'directly supports the research on {query}, including specific evidence and '
                    'measurable outcomes."'
                ),
            ),
            Citation(
                page=rng.randint(1, 15),
                paragraph=rng.randint(1, 12),
                text=(
                    f'"Additional insight from {name}: The research methodology and results provide '
                    f'substantial evidence for conclusions related to {query}."'
                ),
            ),
        )
        return QueryResult(
            document_id=document.id,
            document_name=name,
            answer=(
                f'Analysis of "{name}" reveals insights related to "{query}". The document provides '
                "information including data points, methodologies, and evidence-based conclusions "
                "that address key aspects of your research question. Findings include quantitative "
                "results, qualitative assessments, and strategic recommendations relevant to the topic."
            ),
            summary=f"{name} contributes evidence and analysis for understanding {query}.",
            citations=citations,
            confidence=RESULT_CONFIDENCE_BASE + rng.random() * RESULT_CONFIDENCE_JITTER,
        )
