"""Query and summary orchestration over the generative backend.

Every backend or parse failure is absorbed here and answered with fallback
output, so callers always receive a schema-valid result. The only error that
reaches callers is ``PreconditionError`` when the documents asked
for are not ready. Keep it that way unless the product decision changes.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence
from uuid import NAMESPACE_URL, uuid5

from docinsight.metrics.observability import PipelineMetrics, get_logger
from docinsight.models import Document, DocumentSummary, QueryResponse
from docinsight.services.fallback import FallbackSynthesizer
from docinsight.services.gateway import GatewayError, GenerationBackend
from docinsight.services.parsing import ResponseParser
from docinsight.services.prompts import PromptBuilder


class PreconditionError(ValueError):
    """Raised when a request cannot be served with the documents supplied."""


class QueryService:
    """Answers questions and summarizes documents, falling back on any failure."""

    def __init__(
        self,
        generator: GenerationBackend,
        prompt_builder: PromptBuilder | None = None,
        parser: ResponseParser | None = None,
        fallback: FallbackSynthesizer | None = None,
        *,
        summary_concurrency: int = 4,
    ) -> None:
        self._generator = generator
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._fallback = fallback or FallbackSynthesizer()
        self._parser = parser or ResponseParser(self._fallback)
        self._summary_concurrency = max(summary_concurrency, 1)
        self._logger = get_logger("query")

    @staticmethod
    def ready_documents(documents: Sequence[Document]) -> list[Document]:
        return [document for document in documents if document.is_ready]

    def answer_query(self, query: str, documents: Sequence[Document]) -> QueryResponse:
        ready = self.ready_documents(documents)
        if not ready:
            raise PreconditionError("No documents ready for querying")

        start = time.perf_counter()
        query_id = uuid5(NAMESPACE_URL, query).hex
        self._logger.info("query.start", query_id=query_id, document_count=len(ready))
        prompt = self._prompt_builder.build_query_prompt(query, ready)
        try:
            raw = self._generator.generate(prompt)
        except GatewayError as exc:
            self._logger.warning(
                "fallback.used",
                operation="query",
                query_id=query_id,
                error_kind=type(exc).__name__,
                detail=str(exc),
            )
            PipelineMetrics.observe_fallback("query", "gateway")
            response = self._fallback.fallback_query(query, ready)
        else:
            response = self._parser.parse_query_response(raw, query, ready)

        PipelineMetrics.observe_results(len(response.results))
        self._logger.info(
            "query.complete",
            query_id=query_id,
            result_count=len(response.results),
            theme_count=len(response.themes),
            duration_seconds=time.perf_counter() - start,
        )
        return response

    def summarize_document(self, document: Document) -> DocumentSummary:
        if not document.is_ready:
            raise PreconditionError(f"Document {document.id} is not ready for summarizing")
        content = self._prompt_builder.content_for(document)
        prompt = self._prompt_builder.build_summary_prompt(document, content)
        try:
            raw = self._generator.generate(prompt)
        except GatewayError as exc:
            self._logger.warning(
                "fallback.used",
                operation="summary",
                document_id=document.id,
                error_kind=type(exc).__name__,
                detail=str(exc),
            )
            PipelineMetrics.observe_fallback("summary", "gateway")
            return self._fallback.fallback_summary(document, content)
        summary = self._parser.parse_summary_response(raw, document, content)
        self._logger.info("summary.complete", document_id=document.id, key_points=len(summary.key_points))
        return summary

    def summarize_documents(self, documents: Sequence[Document]) -> list[DocumentSummary]:
        """Summarize every ready document concurrently, preserving input order."""

        ready = self.ready_documents(documents)
        if not ready:
            raise PreconditionError("No documents ready for summarizing")
        workers = min(self._summary_concurrency, len(ready))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="summary") as pool:
            return list(pool.map(self._summarize_isolated, ready))

    def _summarize_isolated(self, document: Document) -> DocumentSummary:
        # One failing document must not discard the summaries of the others
        try:
            return self.summarize_document(document)
        except Exception as exc:
            self._logger.warning(
                "summary.failed",
                document_id=document.id,
                error_kind=type(exc).__name__,
                detail=str(exc),
            )
            PipelineMetrics.observe_fallback("summary", "error")
            return self._fallback.fallback_summary(document)
