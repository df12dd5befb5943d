"""Prompt construction for query answering and document summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from docinsight.content import ContentSource, TemplateContentSource, estimate_word_count
from docinsight.models import Document

QUERY_TEMPLATE = """You are an expert research analyst with advanced document analysis capabilities. Your task is to provide precise, evidence-based answers to research queries by thoroughly analyzing the provided documents.

RESEARCH QUERY: "{query}"

DOCUMENT COLLECTION FOR ANALYSIS:
{documents}

ANALYSIS INSTRUCTIONS:
1. Carefully read and understand the user's research question
2. Analyze each document for relevant information that directly addresses the query
3. Extract specific evidence, data points, and insights from each relevant document
4. Provide detailed, accurate answers with proper source attribution
5. Identify cross-document themes and patterns
6. Assign confidence scores based on evidence quality and relevance

RESPONSE FORMAT (JSON ONLY):
{{
  "results": [
    {{
      "documentId": "document_id",
      "documentName": "document_name",
      "answer": "Comprehensive, detailed answer addressing the query based on this specific document. Include specific facts, figures, and insights found in the document.",
      "summary": "Brief 1-sentence summary of what this document contributes to answering the query",
      "citations": [
        {{
          "page": 1,
          "paragraph": 2,
          "text": "Direct quote or paraphrase from the document that supports the answer"
        }},
        {{
          "page": 2,
          "paragraph": 1,
          "text": "Additional supporting evidence from the document"
        }}
      ],
      "confidence": 0.87
    }}
  ],
  "themes": [
    {{
      "title": "Primary Theme Title",
      "summary": "Detailed explanation of this theme and how it emerges across multiple documents. Include specific examples and evidence.",
      "supportingDocuments": ["document1.pdf", "document2.txt"],
      "confidence": 0.91
    }},
    {{
      "title": "Secondary Theme Title",
      "summary": "Explanation of secondary patterns or themes found across the document collection.",
      "supportingDocuments": ["document2.txt", "document3.docx"],
      "confidence": 0.78
    }}
  ]
}}

QUALITY REQUIREMENTS:
- Only include documents that contain relevant information for the query
- Provide specific, factual answers backed by document evidence
- Include {min_citations}-{max_citations} precise citations per relevant document
- Extract meaningful, contextual text excerpts for citations
- Assign realistic confidence scores ({min_confidence}-{max_confidence} range)
- Identify 2-4 meaningful themes with cross-document analysis
- Ensure all JSON is properly formatted and complete

Return ONLY the JSON response with no additional text or formatting."""

DOCUMENT_BLOCK_TEMPLATE = """=== DOCUMENT {index} ===
Document ID: {id}
Document Name: {name}
Document Type: {type}
Document Size: {size}
Content Analysis: {content}
Content Summary: {quick_summary}
==========================="""

SUMMARY_TEMPLATE = """You are an expert document analyst. Analyze the following document and provide a comprehensive summary.

DOCUMENT TO ANALYZE:
Document Name: {name}
Document Type: {type}
Content: {content}

Please provide your analysis in the following JSON format:
{{
  "documentId": "{id}",
  "documentName": "{name}",
  "summary": "A comprehensive 2-3 sentence summary of the document's main content and purpose",
  "keyPoints": [
    "First key point or finding from the document",
    "Second key point or finding from the document",
    "Third key point or finding from the document",
    "Fourth key point or finding from the document"
  ],
  "wordCount": {word_count},
  "topics": [
    "Primary topic or theme",
    "Secondary topic or theme",
    "Tertiary topic or theme"
  ],
  "confidence": 0.92
}}

ANALYSIS REQUIREMENTS:
1. Provide an accurate, concise summary that captures the document's essence
2. Extract 3-5 key points that represent the most important information
3. Identify 2-4 main topics or themes covered
4. Assign confidence based on content clarity and completeness
5. Ensure all JSON is properly formatted and valid

Return ONLY the JSON response, no additional text."""


@dataclass(frozen=True)
class PromptBuilderConfig:
    """Configuration for prompt construction."""

    min_citations: int = 2
    max_citations: int = 3
    min_confidence: float = 0.6
    max_confidence: float = 0.95
    block_separator: str = "\n\n"


def format_size(size: int | None) -> str:
    """Render a byte count as whole kilobytes, rounding half up."""

    if not size:
        return "Unknown"
    return f"{int(size / 1024 + 0.5)}KB"


class PromptBuilder:
    """Builds prompts for the generation backend.

    Values are substituted verbatim. Callers are expected to pass only ready
    documents to :meth:`build_query_prompt`.
    """

    def __init__(
        self,
        config: PromptBuilderConfig | None = None,
        content_source: ContentSource | None = None,
    ) -> None:
        self._config = config or PromptBuilderConfig()
        self._content = content_source or TemplateContentSource()

    def content_for(self, document: Document) -> str:
        # Document.content is upload-collaborator state; text comes from the content source only
        return self._content.content(document.name, document.type)

    def build_document_context(self, documents: Sequence[Document]) -> str:
        blocks = []
        for index, document in enumerate(documents, start=1):
            blocks.append(
                DOCUMENT_BLOCK_TEMPLATE.format(
                    index=index,
                    id=document.id,
                    name=document.name,
                    type=document.type,
                    size=format_size(document.size),
                    content=self.content_for(document),
                    quick_summary=self._content.quick_summary(document.name, document.type),
                ),
            )
        return self._config.block_separator.join(blocks)

    def build_query_prompt(self, query: str, documents: Sequence[Document]) -> str:
        return QUERY_TEMPLATE.format(
            query=query,
            documents=self.build_document_context(documents),
            min_citations=self._config.min_citations,
            max_citations=self._config.max_citations,
            min_confidence=self._config.min_confidence,
            max_confidence=self._config.max_confidence,
        )

    def build_summary_prompt(self, document: Document, content: str | None = None) -> str:
        body = content if content is not None else self.content_for(document)
        return SUMMARY_TEMPLATE.format(
            id=document.id,
            name=document.name,
            type=document.type,
            content=body,
            word_count=estimate_word_count(body),
        )
