"""Pydantic models for the DocInsight API."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from docinsight.models import Document, DocumentStatus


class DocumentModel(BaseModel):
    id: str = Field(..., min_length=1, description="Caller-assigned unique identifier")
    name: str = Field(..., description="Original file name")
    type: str = Field(default="application/octet-stream", description="MIME type")
    size: int = Field(default=0, ge=0, description="Size in bytes")
    status: Literal["processing", "ready", "error"] = "ready"
    content: Optional[str] = Field(default=None, description="Extracted text, if available")

    def to_domain(self) -> Document:
        return Document(
            id=self.id,
            name=self.name,
            type=self.type,
            size=self.size,
            status=DocumentStatus(self.status),
            content=self.content,
        )


class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1, description="End-user question to answer")
    documents: List[DocumentModel] = Field(default_factory=list)


class SummaryRequest(BaseModel):
    document: DocumentModel


class BatchSummaryRequest(BaseModel):
    documents: List[DocumentModel] = Field(default_factory=list)


class CitationModel(BaseModel):
    page: Optional[int] = Field(default=None, ge=1)
    paragraph: int = Field(..., ge=1)
    text: str


class QueryResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(..., alias="documentId")
    document_name: str = Field(..., alias="documentName")
    answer: str
    summary: str = ""
    citations: List[CitationModel] = Field(default_factory=list, max_length=3)
    confidence: float = Field(..., ge=0.5, le=0.95)


class ThemeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    summary: str
    supporting_documents: List[str] = Field(default_factory=list, alias="supportingDocuments", max_length=4)
    confidence: float = Field(..., ge=0.6, le=0.95)


class QueryResponseModel(BaseModel):
    results: List[QueryResultModel]
    themes: List[ThemeModel] = Field(default_factory=list, max_length=3)


class DocumentSummaryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(..., alias="documentId")
    document_name: str = Field(..., alias="documentName")
    summary: str
    key_points: List[str] = Field(default_factory=list, alias="keyPoints", max_length=5)
    word_count: int = Field(..., ge=0, alias="wordCount")
    topics: List[str] = Field(default_factory=list, max_length=4)
    confidence: float = Field(..., ge=0.6, le=0.95)


class CredentialCheckRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", description="Candidate API key to check")


class CredentialCheckResponse(BaseModel):
    valid: bool
