"""Tests for the FastAPI application."""

from __future__ import annotations

import json

from fastapi.testclient import TestClient

from docinsight.api.app import AppDependencies, create_app
from docinsight.config import Settings
from docinsight.services.fallback import FallbackSynthesizer
from docinsight.services.gateway import TransportError
from docinsight.services.parsing import ResponseParser
from docinsight.services.query import QueryService


class StubGateway:
    def __init__(self, reply: str | None = None) -> None:
        self.reply = reply

    def generate(self, prompt: str) -> str:
        if self.reply is None:
            raise TransportError("offline")
        return self.reply

    def validate_credential(self, api_key: str | None) -> bool:
        return api_key == "valid-key-0123456"


def create_test_client(reply: str | None = None) -> TestClient:
    gateway = StubGateway(reply)
    fallback = FallbackSynthesizer(seed=5)
    service = QueryService(gateway, parser=ResponseParser(fallback, seed=5), fallback=fallback)
    deps = AppDependencies(query_service=service, gateway=gateway)
    app = create_app(settings=Settings(environment="test"), dependencies=deps)
    return TestClient(app)


def _document(doc_id: str, name: str, status: str = "ready") -> dict:
    return {"id": doc_id, "name": name, "type": "application/pdf", "size": 2048, "status": status}


def test_query_returns_camel_case_payload():
    reply = json.dumps(
        {
            "results": [
                {
                    "documentId": "d1",
                    "documentName": "SE_Unit3.pdf",
                    "answer": "A class should have one reason to change.",
                    "citations": [{"page": 3, "paragraph": 2, "text": "Single Responsibility"}],
                    "confidence": 1.4,
                },
            ],
            "themes": [{"title": "SOLID", "supportingDocuments": ["SE_Unit3.pdf"], "confidence": 0.9}],
        },
    )
    client = create_test_client(reply)
    response = client.post("/query", json={"query": "What is SRP?", "documents": [_document("d1", "SE_Unit3.pdf")]})

    assert response.status_code == 200, response.text
    payload = response.json()
    result = payload["results"][0]
    assert result["documentId"] == "d1"
    assert result["confidence"] == 0.95
    assert result["citations"] == [{"page": 3, "paragraph": 2, "text": "Single Responsibility"}]
    assert payload["themes"][0]["supportingDocuments"] == ["SE_Unit3.pdf"]
    assert "X-Correlation-ID" in response.headers


def test_query_without_ready_documents_is_rejected():
    client = create_test_client()
    response = client.post(
        "/query",
        json={"query": "anything", "documents": [_document("d1", "a.pdf", status="processing")]},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "No documents ready for querying"
    assert body["correlation_id"]


def test_query_falls_back_when_backend_is_down():
    client = create_test_client(reply=None)
    response = client.post(
        "/query",
        json={"query": "trends", "documents": [_document("d1", "a.pdf"), _document("d2", "b.pdf")]},
    )
    assert response.status_code == 200, response.text
    payload = response.json()
    assert len(payload["results"]) == 2
    assert len(payload["themes"]) == 2


def test_summary_endpoints():
    client = create_test_client(reply=None)
    single = client.post("/documents/summary", json={"document": _document("d1", "Research_Paper.pdf")})
    assert single.status_code == 200, single.text
    assert single.json()["documentName"] == "Research_Paper.pdf"
    assert single.json()["wordCount"] > 0

    batch = client.post(
        "/documents/summaries",
        json={"documents": [_document("d1", "Policy.pdf"), _document("d2", "x.pdf", status="error")]},
    )
    assert batch.status_code == 200, batch.text
    assert [item["documentId"] for item in batch.json()] == ["d1"]
    assert batch.json()[0]["keyPoints"]


def test_single_summary_rejects_document_that_is_not_ready():
    client = create_test_client(reply=None)
    response = client.post("/documents/summary", json={"document": _document("d1", "Policy.pdf", status="processing")})
    assert response.status_code == 400, response.text
    assert "not ready" in response.json()["detail"]
    assert response.json()["correlation_id"]


def test_credential_validation_endpoint():
    client = create_test_client()
    assert client.post("/credentials/validate", json={"apiKey": "valid-key-0123456"}).json() == {"valid": True}
    assert client.post("/credentials/validate", json={"apiKey": "nope"}).json() == {"valid": False}


def test_health_endpoints():
    client = create_test_client()
    health = client.get("/healthz")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert client.get("/livez").json() == {"status": "alive"}
    assert client.get("/metrics").status_code == 200
