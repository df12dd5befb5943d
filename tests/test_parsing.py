from __future__ import annotations

import json

import pytest

from docinsight.models import Document
from docinsight.services.fallback import FallbackSynthesizer
from docinsight.services.parsing import (
    DEFAULT_CITATION_TEXT,
    UNKNOWN_DOCUMENT_NAME,
    ConfidenceRange,
    ParseError,
    ResponseParser,
    clamp_confidence,
    extract_json_object,
)


def _docs(count: int) -> list[Document]:
    return [Document(id=f"d{i}", name=f"doc{i}.pdf", type="application/pdf", size=1024) for i in range(count)]


def _parser() -> ResponseParser:
    return ResponseParser(FallbackSynthesizer(seed=7), seed=7)


def test_extract_json_object_from_surrounding_prose():
    raw = 'Sure! Here is the JSON:\n```json\n{"results": [], "themes": [{"title": "x"}]}\n```\nThanks.'
    assert extract_json_object(raw) == {"results": [], "themes": [{"title": "x"}]}


@pytest.mark.parametrize("raw", ["", "no json here", "{not valid json}", "[1, 2, 3]", '{"a": 1} trailing } brace'])
def test_extract_json_object_failures(raw):
    with pytest.raises(ParseError):
        extract_json_object(raw)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.8, 0.8), (1.7, 0.95), (-3, 0.5), (0, 0.5), (None, 0.7), ("0.9", 0.7), (True, 0.7), (float("nan"), 0.7)],
)
def test_clamp_confidence(value, expected):
    assert clamp_confidence(value, ConfidenceRange(0.5, 0.95, 0.7)) == pytest.approx(expected)


def test_valid_payload_round_trips():
    payload = {
        "results": [
            {
                "documentId": "d0",
                "documentName": "doc0.pdf",
                "answer": "The answer.",
                "summary": "One line.",
                "citations": [
                    {"page": 2, "paragraph": 3, "text": "quote one"},
                    {"page": 4, "paragraph": 1, "text": "quote two"},
                ],
                "confidence": 0.87,
            },
        ],
        "themes": [
            {"title": "Theme A", "summary": "About A", "supportingDocuments": ["doc0.pdf"], "confidence": 0.91},
        ],
    }
    response = _parser().parse_query_response(json.dumps(payload), "q", _docs(1))

    assert len(response.results) == 1
    result = response.results[0]
    assert (result.document_id, result.document_name, result.answer, result.summary) == (
        "d0",
        "doc0.pdf",
        "The answer.",
        "One line.",
    )
    assert [(c.page, c.paragraph, c.text) for c in result.citations] == [(2, 3, "quote one"), (4, 1, "quote two")]
    assert result.confidence == pytest.approx(0.87)
    theme = response.themes[0]
    assert (theme.title, theme.summary, list(theme.supporting_documents)) == ("Theme A", "About A", ["doc0.pdf"])
    assert theme.confidence == pytest.approx(0.91)


def test_invalid_result_entries_are_dropped_individually():
    payload = {
        "results": [
            {"documentId": "d0", "answer": "kept"},
            {"documentId": "", "answer": "no id"},
            {"documentId": "d1"},
            "not an object",
        ],
    }
    response = _parser().parse_query_response(json.dumps(payload), "q", _docs(2))
    assert [r.answer for r in response.results] == ["kept"]
    assert response.results[0].document_name == UNKNOWN_DOCUMENT_NAME
    assert response.results[0].summary == ""
    assert response.results[0].citations == ()
    assert response.themes == ()


def test_bounds_are_enforced():
    payload = {
        "results": [
            {
                "documentId": "d0",
                "answer": "a",
                "citations": [{"text": f"c{i}"} for i in range(6)],
                "confidence": 4.2,
            },
            {"documentId": "d1", "answer": "b", "confidence": -1},
        ],
        "themes": [
            {"title": f"T{i}", "supportingDocuments": [f"n{j}" for j in range(9)], "confidence": 0.1}
            for i in range(5)
        ],
    }
    response = _parser().parse_query_response(json.dumps(payload), "q", _docs(2))

    first, second = response.results
    assert first.confidence == 0.95
    assert second.confidence == 0.5
    assert [c.text for c in first.citations] == ["c0", "c1", "c2"]
    assert len(response.themes) == 3
    for theme in response.themes:
        assert list(theme.supporting_documents) == ["n0", "n1", "n2", "n3"]
        assert theme.confidence == 0.6


def test_missing_citation_fields_are_synthesized():
    payload = {"results": [{"documentId": "d0", "answer": "a", "citations": [{}, {"page": 0, "paragraph": "x"}]}]}
    result = _parser().parse_query_response(json.dumps(payload), "q", _docs(1)).results[0]
    for citation in result.citations:
        assert 1 <= citation.page <= 10
        assert 1 <= citation.paragraph <= 5
        assert citation.text == DEFAULT_CITATION_TEXT


def test_themes_without_title_are_dropped_before_truncation():
    payload = {"themes": [{"summary": "untitled"}, {"title": "A"}, {"title": "B"}, {"title": "C"}, {"title": "D"}]}
    response = _parser().parse_query_response(json.dumps(payload), "q", _docs(1))
    assert [t.title for t in response.themes] == ["A", "B", "C"]
    assert response.themes[0].summary == "Theme identified across documents"
    assert response.themes[0].confidence == 0.75


def test_text_without_json_uses_fallback_sized_to_documents():
    parser = _parser()
    assert len(parser.parse_query_response("I cannot help with that.", "q", _docs(2)).results) == 2
    assert len(parser.parse_query_response("I cannot help with that.", "q", _docs(7)).results) == 4


def test_malformed_json_uses_fallback():
    response = _parser().parse_query_response('{"results": [', "q", _docs(1))
    assert response.results[0].document_name == "doc0.pdf"
    assert len(response.themes) == 2


def test_deeply_nested_json_uses_fallback():
    raw = '{"results": ' + "[" * 100_000 + "]" * 100_000 + "}"
    with pytest.raises(ParseError):
        extract_json_object(raw)

    response = _parser().parse_query_response(raw, "q", _docs(2))
    assert [r.document_name for r in response.results] == ["doc0.pdf", "doc1.pdf"]
    assert len(response.themes) == 2


def test_summary_payload_is_validated():
    document = Document(id="d9", name="Research_Paper.pdf", type="application/pdf")
    raw = json.dumps(
        {
            "summary": "Short.",
            "keyPoints": ["a", "b", "c", "d", "e", "f", "g"],
            "topics": "not a list",
            "wordCount": 321,
            "confidence": 0.99,
        },
    )
    summary = _parser().parse_summary_response(raw, document)
    assert summary.document_id == "d9"
    assert summary.document_name == "Research_Paper.pdf"
    assert summary.summary == "Short."
    assert list(summary.key_points) == ["a", "b", "c", "d", "e"]
    assert summary.topics == ()
    assert summary.word_count == 321
    assert summary.confidence == 0.95


def test_summary_defaults_for_missing_fields():
    document = Document(id="d9", name="x.txt", type="text/plain")
    summary = _parser().parse_summary_response('{"wordCount": -5}', document)
    assert summary.summary == "Document summary not available"
    assert summary.word_count == 0
    assert summary.confidence == 0.8
    assert summary.key_points == ()


def test_summary_without_json_uses_fallback():
    document = Document(id="d9", name="SE_Unit3.pdf", type="application/pdf")
    summary = _parser().parse_summary_response("model refused", document, content="x" * 50)
    assert summary.word_count == 10
    assert summary.confidence == 0.85
    assert "Design Patterns" in summary.topics
