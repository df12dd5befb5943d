from __future__ import annotations

import json
from pathlib import Path

from docinsight import cli


def _write_documents(tmp_path: Path, documents: list[dict]) -> Path:
    path = tmp_path / "documents.json"
    path.write_text(json.dumps({"documents": documents}), encoding="utf-8")
    return path


def test_query_command_without_api_key_prints_fallback(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("DOCINSIGHT_GEMINI_API_KEY", raising=False)
    docs = _write_documents(tmp_path, [{"id": "d1", "name": "SE_Unit3.pdf", "type": "application/pdf"}])
    out = tmp_path / "result.json"

    code = cli.main(["query", "What is SOLID?", "--documents", str(docs), "--seed", "3", "--json-out", str(out)])

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed == json.loads(out.read_text(encoding="utf-8"))
    assert printed["results"][0]["documentName"] == "SE_Unit3.pdf"
    assert "What is SOLID?" in printed["themes"][0]["title"]


def test_query_command_reports_no_ready_documents(tmp_path, capsys):
    docs = _write_documents(tmp_path, [{"id": "d1", "name": "a.pdf", "status": "processing"}])
    assert cli.main(["query", "q", "--documents", str(docs)]) == cli.EXIT_PRECONDITION
    assert "No documents ready" in capsys.readouterr().err


def test_summarize_single_document(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("DOCINSIGHT_GEMINI_API_KEY", raising=False)
    docs = _write_documents(
        tmp_path,
        [{"id": "d1", "name": "Policy.pdf"}, {"id": "d2", "name": "Research.pdf"}],
    )
    assert cli.main(["summarize", "--documents", str(docs), "--document-id", "d2"]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert [item["documentId"] for item in printed] == ["d2"]
    assert "Technology Research" in printed[0]["topics"]


def test_summarize_single_document_that_is_not_ready(tmp_path, capsys):
    docs = _write_documents(tmp_path, [{"id": "d1", "name": "Policy.pdf", "status": "error"}])
    assert cli.main(["summarize", "--documents", str(docs), "--document-id", "d1"]) == cli.EXIT_PRECONDITION
    assert "not ready" in capsys.readouterr().err
