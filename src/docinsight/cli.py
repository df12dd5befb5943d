"""Command line entry point for querying and summarizing documents."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from docinsight.config import get_settings
from docinsight.models import Document, DocumentStatus, to_payload
from docinsight.services.factory import build_query_service
from docinsight.services.query import PreconditionError

EXIT_PRECONDITION = 2


def load_documents(path: Path) -> list[Document]:
    """Read documents from a JSON list, or an object holding a ``documents`` list."""

    data = json.loads(path.read_text(encoding="utf-8"))
    items = data.get("documents", []) if isinstance(data, dict) else data
    return [
        Document(
            id=str(item["id"]),
            name=item["name"],
            type=item.get("type", "application/octet-stream"),
            size=int(item.get("size", 0)),
            status=DocumentStatus(item.get("status", DocumentStatus.READY.value)),
            content=item.get("content"),
        )
        for item in items
    ]


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask questions about documents or summarize them.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser("query", help="Answer a question across ready documents")
    query_parser.add_argument("question", type=str, help="Question to answer")

    summarize_parser = subparsers.add_parser("summarize", help="Summarize every ready document")
    summarize_parser.add_argument("--document-id", type=str, default=None, help="Only summarize this document")

    for sub in (query_parser, summarize_parser):
        sub.add_argument("--documents", type=Path, required=True, help="Path to a JSON file of documents")
        sub.add_argument("--json-out", type=Path, default=None, help="Optional path to write the JSON result")
        sub.add_argument("--seed", type=int, default=None, help="Fix the random source of fallback output")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Any:
    override: dict[str, object] = {}
    if args.seed is not None:
        override["fallback_seed"] = args.seed
    settings = get_settings(override or None)
    service = build_query_service(settings)
    documents = load_documents(args.documents)

    if args.command == "query":
        return to_payload(service.answer_query(args.question, documents))
    if args.document_id is not None:
        matches = [document for document in documents if document.id == args.document_id]
        if not matches:
            raise PreconditionError(f"Unknown document id: {args.document_id}")
        return [to_payload(service.summarize_document(matches[0]))]
    return [to_payload(summary) for summary in service.summarize_documents(documents)]


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        result = run(args)
    except PreconditionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PRECONDITION

    rendered = json.dumps(result, indent=2)
    if args.json_out:
        args.json_out.write_text(rendered, encoding="utf-8")
    print(rendered)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
