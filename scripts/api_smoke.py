#!/usr/bin/env python3
"""Check that a running DocInsight API answers its health checks."""
from __future__ import annotations

import json
import os
import sys

from urllib.error import URLError
from urllib.request import Request, urlopen


def main() -> int:
    base_url = os.getenv("DOCINSIGHT_API_URL", "http://localhost:8000").rstrip("/")
    try:
        with urlopen(f"{base_url}/healthz", timeout=5) as r:
            print("/healthz:", r.read().decode("utf-8"))
        with urlopen(f"{base_url}/livez", timeout=5) as r2:
            print("/livez:", r2.read().decode("utf-8"))
        # An unready document must be rejected before any model call
        body = json.dumps(
            {"query": "ping", "documents": [{"id": "smoke", "name": "smoke.txt", "status": "processing"}]},
        ).encode("utf-8")
        request = Request(f"{base_url}/query", data=body, headers={"Content-Type": "application/json"})
        try:
            urlopen(request, timeout=5)
        except URLError as exc:
            if getattr(exc, "code", None) != 400:
                raise
            print("/query precondition: 400")
        else:
            print("Smoke failed: /query accepted a request with no ready documents", file=sys.stderr)
            return 1
    except (URLError, Exception) as exc:
        print(f"Smoke failed: {exc}", file=sys.stderr)
        return 1
    print("Smoke passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
