"""JSON document read utilities for CLI comparisons."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from equalpack.documents.exceptions import DocumentDecodeError, DocumentNotFoundError


def read_document(path: str | Path) -> Any:
    """Load a UTF-8 JSON document from ``path``."""
    document_path = Path(path)
    if not document_path.is_file():
        raise DocumentNotFoundError(f"document not found: {document_path}")

    try:
        raw = document_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise DocumentDecodeError(f"document is not valid UTF-8: {document_path}") from error

    try:
        return json.loads(raw)
    except json.JSONDecodeError as error:
        raise DocumentDecodeError(
            f"invalid JSON in {document_path}: line {error.lineno} column {error.colno}: {error.msg}"
        ) from error
