"""Document loading for EqualKit."""

from equalpack.documents.exceptions import (
    DocumentDecodeError,
    DocumentError,
    DocumentNotFoundError,
)
from equalpack.documents.io import read_document

__all__ = [
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentDecodeError",
    "read_document",
]
