"""Core value model and traversal primitives for EqualKit."""

from equalpack.core.kinds import (
    classify,
    error_message,
    is_asymmetric_matcher,
    is_document_node,
    same_value,
    unbox,
)
from equalpack.core.stacks import VisitationStacks
from equalpack.core.types import (
    COMPOSITE_KINDS,
    MISSING,
    VALUE_KINDS,
    Boxed,
    ValueKind,
)

__all__ = [
    "MISSING",
    "Boxed",
    "ValueKind",
    "VALUE_KINDS",
    "COMPOSITE_KINDS",
    "VisitationStacks",
    "classify",
    "error_message",
    "is_asymmetric_matcher",
    "is_document_node",
    "same_value",
    "unbox",
]
