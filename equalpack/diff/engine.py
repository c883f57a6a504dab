"""Shallow key diff built on the deep-equality predicate."""

from __future__ import annotations

from collections.abc import Hashable
import logging
from typing import Any

from equalpack.diff.models import FieldChange, ObjectDiff
from equalpack.equality import equals, get_key, own_keys

logger = logging.getLogger(__name__)


def object_diff(a: Any, b: Any, *, strict: bool = False) -> ObjectDiff:
    """Report the top-level keys whose values differ between two objects.

    Keys come from both sides, ``a`` first, without duplicates; the empty
    string key is skipped. A key missing on one side reads as ``MISSING``.
    Wholly equal objects yield an empty report.
    """
    keys = _union_keys(a, b)
    logger.debug("object diff keys: %s", keys)

    if equals(a, b, strict):
        return {}

    changes: ObjectDiff = {}
    for key in keys:
        old = get_key(a, key)
        new = get_key(b, key)
        if not equals(old, new, strict):
            changes[key] = FieldChange(old=old, new=new)
    return changes


def _union_keys(a: Any, b: Any) -> list[Hashable]:
    keys: list[Hashable] = []
    seen: set[tuple[type, Hashable]] = set()
    for key in [*own_keys(a), *own_keys(b)]:
        if isinstance(key, str) and not key:
            continue
        marker = (type(key), key)
        if marker in seen:
            continue
        seen.add(marker)
        keys.append(key)
    return keys
