"""Own-key enumeration and lookup across mappings, sequences and objects."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from equalpack.core.types import MISSING

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def own_keys(value: Any) -> list[Hashable]:
    """Return the keys a deep comparison walks for ``value``.

    Mappings yield their keys, sequences their indices and any other object
    the names of its instance attributes (``__dict__`` entries plus assigned
    ``__slots__``). Strings, bytes and values without attributes have no keys.
    """
    if isinstance(value, _TEXT_TYPES):
        return []
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, Sequence):
        return list(range(len(value)))
    return _attribute_names(value)


def has_key(value: Any, key: Hashable) -> bool:
    if isinstance(value, _TEXT_TYPES):
        return False
    if isinstance(value, Mapping):
        return key in value
    if isinstance(value, Sequence):
        return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(value)
    return isinstance(key, str) and key in _attribute_names(value)


def get_key(value: Any, key: Hashable) -> Any:
    """Look up ``key`` on ``value``, returning ``MISSING`` when it is absent."""
    if not has_key(value, key):
        return MISSING
    if isinstance(value, (Mapping, Sequence)):
        return value[key]
    return getattr(value, key)


def _attribute_names(value: Any) -> list[str]:
    names: list[str] = []
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        names.extend(name for name in instance_dict if isinstance(name, str))

    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            name = _mangle(cls, slot)
            if name in names:
                continue
            # Unassigned slots are absent, not None.
            if hasattr(value, name):
                names.append(name)
    return names


def _mangle(cls: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name
