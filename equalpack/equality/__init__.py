"""Deep-equality subsystem for EqualKit."""

from equalpack.equality.engine import equals
from equalpack.equality.keys import get_key, has_key, own_keys

__all__ = [
    "equals",
    "own_keys",
    "has_key",
    "get_key",
]
