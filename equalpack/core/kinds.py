"""Value classification and same-value semantics for EqualKit."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import is_dataclass
from datetime import date, time
from decimal import Decimal
from fractions import Fraction
import inspect
import math
import re
from types import SimpleNamespace
from typing import Any

from equalpack.core.types import MISSING, Boxed, ValueKind

_NUMBER_TYPES = frozenset({int, float, complex, Decimal, Fraction})
_SCALAR_TYPES = frozenset({bool, str, bytes})


def is_asymmetric_matcher(value: Any) -> bool:
    """Return True when ``value`` can compare itself against any candidate."""
    if value is None or value is MISSING or inspect.isclass(value):
        return False
    # Looked up on the type so mocks do not grow the member on access.
    return callable(getattr(type(value), "asymmetric_match", None))


def is_document_node(value: Any) -> bool:
    """Return True when ``value`` looks like a DOM node with ``isEqualNode``."""
    if value is None or inspect.isclass(value):
        return False
    node_type = getattr(value, "nodeType", None)
    return (
        isinstance(node_type, int)
        and not isinstance(node_type, bool)
        and isinstance(getattr(value, "nodeName", None), str)
        and callable(getattr(value, "isEqualNode", None))
    )


def classify(value: Any) -> ValueKind:
    """Map a value onto the closed set of kinds the equality engine dispatches on."""
    if value is MISSING:
        return "missing"
    if value is None:
        return "null"

    value_type = type(value)
    if value_type is bool:
        return "bool"
    if value_type is str:
        return "string"
    if value_type in _NUMBER_TYPES:
        return "number"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "bytes"

    if is_asymmetric_matcher(value):
        return "matcher"
    if isinstance(value, BaseException):
        return "error"
    if is_document_node(value):
        return "node"

    if isinstance(value, Boxed):
        if isinstance(value.value, bool):
            return "boxed_bool"
        if isinstance(value.value, str):
            return "boxed_string"
        return "boxed_number"
    if isinstance(value, str):
        return "boxed_string"
    if isinstance(value, (int, float, complex)):
        return "boxed_number"

    if isinstance(value, (date, time)):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"

    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    if isinstance(value, Set):
        return "set"

    if inspect.isroutine(value) or inspect.isclass(value) or inspect.ismodule(value):
        return "function"

    if (
        isinstance(value, SimpleNamespace)
        or is_dataclass(value)
        or value_type.__eq__ is object.__eq__
    ):
        return "instance"
    return "value"


def unbox(value: Any) -> Any:
    """Return the primitive held by a boxed value."""
    if isinstance(value, Boxed):
        return value.value
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return int.__int__(value)
    if isinstance(value, float):
        return float.__float__(value)
    if isinstance(value, complex):
        return complex(value.real, value.imag)
    return value


def same_value(left: Any, right: Any) -> bool:
    """Identity comparison with value semantics for primitives.

    Numbers compare by value, but ``0.0`` and ``-0.0`` differ and NaN equals
    NaN. ``True`` is never the same value as ``1``.
    """
    if left is right:
        return True

    left_type = type(left)
    right_type = type(right)
    if left_type in _NUMBER_TYPES and right_type in _NUMBER_TYPES:
        return _same_number(left, right)
    if left_type is right_type and left_type in _SCALAR_TYPES:
        return left == right
    return False


def error_message(error: BaseException) -> str:
    return str(error)


def _same_number(left: Any, right: Any) -> bool:
    left_nan = left != left
    right_nan = right != right
    if left_nan or right_nan:
        return left_nan and right_nan

    if left == 0 and right == 0 and complex not in (type(left), type(right)):
        return _is_negative_zero(left) == _is_negative_zero(right)
    return left == right


def _is_negative_zero(number: Any) -> bool:
    return math.copysign(1.0, float(number)) < 0
