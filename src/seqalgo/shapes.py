"""
Runtime shape discrimination.

There is no static schema for the values passed to seqalgo, so every
operation classifies its inputs here: primitive, sequence or record.

Kinds of primitive:
    bool    -> checked first, bool is a subclass of int
    number  -> int, float
    string  -> str
"""

import math
from collections.abc import Mapping
from typing import Any, Optional, Tuple

_BOOL = 0
_NUMBER = 1
_STRING = 2


def primitive_kind(value: Any) -> Optional[int]:
    """Return the primitive kind of value, or None for anything else."""
    if isinstance(value, bool):
        return _BOOL
    if isinstance(value, (int, float)):
        return _NUMBER
    if isinstance(value, str):
        return _STRING
    return None


def is_primitive(value: Any) -> bool:
    return primitive_kind(value) is not None


def is_sequence(value: Any) -> bool:
    """Lists and tuples only. Strings are primitives, not sequences."""
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def strict_equal(left: Any, right: Any) -> bool:
    """
    Equality that never crosses primitive kinds.

    True is not equal to 1, "1" is not equal to 1, but 1 equals 1.0.
    """
    left_kind = primitive_kind(left)
    if left_kind is None or left_kind != primitive_kind(right):
        return left is right
    return left == right


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def ordering_key(value: Any) -> Tuple[int, bool, Any]:
    """
    Total ordering over primitives and None.

    None sorts first, then booleans, numbers and strings. Within numbers,
    NaN sorts after every other number so equal values stay adjacent.
    """
    kind = primitive_kind(value)
    if kind is None:
        return (-1, False, 0)
    if is_nan(value):
        return (kind, True, 0)
    return (kind, False, value)
