"""
Shallow structural equality for flat sequences and records.

Both checks return a tagged Result:
    Supported(True) / Supported(False)  -> a valid comparison
    Unsupported(reason)                 -> input shape not supported

KNOWN LIMITATION:
    When a record field holds a sequence, only the index keys of the two
    sequences are compared (in effect their lengths), not their contents.
    {"a": [1, 2]} and {"a": [3, 4]} are reported as the same object.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from seqalgo.model import Result, Supported, Unsupported, is_true
from seqalgo.shapes import (
    is_primitive,
    is_record,
    is_sequence,
    ordering_key,
    strict_equal,
)

logger = logging.getLogger(__name__)


def _unsupported(reason: str) -> Unsupported:
    logger.debug("Unsupported comparison: %s", reason)
    return Unsupported(reason)


def is_same_array(
    array1: Sequence[Any],
    array2: Sequence[Any],
    order_matters: bool = False,
) -> Result[bool]:
    """
    Check whether two sequences of primitives hold the same elements.

    Args:
        array1: First sequence
        array2: Second sequence
        order_matters: If True, elements are compared positionally.
            If False (default), both sequences are sorted first.

    Returns:
        Supported(bool), or Unsupported for a non-sequence argument or a
        non-primitive element (str, int, float and bool only)
    """
    if not is_sequence(array1) or not is_sequence(array2):
        return _unsupported("is_same_array expects two lists or tuples")
    if len(array1) != len(array2):
        return Supported(False)

    for left, right in zip(array1, array2):
        if not is_primitive(left) or not is_primitive(right):
            return _unsupported(
                f"is_same_array found unsupported element types "
                f"{type(left).__name__} / {type(right).__name__}"
            )

    cloned1 = list(array1)
    cloned2 = list(array2)
    if not order_matters:
        cloned1.sort(key=ordering_key)
        cloned2.sort(key=ordering_key)

    for left, right in zip(cloned1, cloned2):
        if not strict_equal(left, right):
            return Supported(False)
    return Supported(True)


def _is_scalar_field(value: Any) -> bool:
    # None stands in for an undefined field value
    return value is None or is_primitive(value)


def is_same_object(object1: Any, object2: Any) -> Result[bool]:
    """
    Check whether two flat records are identical.

    Records are equal iff they have the same key set (order independent)
    and every key holds strictly equal values. Nested records are not
    supported; nested sequences are compared by index keys only.

    Returns:
        Supported(bool), or Unsupported for non-mapping arguments and
        non-primitive field values
    """
    if not is_record(object1) or not is_record(object2):
        return _unsupported("is_same_object expects two mappings")

    same_keys = is_same_array(list(object1.keys()), list(object2.keys()))
    if not is_true(same_keys):
        return same_keys

    for key, left in object1.items():
        right = object2[key]
        if is_sequence(left):
            if not is_sequence(right):
                return Supported(False)
            same_indexes = is_same_array(list(range(len(left))), list(range(len(right))))
            if not is_true(same_indexes):
                return same_indexes
        elif not _is_scalar_field(left) or not _is_scalar_field(right):
            return _unsupported(f"is_same_object found a nested value at field {key!r}")
        elif not strict_equal(left, right):
            return Supported(False)

    return Supported(True)
