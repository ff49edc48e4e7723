"""
Sort-based duplicate detection for primitives and records.

Three operations:
    - find_duplicates: duplicated primitive values
    - find_duplicated_objects: records sharing the value of one field
    - filter_duplicated_objects: drop exact duplicate records

None of them modify their input.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence

from seqalgo.equality import is_same_object
from seqalgo.model import Comparator, Result, Supported, Unsupported, is_true
from seqalgo.shapes import is_primitive, is_record, is_sequence, ordering_key, strict_equal

logger = logging.getLogger(__name__)


def _unsupported(reason: str) -> Unsupported:
    logger.debug("Unsupported duplicate search: %s", reason)
    return Unsupported(reason)


def find_duplicates(array: Sequence[Any]) -> Result[List[Any]]:
    """
    Find duplicated values in a sequence of strings, numbers or booleans.

    Each duplicated value is reported once, however often it repeats.
    The order of the reported values is not guaranteed.

    Returns:
        Supported([]) if nothing is duplicated, Supported(duplicates) if
        something is, Unsupported for a non-sequence or any element that
        is not a primitive
    """
    if not is_sequence(array):
        return _unsupported("find_duplicates expects a list or tuple")
    if len(array) < 2:
        return Supported([])

    cloned = []
    for item in array:
        if not is_primitive(item):
            return _unsupported(
                f"find_duplicates found unsupported element type {type(item).__name__}"
            )
        cloned.append(item)

    cloned.sort(key=ordering_key)
    duplicates: List[Any] = []
    for current, following in zip(cloned, cloned[1:]):
        if strict_equal(current, following):
            if not duplicates or not strict_equal(duplicates[-1], current):
                duplicates.append(current)

    return Supported(duplicates)


def _compare_field(field: str) -> Comparator:
    """Default comparator: orders a[field] and b[field] by ordering_key."""
    def compare(a: Dict[str, Any], b: Dict[str, Any]) -> int:
        x, y = ordering_key(a[field]), ordering_key(b[field])
        return (x > y) - (x < y)
    return compare


def find_duplicated_objects(
    records: Sequence[Dict[str, Any]],
    field: str,
    compare: Optional[Comparator] = None,
) -> Result[List[Dict[str, Any]]]:
    """
    Find records whose value at `field` is duplicated.

    Records are sorted by the field, then scanned pairwise. Every record of
    a run of equal values is returned exactly once and runs are returned
    contiguously, in sorted order.

    Args:
        records: Sequence of flat records
        field: Field name whose value decides duplication
        compare: Optional comparator on whole records, (a, b) -> int.
            Defaults to ordering field values by kind, then value:
            None first, then booleans, numbers (NaN last) and strings.

    Returns:
        Supported(list of records), or Unsupported for a non-sequence, a
        non-mapping element, records lacking the field, or a field value
        that is neither a primitive nor None
    """
    if not is_sequence(records):
        return _unsupported("find_duplicated_objects expects a list or tuple")
    if records and (not is_record(records[0]) or field not in records[0]):
        return _unsupported(f"first record has no field {field!r}")
    if len(records) < 2:
        return Supported([])
    for record in records:
        if not is_record(record) or field not in record:
            return _unsupported(f"a record has no field {field!r}")
        if record[field] is not None and not is_primitive(record[field]):
            return _unsupported(
                f"field {field!r} holds unsupported type {type(record[field]).__name__}"
            )

    cloned = list(records)
    cloned.sort(key=cmp_to_key(compare or _compare_field(field)))

    duplicates: List[Dict[str, Any]] = []
    previous_duplicated = False
    for current, following in zip(cloned, cloned[1:]):
        if strict_equal(current[field], following[field]):
            if not previous_duplicated:
                duplicates.append(current)
            duplicates.append(following)
            previous_duplicated = True
        else:
            previous_duplicated = False

    return Supported(duplicates)


def filter_duplicated_objects(records: Sequence[Dict[str, Any]]) -> Result[List[Dict[str, Any]]]:
    """
    Return a new list keeping only the first occurrence of each record.

    Records are compared with is_same_object (flat records only). A pair
    whose comparison is unsupported counts as two distinct records.
    Every record is compared against every record kept so far: O(n^2).
    """
    if not is_sequence(records):
        return _unsupported("filter_duplicated_objects expects a list or tuple")

    kept: List[Dict[str, Any]] = []
    for record in records:
        if not any(is_true(is_same_object(record, seen)) for seen in kept):
            kept.append(record)

    if len(kept) < len(records):
        logger.debug("Filtered %d duplicated records", len(records) - len(kept))
    return Supported(kept)
