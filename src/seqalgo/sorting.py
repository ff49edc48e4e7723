"""
Multi-key record sorting.

Sort requirements come in two forms:
    - a list of SortKey:  [SortKey("name"), SortKey("_id", SortOrder.DESCENDING)]
    - a mapping:          {"name": 1, "_id": -1}

The first column decides; ties fall through to the next column. Sorting is
stable and in place, and the sorted list itself is returned.

Column values are ordered like ordering_key: None first, then booleans,
numbers (NaN last) and strings, so mixed kinds never raise. A record that
lacks a column, or holds a nested value in it, ties with every other
record on that column.
"""

from __future__ import annotations

import logging
import warnings
from functools import cmp_to_key
from typing import Any, Dict, List, Mapping, Sequence

from seqalgo.model import SortKey, SortOrder
from seqalgo.shapes import is_primitive, ordering_key

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_sortable(value: Any) -> bool:
    return value is None or is_primitive(value)


def _compare_records(a: Mapping[str, Any], b: Mapping[str, Any], sort_keys: Sequence[SortKey]) -> int:
    for key in sort_keys:
        x = a.get(key.column, _MISSING)
        y = b.get(key.column, _MISSING)
        if not _is_sortable(x) or not _is_sortable(y):
            continue
        x, y = ordering_key(x), ordering_key(y)
        if x > y:
            return key.order.value
        if x < y:
            return -key.order.value
    return 0


def _warn_unknown_columns(records: Sequence[Mapping[str, Any]], sort_keys: Sequence[SortKey]) -> None:
    for key in sort_keys:
        if records and not any(key.column in record for record in records):
            warnings.warn(
                f"Sort column {key.column!r} not found in any record; order unchanged for it",
                UserWarning,
            )


def object_sort(records: List[Dict[str, Any]], sort_keys: Sequence[SortKey]) -> List[Dict[str, Any]]:
    """
    Sort records in place on several columns.

    Args:
        records: List of records
        sort_keys: SortKey list, highest priority first

    Returns:
        The same list, sorted
    """
    _warn_unknown_columns(records, sort_keys)
    records.sort(key=cmp_to_key(lambda a, b: _compare_records(a, b, sort_keys)))
    logger.debug("Sorted %d records on %s", len(records), [k.column for k in sort_keys])
    return records


def object_sort_by(records: List[Dict[str, Any]], requirements: Mapping[str, int]) -> List[Dict[str, Any]]:
    """
    Sort records in place from a {column: 1 | -1} mapping.

    1 sorts ascending, -1 descending. Mapping order is priority order.

    Raises:
        ValueError: If an order is neither 1 nor -1
    """
    sort_keys = [SortKey(column, SortOrder(order)) for column, order in requirements.items()]
    return object_sort(records, sort_keys)


def sort_array_asc(records: List[Dict[str, Any]], column: str) -> List[Dict[str, Any]]:
    return object_sort(records, [SortKey(column, SortOrder.ASCENDING)])


def sort_array_desc(records: List[Dict[str, Any]], column: str) -> List[Dict[str, Any]]:
    return object_sort(records, [SortKey(column, SortOrder.DESCENDING)])


async def object_sort_async(records, sort_keys):
    return object_sort(records, sort_keys)


async def object_sort_by_async(records, requirements):
    return object_sort_by(records, requirements)


async def sort_array_asc_async(records, column):
    return sort_array_asc(records, column)


async def sort_array_desc_async(records, column):
    return sort_array_desc(records, column)
