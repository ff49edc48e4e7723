"""
One-level projection filter on a list of records.

    projection[field] = 0 or False   -> exclude the field
    projection[field] = anything else -> include the field

A projection is either all inclusions or all exclusions; the first entry
decides which. Nested projection is not supported.
"""

import logging
from typing import Any, Dict, List, Mapping

from seqalgo.model import ProjectionError

logger = logging.getLogger(__name__)


def _is_exclusion(value: Any) -> bool:
    return value is False or (not isinstance(value, bool) and value == 0)


def projection_filter(records: List[Dict[str, Any]], projection: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Keep or drop fields of every record, in place.

    Args:
        records: List of records (modified in place)
        projection: Field -> include/exclude flag

    Returns:
        The same list

    Raises:
        ProjectionError: If inclusion and exclusion fields are mixed
    """
    if not records or not projection:
        return records

    flags = list(projection.items())
    exclusion = _is_exclusion(flags[0][1])
    for field, value in flags:
        if exclusion and not _is_exclusion(value):
            raise ProjectionError(f"Cannot do inclusion on field {field} in exclusion projection")
        if not exclusion and _is_exclusion(value):
            raise ProjectionError(f"Cannot do exclusion on field {field} in inclusion projection")

    fields = {}
    for record in records:
        fields.update(dict.fromkeys(record))

    if exclusion:
        dropped = [field for field in fields if field in projection]
    else:
        dropped = [field for field in fields if field not in projection]

    for record in records:
        for field in dropped:
            record.pop(field, None)

    logger.debug("Projection dropped fields %s", dropped)
    return records
