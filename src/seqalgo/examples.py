"""
Example record builder used by the demo and the tests.

Builds a small inventory of flat records with repeated SKUs, one exact
duplicate row, and a few empty fields to prune.
"""
from typing import Any, Dict, List


def build_example_records(copies: int = 1) -> List[Dict[str, Any]]:
    records = [
        {"sku": 104, "name": "bolt", "warehouse": "north", "note": ""},
        {"sku": 101, "name": "nut", "warehouse": "south", "note": None},
        {"sku": 104, "name": "bolt", "warehouse": "north", "note": ""},
        {"sku": 102, "name": "washer", "warehouse": "north", "note": "fragile"},
        {"sku": 101, "name": "nut", "warehouse": "east", "note": None},
        {"sku": 103, "name": "screw", "warehouse": "south", "note": ""},
    ]

    result = []
    for _ in range(copies):
        # fresh dicts per copy, callers mutate them
        result.extend(dict(record) for record in records)
    return result
