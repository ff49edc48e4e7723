#!/usr/bin/env python3
"""
Demo: Run the record utilities on the example inventory and print results.
"""

import copy

from seqalgo.examples import build_example_records
from seqalgo.duplicates import find_duplicated_objects, filter_duplicated_objects
from seqalgo.cleaning import remove_empty_key
from seqalgo.projection import projection_filter
from seqalgo.sorting import object_sort
from seqalgo.permutation import iter_permutations
from seqalgo.serialization import sort_spec_from_yaml, projection_from_yaml
from seqalgo.log import setup_logger

QUERY = """
sort:
  - column: warehouse
    order: asc
  - column: sku
    order: desc
projection:
  sku: 1
  warehouse: 1
"""


def main():
    setup_logger()
    records = build_example_records()

    print("=" * 70)
    print("RECORD UTILITIES DEMO")
    print("=" * 70)

    print("\nDuplicated SKUs:")
    for record in find_duplicated_objects(records, "sku").unwrap():
        print(f"  {record}")

    unique = filter_duplicated_objects(records).unwrap()
    print(f"\nExact duplicates removed: {len(records)} -> {len(unique)} records")

    cleaned = remove_empty_key(copy.deepcopy(unique), find_nest=True)
    object_sort(cleaned, sort_spec_from_yaml(QUERY))
    projection_filter(cleaned, projection_from_yaml(QUERY))
    print("\nCleaned, sorted and projected:")
    for record in cleaned:
        print(f"  {record}")

    print("\nPick orders for three warehouses:")
    for arrangement in iter_permutations(["north", "south", "east"]):
        print(f"  {' -> '.join(arrangement)}")
    print("=" * 70)


if __name__ == "__main__":
    main()
