"""
Every ordering of a sequence, generated by Heap's algorithm.

The walk swaps indices of a single private working buffer and snapshots
the buffer each time an arrangement is complete, so callers always get
independent lists and their own sequence is never touched.

Swap rule, for a segment of length k at its i-th iteration (1-based):
    k odd   -> swap(0, k - 1)
    k even  -> swap(i - 1, k - 1)

Example:
    >>> list(iter_permutations([1, 2, 3]))
    [[1, 2, 3], [2, 1, 3], [3, 1, 2], [1, 3, 2], [2, 3, 1], [3, 2, 1]]
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def swap_elements(array: List[T], index1: int, index2: int) -> List[T]:
    """Swap two elements in place and return the same list."""
    array[index1], array[index2] = array[index2], array[index1]
    return array


def iter_permutations(sequence: Iterable[T]) -> Iterator[List[T]]:
    """
    Lazily yield every arrangement of `sequence`.

    Repeated input values are not collapsed: n elements always give n!
    arrangements. An empty sequence gives a single empty arrangement.

    The generator is finite and not restartable. Memory use is O(n)
    regardless of how many arrangements are consumed.
    """
    buffer = list(sequence)
    n = len(buffer)
    # completed[k]: iterations finished by the segment of length k
    completed = [0] * (n + 1)

    yield list(buffer)

    k = 2
    while k <= n:
        completed[k] += 1
        i = completed[k]
        if k % 2:
            swap_elements(buffer, 0, k - 1)
        else:
            swap_elements(buffer, i - 1, k - 1)

        if i < k:
            yield list(buffer)
            k = 2
        else:
            completed[k] = 0
            k += 1


def permutation_heap(sequence: Iterable[T]) -> List[List[T]]:
    """
    Return all n! arrangements of `sequence` as a list of lists.

    Same order as iter_permutations. Prefer iter_permutations for long
    sequences, the materialized list grows as n!.
    """
    result = list(iter_permutations(sequence))
    logger.debug("Generated %d permutations", len(result))
    return result


async def permutation_heap_async(sequence: Iterable[Any]) -> List[List[Any]]:
    """Coroutine form of permutation_heap. Completes without suspending."""
    return permutation_heap(sequence)
