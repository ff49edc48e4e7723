"""
seqalgo: Stateless sequence and record utilities.

Provides permutation generation, duplicate detection, structural equality,
multi-key record sorting, field projection and empty-key pruning.

RESULT CONTRACT:
----------------
Equality and duplicate functions never raise on a bad input shape.
They return a tagged result instead:

    Supported(value)     -> a computed answer (possibly False or [])
    Unsupported(reason)  -> the input shape or element type is not supported

Usage:
    from seqalgo import permutation_heap, find_duplicates, is_same_array

    permutation_heap([1, 2, 3])            # 6 arrangements
    find_duplicates([3, 1, 2, 1, 3])       # Supported([1, 3])
    is_same_array([1, 2, 3], [3, 2, 1])    # Supported(True)
"""

from .model import (
    SortKey,
    SortOrder,
    Supported,
    Unsupported,
    Result,
    SeqAlgoError,
    UnsupportedInputError,
    ProjectionError,
    SerializationError,
)
from .equality import is_same_array, is_same_object
from .duplicates import find_duplicates, find_duplicated_objects, filter_duplicated_objects
from .permutation import swap_elements, iter_permutations, permutation_heap, permutation_heap_async
from .sorting import (
    object_sort,
    object_sort_by,
    sort_array_asc,
    sort_array_desc,
    object_sort_async,
    object_sort_by_async,
    sort_array_asc_async,
    sort_array_desc_async,
)
from .projection import projection_filter
from .cleaning import remove_empty_key, run_fn_on_element, remove_empty_key_async, run_fn_on_element_async

__version__ = "0.1.0"
__all__ = [
    # Results
    "Supported",
    "Unsupported",
    "Result",
    "SortKey",
    "SortOrder",
    # Errors
    "SeqAlgoError",
    "UnsupportedInputError",
    "ProjectionError",
    "SerializationError",
    # Equality and duplicates
    "is_same_array",
    "is_same_object",
    "find_duplicates",
    "find_duplicated_objects",
    "filter_duplicated_objects",
    # Permutations
    "swap_elements",
    "iter_permutations",
    "permutation_heap",
    "permutation_heap_async",
    # Sorting, projection, cleaning
    "object_sort",
    "object_sort_by",
    "sort_array_asc",
    "sort_array_desc",
    "object_sort_async",
    "object_sort_by_async",
    "sort_array_asc_async",
    "sort_array_desc_async",
    "projection_filter",
    "remove_empty_key",
    "run_fn_on_element",
    "remove_empty_key_async",
    "run_fn_on_element_async",
]
