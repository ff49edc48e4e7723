"""
Core Result and Sort Model Objects

Defines the fundamental data structures shared by every seqalgo operation.

These are small data classes representing:
    - Supported results (a computed value)
    - Unsupported results (input shape or element type rejected)
    - Sort orders and sort keys (call-site sort requirements)
    - The package error hierarchy

ARCHITECTURAL RULE:
    Shape violations in the core are RESULTS, not exceptions.
    A caller must look at the result type before trusting its value.
    Exceptions are reserved for caller programming errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")

# (a, b) -> negative | zero | positive
Comparator = Callable[[Any, Any], int]


class SeqAlgoError(Exception):
    """Base class for all seqalgo errors."""
    pass


class UnsupportedInputError(SeqAlgoError, TypeError):
    """Raised when an unsupported input is unwrapped or cannot be processed."""
    pass


class ProjectionError(SeqAlgoError, ValueError):
    """Raised when a projection mixes inclusion and exclusion fields."""
    pass


class SerializationError(SeqAlgoError, ValueError):
    """Raised when a parameter document is malformed."""
    pass


@dataclass(frozen=True)
class Supported(Generic[T]):
    """
    A computed result.

    Example:
        is_same_array([1, 2], [2, 1])  ->  Supported(True)
        find_duplicates([1, 2, 3])     ->  Supported([])

    Properties:
        value: The computed value (bool, list, ...)

    IMPORTANT:
        Supported(False) is a valid answer, not a failure.
        Truth testing is refused so it is never mistaken for Unsupported.
    """

    value: T

    @property
    def is_supported(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def __bool__(self) -> bool:
        raise TypeError(
            "The truth value of a Supported result is ambiguous; "
            "use result.value or result.unwrap()"
        )


@dataclass(frozen=True)
class Unsupported:
    """
    Signals that an input shape or element type is not supported.

    Distinct from a computed False: a function answering "no" returns
    Supported(False), a function that cannot answer returns Unsupported.

    Properties:
        reason: Human-readable explanation (for logs and error messages)
    """

    reason: str = "unsupported input"

    @property
    def is_supported(self) -> bool:
        return False

    def unwrap(self):
        """Always raises UnsupportedInputError."""
        raise UnsupportedInputError(self.reason)

    def __bool__(self) -> bool:
        raise TypeError(
            "The truth value of an Unsupported result is ambiguous; "
            "check result.is_supported"
        )


Result = Union[Supported[T], Unsupported]


def is_true(result: "Result[bool]") -> bool:
    """True only for Supported(True)."""
    return isinstance(result, Supported) and result.value is True


class SortOrder(Enum):
    """
    Direction of a single sort column.

    The integer values match the mapping form of sort requirements:
        {"name": 1, "_id": -1}
    """

    ASCENDING = 1
    DESCENDING = -1


@dataclass(frozen=True)
class SortKey:
    """
    One column of a multi-key sort.

    The first SortKey decides the order; when two records tie on it,
    the next SortKey is consulted, and so on.

    Properties:
        column: Record field name to compare
        order: SortOrder (default ascending)
    """

    column: str
    order: SortOrder = SortOrder.ASCENDING

    def __post_init__(self):
        # accept raw 1 / -1 at the call site
        if not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", SortOrder(self.order))
