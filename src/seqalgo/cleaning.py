"""
In-place pruning and mapping over nested dicts and lists.

Both functions modify the object they are given. Pass a copy
(copy.deepcopy) to keep the original.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from seqalgo.model import UnsupportedInputError
from seqalgo.shapes import is_nan

Container = Union[Dict[str, Any], List[Any]]


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return is_nan(value)


def _clean_value(value: Any, find_nest: bool, fn: Optional[Callable[[Any], Any]]) -> Any:
    if find_nest and isinstance(value, (dict, list)):
        remove_empty_key(value, find_nest, fn)
    if fn is not None:
        value = fn(value)
    return value


def remove_empty_key(
    obj: Container,
    find_nest: bool = False,
    fn: Optional[Callable[[Any], Any]] = None,
) -> Container:
    """
    Remove empty values ("", None, NaN) from a dict or list, in place.

    Example fn, normalizing strings on the way:

        def normalize(value):
            if isinstance(value, str):
                value = value.strip()
            return {"true": True, "false": False}.get(value, value)

        remove_empty_key(data, find_nest=True, fn=normalize)

    Args:
        obj: Dict or list
        find_nest: Also prune nested dicts and lists
        fn: Applied to every surviving value, after nested pruning

    Returns:
        The same object

    Raises:
        UnsupportedInputError: If obj is neither a dict nor a list
    """
    if isinstance(obj, dict):
        for key in list(obj):
            if _is_empty(obj[key]):
                del obj[key]
            else:
                obj[key] = _clean_value(obj[key], find_nest, fn)
    elif isinstance(obj, list):
        obj[:] = [_clean_value(item, find_nest, fn) for item in obj if not _is_empty(item)]
    else:
        raise UnsupportedInputError(
            f"remove_empty_key supports dict and list only, got {type(obj).__name__}"
        )
    return obj


def run_fn_on_element(obj: Container, fn: Callable[[Any], Any]) -> Container:
    """
    Apply fn to every element of nested dicts and lists, in place.

    Nested containers are traversed first, then replaced by fn(container).
    """
    keys = obj.keys() if isinstance(obj, dict) else range(len(obj))
    for key in list(keys):
        if isinstance(obj[key], (dict, list)):
            run_fn_on_element(obj[key], fn)
        obj[key] = fn(obj[key])
    return obj


async def remove_empty_key_async(obj, find_nest=False, fn=None):
    return remove_empty_key(obj, find_nest, fn)


async def run_fn_on_element_async(obj, fn):
    return run_fn_on_element(obj, fn)
