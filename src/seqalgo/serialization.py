"""
Serialization helpers for seqalgo call-site parameters and results.

Sort specs and projections can be kept as JSON/YAML documents:

    sort:
      - column: name
        order: asc
      - column: _id
        order: desc
    projection:
      name: 1
      _id: 0

Conversion goes through an explicit dict representation so document
structure stays stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from seqalgo.model import (
    Result,
    SerializationError,
    SortKey,
    SortOrder,
    Supported,
    Unsupported,
)

_ORDER_NAMES = {"asc": SortOrder.ASCENDING, "desc": SortOrder.DESCENDING}


def order_to_str(order: SortOrder) -> str:
    return "asc" if order is SortOrder.ASCENDING else "desc"


def order_from_value(value: Any) -> SortOrder:
    if isinstance(value, str):
        if value.lower() not in _ORDER_NAMES:
            raise SerializationError(f"Unsupported sort order: {value!r}")
        return _ORDER_NAMES[value.lower()]
    try:
        return SortOrder(value)
    except ValueError as e:
        raise SerializationError(f"Unsupported sort order: {value!r}") from e


def sort_key_to_dict(k: SortKey) -> Dict[str, Any]:
    return {"column": k.column, "order": order_to_str(k.order)}


def sort_key_from_dict(d: Dict[str, Any]) -> SortKey:
    if not isinstance(d, dict) or "column" not in d:
        raise SerializationError(f"Sort key needs a column: {d!r}")
    return SortKey(column=d["column"], order=order_from_value(d.get("order", "asc")))


def sort_spec_to_dict(keys: List[SortKey]) -> Dict[str, Any]:
    return {"sort": [sort_key_to_dict(k) for k in keys]}


def sort_spec_from_dict(d: Dict[str, Any]) -> List[SortKey]:
    if not isinstance(d, dict) or not isinstance(d.get("sort"), list):
        raise SerializationError("Sort spec document needs a 'sort' list")
    return [sort_key_from_dict(k) for k in d["sort"]]


def sort_spec_to_json(keys: List[SortKey]) -> str:
    return json.dumps(sort_spec_to_dict(keys), sort_keys=True)


def sort_spec_from_json(s: str) -> List[SortKey]:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON sort spec: {e}") from e
    return sort_spec_from_dict(d)


def sort_spec_to_yaml(keys: List[SortKey]) -> str:
    return yaml.safe_dump(sort_spec_to_dict(keys), sort_keys=False)


def sort_spec_from_yaml(s: str) -> List[SortKey]:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML sort spec: {e}") from e
    return sort_spec_from_dict(d)


def projection_from_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(d, dict) or not isinstance(d.get("projection"), dict):
        raise SerializationError("Projection document needs a 'projection' mapping")
    return dict(d["projection"])


def projection_from_json(s: str) -> Dict[str, Any]:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON projection: {e}") from e
    return projection_from_dict(d)


def projection_from_yaml(s: str) -> Dict[str, Any]:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML projection: {e}") from e
    return projection_from_dict(d)


def result_to_dict(r: Result[Any]) -> Dict[str, Any]:
    if isinstance(r, Supported):
        return {"supported": True, "value": r.value}
    if isinstance(r, Unsupported):
        return {"supported": False, "reason": r.reason}
    raise TypeError(f"Unsupported result type: {type(r)}")


def result_from_dict(d: Dict[str, Any]) -> Result[Any]:
    if not isinstance(d, dict) or "supported" not in d:
        raise SerializationError(f"Result document needs a 'supported' flag: {d!r}")
    if d["supported"]:
        return Supported(d.get("value"))
    return Unsupported(d.get("reason", "unsupported input"))
