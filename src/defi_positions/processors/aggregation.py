from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .coercion import coerce_amount
from .field_search import collect_numeric_fields


def sum_fields(node: Any, fields: Iterable[str]) -> float:
    """Sum every positive amount found under ``fields`` anywhere in ``node``."""
    return sum(collect_numeric_fields(node, frozenset(fields)), 0.0)


def max_field(node: Any, fields: Iterable[str]) -> float:
    """Return the largest positive amount found under ``fields``, or 0."""
    return max(collect_numeric_fields(node, frozenset(fields)), default=0.0)


def _lookup(node: Any, path: str) -> Any:
    current = node
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current


def first_field(node: Any, fields: Sequence[str]) -> float:
    """Return the first positive amount among ranked top-level fields.

    Fields are tried in the given order and may be dotted paths such as
    ``"value.amount"``. Each candidate goes through :func:`coerce_amount`,
    so ``"balance"`` also reads ``{"balance": {"value": "10"}}``.

    Args:
        node: Mapping to read from; anything else yields 0
        fields: Ranked field names or dotted paths

    Returns:
        The first strictly positive amount, or 0.0 when none is found.
    """
    for path in fields:
        amount = coerce_amount(_lookup(node, path))
        if amount > 0:
            return amount
    return 0.0


def map_entries(node: Any) -> list[Any]:
    """Unwrap a Move map payload into its list of entries.

    Move ``SimpleMap``/``Table`` values serialize as ``{"data": [...]}``;
    bare lists are returned unchanged, anything else yields an empty list.
    """
    if isinstance(node, list):
        return node
    if isinstance(node, Mapping) and isinstance(node.get("data"), list):
        return node["data"]
    return []


def sum_entries(entries: Iterable[Any], fields: Sequence[str]) -> float:
    """Sum :func:`first_field` over every entry of a list."""
    return sum((first_field(entry, fields) for entry in entries), 0.0)
