from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from .coercion import coerce_amount

DEFAULT_MAX_DEPTH = 8


def collect_numeric_fields(
    node: Any,
    field_names: Collection[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> list[float]:
    """Collect positive amounts stored under any of ``field_names``.

    Walks mappings and lists recursively. Each key found in ``field_names``
    has its value coerced with :func:`coerce_amount`; strictly positive
    results are collected. Every mapping or list value is descended into,
    whether or not its key matched, one depth level per step. Nodes deeper
    than ``max_depth`` are not visited (the root is depth 0).

    Args:
        node: JSON-like tree (mappings, lists and scalars)
        field_names: Candidate field names
        max_depth: Deepest level that is still visited
        depth: Depth of ``node`` itself

    Returns:
        Amounts in traversal order (key order, then list index order).

    Notes:
        Payloads are assumed to be acyclic JSON; reference cycles are only
        bounded by ``max_depth``, not detected.
    """
    if node is None or depth > max_depth:
        return []

    if isinstance(node, list):
        found: list[float] = []
        for item in node:
            found.extend(
                collect_numeric_fields(item, field_names, max_depth, depth + 1)
            )
        return found

    if not isinstance(node, Mapping):
        return []

    found = []
    for key, value in node.items():
        if key in field_names:
            amount = coerce_amount(value)
            if amount > 0:
                found.append(amount)

        if isinstance(value, (Mapping, list)):
            found.extend(
                collect_numeric_fields(value, field_names, max_depth, depth + 1)
            )

    return found
