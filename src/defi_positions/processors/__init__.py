from __future__ import annotations

from .aggregation import first_field, map_entries, max_field, sum_entries, sum_fields
from .coercion import coerce_amount
from .field_search import DEFAULT_MAX_DEPTH, collect_numeric_fields
from .position_summary import PositionSummary, summarize_positions

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "PositionSummary",
    "coerce_amount",
    "collect_numeric_fields",
    "first_field",
    "map_entries",
    "max_field",
    "sum_entries",
    "sum_fields",
    "summarize_positions",
]
