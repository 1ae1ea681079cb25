from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

_UNSIGNED_DECIMAL = re.compile(r"[0-9]+(\.[0-9]+)?")

# Wrapper keys tried in order when a value is an object rather than a number.
WRAPPER_KEYS: tuple[str, ...] = ("value", "amount", "coin")

# Wrappers nested deeper than this coerce to 0.0
MAX_WRAPPER_DEPTH = 8


def _positive(number: float) -> float:
    return number if math.isfinite(number) and number > 0 else 0.0


def coerce_amount(value: Any, depth: int = 0) -> float:
    """Coerce an arbitrary JSON value into a positive amount.

    Args:
        value: Number, numeric string, big-integer-like value or a
            ``{value}``/``{amount}``/``{coin}`` wrapper, possibly nested.
        depth: Wrapper nesting level of ``value``, 0 for the top level

    Returns:
        The amount as a float, or 0.0 when ``value`` cannot be read as a
        strictly positive magnitude. Never raises.

    Notes:
        - Booleans are rejected even though ``bool`` subclasses ``int``.
        - Integers beyond float range coerce to 0.0; large integers below
          that lose precision silently.
        - Only MAX_WRAPPER_DEPTH wrapper levels are unwrapped.
        - Strings must be unsigned decimals (``"123"`` or ``"1.5"``), no
          sign, exponent or whitespace.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, Decimal)):
        try:
            return _positive(float(value))
        except (OverflowError, ValueError):
            return 0.0

    if isinstance(value, float):
        return _positive(value)

    if isinstance(value, str):
        if not _UNSIGNED_DECIMAL.fullmatch(value):
            return 0.0
        return _positive(float(value))

    if isinstance(value, Mapping):
        if depth >= MAX_WRAPPER_DEPTH:
            return 0.0
        for key in WRAPPER_KEYS:
            if key in value:
                return coerce_amount(value[key], depth + 1)
        return 0.0

    return 0.0
