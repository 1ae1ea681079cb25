from __future__ import annotations

import math
from collections.abc import Sequence

MIN_DISPLAY_AMOUNT = 0.0001
MAX_DISPLAY_AMOUNT = 1_000_000_000

DISPLAY_PRECISION = 4


def format_amount(value: float) -> str:
    """Format a value with exactly four fractional digits."""
    return f"{value:.{DISPLAY_PRECISION}f}"


def normalize_amount(raw_amount: float, candidate_decimals: Sequence[int]) -> str:
    """Convert a raw on-chain integer amount into a display string.

    Args:
        raw_amount: Unscaled amount (integer-like)
        candidate_decimals: Decimal exponents to try, most likely first

    Returns:
        ``"0"`` for non-positive or non-finite amounts. Otherwise the amount scaled by the
        first candidate whose result lies in ``[0.0001, 1_000_000_000)``,
        formatted to four fractional digits.

    Notes:
        - Order matters: ``150000000`` gives ``"150.0000"`` for ``[6, 8]``
          and ``"1.5000"`` for ``[8, 6]``.
        - When no candidate lands in range, the unscaled amount is
          formatted instead, so an empty candidate list shows raw units.
    """
    if not math.isfinite(raw_amount) or raw_amount <= 0:
        return "0"

    for decimals in candidate_decimals:
        normalized = raw_amount / (10**decimals)
        if MIN_DISPLAY_AMOUNT <= normalized < MAX_DISPLAY_AMOUNT:
            return format_amount(normalized)

    return format_amount(raw_amount)
