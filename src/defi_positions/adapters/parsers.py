"""Parser factories turning ranked field lists into adapter parsers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..processors.aggregation import first_field, max_field, sum_fields

Parser = Callable[[Any], float]

# Field names read for token X / token Y of an AMM position
TOKEN_X_FIELDS = ("liquidity_x", "coin_x_amount", "token_x_amount", "x_amount")
TOKEN_Y_FIELDS = ("liquidity_y", "coin_y_amount", "token_y_amount", "y_amount")


def ranked(*fields: str) -> Parser:
    """First positive top-level field, in the given order."""

    def parse(data: Any) -> float:
        return first_field(data, fields)

    return parse


def summed(*fields: str) -> Parser:
    """Sum of every positive field found anywhere in the payload."""

    def parse(data: Any) -> float:
        return sum_fields(data, fields)

    return parse


def largest(*fields: str) -> Parser:
    """Largest positive field found anywhere in the payload."""

    def parse(data: Any) -> float:
        return max_field(data, fields)

    return parse


def pair_total(data: Any) -> float:
    """Combined token X and token Y amounts of a liquidity position."""
    return sum_fields(data, TOKEN_X_FIELDS) + sum_fields(data, TOKEN_Y_FIELDS)


def with_pair_fallback(primary: Parser) -> Parser:
    """Use ``primary``; fall back to the X + Y token amounts when it finds nothing."""

    def parse(data: Any) -> float:
        return primary(data) or pair_total(data)

    return parse
