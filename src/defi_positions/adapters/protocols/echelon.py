"""Echelon Finance: lending supply, borrow and ecToken receipt balances."""

from __future__ import annotations

from typing import Any

from ...constants import COIN_STORE
from ...processors.aggregation import map_entries, sum_entries
from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "Echelon"

# Amount of one map entry: {"key": ..., "value": {"amount": ...}} or flat
ENTRY_AMOUNT_FIELDS = ("value.amount", "value.value", "amount", "value")


def _first_map(data: Any, *keys: str) -> list[Any]:
    for key in keys:
        entries = map_entries(data.get(key))
        if entries:
            return entries
    return []


def parse_supply(data: Any) -> float:
    collateral = _first_map(data, "collateral", "deposits")
    supply = _first_map(data, "supply_positions")
    return sum_entries(collateral, ENTRY_AMOUNT_FIELDS) + sum_entries(
        supply, ENTRY_AMOUNT_FIELDS
    )


def parse_borrow(data: Any) -> float:
    borrows = _first_map(data, "borrows", "liabilities", "borrow_positions")
    return sum_entries(borrows, ENTRY_AMOUNT_FIELDS)


def is_receipt_token(resource_type: str) -> bool:
    return "echelon" in resource_type or "::ec" in resource_type


ECHELON_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="echelon_supply",
        name="Echelon Supply",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match="::lending::UserAccount",
        parse=parse_supply,
    ),
    Adapter(
        id="echelon_receipt_tokens",
        name="Echelon Deposits",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match=COIN_STORE,
        type_filter=is_receipt_token,
        parse=ranked("coin", "value"),
    ),
    Adapter(
        id="echelon_borrow",
        name="Echelon Borrow",
        protocol=PROTOCOL,
        category=Category.DEBT,
        match="::lending::UserAccount",
        parse=parse_borrow,
    ),
)
