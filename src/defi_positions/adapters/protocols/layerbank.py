"""LayerBank: lending supply and borrow balances."""

from __future__ import annotations

from typing import Any

from ...processors.aggregation import first_field, sum_entries
from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "LayerBank"


def parse_lending_position(data: Any) -> float:
    """Sum of listed deposits plus the direct balance of the resource."""
    deposits = data.get("deposits") or data.get("positions") or []
    total = 0.0
    if isinstance(deposits, list):
        total = sum_entries(deposits, ("amount", "value"))
    return total + first_field(data, ("balance", "deposited"))


def is_layerbank(resource_type: str) -> bool:
    return "layerbank" in resource_type


LAYERBANK_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="layerbank_supply",
        name="LayerBank Supply",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match="::layerbank::",
        parse=ranked("total_collateral", "deposited", "supply_balance", "principal"),
    ),
    Adapter(
        id="layerbank_lending_position",
        name="LayerBank Deposits",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match="::lending::",
        type_filter=is_layerbank,
        parse=parse_lending_position,
    ),
    Adapter(
        id="layerbank_borrow",
        name="LayerBank Borrow",
        protocol=PROTOCOL,
        category=Category.DEBT,
        match="::layerbank::",
        parse=ranked("borrowed", "debt", "borrow_balance", "liability"),
    ),
)
