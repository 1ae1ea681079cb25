"""Joule Finance: per-coin lending, borrowing and reward pool positions.

Joule keeps every position of an account in one map resource, so these
adapters emit one position per coin instead of a single aggregate.
"""

from __future__ import annotations

from typing import Any

from ...processors.aggregation import first_field, map_entries
from ...processors.coercion import coerce_amount
from ...tokens import decimals_for_symbol, symbol_from_type
from ..base import UNKNOWN_TOKEN, Adapter, Category, TokenAmount

PROTOCOL = "Joule Finance"


def _token_amount(
    coin_type: Any, raw_amount: float, strip_digits: bool = False
) -> TokenAmount:
    symbol = symbol_from_type(str(coin_type or ""), strip_digits=strip_digits)
    return TokenAmount(
        raw_amount=raw_amount,
        token=symbol or UNKNOWN_TOKEN,
        decimals=(decimals_for_symbol(symbol),),
    )


def _positions(data: Any) -> list[Any]:
    return map_entries(data.get("positions_map"))


def parse_lend_positions(data: Any) -> list[TokenAmount]:
    amounts = []
    for position in _positions(data):
        for lend in map_entries((position.get("value") or {}).get("lend_positions")):
            raw_amount = coerce_amount(lend.get("value"))
            if raw_amount > 0:
                amounts.append(_token_amount(lend.get("key"), raw_amount))
    return amounts


def parse_borrow_positions(data: Any) -> list[TokenAmount]:
    amounts = []
    for position in _positions(data):
        for borrow in map_entries(
            (position.get("value") or {}).get("borrow_positions")
        ):
            raw_amount = first_field(borrow.get("value"), ("borrow_amount",))
            if raw_amount > 0:
                amounts.append(_token_amount(borrow.get("key"), raw_amount))
    return amounts


def parse_reward_pools(data: Any) -> list[TokenAmount]:
    """Stake amount per reward pool; pool coin names carry a numeric suffix."""
    amounts = []
    for pool in map_entries(data.get("user_pools_map")):
        pool_value = pool.get("value") or {}
        raw_amount = first_field(pool_value, ("stake_amount",))
        if raw_amount > 0:
            coin_name = pool_value.get("coin_name") or pool.get("key")
            amounts.append(_token_amount(coin_name, raw_amount, strip_digits=True))
    return amounts


JOULE_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="joule_supply",
        name="Joule Supply",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match="::pool::UserPositionsMap",
        parse=parse_lend_positions,
    ),
    Adapter(
        id="joule_borrow",
        name="Joule Borrow",
        protocol=PROTOCOL,
        category=Category.DEBT,
        match="::pool::UserPositionsMap",
        parse=parse_borrow_positions,
    ),
    Adapter(
        id="joule_rewards",
        name="Joule Rewards",
        protocol=PROTOCOL,
        category=Category.REWARDS,
        match="::rewards::UserPoolsMap",
        parse=parse_reward_pools,
    ),
)
