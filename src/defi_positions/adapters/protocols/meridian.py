"""Meridian: AMM pools and positions, CDP vaults, stability pool and staking.

Several Meridian resources share no fixed layout, so most adapters search
the payload structurally. Whether an adapter sums every candidate field or
keeps only the largest one is declared per adapter and must stay that way:
switching policies changes displayed balances.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ...constants import MERIDIAN
from ...processors.aggregation import max_field, sum_fields
from ...processors.coercion import coerce_amount
from ...tokens import display_symbol, struct_name, type_arguments
from ..base import Adapter, Category, PoolComposition, Resource
from ..parsers import (
    TOKEN_X_FIELDS,
    TOKEN_Y_FIELDS,
    largest,
    pair_total,
    ranked,
    summed,
    with_pair_fallback,
)

PROTOCOL = "Meridian"

POSITION_FIELDS = (
    "liquidity",
    "amount",
    "shares",
    "value",
    "balance",
    "total_value",
    "position_value",
    "lp_amount",
    "staked",
    "staked_amount",
)

LP_FIELDS = ("liquidity", "amount", "shares", "value", "lp_amount")

NESTED_SEARCH_DEPTH = 3

POOL_X_FIELDS = TOKEN_X_FIELDS + ("amount_x", "token0_amount", "amount_0", "reserve_x")
POOL_Y_FIELDS = TOKEN_Y_FIELDS + ("amount_y", "token1_amount", "amount_1", "reserve_y")
STAKED_FIELDS = (
    "staked",
    "staked_amount",
    "deposit",
    "deposited",
    "stake",
    "stake_amount",
    "lp_amount",
    "shares",
)
LIQUIDITY_TOKEN_FIELDS = (
    "lp_amount",
    "liquidity",
    "shares",
    "amount",
    "stake_amount",
    "staked_amount",
)

_SWAP_STRUCT = re.compile(r"swap::\w+<")


def _first_nested_amount(node: Any, depth: int = 0) -> float:
    """Depth-first search for the first positive number in a payload.

    Known position fields are visited before any other key.
    """
    if depth > NESTED_SEARCH_DEPTH:
        return 0.0
    if isinstance(node, (int, float)) and not isinstance(node, bool):
        return coerce_amount(node)
    if isinstance(node, str):
        return coerce_amount(node) if node.isdigit() else 0.0
    if isinstance(node, Mapping):
        children = [node[key] for key in POSITION_FIELDS if key in node]
        children.extend(node.values())
    elif isinstance(node, list):
        children = list(node)
    else:
        return 0.0
    for child in children:
        amount = _first_nested_amount(child, depth + 1)
        if amount > 0:
            return amount
    return 0.0


def parse_swap_resource(data: Any) -> float:
    """Largest position field, else the first nested number, else X + Y."""
    return (
        max_field(data, POSITION_FIELDS)
        or _first_nested_amount(data)
        or pair_total(data)
    )


def swap_pair_symbols(resource_type: str) -> tuple[str | None, str | None]:
    """Symbols of the X and Y coins of a ``swap::<Struct><X, Y>`` type."""
    found = _SWAP_STRUCT.search(resource_type)
    if found is None:
        return None, None
    arguments = type_arguments(resource_type[found.start() :])
    if len(arguments) < 2:
        return None, None
    return display_symbol(struct_name(arguments[0])), display_symbol(
        struct_name(arguments[1])
    )


def _known(amount: float) -> float | None:
    return amount if amount > 0 else None


def pool_composition(resource: Resource) -> PoolComposition | None:
    """Pool details of a Meridian resource, or None when nothing is known.

    Token X and Y amounts, staked and LP token totals are each summed over
    the whole payload. ``pool_id`` is read from the top level and the pair
    symbols come from the resource type.
    """
    data = resource.data
    token_x, token_y = swap_pair_symbols(resource.resource_type)
    composition = PoolComposition(
        token_x_amount=_known(sum_fields(data, POOL_X_FIELDS)),
        token_y_amount=_known(sum_fields(data, POOL_Y_FIELDS)),
        staked_amount=_known(sum_fields(data, STAKED_FIELDS)),
        liquidity_tokens=_known(sum_fields(data, LIQUIDITY_TOKEN_FIELDS)),
        pool_id=data.get("pool_id") if isinstance(data, Mapping) else None,
        token_x=token_x,
        token_y=token_y,
    )
    return composition if composition.to_dict() else None


MERIDIAN_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="meridian_generic",
        name="Meridian LP",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match=f"{MERIDIAN}::swap::",
        parse=parse_swap_resource,
        decimals=(6, 8),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_userpools",
        name="Meridian Pools",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="UserPoolsMap",
        parse=summed(*LP_FIELDS, "coin_x_amount", "coin_y_amount"),
        decimals=(6, 8),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_userpositions",
        name="Meridian Positions",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="UserPositionsMap",
        parse=with_pair_fallback(summed(*LP_FIELDS)),
        decimals=(6, 8),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_position",
        name="Meridian Position",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::ds::",
        parse=with_pair_fallback(largest(*LP_FIELDS)),
        decimals=(6, 8),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_vault",
        name="Meridian Vault",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match="::vault::",
        parse=ranked("collateral", "collateral_amount", "deposited", "locked_amount"),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_debt",
        name="Meridian Debt",
        protocol=PROTOCOL,
        category=Category.DEBT,
        match="::vault::",
        parse=ranked("debt", "debt_amount", "minted", "borrowed"),
        decimals=(8, 6),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_lp",
        name="Meridian LP Token",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::swap::LPCoin",
        parse=largest("value", "amount", "coin", "balance", "liquidity", "shares"),
        decimals=(6, 8),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_stability",
        name="Meridian Stability Pool",
        protocol=PROTOCOL,
        category=Category.STAKING,
        match="::stability_pool::",
        parse=summed(
            "deposited", "amount", "stake", "staked", "staked_amount", "deposit"
        ),
        decimals=(8, 6),
        composition=pool_composition,
    ),
    Adapter(
        id="meridian_staking",
        name="Meridian Staked LP",
        protocol=PROTOCOL,
        category=Category.FARMING,
        match="::staking::",
        parse=summed(
            "amount",
            "staked",
            "staked_amount",
            "deposit",
            "deposited",
            "stake",
            "lp_amount",
        ),
        decimals=(6, 8),
        composition=pool_composition,
    ),
)
