"""Fallback adapters for receipt tokens and unrecognized DeFi resources.

These overlap with the protocol adapters and are only registered
when the generic fallback is enabled.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from ...constants import (
    COIN_STORE,
    ECHELON,
    JOULE,
    LAYERBANK,
    MERIDIAN,
    MOSAIC,
    MOVEPOSITION,
    YUZU,
)
from ...processors.coercion import coerce_amount
from ...processors.field_search import DEFAULT_MAX_DEPTH, collect_numeric_fields
from ..base import Adapter, Category

GENERIC_PROTOCOL = "DeFi"

VALUE_FIELDS = frozenset(
    {
        "value",
        "amount",
        "balance",
        "coin",
        "total",
        "shares",
        "deposited",
        "borrowed",
        "staked",
        "collateral",
        "principal",
        "debt",
        "supply",
        "deposit_notes",
        "loan_notes",
        "supply_amount",
        "borrow_amount",
        "available",
        "locked",
        "pending",
    }
)

# Container fields that may hold bare numeric strings, e.g. {"items": ["149", "0"]}
ARRAY_FIELDS = frozenset({"data", "inner", "items", "positions", "entries", "vec"})

LP_COIN = re.compile(
    r"::swap::LPCoin|::amm::|::pool::|LPCoin|LPToken", re.IGNORECASE
)

# (pattern, category, priority); lower priority wins
DEFI_PATTERNS: tuple[tuple[re.Pattern[str], Category, int], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), category, priority)
    for pattern, category, priority in (
        (rf"{MOVEPOSITION}::portfolio::", Category.LENDING, 1),
        (r"::borrow::", Category.DEBT, 1),
        (r"UserAccount", Category.LENDING, 1),
        (r"UserPosition", Category.LENDING, 1),
        (r"PositionInfo", Category.LENDING, 1),
        (r"CollateralStore", Category.LENDING, 1),
        (r"DebtStore", Category.DEBT, 1),
        (r"Portfolio$", Category.LENDING, 1),
        (r"::swap::", Category.LIQUIDITY, 2),
        (r"::amm::", Category.LIQUIDITY, 2),
        (r"::pool::", Category.LIQUIDITY, 2),
        (r"LPCoin", Category.LIQUIDITY, 1),
        (r"LPToken", Category.LIQUIDITY, 1),
        (r"PoolToken", Category.LIQUIDITY, 2),
        (r"UserPoolsMap", Category.LIQUIDITY, 2),
        (r"UserPositionsMap", Category.LIQUIDITY, 2),
        (r"::stake::", Category.STAKING, 1),
        (r"::staking::", Category.STAKING, 1),
        (r"StakeInfo", Category.STAKING, 1),
        (r"UserStake", Category.STAKING, 1),
        (r"stMOVE", Category.STAKING, 1),
        (r"staked", Category.STAKING, 3),
        (r"::farm::", Category.FARMING, 1),
        (r"::farming::", Category.FARMING, 1),
        (r"::masterchef::", Category.FARMING, 1),
        (r"::vault::", Category.YIELD, 2),
        (r"VaultShare", Category.YIELD, 1),
        (r"::cdp::", Category.DEBT, 1),
        (r"Trove", Category.DEBT, 1),
    )
)

_PATTERNS_BY_PRIORITY = sorted(DEFI_PATTERNS, key=lambda entry: entry[2])

PROTOCOL_MARKERS = (
    ECHELON,
    JOULE,
    MOVEPOSITION,
    MERIDIAN,
    YUZU,
    LAYERBANK,
    MOSAIC,
    "echelon",
    "joule",
    "moveposition",
    "meridian",
    "canopy",
    "stmove",
    "layerbank",
    "mosaic",
    "yuzu",
)

DEBT_MARKERS = ("borrow", "debt", "loan")

# (adapter id, protocol, lower-cased symbol pattern, category)
RECEIPT_TOKENS: tuple[tuple[str, str, str, Category], ...] = (
    ("echelon_receipt", "Echelon", r"ecusd|ecmove|ecweth|ecwbtc", Category.LENDING),
    ("joule_receipt", "Joule Finance", r"jusd|jmove|jweth|jwbtc", Category.LENDING),
    ("canopy_receipt", "Canopy", r"stmove|smove", Category.STAKING),
    ("mosaic_receipt", "Mosaic", r"mlp|mtoken", Category.LIQUIDITY),
    ("yuzu_receipt", "Yuzu Swap", r"ylp|ytoken", Category.LIQUIDITY),
)


def _array_scalars(node: Any, depth: int = 0) -> list[float]:
    """Bare numeric entries of well-known container lists, at any depth."""
    if depth > DEFAULT_MAX_DEPTH:
        return []
    found: list[float] = []
    if isinstance(node, list):
        for item in node:
            found.extend(_array_scalars(item, depth + 1))
    elif isinstance(node, Mapping):
        for key, value in node.items():
            if key in ARRAY_FIELDS and isinstance(value, list):
                found.extend(
                    amount
                    for item in value
                    if not isinstance(item, (Mapping, list))
                    and (amount := coerce_amount(item)) > 0
                )
            if isinstance(value, (Mapping, list)):
                found.extend(_array_scalars(value, depth + 1))
    return found


def parse_largest_value(data: Any) -> float:
    """Largest value found under any common balance field or container list."""
    candidates = collect_numeric_fields(data, VALUE_FIELDS)
    candidates.extend(_array_scalars(data))
    return max(candidates, default=0.0)


def is_lp_coin(resource_type: str) -> bool:
    return LP_COIN.search(resource_type) is not None


def categorize(resource_type: str) -> Category | None:
    """Guess the position category of a DeFi resource type.

    Plain coin stores are not DeFi positions unless they hold LP coins.
    Types that name no known pattern and no known protocol return None.
    """
    lower = resource_type.lower()
    if COIN_STORE.lower() in lower and not is_lp_coin(lower):
        return None

    matched = [entry for entry in _PATTERNS_BY_PRIORITY if entry[0].search(lower)]
    if not matched and not any(marker in lower for marker in PROTOCOL_MARKERS):
        return None

    if any(marker in lower for marker in DEBT_MARKERS):
        return Category.DEBT
    if matched:
        return matched[0][1]
    return None


def _category_rule(category: Category) -> Callable[[str], bool]:
    def rule(resource_type: str) -> bool:
        return categorize(resource_type) is category

    return rule


def _receipt_filter(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)

    def rule(resource_type: str) -> bool:
        if is_lp_coin(resource_type):
            return False
        return compiled.search(resource_type) is not None

    return rule


RECEIPT_ADAPTERS: tuple[Adapter, ...] = tuple(
    Adapter(
        id=adapter_id,
        name=f"{protocol} Deposit",
        protocol=protocol,
        category=category,
        match=COIN_STORE,
        type_filter=_receipt_filter(pattern),
        parse=parse_largest_value,
    )
    for adapter_id, protocol, pattern, category in RECEIPT_TOKENS
)

GENERIC_ADAPTERS: tuple[Adapter, ...] = tuple(
    Adapter(
        id=f"generic_{category.name.lower()}",
        name=f"DeFi {category.value}",
        protocol=GENERIC_PROTOCOL,
        category=category,
        match=_category_rule(category),
        parse=parse_largest_value,
    )
    for category in Category
    if category is not Category.REWARDS
)

FALLBACK_ADAPTERS: tuple[Adapter, ...] = RECEIPT_ADAPTERS + GENERIC_ADAPTERS
