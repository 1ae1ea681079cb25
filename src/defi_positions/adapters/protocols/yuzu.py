"""Yuzu Swap: CLMM positions, AMM LP tokens and farming."""

from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "Yuzu Swap"

YUZU_ADAPTERS: tuple[Adapter, ...] = (
    # CLMM liquidity has no token decimals; it is shown in raw units.
    Adapter(
        id="yuzu_liquidity",
        name="Yuzu LP Position",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::clmm::Position",
        parse=ranked("liquidity", "amount"),
        decimals=(),
        token="LIQUIDITY",
    ),
    Adapter(
        id="yuzu_lp_token",
        name="Yuzu LP Token",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::pool::LPCoin",
        parse=ranked("coin", "value", "amount"),
        decimals=(6,),
    ),
    Adapter(
        id="yuzu_farming",
        name="Yuzu Yield Farming",
        protocol=PROTOCOL,
        category=Category.FARMING,
        match="::farming::",
        parse=ranked("staked_amount", "amount", "deposited"),
    ),
)
