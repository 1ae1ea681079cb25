"""Razor DEX: AMM liquidity, staking and farming."""

from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "Razor DEX"

RAZOR_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="razor_lp",
        name="Razor LP",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::swap::LPCoin",
        parse=ranked("coin", "value", "amount"),
        decimals=(6,),
    ),
    Adapter(
        id="razor_staking",
        name="Razor Staking",
        protocol=PROTOCOL,
        category=Category.STAKING,
        match="::staking::",
        parse=ranked("staked_amount", "amount", "value", "balance"),
    ),
    Adapter(
        id="razor_farm",
        name="Razor Farm",
        protocol=PROTOCOL,
        category=Category.FARMING,
        match="::farm::",
        parse=ranked("staked", "deposited", "amount"),
    ),
)
