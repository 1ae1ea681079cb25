"""Mosaic: LP tokens and staked LP farms."""

from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "Mosaic"

MOSAIC_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="mosaic_lp",
        name="Mosaic LP",
        protocol=PROTOCOL,
        category=Category.LIQUIDITY,
        match="::swap::LPCoin",
        parse=ranked("value"),
        decimals=(6,),
    ),
    Adapter(
        id="mosaic_farm",
        name="Mosaic Farm",
        protocol=PROTOCOL,
        category=Category.FARMING,
        match="::farming::UserInfo",
        parse=ranked("amount"),
        decimals=(6,),
    ),
)
