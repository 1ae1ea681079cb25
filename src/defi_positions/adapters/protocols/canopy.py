"""Canopy: liquid staking receipts (stMOVE), vaults and direct staking."""

from ...constants import COIN_STORE
from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "Canopy"

STAKING_TOKEN_MARKERS = ("stmove", "canopy", "liquid_staking", "::st::")


def is_staking_token(resource_type: str) -> bool:
    return any(marker in resource_type for marker in STAKING_TOKEN_MARKERS)


CANOPY_ADAPTERS: tuple[Adapter, ...] = (
    Adapter(
        id="canopy_liquid_staking",
        name="Canopy Staked MOVE",
        protocol=PROTOCOL,
        category=Category.STAKING,
        match=COIN_STORE,
        type_filter=is_staking_token,
        parse=ranked("coin", "value"),
    ),
    Adapter(
        id="canopy_vault_position",
        name="Canopy Vault",
        protocol=PROTOCOL,
        category=Category.YIELD,
        match="::vault::",
        parse=ranked("staked_amount", "shares", "amount", "active_stake", "balance"),
    ),
    Adapter(
        id="canopy_staking_position",
        name="Canopy Staking",
        protocol=PROTOCOL,
        category=Category.STAKING,
        match="::staking::",
        parse=ranked("staked", "amount", "principal"),
    ),
)
