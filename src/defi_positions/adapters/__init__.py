from __future__ import annotations

from collections.abc import Iterable

from .base import Adapter, Category, MatchRule, Position, Resource, TokenAmount
from .protocols import (
    CANOPY_ADAPTERS,
    ECHELON_ADAPTERS,
    FALLBACK_ADAPTERS,
    JOULE_ADAPTERS,
    LAYERBANK_ADAPTERS,
    MERIDIAN_ADAPTERS,
    MOSAIC_ADAPTERS,
    MOVEPOSITION_ADAPTERS,
    RAZOR_ADAPTERS,
    YUZU_ADAPTERS,
)
from .registry import AdapterRegistry, find_matches

PROTOCOL_ADAPTERS: tuple[Adapter, ...] = (
    *RAZOR_ADAPTERS,
    *YUZU_ADAPTERS,
    *JOULE_ADAPTERS,
    *MOSAIC_ADAPTERS,
    *ECHELON_ADAPTERS,
    *CANOPY_ADAPTERS,
    *MOVEPOSITION_ADAPTERS,
    *MERIDIAN_ADAPTERS,
    *LAYERBANK_ADAPTERS,
)

ALL_ADAPTERS: tuple[Adapter, ...] = PROTOCOL_ADAPTERS + FALLBACK_ADAPTERS


def build_registry(
    include_generic: bool = False,
    disabled: Iterable[str] = (),
) -> AdapterRegistry:
    """Build the adapter registry.

    Args:
        include_generic: Also register the receipt-token and generic
            fallback adapters after the protocol adapters
        disabled: Adapter ids to leave out

    Returns:
        Registry with adapters in declaration order

    Raises:
        ValueError: If a disabled id is not a known adapter
    """
    adapters = ALL_ADAPTERS if include_generic else PROTOCOL_ADAPTERS
    registry = AdapterRegistry(adapters)
    disabled = list(disabled)
    if not disabled:
        return registry
    unknown = sorted(set(disabled) - {adapter.id for adapter in ALL_ADAPTERS})
    if unknown:
        raise ValueError(
            f"Unknown adapter(s) {', '.join(unknown)}. "
            f"Available: {', '.join(adapter.id for adapter in ALL_ADAPTERS)}"
        )
    return registry.without(set(disabled) & set(registry.ids))


def get_adapter(adapter_id: str) -> Adapter:
    """Get an adapter by id.

    Args:
        adapter_id: Adapter id (case-insensitive)

    Returns:
        The registered adapter

    Raises:
        ValueError: If adapter_id is not recognized
    """
    return AdapterRegistry(ALL_ADAPTERS).get(adapter_id.lower())


__all__ = [
    "ALL_ADAPTERS",
    "PROTOCOL_ADAPTERS",
    "Adapter",
    "AdapterRegistry",
    "Category",
    "MatchRule",
    "Position",
    "Resource",
    "TokenAmount",
    "build_registry",
    "find_matches",
    "get_adapter",
]
