"""Extract DeFi positions from Movement account resources."""

from .adapters import (
    Adapter,
    AdapterRegistry,
    Category,
    Position,
    Resource,
    TokenAmount,
    build_registry,
    find_matches,
    get_adapter,
)
from .units import normalize_amount

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "Category",
    "Position",
    "Resource",
    "TokenAmount",
    "build_registry",
    "find_matches",
    "get_adapter",
    "normalize_amount",
]
