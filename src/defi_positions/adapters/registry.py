from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .base import Adapter, Position, Resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterRegistry:
    """Ordered, immutable collection of adapters consulted per resource."""

    adapters: tuple[Adapter, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        duplicates = []
        for adapter in self.adapters:
            if adapter.id in seen:
                duplicates.append(adapter.id)
            seen.add(adapter.id)
        if duplicates:
            raise ValueError(f"Duplicate adapter ids: {', '.join(duplicates)}")

    def __iter__(self) -> Iterator[Adapter]:
        return iter(self.adapters)

    def __len__(self) -> int:
        return len(self.adapters)

    @property
    def ids(self) -> list[str]:
        return [adapter.id for adapter in self.adapters]

    def get(self, adapter_id: str) -> Adapter:
        """Get an adapter by id.

        Raises:
            ValueError: If adapter_id is not registered
        """
        for adapter in self.adapters:
            if adapter.id == adapter_id:
                return adapter
        raise ValueError(
            f"Unknown adapter '{adapter_id}'. Available: {', '.join(self.ids)}"
        )

    def without(self, adapter_ids: Iterable[str]) -> AdapterRegistry:
        """Return a registry without the given adapters, order preserved.

        Raises:
            ValueError: If any id is not registered
        """
        excluded = set(adapter_ids)
        unknown = sorted(excluded - set(self.ids))
        if unknown:
            raise ValueError(
                f"Unknown adapter(s) {', '.join(unknown)}. "
                f"Available: {', '.join(self.ids)}"
            )
        return AdapterRegistry(
            tuple(adapter for adapter in self.adapters if adapter.id not in excluded)
        )

    def find_matches(self, resource: Resource) -> list[Adapter]:
        return find_matches(self, resource)

    def extract(self, resource: Resource) -> list[Position]:
        """Run every matching adapter against one resource."""
        positions: list[Position] = []
        for adapter in self.find_matches(resource):
            found = adapter.extract(resource)
            logger.debug(
                "Adapter '%s' produced %d position(s) from %s",
                adapter.id,
                len(found),
                resource.resource_type,
            )
            positions.extend(found)
        return positions

    def extract_all(self, resources: Iterable[Resource]) -> list[Position]:
        """Extract positions for a whole account, in resource order.

        Positions from different adapters are not deduplicated.
        """
        positions: list[Position] = []
        for resource in resources:
            positions.extend(self.extract(resource))
        return positions


def find_matches(registry: AdapterRegistry, resource: Resource) -> list[Adapter]:
    """Return every adapter whose rule accepts the resource type, in registry order."""
    return [
        adapter
        for adapter in registry.adapters
        if adapter.matches(resource.resource_type)
    ]
