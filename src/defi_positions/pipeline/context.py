from __future__ import annotations

from dataclasses import dataclass

from ..adapters import AdapterRegistry, Position, Resource
from ..state import AppState


@dataclass
class ScanContext:
    state: AppState
    account_address: str
    resources: list[Resource] | None = None
    registry: AdapterRegistry | None = None
    positions: list[Position] | None = None

    @property
    def resources_required(self) -> list[Resource]:
        if self.resources is None:
            raise RuntimeError(
                "Resources have not been set. Ensure load_resources() is called before accessing this property."
            )
        return self.resources

    @property
    def registry_required(self) -> AdapterRegistry:
        if self.registry is None:
            raise RuntimeError(
                "Adapter registry has not been set. Ensure build_adapters() is called before accessing this property."
            )
        return self.registry

    @property
    def positions_required(self) -> list[Position]:
        if self.positions is None:
            raise RuntimeError(
                "Positions have not been set. Ensure extract_positions() is called before accessing this property."
            )
        return self.positions
