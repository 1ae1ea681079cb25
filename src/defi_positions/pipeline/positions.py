"""Position extraction with the configured adapters."""

from __future__ import annotations

from ..adapters import build_registry
from .context import ScanContext


def build_adapters(ctx: ScanContext) -> None:
    """Build the adapter registry from settings.

    Raises:
        ValueError: If a disabled adapter id is unknown
    """
    s = ctx.state.settings
    ctx.registry = build_registry(
        include_generic=s.include_generic_fallback,
        disabled=s.disabled_adapters,
    )
    ctx.state.logger.debug("Using %d adapter(s)", len(ctx.registry))


def extract_positions(ctx: ScanContext) -> None:
    log = ctx.state.logger
    resources = ctx.resources_required
    ctx.positions = ctx.registry_required.extract_all(resources)
    log.info(
        "Extracted %d position(s) from %d resource(s)",
        len(ctx.positions),
        len(resources),
    )
