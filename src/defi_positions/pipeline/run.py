"""High-level pipeline orchestration."""

from __future__ import annotations

from pathlib import Path

from ..adapters import Position
from ..report import publish_positions
from ..state import AppState
from .context import ScanContext
from .positions import build_adapters, extract_positions
from .resources import load_resources


def run_scan(
    state: AppState,
    account_address: str,
    resources_file: Path | None = None,
) -> list[Position]:
    """Execute the complete scan pipeline.

    This is a thin orchestrator that sequences the pipeline steps:
    1. Resource loading
    2. Adapter selection
    3. Position extraction
    4. Publishing

    Args:
        state: Application state containing settings and logger
        account_address: The account to scan
        resources_file: Optional JSON dump used instead of the fullnode

    Returns:
        Extracted positions, in resource order
    """
    log = state.logger
    log.info("Starting scan", extra={"account": account_address})

    ctx = ScanContext(state=state, account_address=account_address)
    load_resources(ctx, resources_file)
    build_adapters(ctx)
    extract_positions(ctx)
    publish_positions(
        ctx.positions_required,
        state.settings.output_format,
        account_address,
    )

    log.info("Scan completed", extra={"account": account_address})
    return ctx.positions_required
