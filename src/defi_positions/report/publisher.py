from __future__ import annotations

import json
import logging

from ..adapters import Position
from ..settings import OutputFormat
from .formatter import format_positions_table

logger = logging.getLogger(__name__)


def positions_payload(positions: list[Position], account_address: str) -> dict:
    return {
        "address": account_address,
        "positions": [position.to_dict() for position in positions],
    }


def publish_positions(
    positions: list[Position],
    output_format: OutputFormat = OutputFormat.TABLE,
    account_address: str = "",
) -> None:
    """Publish positions to stdout.

    Args:
        positions: Positions in extraction order
        output_format: TABLE for the rich dashboard, JSON for raw JSON
        account_address: Scanned account, included in the output
    """
    logger.debug("Publishing %d position(s) as %s", len(positions), output_format)
    if output_format == OutputFormat.JSON:
        print(json.dumps(positions_payload(positions, account_address), indent=2))
    else:
        format_positions_table(positions, account_address)
