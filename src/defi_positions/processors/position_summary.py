from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from ..adapters.base import Category, Position


@dataclass
class PositionSummary:
    """Positions of one account grouped for display."""

    by_protocol: dict[str, list[Position]] = field(default_factory=dict)
    category_counts: Counter[Category] = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.category_counts.values())

    @property
    def protocols(self) -> list[str]:
        return list(self.by_protocol)


def summarize_positions(positions: list[Position]) -> PositionSummary:
    """Group positions by protocol and count them per category.

    Args:
        positions: Positions in extraction order

    Returns:
        Summary with protocols in first-seen order

    Positions reported by overlapping adapters are kept as they are.
    """
    summary = PositionSummary()
    for position in positions:
        summary.by_protocol.setdefault(position.protocol, []).append(position)
        summary.category_counts[position.category] += 1
    return summary
