from .formatter import format_positions_table
from .publisher import positions_payload, publish_positions

__all__ = ["format_positions_table", "positions_payload", "publish_positions"]
