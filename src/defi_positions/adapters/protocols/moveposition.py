"""MovePosition: deposit notes (supply) and loan notes (debt)."""

from ...constants import MOVEPOSITION
from ..base import Adapter, Category
from ..parsers import ranked

PROTOCOL = "MovePosition"

LEND_MODULE = f"{MOVEPOSITION}::lend::"

MOVEPOSITION_ADAPTERS: tuple[Adapter, ...] = (
    # Notes are read first; the other names cover older resource layouts.
    Adapter(
        id="moveposition_supply",
        name="MovePosition Supply",
        protocol=PROTOCOL,
        category=Category.LENDING,
        match=LEND_MODULE,
        parse=ranked(
            "deposit_notes", "deposited", "supply_amount", "principal", "balance"
        ),
    ),
    Adapter(
        id="moveposition_borrow",
        name="MovePosition Borrow",
        protocol=PROTOCOL,
        category=Category.DEBT,
        match=LEND_MODULE,
        parse=ranked("loan_notes", "borrowed", "debt_amount", "liability"),
    ),
)
