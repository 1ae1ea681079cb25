from __future__ import annotations

from defi_positions.adapters import Resource, build_registry, get_adapter
from defi_positions.constants import MOVEPOSITION

PORTFOLIO_TYPE = f"{MOVEPOSITION}::lend::Portfolio"


def test_notes_are_reported_as_supply_and_debt():
    resource = Resource(
        PORTFOLIO_TYPE, {"deposit_notes": "300000000", "loan_notes": "100000000"}
    )

    positions = build_registry().extract(resource)

    assert [(p.adapter_id, p.category.value, p.display_amount) for p in positions] == [
        ("moveposition_supply", "Lending", "3.0000"),
        ("moveposition_borrow", "Debt", "1.0000"),
    ]


def test_older_layout_field_names():
    resource = Resource(PORTFOLIO_TYPE, {"deposit_notes": "0", "deposited": "50000000"})

    [position] = get_adapter("moveposition_supply").extract(resource)

    assert position.display_amount == "0.5000"
    assert get_adapter("moveposition_borrow").extract(resource) == []


def test_other_deployments_do_not_match():
    assert not get_adapter("moveposition_supply").matches("0xabc::lend::Portfolio")
