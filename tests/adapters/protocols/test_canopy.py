from __future__ import annotations

from defi_positions.adapters import Resource, build_registry, get_adapter


def test_liquid_staking_coin_store():
    resource = Resource(
        "0x1::coin::CoinStore<0xabc::stmove::StMOVE>",
        {"coin": {"value": "250000000"}, "frozen": False},
    )

    positions = build_registry().extract(resource)

    assert [(p.adapter_id, p.token, p.display_amount) for p in positions] == [
        ("canopy_liquid_staking", "StMOVE", "2.5000")
    ]


def test_native_coin_store_is_ignored():
    resource = Resource(
        "0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>",
        {"coin": {"value": "250000000"}},
    )

    assert build_registry().extract(resource) == []


def test_vault_position_is_yield():
    [position] = get_adapter("canopy_vault_position").extract(
        Resource("0xabc::vault::VaultPosition", {"shares": "300000000"})
    )

    assert position.category.value == "Yield"
    assert position.display_amount == "3.0000"


def test_staking_position_rank_order():
    [position] = get_adapter("canopy_staking_position").extract(
        Resource("0xabc::staking::StakePosition", {"amount": "5", "staked": "100000000"})
    )

    assert position.raw_amount == 100_000_000.0
