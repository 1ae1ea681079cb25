from __future__ import annotations

import pytest

from defi_positions.adapters import Category, Resource, build_registry, get_adapter
from defi_positions.adapters.protocols.generic import categorize, parse_largest_value


@pytest.mark.parametrize(
    ("resource_type", "expected"),
    [
        ("0xabc::cdp::Trove", Category.DEBT),
        ("0xabc::borrow::Ledger", Category.DEBT),
        ("0xabc::lending::UserAccount", Category.LENDING),
        ("0xabc::farm::UserInfo", Category.FARMING),
        ("0xabc::stake::StakeInfo", Category.STAKING),
        ("0xabc::vault::Receipt", Category.YIELD),
        ("0x1::coin::CoinStore<0xabc::swap::LPCoin<0xabc::a::A, 0xabc::b::B>>", Category.LIQUIDITY),
    ],
)
def test_categorize(resource_type, expected):
    assert categorize(resource_type) is expected


@pytest.mark.parametrize(
    "resource_type",
    [
        "0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>",
        "0x1::account::Account",
        "0xabc::nft::Collection",
    ],
)
def test_non_defi_types_are_not_categorized(resource_type):
    assert categorize(resource_type) is None


def test_debt_markers_override_patterns():
    assert categorize("0xabc::pool::LoanPosition") is Category.DEBT


def test_parse_largest_value_reads_container_lists():
    data = {"amount": "10", "positions": ["149", "0"], "nested": {"balance": "20"}}

    assert parse_largest_value(data) == 149.0


def test_generic_debt_adapter():
    [position] = get_adapter("generic_debt").extract(
        Resource("0xabc::cdp::Trove", {"debt": "250000000", "collateral": "100"})
    )

    assert position.protocol == "DeFi"
    assert position.category is Category.DEBT
    assert position.display_amount == "2.5000"


def test_receipt_token_adapter_skips_lp_coins():
    adapter = get_adapter("echelon_receipt")

    assert adapter.matches("0x1::coin::CoinStore<0xabc::token::ecUSD>")
    assert not adapter.matches("0x1::coin::CoinStore<0xabc::swap::LPCoin<0xabc::token::ecUSD>>")


def test_fallback_adapters_only_fire_when_enabled():
    resource = Resource("0xabc::cdp::Trove", {"debt": "250000000"})

    assert build_registry().extract(resource) == []
    assert [p.adapter_id for p in build_registry(include_generic=True).extract(resource)] == [
        "generic_debt"
    ]
