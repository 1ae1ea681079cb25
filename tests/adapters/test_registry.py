from __future__ import annotations

import pytest

from defi_positions.adapters import (
    ALL_ADAPTERS,
    PROTOCOL_ADAPTERS,
    AdapterRegistry,
    build_registry,
    find_matches,
    get_adapter,
)
from defi_positions.adapters.base import Adapter, Category, Resource
from defi_positions.adapters.parsers import ranked

LP_RESOURCE = Resource(
    "0xabc::swap::LPCoin<0x1::aptos_coin::AptosCoin, 0xdef::coins::USDC>",
    {"coin": {"value": "150000000"}},
)


def _adapter(adapter_id: str, parse=None, match: str = "::swap::") -> Adapter:
    return Adapter(
        id=adapter_id,
        name=adapter_id,
        protocol="Test",
        category=Category.LIQUIDITY,
        match=match,
        parse=parse or ranked("coin"),
    )


def _explode(data):
    raise RuntimeError("unexpected payload")


def test_adapter_ids_are_unique():
    ids = [adapter.id for adapter in ALL_ADAPTERS]

    assert len(ids) == len(set(ids))


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate adapter ids: a"):
        AdapterRegistry((_adapter("a"), _adapter("a")))


def test_every_matching_adapter_fires_in_registry_order():
    registry = build_registry()

    matched = [adapter.id for adapter in find_matches(registry, LP_RESOURCE)]
    positions = registry.extract(LP_RESOURCE)

    assert matched == ["razor_lp", "mosaic_lp", "meridian_lp"]
    # mosaic_lp reads a top-level "value" that is absent, so it yields nothing.
    assert [(p.adapter_id, p.display_amount) for p in positions] == [
        ("razor_lp", "150.0000"),
        ("meridian_lp", "150.0000"),
    ]


def test_failing_adapter_does_not_affect_others():
    registry = AdapterRegistry(
        (_adapter("first"), _adapter("broken", parse=_explode), _adapter("last"))
    )

    positions = registry.extract(LP_RESOURCE)

    assert [p.adapter_id for p in positions] == ["first", "last"]


def test_failing_adapter_does_not_stop_later_resources():
    registry = AdapterRegistry(
        (
            _adapter("broken", parse=_explode, match="::broken::"),
            _adapter("lp", match="::swap::"),
        )
    )
    resources = [Resource("0xabc::broken::Pool", {"coin": "1"}), LP_RESOURCE]

    positions = registry.extract_all(resources)

    assert [(p.adapter_id, p.raw_amount) for p in positions] == [("lp", 150_000_000.0)]


def test_coin_store_stake_token_is_read_through_coin_wrapper():
    registry = AdapterRegistry(
        (
            Adapter(
                id="stake_token",
                name="Stake Token",
                protocol="Test",
                category=Category.STAKING,
                match="::coin::CoinStore",
                parse=ranked("coin"),
                decimals=(8,),
            ),
        )
    )
    resource = Resource(
        "0x1::coin::CoinStore<0xabc::staking::StakeToken>",
        {"coin": {"value": "250000000"}},
    )

    [position] = registry.extract_all([resource])

    assert position.raw_amount == 250_000_000.0
    assert position.display_amount == "2.5000"
    assert position.token == "StakeToken"
    assert position.category is Category.STAKING


def test_unmatched_resource_yields_nothing():
    registry = build_registry()

    assert registry.extract(Resource("0xabc::nft::Collection", {"amount": "5"})) == []


def test_extract_all_keeps_resource_order():
    registry = AdapterRegistry((_adapter("lp"),))
    resources = [
        Resource("0xabc::swap::A", {"coin": "1"}),
        Resource("0xabc::other::B", {"coin": "2"}),
        Resource("0xabc::swap::C", {"coin": "3"}),
    ]

    positions = registry.extract_all(resources)

    assert [p.resource_type for p in positions] == ["0xabc::swap::A", "0xabc::swap::C"]


def test_default_registry_excludes_fallback_adapters():
    assert build_registry().ids == [adapter.id for adapter in PROTOCOL_ADAPTERS]
    assert "generic_debt" not in build_registry().ids
    assert "echelon_receipt" not in build_registry().ids


def test_include_generic_appends_fallback_adapters():
    registry = build_registry(include_generic=True)

    assert registry.ids[: len(PROTOCOL_ADAPTERS)] == [
        adapter.id for adapter in PROTOCOL_ADAPTERS
    ]
    assert "generic_debt" in registry.ids
    assert "echelon_receipt" in registry.ids


def test_disabled_adapters_are_removed():
    registry = build_registry(disabled=["razor_lp", "generic_debt"])

    assert "razor_lp" not in registry.ids
    assert [p.adapter_id for p in registry.extract(LP_RESOURCE)] == ["meridian_lp"]


def test_unknown_disabled_adapter_is_rejected():
    with pytest.raises(ValueError, match="Unknown adapter"):
        build_registry(disabled=["nope"])


def test_without_unknown_id_is_rejected():
    with pytest.raises(ValueError, match="Available"):
        build_registry().without(["nope"])


def test_registry_is_immutable():
    registry = build_registry()
    smaller = registry.without(["razor_lp"])

    assert "razor_lp" in registry.ids
    assert len(smaller) == len(registry) - 1


def test_get_adapter():
    assert get_adapter("RAZOR_LP").protocol == "Razor DEX"
    with pytest.raises(ValueError, match="Unknown adapter 'nope'"):
        get_adapter("nope")
