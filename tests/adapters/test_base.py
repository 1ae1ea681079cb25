from __future__ import annotations

import pytest

from defi_positions.adapters.base import (
    UNKNOWN_TOKEN,
    Adapter,
    Category,
    Position,
    Resource,
    TokenAmount,
)
from defi_positions.adapters.parsers import ranked, summed


def _adapter(**overrides) -> Adapter:
    fields = {
        "id": "test_adapter",
        "name": "Test",
        "protocol": "Test Protocol",
        "category": Category.LENDING,
        "match": "::lending::",
        "parse": ranked("amount"),
    }
    fields.update(overrides)
    return Adapter(**fields)


def _explode(data):
    raise KeyError("boom")


def test_resource_from_dict_accepts_both_type_keys():
    assert Resource.from_dict({"type": "0x1::a::B", "data": {"x": 1}}) == Resource(
        "0x1::a::B", {"x": 1}
    )
    assert Resource.from_dict({"resourceType": "0x1::a::B"}).resource_type == "0x1::a::B"


def test_resource_from_dict_requires_type():
    with pytest.raises(ValueError, match="missing a type"):
        Resource.from_dict({"data": {}})


def test_string_rule_is_case_sensitive_substring():
    adapter = _adapter(match="::swap::LPCoin")

    assert adapter.matches("0xabc::swap::LPCoin<A, B>")
    assert not adapter.matches("0xabc::swap::lpcoin<A, B>")


def test_callable_rule_receives_lower_cased_type():
    seen = []

    def rule(resource_type: str) -> bool:
        seen.append(resource_type)
        return "stmove" in resource_type

    adapter = _adapter(match=rule)

    assert adapter.matches("0x1::coin::CoinStore<0xabc::stmove::StMOVE>")
    assert seen == ["0x1::coin::coinstore<0xabc::stmove::stmove>"]


def test_type_filter_must_also_accept():
    adapter = _adapter(match="0x1::coin::CoinStore", type_filter=lambda t: "echelon" in t)

    assert adapter.matches("0x1::coin::CoinStore<0xabc::Echelon::ecUSDC>")
    assert not adapter.matches("0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>")


def test_raising_rule_is_a_non_match():
    adapter = _adapter(match=lambda t: 1 / 0)

    assert adapter.matches("0xabc::lending::X") is False


def test_extract_scalar_result():
    adapter = _adapter(decimals=(8,))
    resource = Resource("0xabc::lending::Deposit<0xabc::coins::USDC>", {"amount": "250000000"})

    [position] = adapter.extract(resource)

    assert position == Position(
        adapter_id="test_adapter",
        name="Test",
        protocol="Test Protocol",
        category=Category.LENDING,
        token="USDC",
        raw_amount=250_000_000.0,
        display_amount="2.5000",
        resource_type=resource.resource_type,
    )


def test_extract_token_amount_list_uses_own_token_and_decimals():
    adapter = _adapter(
        parse=lambda data: [
            TokenAmount(raw_amount=5_000_000, token="USDC", decimals=(6,)),
            TokenAmount(raw_amount=0, token="WETH"),
            TokenAmount(raw_amount=100_000_000),
        ],
        token="DEFAULT",
    )

    positions = adapter.extract(Resource("0xabc::lending::X", {}))

    assert [(p.token, p.display_amount) for p in positions] == [
        ("USDC", "5.0000"),
        ("DEFAULT", "1.0000"),
    ]


def test_extract_drops_zero_amounts():
    assert _adapter().extract(Resource("0xabc::lending::X", {"amount": "0"})) == []


def test_extract_drops_amounts_that_overflow_to_infinity():
    huge = "1" + "0" * 308
    adapter = _adapter(parse=summed("amount"))
    resource = Resource("0xabc::lending::X", {"a": {"amount": huge}, "b": {"amount": huge}})

    assert adapter.extract(resource) == []


def test_extract_drops_non_finite_token_amounts():
    adapter = _adapter(
        parse=lambda data: [
            TokenAmount(raw_amount=float("inf")),
            TokenAmount(raw_amount=float("nan")),
            TokenAmount(raw_amount=100_000_000),
        ]
    )

    positions = adapter.extract(Resource("0xabc::lending::X", {}))

    assert [p.display_amount for p in positions] == ["1.0000"]


def test_extract_never_raises():
    assert _adapter(parse=_explode).extract(Resource("0xabc::lending::X", {})) == []
    assert _adapter().extract(Resource("0xabc::lending::X", None)) == []


def test_extract_falls_back_to_unknown_token():
    adapter = _adapter()

    [position] = adapter.extract(Resource("0xdead", {"amount": "100000000"}))

    assert position.token == UNKNOWN_TOKEN


def test_position_to_dict():
    [position] = _adapter().extract(
        Resource("0xabc::lending::Deposit<0x1::aptos_coin::AptosCoin>", {"amount": "1"})
    )

    data = position.to_dict()

    assert data["category"] == "Lending"
    assert data["token"] == "MOVE"
    assert data["display_amount"] == "1.0000"
