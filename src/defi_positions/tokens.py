"""Movement token registry and symbol inference from Move type strings."""

from __future__ import annotations

import re
from typing import NamedTuple


class TokenInfo(NamedTuple):
    symbol: str
    name: str
    decimals: int


DEFAULT_DECIMALS = 8

# Stablecoins bridged to Movement keep their 6-decimal precision.
SIX_DECIMAL_SYMBOLS = frozenset({"USDC", "USDT", "USDE", "USDA"})

MOVEMENT_TOKENS: dict[str, TokenInfo] = {
    "0xa": TokenInfo("MOVE", "Movement", 8),
    "0x1": TokenInfo("MOVE", "Movement", 8),
    "0x447721a30109c662dde9c73a0c2c9c9c459fb5e5a9c92f03c50fa69737f5d08d": TokenInfo(
        "USDT", "Tether USD", 6
    ),
    "0x83121c9f9b0527d1f056e21a950d6bf3b9e9e2e8353d0e95ccea726713cbea39": TokenInfo(
        "USDC", "USD Coin", 6
    ),
    "0x908828f4fb0213d4034c3ded1630bbd904e8a3a6bf3c63270887f0b06653a376": TokenInfo(
        "WETH", "Wrapped Ether", 8
    ),
    "0xb06f29f24dde9c6daeec1f930f14a441a8d6c0fbea590725e88b340af3e1939c": TokenInfo(
        "WBTC", "Wrapped Bitcoin", 8
    ),
    "0x967d9125a338c5b1e22b6aacaa8d14b2b8b785ca44b614803ecbcdb4898229f3": TokenInfo(
        "CAPY", "Capy", 8
    ),
    "0xf02c83698b28a544197858c4808b96ff740aa1c01b2f04ba33e80a485b4bf67a": TokenInfo(
        "MOVECAT", "MoveCat", 8
    ),
    "0x0658f4ef6f76c8eeffdc06a30946f3f06723a7f9532e2413312b2a612183759c": TokenInfo(
        "LBTC", "Lombard BTC", 8
    ),
    "0x2f6af255328fe11b88d840d1e367e946ccd16bd7ebddd6ee7e2ef9f7ae0c53ef": TokenInfo(
        "ezETH", "Renzo Restaked ETH", 8
    ),
    "0x51ffc9885233adf3dd411078cad57535ed1982013dc82d9d6c433a55f2e0035d": TokenInfo(
        "rsETH", "Kelp Restaked ETH", 8
    ),
    "0x527c43638a6c389a9ad702e7085f31c48223624d5102a5207dfab861f482c46d": TokenInfo(
        "SolvBTC", "Solv BTC", 8
    ),
    "0x9d146a4c9472a7e7b0dbc72da0eafb02b54173a956ef22a9fba29756f8661c6c": TokenInfo(
        "USDe", "Ethena USDe", 6
    ),
    "0x48b904a97eafd065ced05168ec44638a63e1e3bcaec49699f6b8dabbd1424650": TokenInfo(
        "USDa", "Angle USD", 6
    ),
    "0xe956f5062c3b9cba00e82dc775d29acf739ffa1e612e619062423b58afdbf035": TokenInfo(
        "weETH", "Wrapped eETH", 8
    ),
}

_TRAILING_DIGITS = re.compile(r"\d+$")


def normalize_address(address: str) -> str:
    """Lower-case an account or token address and ensure the 0x prefix."""
    normalized = str(address).strip().lower()
    if not normalized.startswith("0x"):
        normalized = f"0x{normalized}"
    return normalized


def get_token_info(address: str | None) -> TokenInfo | None:
    if not address:
        return None
    return MOVEMENT_TOKENS.get(normalize_address(address))


def display_symbol(symbol: str) -> str:
    """Map framework coin names to their display symbol."""
    return "MOVE" if symbol == "AptosCoin" else symbol


def type_arguments(type_str: str) -> list[str]:
    """Return the top-level generic parameters of a Move type.

    ``0x1::swap::LPCoin<0x1::a::A, 0x2::b::B<0x3::c::C>>`` ->
    ``["0x1::a::A", "0x2::b::B<0x3::c::C>"]``. Unterminated generics yield
    an empty list.
    """
    start = type_str.find("<")
    if start == -1:
        return []
    arguments: list[str] = []
    depth = 0
    begin = start + 1
    for index in range(start + 1, len(type_str)):
        char = type_str[index]
        if char == "<":
            depth += 1
        elif char == ">":
            if depth == 0:
                arguments.append(type_str[begin:index].strip())
                return [argument for argument in arguments if argument]
            depth -= 1
        elif char == "," and depth == 0:
            arguments.append(type_str[begin:index].strip())
            begin = index + 1
    return []


def struct_name(type_str: str) -> str:
    """Return the struct name of a Move type, without generic parameters.

    ``0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>`` -> ``CoinStore``
    """
    base = type_str.split("<", 1)[0]
    return base.rsplit("::", 1)[-1].strip()


def symbol_from_type(type_str: str, strip_digits: bool = False) -> str | None:
    """Infer a token symbol from a Move type string.

    Uses the struct name of the first generic parameter when there is one
    (``CoinStore<...::coins::USDC>`` -> ``USDC``), otherwise the struct name
    of the type itself. A bare address resolves through the token registry.

    Args:
        type_str: Fully-qualified Move type or token address
        strip_digits: Drop a numeric suffix (``AptosCoin1111`` -> ``AptosCoin``)

    Returns:
        The display symbol, or None when nothing usable is found.
    """
    if not type_str:
        return None

    if "::" not in type_str:
        info = get_token_info(type_str)
        return info.symbol if info is not None else None

    arguments = type_arguments(type_str)
    name = struct_name(arguments[0] if arguments else type_str)
    if strip_digits:
        name = _TRAILING_DIGITS.sub("", name)
    if not name:
        return None
    return display_symbol(name)


def decimals_for_symbol(symbol: str | None) -> int:
    """Decimal precision of a token symbol; 6 for USD stables, else 8."""
    if symbol and symbol.upper() in SIX_DECIMAL_SYMBOLS:
        return 6
    return DEFAULT_DECIMALS
