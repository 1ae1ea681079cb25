from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Union

from ..tokens import symbol_from_type
from ..units import normalize_amount

logger = logging.getLogger(__name__)


class Category(str, Enum):
    STAKING = "Staking"
    LENDING = "Lending"
    DEBT = "Debt"
    LIQUIDITY = "Liquidity"
    FARMING = "Farming"
    REWARDS = "Rewards"
    YIELD = "Yield"


@dataclass(frozen=True)
class Resource:
    """An on-chain account resource: a Move type string and its JSON payload."""

    resource_type: str
    data: Any = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Resource:
        """Build a resource from the fullnode ``{"type", "data"}`` shape.

        The camel-case ``resourceType`` key is accepted as well.

        Raises:
            ValueError: If neither ``type`` nor ``resourceType`` is a string
        """
        resource_type = raw.get("type", raw.get("resourceType"))
        if not isinstance(resource_type, str):
            raise ValueError(f"Resource is missing a type string: {raw!r}")
        return cls(resource_type=resource_type, data=raw.get("data"))


@dataclass(frozen=True)
class TokenAmount:
    """One raw amount produced by an adapter's parser."""

    raw_amount: float
    token: str | None = None
    decimals: tuple[int, ...] | None = None


@dataclass(frozen=True)
class PoolComposition:
    """Breakdown of a liquidity position into its pool parts.

    Every part is optional; unknown parts stay None and are left out of
    :meth:`to_dict`.
    """

    token_x_amount: float | None = None
    token_y_amount: float | None = None
    staked_amount: float | None = None
    liquidity_tokens: float | None = None
    pool_id: Any = None
    token_x: str | None = None
    token_y: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class Position:
    """A normalized balance attributable to a token and category."""

    adapter_id: str
    name: str
    protocol: str
    category: Category
    token: str
    raw_amount: float
    display_amount: str
    resource_type: str
    pool: PoolComposition | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "adapter_id": self.adapter_id,
            "name": self.name,
            "protocol": self.protocol,
            "category": self.category.value,
            "token": self.token,
            "raw_amount": self.raw_amount,
            "display_amount": self.display_amount,
            "resource_type": self.resource_type,
        }
        if self.pool is not None:
            data["pool"] = self.pool.to_dict()
        return data


# Substring of the type (case-sensitive) or predicate over the lower-cased type
MatchRule = Union[str, Callable[[str], bool]]

ParseResult = Union[float, Sequence[TokenAmount]]

UNKNOWN_TOKEN = "UNKNOWN"


def rule_accepts(rule: MatchRule, resource_type: str) -> bool:
    if isinstance(rule, str):
        return rule in resource_type
    return bool(rule(resource_type.lower()))


@dataclass(frozen=True)
class Adapter:
    """Declarative binding of a type match rule to a payload parser.

    ``parse`` receives the resource payload and returns either a single raw
    amount or a list of :class:`TokenAmount`. ``decimals`` is the ordered
    list of decimal exponents tried by :func:`normalize_amount`.
    ``composition``, when set, attaches pool details to every position the
    adapter yields.
    """

    id: str
    name: str
    protocol: str
    category: Category
    match: MatchRule
    parse: Callable[[Any], ParseResult] = field(repr=False)
    decimals: tuple[int, ...] = (8,)
    type_filter: Callable[[str], bool] | None = field(default=None, repr=False)
    token: str | None = None
    composition: Callable[[Resource], PoolComposition | None] | None = field(
        default=None, repr=False
    )

    def matches(self, resource_type: str) -> bool:
        """Check the type against ``match`` and the optional ``type_filter``.

        Only the type string is inspected, never the payload. A predicate
        that raises counts as a non-match.
        """
        try:
            if not rule_accepts(self.match, resource_type):
                return False
            if self.type_filter is not None:
                return bool(self.type_filter(resource_type.lower()))
            return True
        except Exception as e:
            logger.debug("Match rule of adapter '%s' failed: %s", self.id, e)
            return False

    def extract(self, resource: Resource) -> list[Position]:
        """Extract positions from a resource this adapter matched.

        Never raises: a parser failure on an unexpected payload is logged
        at DEBUG and yields no positions. Non-positive and non-finite amounts
        are dropped.
        """
        try:
            result = self.parse(resource.data)
            amounts = (
                [TokenAmount(raw_amount=result)]
                if isinstance(result, (int, float))
                else list(result)
            )
            pool = self.composition(resource) if self.composition else None
            positions = [
                self._to_position(amount, resource, pool) for amount in amounts
            ]
            return [position for position in positions if position is not None]
        except Exception as e:
            logger.debug(
                "Adapter '%s' failed on %s: %s", self.id, resource.resource_type, e
            )
            return []

    def _to_position(
        self,
        amount: TokenAmount,
        resource: Resource,
        pool: PoolComposition | None = None,
    ) -> Position | None:
        if not math.isfinite(amount.raw_amount) or amount.raw_amount <= 0:
            return None
        decimals = amount.decimals if amount.decimals is not None else self.decimals
        token = (
            amount.token
            or self.token
            or symbol_from_type(resource.resource_type)
            or UNKNOWN_TOKEN
        )
        return Position(
            adapter_id=self.id,
            name=self.name,
            protocol=self.protocol,
            category=self.category,
            token=token,
            raw_amount=float(amount.raw_amount),
            display_amount=normalize_amount(amount.raw_amount, decimals),
            resource_type=resource.resource_type,
            pool=pool,
        )
