"""Data types for cryptocurrencies and portfolio holdings."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


def _require_str(data: Mapping[str, Any], key: str) -> str:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {type(value).__name__}")
    return value


def _require_number(data: Mapping[str, Any], key: str) -> float:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Cryptocurrency:
    """Market data for one cryptocurrency."""

    id: str
    name: str
    symbol: str
    price: float
    market_cap: float
    volume_24h: float
    price_change_24h: float

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cryptocurrency:
        """Build a record from a dictionary, raising ValueError on bad input."""
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            symbol=_require_str(data, "symbol"),
            price=_require_number(data, "price"),
            market_cap=_require_number(data, "market_cap"),
            volume_24h=_require_number(data, "volume_24h"),
            price_change_24h=_require_number(data, "price_change_24h"),
        )


@dataclass(frozen=True)
class PortfolioItem:
    """An amount of one cryptocurrency held in the portfolio."""

    crypto_id: str
    amount: float

    def to_dict(self) -> dict[str, Any]:
        """Return the item as a JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PortfolioItem:
        """Build an item from a dictionary, raising ValueError on bad input."""
        return cls(
            crypto_id=_require_str(data, "crypto_id"),
            amount=_require_number(data, "amount"),
        )