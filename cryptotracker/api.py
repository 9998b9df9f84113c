"""Market data service backed by a fixed data set."""

from __future__ import annotations

from typing import Iterable

from cryptotracker.models import Cryptocurrency, PortfolioItem

API_BASE_URL = "https://api.example.com"

_CATALOGUE: tuple[Cryptocurrency, ...] = (
    Cryptocurrency(
        id="bitcoin",
        name="Bitcoin",
        symbol="BTC",
        price=63542.87,
        market_cap=1245678900000.0,
        volume_24h=45678900000.0,
        price_change_24h=2.34,
    ),
    Cryptocurrency(
        id="ethereum",
        name="Ethereum",
        symbol="ETH",
        price=3421.65,
        market_cap=412345678900.0,
        volume_24h=21345678900.0,
        price_change_24h=-1.23,
    ),
    Cryptocurrency(
        id="solana",
        name="Solana",
        symbol="SOL",
        price=189.32,
        market_cap=86234567890.0,
        volume_24h=7423456789.0,
        price_change_24h=5.67,
    ),
    Cryptocurrency(
        id="cardano",
        name="Cardano",
        symbol="ADA",
        price=0.93,
        market_cap=34256789012.0,
        volume_24h=1923456789.0,
        price_change_24h=-0.42,
    ),
    Cryptocurrency(
        id="polkadot",
        name="Polkadot",
        symbol="DOT",
        price=14.78,
        market_cap=18234567890.0,
        volume_24h=987654321.0,
        price_change_24h=3.18,
    ),
)

_BY_ID = {crypto.id: crypto for crypto in _CATALOGUE}


class ApiError(Exception):
    """Raised when the service cannot satisfy a request."""


def get_cryptocurrencies() -> list[Cryptocurrency]:
    """Return the list of tracked cryptocurrencies."""
    return list(_CATALOGUE)


def get_cryptocurrency_details(crypto_id: str) -> Cryptocurrency:
    """Return one cryptocurrency by id, raising ApiError if it is unknown."""
    try:
        return _BY_ID[crypto_id]
    except KeyError:
        raise ApiError("Cryptocurrency not found") from None


def update_portfolio(portfolio: Iterable[PortfolioItem]) -> list[PortfolioItem]:
    """Store the portfolio and return it as saved."""
    return list(portfolio)