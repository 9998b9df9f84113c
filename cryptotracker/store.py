"""Application state, the actions that change it, and a dispatching handle."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Union

from cryptotracker import api
from cryptotracker.models import Cryptocurrency, PortfolioItem


@dataclass(frozen=True)
class Store:
    """Snapshot of the application state."""

    cryptocurrencies: tuple[Cryptocurrency, ...] = ()
    portfolio: tuple[PortfolioItem, ...] = ()
    selected_cryptocurrency: Cryptocurrency | None = None
    loading: bool = False
    error: str | None = None

    def calculate_portfolio_value(self) -> float:
        """Sum price times amount over holdings whose price is known."""
        prices = {crypto.id: crypto.price for crypto in self.cryptocurrencies}
        return sum(
            prices[item.crypto_id] * item.amount
            for item in self.portfolio
            if item.crypto_id in prices
        )


@dataclass(frozen=True)
class FetchCryptocurrencies:
    """Request the list of cryptocurrencies."""


@dataclass(frozen=True)
class SetCryptocurrencies:
    cryptocurrencies: tuple[Cryptocurrency, ...]


@dataclass(frozen=True)
class FetchCryptocurrencyDetails:
    crypto_id: str


@dataclass(frozen=True)
class SetSelectedCryptocurrency:
    cryptocurrency: Cryptocurrency


@dataclass(frozen=True)
class AddToPortfolio:
    item: PortfolioItem


@dataclass(frozen=True)
class RemoveFromPortfolio:
    crypto_id: str


@dataclass(frozen=True)
class UpdatePortfolioItem:
    item: PortfolioItem


@dataclass(frozen=True)
class SavePortfolio:
    """Persist the current portfolio."""


@dataclass(frozen=True)
class SetError:
    error: str


@dataclass(frozen=True)
class ClearError:
    """Forget the current error."""


@dataclass(frozen=True)
class SetLoading:
    loading: bool


StoreAction = Union[
    FetchCryptocurrencies,
    SetCryptocurrencies,
    FetchCryptocurrencyDetails,
    SetSelectedCryptocurrency,
    AddToPortfolio,
    RemoveFromPortfolio,
    UpdatePortfolioItem,
    SavePortfolio,
    SetError,
    ClearError,
    SetLoading,
]


def reduce(store: Store, action: StoreAction) -> Store:
    """Return the state that follows *store* after *action*."""
    replace = dataclasses.replace
    match action:
        case FetchCryptocurrencies() | FetchCryptocurrencyDetails():
            return replace(store, loading=True, error=None)
        case SetCryptocurrencies(cryptocurrencies):
            return replace(store, cryptocurrencies=tuple(cryptocurrencies), loading=False)
        case SetSelectedCryptocurrency(cryptocurrency):
            return replace(store, selected_cryptocurrency=cryptocurrency, loading=False)
        case AddToPortfolio(item):
            if any(held.crypto_id == item.crypto_id for held in store.portfolio):
                return store
            return replace(store, portfolio=(*store.portfolio, item))
        case RemoveFromPortfolio(crypto_id):
            kept = tuple(held for held in store.portfolio if held.crypto_id != crypto_id)
            return replace(store, portfolio=kept)
        case UpdatePortfolioItem(item):
            updated = list(store.portfolio)
            for index, held in enumerate(updated):
                if held.crypto_id == item.crypto_id:
                    updated[index] = item
                    break
            return replace(store, portfolio=tuple(updated))
        case SavePortfolio():
            return replace(store, loading=True)
        case SetError(error):
            return replace(store, error=error, loading=False)
        case ClearError():
            return replace(store, error=None)
        case SetLoading(loading):
            return replace(store, loading=loading)
    raise TypeError(f"unknown store action: {action!r}")


@dataclass
class StoreHandle:
    """Holds the current state and runs service calls for fetch and save actions."""

    state: Store = field(default_factory=Store)

    def dispatch(self, action: StoreAction) -> Store:
        """Apply *action*, calling the service where the action needs it."""
        match action:
            case FetchCryptocurrencies():
                try:
                    result = api.get_cryptocurrencies()
                except api.ApiError as err:
                    return self._apply(SetError(str(err)))
                return self._apply(SetCryptocurrencies(tuple(result)))
            case FetchCryptocurrencyDetails(crypto_id):
                try:
                    crypto = api.get_cryptocurrency_details(crypto_id)
                except api.ApiError as err:
                    return self._apply(SetError(str(err)))
                return self._apply(SetSelectedCryptocurrency(crypto))
            case SavePortfolio():
                try:
                    api.update_portfolio(self.state.portfolio)
                except api.ApiError as err:
                    return self._apply(SetError(str(err)))
                return self._apply(SetLoading(False))
        return self._apply(action)

    def _apply(self, action: StoreAction) -> Store:
        self.state = reduce(self.state, action)
        return self.state