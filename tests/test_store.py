import pytest

from cryptotracker.api import get_cryptocurrencies, get_cryptocurrency_details
from cryptotracker.models import Cryptocurrency, PortfolioItem
from cryptotracker.store import (
    AddToPortfolio,
    ClearError,
    FetchCryptocurrencies,
    FetchCryptocurrencyDetails,
    RemoveFromPortfolio,
    SavePortfolio,
    SetCryptocurrencies,
    SetError,
    SetLoading,
    SetSelectedCryptocurrency,
    Store,
    StoreHandle,
    UpdatePortfolioItem,
    reduce,
)


def _crypto(crypto_id, price):
    return Cryptocurrency(crypto_id, crypto_id.title(), crypto_id[:3].upper(), price, 0.0, 0.0, 0.0)


def test_new_store_is_empty():
    store = Store()
    assert store.cryptocurrencies == ()
    assert store.portfolio == ()
    assert store.selected_cryptocurrency is None
    assert store.loading is False
    assert store.error is None


def test_portfolio_value_empty():
    assert Store().calculate_portfolio_value() == 0


def test_portfolio_value_single_unit_equals_price():
    crypto = _crypto("alpha", 12.5)
    store = Store(cryptocurrencies=(crypto,), portfolio=(PortfolioItem("alpha", 1.0),))
    assert store.calculate_portfolio_value() == crypto.price


def test_portfolio_value_ignores_unknown_ids():
    crypto = _crypto("alpha", 12.5)
    store = Store(
        cryptocurrencies=(crypto,),
        portfolio=(PortfolioItem("alpha", 1.0), PortfolioItem("missing", 100.0)),
    )
    assert store.calculate_portfolio_value() == crypto.price


def test_portfolio_value_is_additive():
    a, b = _crypto("alpha", 3.0), _crypto("beta", 7.0)
    only_a = Store(cryptocurrencies=(a, b), portfolio=(PortfolioItem("alpha", 2.0),))
    only_b = Store(cryptocurrencies=(a, b), portfolio=(PortfolioItem("beta", 5.0),))
    both = Store(
        cryptocurrencies=(a, b),
        portfolio=(PortfolioItem("alpha", 2.0), PortfolioItem("beta", 5.0)),
    )
    assert both.calculate_portfolio_value() == pytest.approx(
        only_a.calculate_portfolio_value() + only_b.calculate_portfolio_value()
    )


@pytest.mark.parametrize("action", [FetchCryptocurrencies(), FetchCryptocurrencyDetails("x")])
def test_fetch_sets_loading_and_clears_error(action):
    store = reduce(Store(error="boom"), action)
    assert store.loading is True
    assert store.error is None


def test_set_cryptocurrencies_stops_loading():
    cryptos = tuple(get_cryptocurrencies())
    store = reduce(Store(loading=True), SetCryptocurrencies(cryptos))
    assert store.cryptocurrencies == cryptos
    assert store.loading is False


def test_set_selected_stops_loading():
    crypto = get_cryptocurrency_details("solana")
    store = reduce(Store(loading=True), SetSelectedCryptocurrency(crypto))
    assert store.selected_cryptocurrency == crypto
    assert store.loading is False


def test_add_to_portfolio_appends_in_order():
    store = reduce(Store(), AddToPortfolio(PortfolioItem("a", 1.0)))
    store = reduce(store, AddToPortfolio(PortfolioItem("b", 2.0)))
    assert [item.crypto_id for item in store.portfolio] == ["a", "b"]


def test_add_duplicate_is_ignored():
    store = reduce(Store(), AddToPortfolio(PortfolioItem("a", 1.0)))
    store = reduce(store, AddToPortfolio(PortfolioItem("a", 9.0)))
    assert store.portfolio == (PortfolioItem("a", 1.0),)


def test_remove_from_portfolio():
    store = Store(portfolio=(PortfolioItem("a", 1.0), PortfolioItem("b", 2.0)))
    store = reduce(store, RemoveFromPortfolio("a"))
    assert store.portfolio == (PortfolioItem("b", 2.0),)


def test_remove_unknown_keeps_portfolio():
    portfolio = (PortfolioItem("a", 1.0),)
    assert reduce(Store(portfolio=portfolio), RemoveFromPortfolio("z")).portfolio == portfolio


def test_update_portfolio_item_in_place():
    store = Store(portfolio=(PortfolioItem("a", 1.0), PortfolioItem("b", 2.0)))
    store = reduce(store, UpdatePortfolioItem(PortfolioItem("a", 4.0)))
    assert store.portfolio == (PortfolioItem("a", 4.0), PortfolioItem("b", 2.0))


def test_update_unknown_item_does_not_add():
    store = reduce(Store(), UpdatePortfolioItem(PortfolioItem("a", 4.0)))
    assert store.portfolio == ()


def test_save_sets_loading():
    assert reduce(Store(), SavePortfolio()).loading is True


def test_set_error_and_clear():
    store = reduce(Store(loading=True), SetError("boom"))
    assert store.error == "boom"
    assert store.loading is False
    assert reduce(store, ClearError()).error is None


def test_set_loading():
    assert reduce(Store(), SetLoading(True)).loading is True
    assert reduce(Store(loading=True), SetLoading(False)).loading is False


def test_reduce_does_not_mutate_input():
    original = Store()
    reduce(original, AddToPortfolio(PortfolioItem("a", 1.0)))
    assert original.portfolio == ()


def test_reduce_rejects_unknown_action():
    with pytest.raises(TypeError):
        reduce(Store(), "not an action")


def test_handle_fetch_cryptocurrencies():
    handle = StoreHandle()
    state = handle.dispatch(FetchCryptocurrencies())
    assert state is handle.state
    assert list(state.cryptocurrencies) == get_cryptocurrencies()
    assert state.loading is False
    assert state.error is None


def test_handle_fetch_details():
    handle = StoreHandle()
    handle.dispatch(FetchCryptocurrencyDetails("ethereum"))
    assert handle.state.selected_cryptocurrency == get_cryptocurrency_details("ethereum")
    assert handle.state.loading is False


def test_handle_fetch_details_unknown_sets_error():
    handle = StoreHandle()
    handle.dispatch(FetchCryptocurrencyDetails("nope"))
    assert handle.state.error == "Cryptocurrency not found"
    assert handle.state.selected_cryptocurrency is None
    assert handle.state.loading is False


def test_handle_save_portfolio_clears_loading():
    handle = StoreHandle(Store(portfolio=(PortfolioItem("bitcoin", 1.0),), loading=True))
    handle.dispatch(SavePortfolio())
    assert handle.state.loading is False
    assert handle.state.portfolio == (PortfolioItem("bitcoin", 1.0),)


def test_handle_plain_actions_go_to_reducer():
    handle = StoreHandle()
    handle.dispatch(AddToPortfolio(PortfolioItem("bitcoin", 2.0)))
    handle.dispatch(UpdatePortfolioItem(PortfolioItem("bitcoin", 3.0)))
    assert handle.state.portfolio == (PortfolioItem("bitcoin", 3.0),)
    handle.dispatch(RemoveFromPortfolio("bitcoin"))
    assert handle.state.portfolio == ()


def test_handle_portfolio_value_after_fetch():
    handle = StoreHandle()
    handle.dispatch(FetchCryptocurrencies())
    handle.dispatch(AddToPortfolio(PortfolioItem("bitcoin", 1.0)))
    assert handle.state.calculate_portfolio_value() == 63542.87