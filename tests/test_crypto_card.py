import pytest

from cryptotracker import api
from cryptotracker.components.crypto_card import (
    ADD_URL,
    REMOVE_URL,
    UPDATE_URL,
    parse_amount,
    render_crypto_card,
)
from cryptotracker.models import Cryptocurrency


@pytest.fixture
def bitcoin():
    return api.get_cryptocurrency_details("bitcoin")


@pytest.fixture
def ethereum():
    return api.get_cryptocurrency_details("ethereum")


@pytest.mark.parametrize("value", [2.5, 0.000001, 1234.5678, 0.1])
def test_parse_amount_round_trip(value):
    assert parse_amount(repr(value), -1.0) == value


@pytest.mark.parametrize("text", ["abc", "", " 1.5", "1.5 ", "1_000", "1,5"])
def test_parse_amount_keeps_current_on_bad_input(text):
    assert parse_amount(text, 7.25) == 7.25


def test_parse_amount_accepts_exponent():
    assert parse_amount("1e3", 0.0) == 1000.0


def test_card_shows_price_and_change(bitcoin):
    html = str(render_crypto_card(bitcoin, False, None, False))
    assert "Bitcoin (BTC)" in html
    assert "$63542.87" in html
    assert "2.34%" in html
    assert "text-green-600" in html
    assert "Market Cap: " in html
    assert "24h Volume: " in html


def test_negative_change_is_red(ethereum):
    html = str(render_crypto_card(ethereum, False, None, False))
    assert "-1.23%" in html
    assert "text-red-600" in html


def test_not_in_portfolio_offers_add_button(bitcoin):
    html = str(render_crypto_card(bitcoin, False, None, False))
    assert "Add to Portfolio" in html
    assert "Your holdings" not in html
    assert ADD_URL not in html


def test_amount_input_form(bitcoin):
    html = str(render_crypto_card(bitcoin, False, None, True))
    assert f'action="{ADD_URL}"' in html
    assert "Enter amount" in html
    assert 'value="0"' in html
    assert 'name="crypto_id" value="bitcoin"' in html


def test_amount_input_takes_precedence_over_holdings(bitcoin):
    html = str(render_crypto_card(bitcoin, True, 1.5, True))
    assert "Enter amount" in html
    assert "Remove" not in html
    assert 'value="1.5"' in html


def test_holdings_view(bitcoin):
    html = str(render_crypto_card(bitcoin, True, 0.5, False))
    assert "Your holdings" in html
    assert "0.500000 BTC" in html
    assert f'action="{UPDATE_URL}"' in html
    assert f'action="{REMOVE_URL}"' in html
    assert "Add to Portfolio" not in html


def test_whole_amount_input_value_has_no_fraction(bitcoin):
    html = str(render_crypto_card(bitcoin, True, 2.0, False))
    assert 'value="2"' in html


def test_text_is_escaped():
    crypto = Cryptocurrency(
        id="evil",
        name="<b>x</b>",
        symbol="X&Y",
        price=1.0,
        market_cap=0.0,
        volume_24h=0.0,
        price_change_24h=0.0,
    )
    html = str(render_crypto_card(crypto, False, None, False))
    assert "<b>x</b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "X&amp;Y" in html