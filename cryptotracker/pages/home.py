"""Home page listing all tracked cryptocurrencies."""

from __future__ import annotations

from markupsafe import Markup

from cryptotracker.components.crypto_list import render_crypto_list
from cryptotracker.components.error import render_error
from cryptotracker.components.loading import render_loading
from cryptotracker.store import Store

HOME_URL = "/"

_EMPTY = Markup('<p class="text-gray-500">No cryptocurrencies available.</p>')


def render_home(store: Store) -> Markup:
    """Render the home page for the given state."""
    if store.loading:
        body = render_loading()
    elif store.error is not None:
        body = render_error(store.error, HOME_URL)
    elif not store.cryptocurrencies:
        body = _EMPTY
    else:
        body = render_crypto_list(store.cryptocurrencies)

    return Markup(
        '<div class="home-page max-w-3xl mx-auto bg-white rounded-lg shadow p-8 mt-8">'
        '<h2 class="text-2xl font-bold text-blue-700 mb-6">HomePortfolio</h2>'
        "{body}"
        "</div>"
    ).format(body=body)