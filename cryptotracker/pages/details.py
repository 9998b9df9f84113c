"""Details page for a single cryptocurrency."""

from __future__ import annotations

from markupsafe import Markup

from cryptotracker.components.crypto_card import _details_url, render_crypto_card
from cryptotracker.components.error import render_error
from cryptotracker.components.loading import render_loading
from cryptotracker.store import Store

_NO_DATA = Markup('<p class="text-gray-500">No cryptocurrency data available.</p>')


def render_details(store: Store, crypto_id: str, show_amount_input: bool = False) -> Markup:
    """Render the details page for *crypto_id* from the given state."""
    held = next((item for item in store.portfolio if item.crypto_id == crypto_id), None)
    amount = None if held is None else held.amount

    if store.loading:
        body = render_loading()
    elif store.error is not None:
        body = render_error(store.error, _details_url(crypto_id))
    elif store.selected_cryptocurrency is not None:
        body = render_crypto_card(
            store.selected_cryptocurrency,
            held is not None,
            amount,
            show_amount_input,
        )
    else:
        body = _NO_DATA

    return Markup(
        '<div class="details-page max-w-2xl mx-auto bg-white rounded-lg shadow p-8 mt-8">'
        '<h2 class="text-2xl font-bold text-blue-700 mb-6">Cryptocurrency Details</h2>'
        "{body}"
        "</div>"
    ).format(body=body)