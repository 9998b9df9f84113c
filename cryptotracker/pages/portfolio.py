"""Portfolio page with total value and one row per holding."""

from __future__ import annotations

from markupsafe import Markup

from cryptotracker.components.error import render_error
from cryptotracker.components.loading import render_loading
from cryptotracker.components.portfolio_item import render_portfolio_item
from cryptotracker.store import Store

PORTFOLIO_URL = "/portfolio"

_EMPTY = Markup(
    '<div class="empty-portfolio text-gray-500 text-center py-8">'
    "<p>Your portfolio is empty. Add cryptocurrencies from the Home page.</p>"
    "</div>"
)


def _holdings(store: Store) -> Markup:
    prices = {crypto.id: crypto for crypto in store.cryptocurrencies}
    rows = Markup("").join(
        render_portfolio_item(item, prices.get(item.crypto_id)) for item in store.portfolio
    )
    return Markup(
        '<div class="portfolio-summary flex items-center justify-between'
        ' bg-blue-50 rounded p-4 mb-6">'
        '<h3 class="text-lg font-semibold text-blue-700">Total Value</h3>'
        '<p class="total-value text-2xl font-bold text-green-600">{total}</p>'
        "</div>"
        '<div class="portfolio-list space-y-4">{rows}</div>'
    ).format(total=f"${store.calculate_portfolio_value():.2f}", rows=rows)


def render_portfolio(store: Store) -> Markup:
    """Render the portfolio page for the given state."""
    if store.loading and not store.cryptocurrencies:
        body = render_loading()
    elif store.error is not None:
        body = render_error(store.error, PORTFOLIO_URL)
    elif not store.portfolio:
        body = _EMPTY
    else:
        body = _holdings(store)

    return Markup(
        '<div class="portfolio-page max-w-3xl mx-auto bg-white rounded-lg shadow p-8 mt-8">'
        '<h2 class="text-2xl font-bold text-blue-700 mb-6">My Portfolio</h2>'
        "{body}"
        "</div>"
    ).format(body=body)