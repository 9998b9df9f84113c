"""One row of the portfolio with update and remove controls."""

from __future__ import annotations

from markupsafe import Markup

from cryptotracker.components.crypto_card import (
    REMOVE_URL,
    UPDATE_URL,
    _amount_input,
    _details_url,
    _hidden_fields,
)
from cryptotracker.models import Cryptocurrency, PortfolioItem

_PORTFOLIO_URL = "/portfolio"

_PLACEHOLDER = Markup(
    '<div class="portfolio-item loading flex items-center justify-between'
    ' bg-gray-100 rounded p-4 animate-pulse">'
    '<div class="item-info">'
    '<div class="crypto-name">'
    '<span class="symbol text-gray-400">Loading...</span>'
    "</div>"
    "</div>"
    "</div>"
)


def render_portfolio_item(
    item: PortfolioItem, cryptocurrency: Cryptocurrency | None
) -> Markup:
    """Render a holding; a placeholder is shown while its market data is unknown."""
    if cryptocurrency is None:
        return _PLACEHOLDER

    crypto = cryptocurrency
    return Markup(
        '<div class="portfolio-item flex items-center justify-between'
        ' bg-blue-50 rounded p-4 shadow-sm">'
        '<a href="{href}" class="item-info flex-1 cursor-pointer">'
        '<div class="crypto-name flex items-center space-x-2">'
        '<span class="symbol font-mono font-bold text-blue-700">{symbol}</span>'
        '<span class="name text-gray-700">{name}</span>'
        "</div>"
        '<div class="holdings flex items-center space-x-4 mt-2">'
        '<span class="amount text-gray-800">{amount}</span>'
        '<span class="value font-semibold text-green-600">{value}</span>'
        "</div>"
        "</a>"
        '<div class="item-actions flex items-center space-x-2 ml-4">'
        '<form method="post" action="{update}" class="flex items-center space-x-2">'
        "{update_hidden}{field}"
        '<button type="submit"'
        ' class="px-3 py-1 bg-blue-600 text-white rounded hover:bg-blue-700 transition">'
        "Update</button>"
        "</form>"
        '<form method="post" action="{remove}">'
        "{remove_hidden}"
        '<button type="submit"'
        ' class="remove px-3 py-1 bg-red-500 text-white rounded hover:bg-red-600 transition">'
        "Remove</button>"
        "</form>"
        "</div>"
        "</div>"
    ).format(
        href=_details_url(item.crypto_id),
        symbol=crypto.symbol,
        name=crypto.name,
        amount=f"{item.amount:.6f}",
        value=f"${item.amount * crypto.price:.2f}",
        update=UPDATE_URL,
        update_hidden=_hidden_fields(item.crypto_id, _PORTFOLIO_URL),
        field=_amount_input(item.amount, "w-24", placeholder=False),
        remove=REMOVE_URL,
        remove_hidden=_hidden_fields(item.crypto_id, _PORTFOLIO_URL),
    )