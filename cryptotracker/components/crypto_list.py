"""List of cryptocurrencies, each linking to its details page."""

from __future__ import annotations

from typing import Iterable

from markupsafe import Markup

from cryptotracker.components.crypto_card import _details_url
from cryptotracker.models import Cryptocurrency

_ITEM = Markup(
    '<a href="{href}" data-id="{crypto_id}"'
    ' class="crypto-item flex items-center justify-between py-4 px-2'
    ' hover:bg-blue-50 cursor-pointer transition">'
    '<div class="crypto-name flex items-center space-x-2">'
    '<span class="symbol font-mono font-bold text-blue-700">{symbol}</span>'
    '<span class="name text-gray-700">{name}</span>'
    "</div>"
    '<div class="crypto-price flex items-center space-x-4">'
    '<span class="price font-semibold text-gray-800">{price}</span>'
    '<span class="ml-2 text-sm font-medium {change_class}">{change}</span>'
    "</div>"
    "</a>"
)


def _change_class(change: float) -> str:
    """Colour class for a 24h price change: green when not negative."""
    return "text-green-600" if change >= 0.0 else "text-red-600"


def render_crypto_list(cryptocurrencies: Iterable[Cryptocurrency]) -> Markup:
    """Render one linked row per cryptocurrency, in the order given."""
    rows = Markup("").join(
        _ITEM.format(
            href=_details_url(crypto.id),
            crypto_id=crypto.id,
            symbol=crypto.symbol,
            name=crypto.name,
            price=f"${crypto.price:.2f}",
            change_class=_change_class(crypto.price_change_24h),
            change=f"{crypto.price_change_24h:.2f}%",
        )
        for crypto in cryptocurrencies
    )
    return Markup('<div class="crypto-list divide-y divide-gray-200">{rows}</div>').format(
        rows=rows
    )