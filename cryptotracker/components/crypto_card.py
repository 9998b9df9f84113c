"""Card showing one cryptocurrency's market data and portfolio controls."""

from __future__ import annotations

import math
from decimal import Decimal
from urllib.parse import quote

from markupsafe import Markup

from cryptotracker.models import Cryptocurrency

ADD_URL = "/portfolio/add"
UPDATE_URL = "/portfolio/update"
REMOVE_URL = "/portfolio/remove"

_INPUT_CLASS = (
    "border rounded px-2 py-1 {width} focus:outline-none focus:ring-2 focus:ring-blue-400"
)


def _details_url(crypto_id: str) -> str:
    return "/details/" + quote(crypto_id, safe="")


def _plain_number(value: float) -> str:
    """Shortest decimal text for *value*, without exponent or a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_amount(text: str, current: float) -> float:
    """Return *text* read as a number, or *current* when it is not one."""
    if text != text.strip() or "_" in text:
        return current
    try:
        return float(text)
    except ValueError:
        return current


def _amount_input(amount: float, width: str, placeholder: bool) -> Markup:
    extra = Markup(' placeholder="Enter amount"') if placeholder else Markup("")
    return Markup(
        '<input type="number" name="amount" step="0.000001" min="0"{extra}'
        ' value="{value}" class="{cls}" />'
    ).format(
        extra=extra,
        value=_plain_number(amount),
        cls=_INPUT_CLASS.format(width=width),
    )


def _hidden_fields(crypto_id: str, next_url: str) -> Markup:
    return Markup(
        '<input type="hidden" name="crypto_id" value="{crypto_id}" />'
        '<input type="hidden" name="next" value="{next_url}" />'
    ).format(crypto_id=crypto_id, next_url=next_url)


def _amount_form(crypto: Cryptocurrency, amount: float) -> Markup:
    return Markup(
        '<form method="post" action="{action}"'
        ' class="amount-input flex items-center space-x-2">'
        "{hidden}{field}"
        '<button type="submit"'
        ' class="px-4 py-1 bg-blue-600 text-white rounded hover:bg-blue-700 transition">'
        "Add</button>"
        "</form>"
    ).format(
        action=ADD_URL,
        hidden=_hidden_fields(crypto.id, _details_url(crypto.id)),
        field=_amount_input(amount, "w-32", placeholder=True),
    )


def _holdings(crypto: Cryptocurrency, amount: float) -> Markup:
    next_url = _details_url(crypto.id)
    return Markup(
        '<div class="portfolio-actions space-y-2">'
        '<div class="amount-display">'
        '<p class="text-gray-700">Your holdings: <span class="font-semibold">{held}</span></p>'
        '<p class="text-gray-700">Value: '
        '<span class="font-semibold text-green-600">{value}</span></p>'
        "</div>"
        '<div class="portfolio-buttons flex items-center space-x-2">'
        '<form method="post" action="{update}" class="flex items-center space-x-2">'
        "{update_hidden}{field}"
        '<button type="submit"'
        ' class="px-4 py-1 bg-blue-600 text-white rounded hover:bg-blue-700 transition">'
        "Update</button>"
        "</form>"
        '<form method="post" action="{remove}">'
        "{remove_hidden}"
        '<button type="submit"'
        ' class="remove px-4 py-1 bg-red-500 text-white rounded hover:bg-red-600 transition">'
        "Remove</button>"
        "</form>"
        "</div>"
        "</div>"
    ).format(
        held=f"{amount:.6f} {crypto.symbol}",
        value=f"${amount * crypto.price:.2f}",
        update=UPDATE_URL,
        update_hidden=_hidden_fields(crypto.id, next_url),
        field=_amount_input(amount, "w-32", placeholder=False),
        remove=REMOVE_URL,
        remove_hidden=_hidden_fields(crypto.id, next_url),
    )


def _add_button(crypto: Cryptocurrency) -> Markup:
    return Markup(
        '<div class="add-button">'
        '<form method="get" action="{action}">'
        '<input type="hidden" name="add" value="1" />'
        '<button type="submit"'
        ' class="px-4 py-2 bg-blue-600 text-white rounded hover:bg-blue-700 transition">'
        "Add to Portfolio</button>"
        "</form>"
        "</div>"
    ).format(action=_details_url(crypto.id))


def render_crypto_card(
    cryptocurrency: Cryptocurrency,
    in_portfolio: bool,
    amount: float | None,
    show_amount_input: bool,
) -> Markup:
    """Render the card; *amount* is the held amount, if any."""
    crypto = cryptocurrency
    held = 0.0 if amount is None else amount
    if show_amount_input:
        actions = _amount_form(crypto, held)
    elif in_portfolio:
        actions = _holdings(crypto, held)
    else:
        actions = _add_button(crypto)

    change_class = "text-green-600" if crypto.price_change_24h >= 0.0 else "text-red-600"

    return Markup(
        '<div class="crypto-card bg-white rounded-lg shadow p-6">'
        '<div class="card-header mb-4">'
        '<h2 class="text-xl font-bold text-blue-700">{title}</h2>'
        "</div>"
        '<div class="card-body space-y-4">'
        '<div class="price-info flex items-center space-x-4">'
        '<p class="price text-2xl font-bold text-gray-800">{price}</p>'
        '<p class="text-sm font-medium {change_class}">{change}</p>'
        "</div>"
        '<div class="market-info text-gray-600 space-y-1">'
        '<p>Market Cap: <span class="font-semibold text-gray-800">{market_cap}</span></p>'
        '<p>24h Volume: <span class="font-semibold text-gray-800">{volume}</span></p>'
        "</div>"
        "{actions}"
        "</div>"
        "</div>"
    ).format(
        title=f"{crypto.name} ({crypto.symbol})",
        price=f"${crypto.price:.2f}",
        change_class=change_class,
        change=f"{crypto.price_change_24h:.2f}%",
        market_cap=f"${crypto.market_cap / 1_000_000_000.0:.2f} B",
        volume=f"${crypto.volume_24h / 1_000_000_000.0:.2f} B",
        actions=actions,
    )