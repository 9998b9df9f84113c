"""Web application: layout, routes and the command that serves them."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from flask import Flask, abort, redirect, request
from markupsafe import Markup

from cryptotracker.components.crypto_card import parse_amount
from cryptotracker.config import copyright_text, read_env_file
from cryptotracker.models import PortfolioItem
from cryptotracker.pages.details import render_details
from cryptotracker.pages.home import render_home
from cryptotracker.pages.not_found import render_not_found
from cryptotracker.pages.portfolio import render_portfolio
from cryptotracker.store import (
    AddToPortfolio,
    FetchCryptocurrencies,
    FetchCryptocurrencyDetails,
    RemoveFromPortfolio,
    SavePortfolio,
    StoreHandle,
    UpdatePortfolioItem,
)

log = logging.getLogger(__name__)

_NAV_LINK = "text-gray-700 hover:text-blue-600 font-medium transition"


def render_layout(content: str, copyright: str) -> Markup:
    """Wrap page *content* in the document with header, navigation and footer."""
    return Markup(
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8" />'
        "<title>Crypto Tracker</title></head><body>"
        '<div class="app-container min-h-screen flex flex-col bg-gray-50">'
        '<header class="bg-white shadow p-4 flex flex-col md:flex-row'
        ' md:items-center md:justify-between">'
        '<h1 class="text-2xl font-bold text-blue-700 mb-2 md:mb-0">Crypto Tracker</h1>'
        '<nav class="flex space-x-4">'
        '<a href="/" class="{link}">Home</a>'
        '<a href="/portfolio" class="{link}">Portfolio</a>'
        "</nav>"
        "</header>"
        '<main class="flex-1 container mx-auto px-4 py-8">{content}</main>'
        '<footer class="bg-white text-center text-gray-500 py-4 border-t">'
        "<p>{copyright}</p>"
        "</footer>"
        "</div>"
        "</body></html>"
    ).format(link=_NAV_LINK, content=content, copyright=copyright)


def _safe_next(target: str | None) -> str:
    if not target or not target.startswith("/") or target.startswith("//"):
        return "/"
    return target


def _form_crypto_id() -> str:
    crypto_id = request.form.get("crypto_id", "")
    if not crypto_id:
        abort(400)
    return crypto_id


def create_app(env_path: str | os.PathLike[str] | None = None) -> Flask:
    """Build the web application, reading settings from *env_path* (default ``.env``)."""
    settings = {**os.environ, **read_env_file(env_path if env_path is not None else ".env")}
    footer = copyright_text(settings)
    log.info("Copyright text: %s", footer)

    app = Flask(__name__)
    handle = StoreHandle()

    def page(content: Markup) -> str:
        return render_layout(content, footer)

    @app.get("/")
    def home() -> str:
        handle.dispatch(FetchCryptocurrencies())
        return page(render_home(handle.state))

    @app.get("/details/<crypto_id>")
    def details(crypto_id: str) -> str:
        handle.dispatch(FetchCryptocurrencyDetails(crypto_id))
        show_input = request.args.get("add") == "1"
        return page(render_details(handle.state, crypto_id, show_input))

    @app.get("/portfolio")
    def portfolio() -> str:
        if not handle.state.cryptocurrencies:
            handle.dispatch(FetchCryptocurrencies())
        return page(render_portfolio(handle.state))

    @app.post("/portfolio/add")
    def add_item():
        crypto_id = _form_crypto_id()
        amount = parse_amount(request.form.get("amount", ""), 0.0)
        handle.dispatch(AddToPortfolio(PortfolioItem(crypto_id, amount)))
        handle.dispatch(SavePortfolio())
        return redirect(_safe_next(request.form.get("next")))

    @app.post("/portfolio/update")
    def update_item():
        crypto_id = _form_crypto_id()
        current = next(
            (item.amount for item in handle.state.portfolio if item.crypto_id == crypto_id),
            0.0,
        )
        amount = parse_amount(request.form.get("amount", ""), current)
        handle.dispatch(UpdatePortfolioItem(PortfolioItem(crypto_id, amount)))
        handle.dispatch(SavePortfolio())
        return redirect(_safe_next(request.form.get("next")))

    @app.post("/portfolio/remove")
    def remove_item():
        crypto_id = _form_crypto_id()
        handle.dispatch(RemoveFromPortfolio(crypto_id))
        handle.dispatch(SavePortfolio())
        return redirect(_safe_next(request.form.get("next")))

    @app.get("/404")
    def not_found_page():
        return page(render_not_found()), 404

    @app.errorhandler(404)
    def not_found(_error):
        return page(render_not_found()), 404

    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the application over HTTP."""
    parser = argparse.ArgumentParser(description="Track cryptocurrency prices and a portfolio.")
    parser.add_argument("--host", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--env-file", default=".env", help="settings file to read")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = create_app(args.env_file)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()