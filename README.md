# cryptotracker

A small web application for browsing cryptocurrency prices and keeping a
personal portfolio. It shows a list of coins with their price and 24-hour
change, a details page per coin, and a portfolio page with the total value
of your holdings.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Run

```
cryptotracker
```

This starts the Flask development server on `127.0.0.1:8080`. Options:

- `--host ADDRESS`: address to listen on (default `127.0.0.1`).
- `--port PORT`: port to listen on (default `8080`).
- `--env-file PATH`: settings file to read (default `.env`).

Pages:

- `/` lists the available cryptocurrencies; each row links to its details.
- `/details/<id>` shows one coin (for example `/details/bitcoin`) with its
  price, 24h change, market cap and 24h volume. If the coin is not yet in
  the portfolio, "Add to Portfolio" opens an amount field (`?add=1`); if it
  is, you can change the amount held or remove it. An unknown id shows the
  error "Cryptocurrency not found" with a Retry link.
- `/portfolio` shows your holdings, the value of each and their total value.
- `/404` and any other unknown address show a "Page Not Found" page with a
  link back home.

The forms post to `/portfolio/add`, `/portfolio/update` and
`/portfolio/remove`, each taking `crypto_id`, `amount` (for add and update)
and `next`, the page to return to. An amount that is not a number counts as
`0` when adding and leaves the held amount unchanged when updating. A coin
that is already in the portfolio is not added a second time.

## Configuration

The footer text comes from `COPYRIGHT_TEXT`, looked up first in the settings
file and then in the process environment. Without it the footer reads
`© 2023 Crypto Tracker`.

The settings file is read line by line. Each line holding `=` is split at
the first `=`, and key and value are trimmed of surrounding spaces; other
lines are skipped. There is no quoting or comment syntax. A missing file is
the same as an empty one.

```
COPYRIGHT_TEXT=© 2024 My Portfolio
```

## Use as a library

```python
from cryptotracker.app import create_app

app = create_app(".env")
```

`create_app` returns a Flask application that can be served by any WSGI
server. Other pieces:

- `cryptotracker.models`: the `Cryptocurrency` and `PortfolioItem`
  dataclasses, with `to_dict` and `from_dict` (the latter raises
  `ValueError` on missing or wrongly typed fields).
- `cryptotracker.api`: `get_cryptocurrencies`, `get_cryptocurrency_details`
  (raises `ApiError` for an unknown id) and `update_portfolio`.
- `cryptotracker.store`: the immutable `Store` state, the action classes
  (`FetchCryptocurrencies`, `AddToPortfolio`, `UpdatePortfolioItem`,
  `RemoveFromPortfolio`, `SavePortfolio` and others), the pure `reduce`
  function, and `StoreHandle`, whose `dispatch` applies an action and calls
  the service for fetch and save actions. `Store.calculate_portfolio_value`
  sums price times amount over holdings whose price is known.
- `cryptotracker.config`: `read_env_file` and `copyright_text`.
- `cryptotracker.components` and `cryptotracker.pages`: functions that
  render HTML fragments and page bodies, and `cryptotracker.app.render_layout`
  that wraps a page in the document with header and footer.

## Limitations

- The market data is a fixed sample set (Bitcoin, Ethereum, Solana, Cardano
  and Polkadot); no live prices are fetched.
- The portfolio is held in memory by the running application only. It is
  shared by every visitor and lost when the server stops; nothing is written
  to disk.
- The pages carry Tailwind-style class names but no stylesheet is served.