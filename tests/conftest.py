from unittest.mock import MagicMock

import pytest
import requests

from config import Settings

WATCHLIST = ("BTC", "ETH", "BNB", "SOL", "MATIC")

ASSETS_PAYLOAD = {
    "data": [
        {"id": "bitcoin", "symbol": "BTC", "priceUsd": "64123.4567891234"},
        {"id": "ethereum", "symbol": "ETH", "priceUsd": "3120.55"},
        {"id": "tether", "symbol": "USDT", "priceUsd": "1.0001"},
        {"id": "solana", "symbol": "SOL", "priceUsd": "150"},
        {"id": "binance-coin", "symbol": "BNB", "priceUsd": "585.2"},
    ],
    "timestamp": 1718000000000,
}


def make_response(status_code=200, payload=None, text=""):
    r = MagicMock()
    r.status_code = status_code
    r.text = text
    if isinstance(payload, Exception):
        r.json.side_effect = payload
    else:
        r.json.return_value = payload
    return r


@pytest.fixture
def settings():
    return Settings(watchlist=WATCHLIST, http_timeout_sec=5)


@pytest.fixture
def price_session():
    session = MagicMock()
    session.get.return_value = make_response(payload=ASSETS_PAYLOAD)
    return session


@pytest.fixture
def broken_session():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("network down")
    return session
