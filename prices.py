"""
Watchlist price fetcher over the CoinCap assets endpoint.

Keeps the last successful snapshot and hands it back when a fetch fails.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Sequence

import requests

from config import Settings
from schemas import PriceMap

logger = logging.getLogger("PriceFetcher")


def empty_price_map(watchlist: Iterable[str]) -> PriceMap:
    return {sym: None for sym in watchlist}


def _to_float(value: Any) -> Optional[float]:
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    # NaN and infinities are not prices
    return price if math.isfinite(price) else None


def parse_assets(payload: Any, watchlist: Sequence[str]) -> PriceMap:
    """Map each watchlist symbol to its USD price; symbols absent from the payload map to None."""
    try:
        records = payload["data"]
    except (KeyError, TypeError):
        raise ValueError("Price payload has no 'data' list")
    if not isinstance(records, list):
        raise ValueError("Price payload 'data' is not a list")

    found = {}
    for item in records:
        if not isinstance(item, dict) or not isinstance(item.get("symbol"), str):
            continue
        sym = item["symbol"].upper()
        if sym in watchlist and sym not in found:
            found[sym] = _to_float(item.get("priceUsd"))
    return {sym: found.get(sym) for sym in watchlist}


class PriceFetcher:
    def __init__(self, watchlist: Sequence[str], settings: Optional[Settings] = None, session=None):
        self.watchlist = tuple(watchlist)
        self.settings = settings or Settings(watchlist=self.watchlist)
        self.session = session or requests
        self._snapshot: Optional[PriceMap] = None
        self.updated_at: Optional[datetime] = None

    @property
    def snapshot(self) -> PriceMap:
        if self._snapshot is None:
            return empty_price_map(self.watchlist)
        return dict(self._snapshot)

    def _headers(self) -> dict:
        if self.settings.prices_api_key:
            return {"Authorization": f"Bearer {self.settings.prices_api_key}"}
        return {}

    def fetch(self) -> PriceMap:
        """
        Fetch the latest prices once. On failure the previous snapshot is
        returned unchanged, or an all-None map if nothing was fetched yet.
        """
        try:
            r = self.session.get(
                self.settings.prices_url,
                params={"limit": self.settings.prices_limit},
                headers=self._headers(),
                timeout=self.settings.http_timeout_sec,
            )
            if r.status_code != 200:
                raise ValueError(f"Price fetch failed with status {r.status_code}: {r.text[:120]}")
            prices = parse_assets(r.json(), self.watchlist)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Price fetch error: {e}")
            return self.snapshot

        self._snapshot = prices
        self.updated_at = datetime.now(timezone.utc)
        missing = [sym for sym, price in prices.items() if price is None]
        if missing:
            logger.info(f"No price for {', '.join(missing)}")
        return dict(prices)
