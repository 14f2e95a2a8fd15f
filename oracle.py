"""
Oracle state: the latest price snapshot, the selected symbol and the chart
rendered for it. Request handlers and the refresh task both go through here.
"""
import logging
import math
import threading
from typing import Callable, Optional

from chart import ChartRenderer
from config import Settings
from prices import PriceFetcher
from resolver import resolve_symbol
from schemas import AskResponse, PriceMap, Quote, TranslationResult
from translator import translate_to_english

logger = logging.getLogger("Oracle")

EMPTY_QUERY_MESSAGE = "Please type a question (any language)."
NO_PRICE_TEXT = "Price not available"


def format_price(price: Optional[float]) -> str:
    if price is None or not math.isfinite(price):
        return NO_PRICE_TEXT
    text = f"{price:,.6f}"
    whole, frac = text.split(".")
    frac = frac.rstrip("0").ljust(2, "0")
    return f"${whole}.{frac}"


class Oracle:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[PriceFetcher] = None,
        renderer: Optional[ChartRenderer] = None,
        translate: Optional[Callable[[str], TranslationResult]] = None,
    ):
        self.settings = settings or Settings()
        self.watchlist = self.settings.watchlist
        self.fetcher = fetcher or PriceFetcher(self.watchlist, self.settings)
        self.renderer = renderer or ChartRenderer(self.watchlist)
        self.translate = translate or (lambda text: translate_to_english(text, self.settings))

        self.selected = self.watchlist[0]
        self.status = ""
        self.lang_info = ""
        self._lock = threading.Lock()

    def normalize(self, symbol: Optional[str]) -> str:
        sym = (symbol or "").strip().upper()
        if sym not in self.watchlist:
            raise ValueError(f"Unknown symbol: {symbol!r}")
        return sym

    def quote(self, symbol: Optional[str] = None, snapshot: Optional[PriceMap] = None) -> Quote:
        sym = self.normalize(symbol) if symbol else self.selected
        if snapshot is None:
            snapshot = self.fetcher.snapshot
        price = snapshot.get(sym)
        price_text = format_price(price)
        return Quote(
            symbol=sym,
            price=price,
            price_text=price_text,
            status=f"{sym} → {price_text}",
            updated_at=self.fetcher.updated_at,
        )

    def update_ui(self, symbol: str) -> Quote:
        """Select a symbol, refresh the status text and redraw the chart once."""
        sym = self.normalize(symbol)
        with self._lock:
            self.selected = sym
            # status text and chart come from the same snapshot
            snapshot = self.fetcher.snapshot
            quote = self.quote(sym, snapshot)
            self.status = quote.status
            self.renderer.render(snapshot, sym)
        return quote

    def refresh(self) -> Quote:
        self.fetcher.fetch()
        return self.update_ui(self.selected)

    def select(self, symbol: str) -> Quote:
        return self.update_ui(symbol)

    def chart_png(self) -> bytes:
        png = self.renderer.last_png
        if png is None:
            self.update_ui(self.selected)
            png = self.renderer.last_png
        return png

    def ask(self, text: str, current: Optional[str] = None) -> AskResponse:
        query = (text or "").strip()
        if not query:
            raise ValueError(EMPTY_QUERY_MESSAGE)

        result = self.translate(query)
        self.lang_info = f'Detected: {result.detected} | Translated: "{result.translated}"'
        logger.info(self.lang_info)

        fallback = (current or "").strip().upper()
        if fallback not in self.watchlist:
            fallback = self.selected
        chosen = resolve_symbol(result.translated, self.watchlist, fallback)
        quote = self.update_ui(chosen)
        return AskResponse(
            query=query,
            translated=result.translated,
            detected=result.detected,
            lang_info=self.lang_info,
            quote=quote,
        )
