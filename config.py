import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_WATCHLIST: Tuple[str, ...] = ("BTC", "ETH", "BNB", "SOL", "MATIC")


def _clean_symbols(symbols) -> Tuple[str, ...]:
    cleaned = []
    for part in symbols:
        sym = part.strip().upper()
        if sym and sym not in cleaned:
            cleaned.append(sym)
    return tuple(cleaned)


def _parse_watchlist(raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return DEFAULT_WATCHLIST
    return _clean_symbols(raw.split(","))


@dataclass
class Settings:
    watchlist: Tuple[str, ...] = DEFAULT_WATCHLIST
    refresh_interval_sec: float = 10.0

    translate_url: str = "https://translate.googleapis.com/translate_a/single"
    translate_client: str = "gtx"

    prices_url: str = "https://api.coincap.io/v2/assets"
    prices_limit: int = 200
    prices_api_key: Optional[str] = field(default=None, repr=False)

    http_timeout_sec: float = 15.0
    port: int = 8000
    log_level: str = "INFO"

    def __post_init__(self):
        self.watchlist = _clean_symbols(self.watchlist)
        if not self.watchlist:
            raise ValueError("Watchlist must contain at least one symbol")
        if self.refresh_interval_sec <= 0:
            raise ValueError("Refresh interval must be positive")


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    defaults = Settings()
    return Settings(
        watchlist=_parse_watchlist(os.getenv("ORACLE_WATCHLIST")),
        refresh_interval_sec=float(os.getenv("ORACLE_REFRESH_INTERVAL", defaults.refresh_interval_sec)),
        translate_url=os.getenv("ORACLE_TRANSLATE_URL", defaults.translate_url),
        translate_client=os.getenv("ORACLE_TRANSLATE_CLIENT", defaults.translate_client),
        prices_url=os.getenv("ORACLE_PRICES_URL", defaults.prices_url),
        prices_limit=int(os.getenv("ORACLE_PRICES_LIMIT", defaults.prices_limit)),
        prices_api_key=os.getenv("COINCAP_API_KEY") or None,
        http_timeout_sec=float(os.getenv("ORACLE_HTTP_TIMEOUT", defaults.http_timeout_sec)),
        port=int(os.getenv("PORT", defaults.port)),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )
