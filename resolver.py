import re
from typing import Optional, Sequence

# Common names for watchlist symbols, checked in order when no ticker appears verbatim
ALIASES = [
    (re.compile(r"ethereum|eth"), "ETH"),
    (re.compile(r"binance|bnb"), "BNB"),
    (re.compile(r"solana|sol"), "SOL"),
    (re.compile(r"matic|polygon"), "MATIC"),
]


def find_symbol(translated: str, watchlist: Sequence[str]) -> Optional[str]:
    """Return the watchlist symbol named in the text, or None."""
    text = (translated or "").lower()

    for sym in watchlist:
        if sym.lower() in text:
            return sym

    chosen = None
    for pattern, sym in ALIASES:
        # last matching alias wins
        if sym in watchlist and pattern.search(text):
            chosen = sym
    return chosen


def resolve_symbol(translated: str, watchlist: Sequence[str], current: Optional[str] = None) -> str:
    chosen = find_symbol(translated, watchlist)
    if chosen:
        return chosen
    if current and current.upper() in watchlist:
        return current.upper()
    return watchlist[0]
