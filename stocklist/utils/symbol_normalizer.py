import re
from typing import Iterable

_SYMBOL_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,16}$")


def normalize_symbol(symbol: str) -> str:
    cleaned = symbol.strip().upper()
    if not cleaned or not _SYMBOL_PATTERN.match(cleaned):
        raise ValueError(f"invalid symbol: {symbol!r}")
    return cleaned


def join_symbols(symbols: Iterable[str]) -> str:
    """Comma-join tickers in request order."""
    joined = ",".join(normalize_symbol(symbol) for symbol in symbols)
    if not joined:
        raise ValueError("no symbols requested")
    return joined
