from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import urlopen

from stocklist.errors import ResponseReadError, TransportError
from stocklist.exchanges.base import QuoteAdapter
from stocklist.utils.symbol_normalizer import join_symbols

logger = logging.getLogger(__name__)

QUOTE_URL = "https://api.twelvedata.com/quote"


class TwelveDataAdapter(QuoteAdapter):
    def __init__(self, api_key: str, base_url: str = QUOTE_URL):
        self.api_key = api_key
        self.base_url = base_url

    def build_quote_url(self, symbols: Sequence[str]) -> str:
        query = urlencode({"symbol": join_symbols(symbols), "apikey": self.api_key}, safe=",")
        return f"{self.base_url}?{query}"

    def _get_body(self, url: str) -> bytes:
        try:
            response = urlopen(url)
        except HTTPError as exc:
            # provider error payloads can arrive with a non-2xx status
            logger.warning("Quote endpoint returned HTTP %s", exc.code)
            response = exc
        except (URLError, HTTPException, OSError) as exc:
            raise TransportError(f"HTTP request failed: {exc!r}") from exc

        try:
            with response:
                return response.read()
        except (HTTPException, OSError) as exc:
            raise ResponseReadError(f"failed to read response body: {exc!r}") from exc

    def fetch_quotes(self, symbols: Sequence[str]) -> bytes:
        url = self.build_quote_url(symbols)
        logger.info("Requesting quotes for %s from %s", join_symbols(symbols), self.base_url)
        started = time.perf_counter()
        body = self._get_body(url)
        logger.info("Received %d bytes in %.1f ms", len(body), (time.perf_counter() - started) * 1000)
        return body
