import io
from http.client import BadStatusLine, IncompleteRead
from urllib.error import HTTPError, URLError

import pytest

from stocklist.errors import ResponseReadError, TransportError
from stocklist.exchanges import twelvedata_adapter
from stocklist.exchanges.twelvedata_adapter import TwelveDataAdapter

TICKERS = ["IBM", "WMT", "MMM", "INTC", "AXP"]


def test_quote_url_contains_key_and_symbols():
    url = TwelveDataAdapter("X").build_quote_url(TICKERS)
    assert url.startswith("https://api.twelvedata.com/quote?")
    assert "symbol=IBM,WMT,MMM,INTC,AXP" in url
    assert "apikey=X" in url


def test_fetch_returns_raw_body(monkeypatch):
    seen = []

    def fake_urlopen(url):
        seen.append(url)
        return io.BytesIO(b'{"IBM": {}}')

    monkeypatch.setattr(twelvedata_adapter, "urlopen", fake_urlopen)
    body = TwelveDataAdapter("X").fetch_quotes(["IBM"])
    assert body == b'{"IBM": {}}'
    assert seen == ["https://api.twelvedata.com/quote?symbol=IBM&apikey=X"]


def test_http_error_body_is_returned(monkeypatch):
    payload = b'{"code": 401, "message": "bad key", "status": "error"}'

    def fake_urlopen(url):
        raise HTTPError(url, 401, "Unauthorized", {}, io.BytesIO(payload))

    monkeypatch.setattr(twelvedata_adapter, "urlopen", fake_urlopen)
    assert TwelveDataAdapter("X").fetch_quotes(["IBM"]) == payload


def test_connection_failure(monkeypatch):
    def fake_urlopen(url):
        raise URLError("connection refused")

    monkeypatch.setattr(twelvedata_adapter, "urlopen", fake_urlopen)
    with pytest.raises(TransportError):
        TwelveDataAdapter("X").fetch_quotes(["IBM"])


def test_body_read_failure(monkeypatch):
    class BrokenResponse(io.BytesIO):
        def read(self, *args):
            raise OSError("connection reset")

    monkeypatch.setattr(twelvedata_adapter, "urlopen", lambda url: BrokenResponse())
    with pytest.raises(ResponseReadError):
        TwelveDataAdapter("X").fetch_quotes(["IBM"])


def test_truncated_body(monkeypatch):
    class TruncatedResponse(io.BytesIO):
        def read(self, *args):
            raise IncompleteRead(b'{"IBM"', 100)

    monkeypatch.setattr(twelvedata_adapter, "urlopen", lambda url: TruncatedResponse())
    with pytest.raises(ResponseReadError):
        TwelveDataAdapter("X").fetch_quotes(["IBM"])


def test_bad_status_line(monkeypatch):
    def fake_urlopen(url):
        raise BadStatusLine("garbage")

    monkeypatch.setattr(twelvedata_adapter, "urlopen", fake_urlopen)
    with pytest.raises(TransportError):
        TwelveDataAdapter("X").fetch_quotes(["IBM"])
