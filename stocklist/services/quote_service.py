"""
Quote retrieval and response interpretation.

The provider answers a multi-symbol request with either an error payload
({"code", "message", "status"}) or an object keyed by ticker symbol. Both
shapes are plain JSON objects, so the body is checked for the error shape
first and only then decoded as quotes.

The raw body is only logged at DEBUG level; stdout carries the quote
listing alone.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from stocklist.errors import ApiError, EmptyResultError, MalformedResponseError
from stocklist.exchanges.base import QuoteAdapter
from stocklist.schemas.quote import ErrorPayloadSchema, QuoteSchema

logger = logging.getLogger(__name__)

_QUOTES_ADAPTER = TypeAdapter(dict[str, QuoteSchema])


def parse_error_payload(body: bytes) -> ErrorPayloadSchema | None:
    """Decode the body as an error payload, or return None if it is not one."""
    try:
        return ErrorPayloadSchema.model_validate_json(body)
    except ValidationError:
        return None


def parse_quotes(body: bytes) -> dict[str, QuoteSchema]:
    error = parse_error_payload(body)
    if error is not None and error.code != 0:
        raise ApiError(error.code, error.message, error.status)

    try:
        quotes = _QUOTES_ADAPTER.validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(f"JSON decode error: {exc}") from exc

    if not quotes:
        raise EmptyResultError("No stock data received")
    return quotes


class QuoteService:
    def __init__(self, adapter: QuoteAdapter):
        self.adapter = adapter

    def get_quotes(self, symbols: Sequence[str]) -> dict[str, QuoteSchema]:
        body = self.adapter.fetch_quotes(symbols)
        logger.debug("API response: %s", body.decode("utf-8", errors="replace"))
        quotes = parse_quotes(body)
        logger.info("Decoded %d quotes", len(quotes))
        return quotes
