"""
Error types for the stocklist pipeline.
Every failure is fatal; errors propagate to the entry point, which logs and exits.
"""
from __future__ import annotations


class StockListError(Exception):
    """Base class for all pipeline failures."""

    code = "STOCKLIST_ERROR"


class CredentialError(StockListError):
    """The credential file could not be read or parsed."""

    code = "CREDENTIAL_ERROR"


class TransportError(StockListError):
    """The HTTP request could not be completed."""

    code = "TRANSPORT_ERROR"


class ResponseReadError(StockListError):
    """The response body could not be read in full."""

    code = "RESPONSE_READ_ERROR"


class ApiError(StockListError):
    """The provider answered with an error payload."""

    code = "API_ERROR"

    def __init__(self, api_code: int, message: str, status: str = ""):
        super().__init__(f"API Error {api_code}: {message}")
        self.api_code = api_code
        self.message = message
        self.status = status


class MalformedResponseError(StockListError):
    """The response body is not a symbol -> quote mapping."""

    code = "MALFORMED_RESPONSE"


class EmptyResultError(StockListError):
    """The response decoded to an empty mapping."""

    code = "EMPTY_RESULT"


class OutputFileError(StockListError):
    """The CSV output file could not be created or written."""

    code = "OUTPUT_FILE_ERROR"
