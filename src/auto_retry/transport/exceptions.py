"""
Custom exceptions for the transport layer.

These exceptions let the retry engine distinguish failures that happened
at the network level (the request may never have reached the server) from
everything else. Only ``TransportError`` and its subclasses are retried.
"""


class TransportClientError(Exception):
    """
    Base exception for all transport errors.

    All transport-specific exceptions inherit from this to allow catching
    any transport-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(TransportClientError):
    """
    Raised when the request could not complete at the network level.

    Includes connection failures, DNS errors, dropped connections, etc.
    This error type triggers unbounded retries with exponential backoff.
    """
    pass


class TransportTimeoutError(TransportError):
    """
    Raised when the request exceeds the client timeout.
    """
    pass


class InvalidResponseError(TransportClientError):
    """
    Raised when the server answered with a body that is not a valid API
    response (e.g. an HTML error page from a proxy).

    Not retried: the server was reached, so this is not a network failure.
    """
    pass
