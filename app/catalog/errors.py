"""Errors raised while talking to the upstream book search API."""


class BookSearchError(RuntimeError):
    pass


class TransportError(BookSearchError):
    """The upstream could not be reached or answered with a non-200 status."""


class DecodeError(BookSearchError):
    """The upstream answered, but the body is not a volumes payload."""
