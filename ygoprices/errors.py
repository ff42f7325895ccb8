"""
YGO Prices — Error taxonomy.

Every failure surfaces to the caller as its own type. Nothing here is
recovered internally; per-listing price failures are not errors at all
(they degrade to an empty PriceData, see pipeline/mapper.py).
"""

from __future__ import annotations


class YugiohPricesError(Exception):
    """Base class for all client errors."""


class TransportError(YugiohPricesError):
    """Network-level failure: DNS, connection, timeout or an unreadable body."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ParseError(YugiohPricesError):
    """The response body is not JSON, or not shaped like the service's envelope."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class ServiceError(YugiohPricesError):
    """A well-formed envelope with a non-success status.

    ``message`` is the upstream ``message`` field, verbatim.
    """

    def __init__(self, message: str, status: str | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


class NotFoundError(YugiohPricesError):
    """Success envelope whose payload does not describe a real card."""

    def __init__(self, name: str):
        super().__init__(f"Card not found: {name!r}")
        self.name = name


class EmptyResultError(YugiohPricesError):
    """Success envelope with zero price listings where one was required."""

    def __init__(self, name: str):
        super().__init__(f"No price listings for card: {name!r}")
        self.name = name
