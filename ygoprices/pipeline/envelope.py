"""
YGO Prices — Envelope Parser

Every JSON response from the service is wrapped as

    {"status": "success", "data": ...}
    {"status": "fail", "message": "..."}

and each price listing carries a nested envelope of the same shape under
``price_data``. This module unwraps both levels.

JSON numbers with a fraction are parsed straight to Decimal, so "12.34"
stays 12.34 all the way into PriceData.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from ygoprices.config import STATUS_SUCCESS
from ygoprices.errors import ParseError, ServiceError

logger = structlog.get_logger(__name__)

# Body excerpt kept on ParseError for debugging
_BODY_EXCERPT = 200


# ---------------------------------------------------------------------------
# Pydantic Envelope Models
# ---------------------------------------------------------------------------


class Envelope(BaseModel):
    """Top-level response wrapper."""

    status: str
    message: str | None = None
    data: Any = None

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS


class NestedPrices(BaseModel):
    """``price_data.data`` of one listing."""

    prices: dict[str, Any] | None = None


class NestedPriceEnvelope(BaseModel):
    """``price_data`` of one listing."""

    status: str
    data: NestedPrices | None = None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_json(body: str) -> Any:
    """Parse a response body, keeping decimal fractions exact."""
    try:
        return json.loads(body, parse_float=Decimal)
    except json.JSONDecodeError as e:
        logger.error("ygoprices_invalid_json", error=str(e), body=body[:_BODY_EXCERPT])
        raise ParseError(f"Response is not valid JSON: {e}", body=body[:_BODY_EXCERPT]) from e


def unwrap(body: str) -> Any:
    """
    Parse an envelope and return its ``data`` payload.

    Raises:
        ParseError: body is not JSON or has no string ``status``.
        ServiceError: ``status`` is anything but "success"; carries ``message`` verbatim.
    """
    document = parse_json(body)
    try:
        envelope = Envelope.model_validate(document)
    except ValidationError as e:
        logger.error("ygoprices_invalid_envelope", body=body[:_BODY_EXCERPT])
        raise ParseError("Response is not a status envelope", body=body[:_BODY_EXCERPT]) from e

    if not envelope.is_success:
        message = envelope.message if envelope.message is not None else ""
        logger.warning("ygoprices_service_error", status=envelope.status, message=message)
        raise ServiceError(message, status=envelope.status)

    return envelope.data


def listing_prices(entry: dict[str, Any]) -> dict[str, Any] | None:
    """
    Return ``price_data.data.prices`` of one listing, or None when the nested
    status is not success or the nested document is malformed.

    Never raises: one listing without prices must not fail the whole request.
    """
    raw = entry.get("price_data")
    if raw is None:
        return None
    try:
        nested = NestedPriceEnvelope.model_validate(raw)
    except ValidationError:
        logger.warning("ygoprices_invalid_listing_price_data", print_tag=entry.get("print_tag"))
        return None

    if nested.status != STATUS_SUCCESS or nested.data is None:
        return None
    return nested.data.prices
