"""
YGO Prices — Record Mapper

Turns unwrapped ``data`` payloads into Card / CardPrices / PriceData records.

"Not found" is decided by an explicit presence check: a success envelope
whose payload is null, empty, or has no ``name`` key describes no card. A
card whose name is the empty string is still a card.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from ygoprices.errors import NotFoundError, ParseError
from ygoprices.models import Card, CardPrices, PriceData
from ygoprices.pipeline.envelope import listing_prices

logger = structlog.get_logger(__name__)


def is_card_payload(data: Any) -> bool:
    """True when ``data`` describes a real card."""
    return isinstance(data, dict) and data.get("name") is not None


def map_card(data: Any, name: str) -> Card:
    """
    Map a ``card_data`` payload to a Card (without image).

    Args:
        data: Unwrapped ``data`` payload.
        name: The name that was looked up, for error reporting.

    Raises:
        NotFoundError: the payload describes no card.
        ParseError: the payload is a card but does not fit the record.
    """
    if data is not None and not isinstance(data, dict):
        raise ParseError(f"Card data for {name!r} is {type(data).__name__}, expected an object")
    if not is_card_payload(data):
        logger.info("ygoprices_card_not_found", name=name)
        raise NotFoundError(name)

    try:
        return Card.model_validate(data)
    except ValidationError as e:
        logger.error("ygoprices_invalid_card", name=name, errors=e.error_count())
        raise ParseError(f"Card data for {name!r} does not match the card schema: {e}") from e


def price_entries(data: Any, name: str) -> list[dict[str, Any]]:
    """Validate the ``get_card_prices`` payload shape; null means no listings."""
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise ParseError(f"Price data for {name!r} is not a list of listings")
    return data


def map_price_data(entry: dict[str, Any]) -> PriceData | None:
    """PriceData for one listing, or None when its nested status is not success."""
    prices = listing_prices(entry)
    if prices is None:
        return None
    try:
        return PriceData.model_validate(prices)
    except ValidationError:
        logger.warning("ygoprices_invalid_listing_prices", print_tag=entry.get("print_tag"))
        return None


def map_card_prices(entry: dict[str, Any], card: Card) -> CardPrices:
    """
    Map one listing entry to CardPrices with ``card`` attached.

    A listing without usable prices keeps a zero PriceData and
    ``prices_available=False``.
    """
    price_data = map_price_data(entry)
    if price_data is None:
        logger.info(
            "ygoprices_listing_price_unavailable",
            card=card.name,
            print_tag=entry.get("print_tag"),
        )

    fields = {key: entry[key] for key in ("name", "print_tag", "rarity", "listings") if key in entry}
    try:
        return CardPrices.model_validate(
            {
                **fields,
                "card": card,
                "price_data": price_data if price_data is not None else PriceData(),
                "prices_available": price_data is not None,
            }
        )
    except ValidationError as e:
        raise ParseError(f"Listing for {card.name!r} does not match the listing schema: {e}") from e


def map_all_card_prices(entries: list[dict[str, Any]], card: Card) -> list[CardPrices]:
    """Map every listing, in service order, sharing one Card."""
    return [map_card_prices(entry, card) for entry in entries]
