"""
YGO Prices — Price records

PriceData is the ``price_data.data.prices`` object of one listing; CardPrices
is one listing (a print of the card in a given set) with its PriceData and
the full Card attached.

Money values are Decimal, never float.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ygoprices.models.card import Card

logger = structlog.get_logger(__name__)

_ZERO = Decimal("0")

# Formats seen from the service, tried before ISO-8601
_TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S",
)


def _parse_timestamp(value: str) -> datetime | None:
    """Parse a service timestamp; a value without a zone is taken as UTC."""
    text = value.strip()
    if text.endswith(" UTC"):
        text = text[: -len(" UTC")] + " +0000"
    parsed: datetime | None = None
    for fmt in _TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
            break
        except ValueError:
            continue
    if parsed is None:
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class PriceData(BaseModel):
    """
    Price summary for one listing.

    Numeric fields default to zero when the service omits them. Whether a
    listing had prices at all is carried on CardPrices.prices_available,
    since zero is also a possible price.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    high_price: Decimal = Field(default=_ZERO, alias="high", description="Highest price, USD")
    average_price: Decimal = Field(default=_ZERO, alias="average", description="Average price, USD")
    low_price: Decimal = Field(default=_ZERO, alias="low", description="Lowest price, USD")
    last_updated: datetime | None = Field(default=None, alias="updated_at")

    # Percentage change over trailing windows
    shift: Decimal = Field(default=_ZERO, description="Immediate shift")
    shift_3: Decimal = Field(default=_ZERO, description="3-day shift")
    shift_7: Decimal = Field(default=_ZERO, description="7-day shift")
    shift_30: Decimal = Field(default=_ZERO, description="30-day shift")
    shift_90: Decimal = Field(default=_ZERO, description="90-day shift")
    shift_180: Decimal = Field(default=_ZERO, description="180-day shift")
    shift_365: Decimal = Field(default=_ZERO, description="365-day shift")

    @field_validator(
        "high_price", "average_price", "low_price",
        "shift", "shift_3", "shift_7", "shift_30", "shift_90", "shift_180", "shift_365",
        mode="before",
    )
    @classmethod
    def parse_decimal(cls, v: Any) -> Decimal:
        """Convert price values to Decimal via str() so floats keep their printed digits."""
        if v is None or v == "" or v == "N/A":
            return _ZERO
        try:
            value = v if isinstance(v, Decimal) else Decimal(str(v))
        except (InvalidOperation, ValueError):
            logger.warning("ygoprices_invalid_decimal", value=str(v)[:50])
            return _ZERO
        if not value.is_finite():
            logger.warning("ygoprices_non_finite_decimal", value=str(v)[:50])
            return _ZERO
        return value

    @field_validator("last_updated", mode="before")
    @classmethod
    def parse_last_updated(cls, v: Any) -> Any:
        if v is None or v == "":
            return None
        if isinstance(v, datetime):
            return v
        parsed = _parse_timestamp(str(v))
        if parsed is None:
            logger.warning("ygoprices_invalid_timestamp", value=str(v)[:50])
        return parsed

    def is_empty(self) -> bool:
        """True when every numeric field is zero."""
        return all(
            getattr(self, field) == _ZERO
            for field in (
                "high_price", "average_price", "low_price",
                "shift", "shift_3", "shift_7", "shift_30", "shift_90", "shift_180", "shift_365",
            )
        )


class CardPrices(BaseModel):
    """One priced print of a card, with the full Card attached."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    set_name: str = Field(default="", alias="name", description="Set the print came from")
    print_tag: str = Field(default="", description="Set code of the print, e.g. 'LOB-005'")
    rarity: str = Field(default="")
    listings: tuple[str, ...] = Field(default=())
    card: Card
    price_data: PriceData = Field(default_factory=PriceData)
    prices_available: bool = Field(
        default=False, description="False when the service had no prices for this listing"
    )

    @field_validator("set_name", "print_tag", "rarity", mode="before")
    @classmethod
    def parse_label(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("listings", mode="before")
    @classmethod
    def parse_listings(cls, v: Any) -> tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, (str, int, Decimal)):
            return (str(v),)
        return tuple(str(item) for item in v)
