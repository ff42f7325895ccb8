"""
YGO Prices — async client for the yugiohprices.com card database.

Usage:
    from ygoprices import YugiohPricesSearcher

    async with YugiohPricesSearcher() as searcher:
        card = await searcher.get_card_by_name("Dark Magician")
"""

from ygoprices.errors import (
    EmptyResultError,
    NotFoundError,
    ParseError,
    ServiceError,
    TransportError,
    YugiohPricesError,
)
from ygoprices.models import Card, CardPrices, CardType, PriceData
from ygoprices.searcher import YugiohPricesSearcher

__all__ = [
    "Card",
    "CardPrices",
    "CardType",
    "EmptyResultError",
    "NotFoundError",
    "ParseError",
    "PriceData",
    "ServiceError",
    "TransportError",
    "YugiohPricesError",
    "YugiohPricesSearcher",
]
