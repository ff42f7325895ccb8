"""
Models package — export all record types.
"""

from ygoprices.models.card import Card, CardType
from ygoprices.models.prices import CardPrices, PriceData

__all__ = ["Card", "CardPrices", "CardType", "PriceData"]
