"""
YGO Prices — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- Upstream URLs for respx routes
- Mock API payloads for the three endpoints
- Async test support via pytest-asyncio (asyncio_mode = auto in pyproject.toml)
"""

from __future__ import annotations

from typing import Any

import pytest

from ygoprices.config import CARD_DATA_PATH, CARD_IMAGE_PATH, CARD_PRICES_PATH

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

pytest_plugins = ("pytest_asyncio",)

BASE_URL = "http://yugiohprices.com/api/"
CARD_DATA_URL = BASE_URL + CARD_DATA_PATH
CARD_PRICES_URL = BASE_URL + CARD_PRICES_PATH
CARD_IMAGE_URL = BASE_URL + CARD_IMAGE_PATH

FAKE_IMAGE = b"\x89PNG\r\n\x1a\nfake-artwork"


# ---------------------------------------------------------------------------
# Payload Builders
# ---------------------------------------------------------------------------


def card_payload(**overrides: Any) -> dict[str, Any]:
    """card_data envelope for Dark Magician, with optional field overrides."""
    data = {
        "name": "Dark Magician",
        "text": "The ultimate wizard in terms of attack and defense.",
        "card_type": "monster",
        "type": "Spellcaster / Normal",
        "family": "dark",
        "atk": 2500,
        "def": 2100,
        "level": 7,
        "property": None,
    }
    data.update(overrides)
    return {"status": "success", "data": data}


def prices_block(**overrides: Any) -> dict[str, Any]:
    prices = {
        "high": 45.99,
        "average": 12.34,
        "low": 3.5,
        "updated_at": "2016-08-10 21:09:11 UTC",
        "shift": 0,
        "shift_3": 1.25,
        "shift_7": -2.5,
        "shift_30": 10,
        "shift_90": 0,
        "shift_180": 0,
        "shift_365": -15.75,
    }
    prices.update(overrides)
    return {"status": "success", "data": {"listings": [], "prices": prices}}


def listing(print_tag: str, set_name: str = "Legend of Blue Eyes White Dragon",
            rarity: str = "Ultra Rare", price_data: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "name": set_name,
        "print_tag": print_tag,
        "rarity": rarity,
        "listings": [],
        "price_data": price_data if price_data is not None else prices_block(),
    }


def prices_payload(*entries: dict[str, Any]) -> dict[str, Any]:
    return {"status": "success", "data": list(entries)}


def failure_payload(message: str = "No cards matching this name were found in our database.") -> dict[str, Any]:
    return {"status": "fail", "message": message}


@pytest.fixture
def dark_magician_payload() -> dict[str, Any]:
    return card_payload()


@pytest.fixture
def three_listings_payload() -> dict[str, Any]:
    return prices_payload(
        listing("LOB-005"),
        listing("SDY-006", set_name="Starter Deck: Yugi", rarity="Common",
                price_data={"status": "fail", "message": "Unable to get price data"}),
        listing("YGLD-ENA03", set_name="Yugi's Legendary Decks", rarity="Common",
                price_data=prices_block(high="1.99", average="0.89", low="0.25")),
    )
