"""
Tests for the record models (ygoprices/models/).

Covers:
- Card alias mapping, case-insensitive card_type, absent stats
- PriceData Decimal parsing, zero defaults, timestamps
- CardPrices labels and listings coercion
- Immutability
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ygoprices.models import Card, CardPrices, CardType, PriceData


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------


def test_card_maps_upstream_keys() -> None:
    """Every upstream key lands on its domain field."""
    card = Card.model_validate(
        {
            "name": "Dark Magician",
            "text": "The ultimate wizard.",
            "card_type": "Monster",
            "type": "Normal Monster",
            "family": "Dark",
            "atk": 2500,
            "def": 2100,
            "level": 7,
            "property": None,
        }
    )

    assert card.name == "Dark Magician"
    assert card.description == "The ultimate wizard."
    assert card.card_type is CardType.MONSTER
    assert card.monster_type == "Normal Monster"
    assert card.attribute == "Dark"
    assert card.attack == 2500
    assert card.defense == 2100
    assert card.level == 7
    assert card.extra_properties is None
    assert card.image is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("trap", CardType.TRAP),
        ("SPELL", CardType.SPELL),
        (" Monster ", CardType.MONSTER),
    ],
)
def test_card_type_is_case_insensitive(raw: str, expected: CardType) -> None:
    card = Card.model_validate({"name": "X", "card_type": raw})
    assert card.card_type is expected


def test_unknown_card_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Card.model_validate({"name": "X", "card_type": "Skill"})


def test_spell_card_has_no_stats() -> None:
    card = Card.model_validate(
        {
            "name": "Pot of Greed",
            "text": "Draw 2 cards.",
            "card_type": "spell",
            "type": None,
            "family": None,
            "atk": None,
            "def": None,
            "level": None,
            "property": "Normal",
        }
    )

    assert card.card_type is CardType.SPELL
    assert card.extra_properties == "Normal"
    assert (card.attack, card.defense, card.level) == (None, None, None)
    assert card.is_monster is False


def test_question_mark_stats_are_absent() -> None:
    """'?' and '' stats are treated as not printed; numeric strings are coerced."""
    card = Card.model_validate(
        {"name": "Obelisk", "card_type": "monster", "atk": "?", "def": "", "level": "10"}
    )

    assert card.attack is None
    assert card.defense is None
    assert card.level == 10


def test_null_text_becomes_empty_description() -> None:
    card = Card.model_validate({"name": "X", "text": None, "card_type": "trap"})
    assert card.description == ""


def test_card_accepts_python_field_names() -> None:
    card = Card(name="Mirror Force", card_type=CardType.TRAP, extra_properties="Normal")
    assert card.extra_properties == "Normal"


def test_with_image_returns_new_card() -> None:
    card = Card(name="Dark Magician", card_type=CardType.MONSTER)
    with_art = card.with_image(b"png")

    assert with_art.image == b"png"
    assert with_art.has_image is True
    assert card.image is None


def test_card_is_frozen() -> None:
    card = Card(name="Dark Magician", card_type=CardType.MONSTER)
    with pytest.raises(ValidationError):
        card.name = "Dark Magician Girl"


# ---------------------------------------------------------------------------
# PriceData
# ---------------------------------------------------------------------------


def test_price_data_maps_upstream_keys() -> None:
    prices = PriceData.model_validate(
        {
            "high": "45.99",
            "average": "12.34",
            "low": "3.50",
            "updated_at": "2016-08-10 21:09:11 UTC",
            "shift": "0.5",
            "shift_3": "1",
            "shift_7": "-2.5",
            "shift_30": "10",
            "shift_90": "0",
            "shift_180": "7.25",
            "shift_365": "-15.75",
        }
    )

    assert prices.high_price == Decimal("45.99")
    assert prices.average_price == Decimal("12.34")
    assert prices.low_price == Decimal("3.50")
    assert prices.last_updated == datetime(2016, 8, 10, 21, 9, 11, tzinfo=timezone.utc)
    assert prices.shift == Decimal("0.5")
    assert prices.shift_3 == Decimal("1")
    assert prices.shift_7 == Decimal("-2.5")
    assert prices.shift_30 == Decimal("10")
    assert prices.shift_90 == Decimal("0")
    assert prices.shift_180 == Decimal("7.25")
    assert prices.shift_365 == Decimal("-15.75")


def test_price_data_float_keeps_printed_digits() -> None:
    """A float 12.34 becomes Decimal('12.34'), not 12.339999..."""
    prices = PriceData.model_validate({"average": 12.34})
    assert prices.average_price == Decimal("12.34")


def test_price_data_defaults_to_zero() -> None:
    prices = PriceData()

    assert prices.high_price == Decimal("0")
    assert prices.shift_365 == Decimal("0")
    assert prices.last_updated is None
    assert prices.is_empty() is True


@pytest.mark.parametrize("raw", [None, "", "N/A", "not-a-number"])
def test_price_data_unusable_values_become_zero(raw: object) -> None:
    prices = PriceData.model_validate({"high": raw})
    assert prices.high_price == Decimal("0")


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-inf", "sNaN", Decimal("NaN"), float("inf")])
def test_price_data_non_finite_value_zeroes_only_that_field(raw: object) -> None:
    """A non-finite shift becomes zero while the real prices survive."""
    prices = PriceData.model_validate(
        {"high": "45.99", "average": "12.34", "low": "3.50", "shift_365": raw}
    )

    assert prices.shift_365 == Decimal("0")
    assert prices.high_price == Decimal("45.99")
    assert prices.average_price == Decimal("12.34")
    assert prices.low_price == Decimal("3.50")


def test_price_data_with_any_value_is_not_empty() -> None:
    assert PriceData.model_validate({"shift_90": "0.01"}).is_empty() is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2016-08-10 21:09:11 -0400", datetime(2016, 8, 10, 21, 9, 11, tzinfo=timezone(timedelta(hours=-4)))),
        ("2016-08-10 21:09:11", datetime(2016, 8, 10, 21, 9, 11, tzinfo=timezone.utc)),
        ("2016-08-10T21:09:11", datetime(2016, 8, 10, 21, 9, 11, tzinfo=timezone.utc)),
        ("2016-08-10T21:09:11+00:00", datetime(2016, 8, 10, 21, 9, 11, tzinfo=timezone.utc)),
        ("yesterday", None),
    ],
)
def test_price_data_timestamp_formats(raw: str, expected: datetime | None) -> None:
    assert PriceData.model_validate({"updated_at": raw}).last_updated == expected


# ---------------------------------------------------------------------------
# CardPrices
# ---------------------------------------------------------------------------


def test_card_prices_labels_and_listings() -> None:
    card = Card(name="Dark Magician", card_type=CardType.MONSTER)
    prices = CardPrices.model_validate(
        {
            "name": "Legend of Blue Eyes White Dragon",
            "print_tag": "LOB-005",
            "rarity": None,
            "listings": ["abc", 42],
            "card": card,
        }
    )

    assert prices.set_name == "Legend of Blue Eyes White Dragon"
    assert prices.print_tag == "LOB-005"
    assert prices.rarity == ""
    assert prices.listings == ("abc", "42")
    assert prices.card is card
    assert prices.prices_available is False
    assert prices.price_data.is_empty()


def test_card_prices_null_listings() -> None:
    card = Card(name="Dark Magician", card_type=CardType.MONSTER)
    prices = CardPrices.model_validate({"listings": None, "card": card})
    assert prices.listings == ()


def test_card_prices_requires_card() -> None:
    with pytest.raises(ValidationError):
        CardPrices.model_validate({"name": "LOB", "print_tag": "LOB-005"})


def test_price_data_timestamps_are_comparable() -> None:
    """Zoned and zone-less timestamps from different listings compare without error."""
    zoned = PriceData.model_validate({"updated_at": "2016-08-10 21:09:11 -0400"})
    plain = PriceData.model_validate({"updated_at": "2016-08-10 21:09:11"})

    assert plain.last_updated.tzinfo is not None
    assert plain.last_updated < zoned.last_updated
