"""
YGO Prices — Card record

Static metadata for a single named card, mapped from the ``data`` object of
the ``card_data/{name}`` endpoint. Artwork bytes are attached afterwards from
``card_image/{name}``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Stat values the service uses for "no number printed"
_ABSENT_STATS = ("", "?", "-")


class CardType(str, Enum):
    """Top-level card category."""
    TRAP = "Trap"
    SPELL = "Spell"
    MONSTER = "Monster"


class Card(BaseModel):
    """
    Immutable card metadata.

    Built from upstream keys (``text``, ``card_type``, ``family`` ...) via
    aliases; Python field names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Card name, the lookup key")
    description: str = Field(default="", alias="text", description="Card text")
    card_type: CardType = Field(..., description="Trap, Spell or Monster")
    monster_type: str | None = Field(default=None, alias="type", description="e.g. 'Normal Monster'")
    attribute: str | None = Field(default=None, alias="family", description="e.g. 'Dark'")
    attack: int | None = Field(default=None, alias="atk")
    defense: int | None = Field(default=None, alias="def")
    level: int | None = Field(default=None)
    extra_properties: str | None = Field(default=None, alias="property", description="Spell/Trap property")
    image: bytes | None = Field(default=None, repr=False, description="Raw artwork bytes")

    @field_validator("card_type", mode="before")
    @classmethod
    def parse_card_type(cls, v: Any) -> Any:
        """Match the category case-insensitively; the live service sends 'monster'."""
        if isinstance(v, str):
            wanted = v.strip().lower()
            for member in CardType:
                if member.value.lower() == wanted:
                    return member
        return v

    @field_validator("attack", "defense", "level", mode="before")
    @classmethod
    def parse_stat(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, str) and v.strip() in _ABSENT_STATS:
            return None
        return v

    @field_validator("description", mode="before")
    @classmethod
    def parse_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_monster(self) -> bool:
        return self.card_type is CardType.MONSTER

    @property
    def has_image(self) -> bool:
        return bool(self.image)

    def with_image(self, image: bytes) -> Card:
        """Return a copy of this card carrying ``image``."""
        return self.model_copy(update={"image": image})
