"""
YGO Prices — Searcher

Async facade over the yugiohprices.com API: transport -> envelope -> mapper
for each lookup. Price lookups embed the full Card, fetched once per call
and shared by every listing.

Usage:
    async with YugiohPricesSearcher() as searcher:
        card = await searcher.get_card_by_name("Dark Magician")
        listings = await searcher.get_all_card_prices_by_name("Dark Magician")
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from ygoprices.config import CARD_DATA_PATH, CARD_IMAGE_PATH, CARD_PRICES_PATH
from ygoprices.errors import EmptyResultError
from ygoprices.models import Card, CardPrices
from ygoprices.pipeline.envelope import unwrap
from ygoprices.pipeline.mapper import map_all_card_prices, map_card, map_card_prices, price_entries
from ygoprices.pipeline.transport import HttpTransport, build_path

logger = structlog.get_logger(__name__)


class YugiohPricesSearcher:
    """
    Card, price and image lookups by (case-sensitive) card name.

    Each call owns its request/response cycle; nothing is cached or shared
    between calls beyond the pooled HTTP connection.

    Raises (from every lookup):
        TransportError: the service could not be reached.
        ParseError: the response was not a valid envelope.
        ServiceError: the service answered with a non-success status.
        NotFoundError: the service answered success but described no card.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._transport = HttpTransport(base_url=base_url, timeout=timeout, client=client)

    async def __aenter__(self) -> YugiohPricesSearcher:
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._transport.__aexit__(*args)

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    async def get_card_by_name(self, name: str) -> Card:
        """
        Fetch a card's metadata and artwork.

        Args:
            name: Case-sensitive card name (e.g., "Dark Magician").

        Returns:
            Card with ``image`` attached.

        Raises:
            NotFoundError: no such card. No image request is made.
        """
        logger.info("ygoprices_fetch_card", name=name)

        body = await self._transport.fetch_text(build_path(CARD_DATA_PATH, name))
        card = map_card(unwrap(body), name)
        image = await self._transport.fetch_bytes(build_path(CARD_IMAGE_PATH, name))

        logger.info(
            "ygoprices_fetch_card_complete",
            name=name,
            card_type=card.card_type.value,
            image_bytes=len(image),
        )
        return card.with_image(image)

    async def get_all_card_prices_by_name(self, name: str) -> list[CardPrices]:
        """
        Fetch every price listing for a card.

        The card itself is looked up once and the same Card is attached to
        every listing.

        Returns:
            Listings in service order; an empty list when there are none.
        """
        logger.info("ygoprices_fetch_prices", name=name)

        body = await self._transport.fetch_text(build_path(CARD_PRICES_PATH, name))
        entries = price_entries(unwrap(body), name)
        card = await self.get_card_by_name(name)
        results = map_all_card_prices(entries, card)

        logger.info(
            "ygoprices_fetch_prices_complete",
            name=name,
            results_count=len(results),
            priced_count=sum(1 for r in results if r.prices_available),
        )
        return results

    async def get_card_prices_by_name(self, name: str) -> CardPrices:
        """
        Fetch the first price listing for a card, in service order.

        Raises:
            EmptyResultError: the service has no listings for the card.
        """
        logger.info("ygoprices_fetch_first_price", name=name)

        body = await self._transport.fetch_text(build_path(CARD_PRICES_PATH, name))
        entries = price_entries(unwrap(body), name)
        if not entries:
            logger.warning("ygoprices_no_listings", name=name)
            raise EmptyResultError(name)

        card = await self.get_card_by_name(name)
        result = map_card_prices(entries[0], card)

        logger.info(
            "ygoprices_fetch_first_price_complete",
            name=name,
            print_tag=result.print_tag,
            prices_available=result.prices_available,
        )
        return result
