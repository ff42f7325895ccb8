"""
YGO Prices — Demonstration entrypoint

Looks up each given card name and prints the result, or the error class and
message when a lookup fails.

Run via:
    python -m ygoprices.main "Dark Magician" m8
    python -m ygoprices.main "Blue-Eyes White Dragon" --prices
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import structlog

from ygoprices.config import settings
from ygoprices.errors import YugiohPricesError
from ygoprices.models import Card, CardPrices
from ygoprices.searcher import YugiohPricesSearcher
from ygoprices.utils.money import format_shift, format_usd

DEFAULT_NAMES = ["m8", "Dark Magician"]


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        json_output: Render JSON lines instead of the console format.
    """
    level = getattr(logging, log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def describe_card(card: Card) -> str:
    stats = ""
    if card.is_monster:
        stats = f" [{card.attribute or '?'}] Lv{card.level} ATK {card.attack} / DEF {card.defense}"
    return f"{card.name} ({card.card_type.value}){stats}. {card.description}"


def describe_prices(prices: CardPrices) -> str:
    head = f"{prices.print_tag} {prices.set_name} ({prices.rarity})"
    if not prices.prices_available:
        return f"{head}: no price data"
    p = prices.price_data
    return (
        f"{head}: low {format_usd(p.low_price)} / avg {format_usd(p.average_price)}"
        f" / high {format_usd(p.high_price)}, 7d {format_shift(p.shift_7)}"
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up Yu-Gi-Oh! cards on yugiohprices.com.")
    parser.add_argument("names", nargs="*", default=DEFAULT_NAMES, help="Case-sensitive card names")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--prices", action="store_true", help="Show the first price listing")
    group.add_argument("--all-prices", action="store_true", help="Show every price listing")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    """Run each lookup in turn. Returns 1 if any lookup failed."""
    failed = False
    async with YugiohPricesSearcher() as searcher:
        for name in args.names:
            print(f"-- {name} --")
            try:
                if args.all_prices:
                    listings = await searcher.get_all_card_prices_by_name(name)
                    if not listings:
                        print("no listings")
                    for listing in listings:
                        print(describe_prices(listing))
                elif args.prices:
                    print(describe_prices(await searcher.get_card_prices_by_name(name)))
                else:
                    print(describe_card(await searcher.get_card_by_name(name)))
            except YugiohPricesError as e:
                failed = True
                print(f"{type(e).__name__}: {e}")
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(log_level=args.log_level, json_output=settings.LOG_JSON)
    return asyncio.run(run(args))


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    sys.exit(main())
