"""Main entry point with CLI."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

import orjson

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config, Config
from src.logging_conf import setup_logging
from src.fetch.client import FetchClient
from src.jobs.trigger import KattehjemTrigger, TriggerHelpers
from src.parse.models import FilterOptions

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Inges Kattehjem adoption listing")

    # Filters
    parser.add_argument(
        "--tag",
        action="append",
        default=None,
        help="Only cats with this tag (repeatable, all must match)",
    )
    parser.add_argument(
        "--min-age",
        type=float,
        default=None,
        help="Minimum age in months",
    )
    parser.add_argument(
        "--max-age",
        type=float,
        default=None,
        help="Maximum age in months",
    )
    parser.add_argument(
        "--include-sold",
        action="store_true",
        help="Keep cats that have already been adopted",
    )
    parser.add_argument(
        "--strict-max-age",
        action="store_true",
        help="Compare --max-age against the maximum instead of the minimum bound",
    )

    # Output
    parser.add_argument(
        "--keys",
        action="store_true",
        help="Add the identity key of each cat to the output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging",
    )

    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> FilterOptions:
    """Merge CLI flags over the configured defaults."""
    defaults = Config.default_filter_options()
    return FilterOptions(
        tags=args.tag if args.tag is not None else defaults.tags,
        min_age_in_months=args.min_age if args.min_age is not None else defaults.min_age_in_months,
        max_age_in_months=args.max_age if args.max_age is not None else defaults.max_age_in_months,
        only_available=False if args.include_sold else defaults.only_available,
        strict_max_age=args.strict_max_age or defaults.strict_max_age,
    )


async def list_cats(options: FilterOptions, with_keys: bool = False) -> list[dict]:
    """Run the trigger once and return the cats as JSON-ready dicts."""
    async with FetchClient() as client:
        trigger = KattehjemTrigger(TriggerHelpers(http=client), options)
        cats = await trigger.run()

    rows = []
    for cat in cats:
        row = cat.model_dump(mode="json")
        if with_keys:
            row["key"] = trigger.get_item_key(cat)
        rows.append(row)
    return rows


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        Config.validate()
        options = build_options(args)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info(f"Listing cats from {config.LISTING_URL}")
    logger.info(f"Filters: {options.model_dump()}")

    try:
        rows = asyncio.run(list_cats(options, with_keys=args.keys))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    logger.info(f"{len(rows)} cats after filtering")
    sys.stdout.write(orjson.dumps(rows, option=orjson.OPT_INDENT_2).decode() + "\n")


if __name__ == "__main__":
    main()
