"""Command-line entry point.

Usage:
    gempa latest
    gempa recent --json
    gempa significant --min-magnitude 6
    gempa felt

Environment:
    GEMPA_CONFIG_PATH: Path to YAML config file
    LOG_LEVEL: Logging level (default: WARNING, INFO with --verbose)
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace

from gempa.core.config import SIGNIFICANT_MAGNITUDE, Feed
from gempa.core.earthquake import filter_by_magnitude
from gempa.core.errors import GempaError
from gempa.core.formatter import format_record_detail, format_record_summary, record_to_dict
from gempa.core.geo import record_coordinate
from gempa.shell.bmkg_client import BMKGClient
from gempa.shell.config_loader import load_config, load_config_from_env


logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    default_level = "INFO" if verbose else "WARNING"
    log_level = os.environ.get("LOG_LEVEL", default_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gempa",
        description="Show earthquake data from the BMKG public feeds",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unparseable coordinates instead of using (0, 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    parser.add_argument(
        "feed",
        choices=[feed.value for feed in Feed],
        help="Feed to fetch",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        default=None,
        help=f"Minimum magnitude to show (significant defaults to {SIGNIFICANT_MAGNITUDE})",
    )
    return parser


def run(args: argparse.Namespace, client: BMKGClient | None = None) -> int:
    """Fetch the requested feed and print it.

    An injected client keeps its own configuration; --config and --strict
    only apply to the client built here.

    Returns:
        Process exit code
    """
    if client is None:
        config = load_config_from_env(load_config(args.config))
        if args.strict:
            config = replace(config, strict_coordinates=True)
        client = BMKGClient(config)

    feed = Feed(args.feed)

    try:
        if feed is Feed.LATEST:
            latest = client.fetch_latest()
            if args.json:
                print(json.dumps(record_to_dict(latest.record, latest.coordinate), indent=2))
            else:
                print(format_record_detail(latest.record, latest.coordinate))
            return 0

        records = client.fetch_feed(feed)

        min_magnitude = args.min_magnitude
        if feed is Feed.SIGNIFICANT and min_magnitude is None:
            min_magnitude = SIGNIFICANT_MAGNITUDE
        records = filter_by_magnitude(records, min_magnitude=min_magnitude)

        if args.json:
            payload = [
                record_to_dict(r, record_coordinate(r, strict=client.config.strict_coordinates))
                for r in records
            ]
            print(json.dumps(payload, indent=2))
        else:
            for record in records:
                print(format_record_summary(record))

    except GempaError as e:
        logger.error("%s: %s", e.error_code, e)
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return run(args)
    except GempaError as e:
        logger.error("%s: %s", e.error_code, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
