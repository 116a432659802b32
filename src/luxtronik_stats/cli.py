"""Command-line interface for Luxtronik heat pump statistics."""

import argparse
import asyncio
import json
import logging
import sys

from luxtronik_stats.adapters.luxtronik import LuxtronikAdapter
from luxtronik_stats.config import settings
from luxtronik_stats.domain.configuration import bootstrap_collector_config, load_collector_config
from luxtronik_stats.domain.exceptions import CollectorError
from luxtronik_stats.services.mapper import map_points

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def setup_parser():
    """Set up command-line argument parser."""
    parser = argparse.ArgumentParser(description="Collect Luxtronik heat pump calculations")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("run", help="Run the collector daemon")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch the current calculations once")
    fetch_parser.add_argument("-p", "--points", action="store_true", help="Print the configured points instead")

    subparsers.add_parser("init-config", help="Write a sample points configuration")

    return parser


def fetch_data(points=False):
    """
    Fetch the current calculations and print them as JSON.

    Args:
        points: Print the mapped points instead of the raw calculations
    """
    adapter = LuxtronikAdapter(
        host=settings.LUXTRONIK_HOST,
        port=settings.LUXTRONIK_PORT,
        local_ip=settings.LUXTRONIK_LOCAL_IP,
        timeout=settings.LUXTRONIK_TIMEOUT,
    )
    try:
        calculations = asyncio.run(adapter.query_calculations())
        if points:
            config = load_collector_config(settings.POINTS_CONFIG_FILE)
            mapped = map_points(calculations, config.point_map, config.tag_map)
            print(json.dumps([p.model_dump(mode="json") for p in mapped], indent=2))
        else:
            print(json.dumps(calculations))
        return calculations
    except CollectorError as e:
        logger.error(f"Error fetching data: {e}")
        sys.exit(1)


def init_config():
    """Write the sample points configuration if none exists."""
    if bootstrap_collector_config(settings.POINTS_CONFIG_FILE):
        print(f"Sample configuration written to {settings.POINTS_CONFIG_FILE}")
    else:
        print(f"{settings.POINTS_CONFIG_FILE} already exists")


def main():
    """Main entry point for the CLI."""
    parser = setup_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    # Execute command
    if args.command == "run":
        from luxtronik_stats.entrypoints.daemon import run

        run()
    elif args.command == "fetch":
        fetch_data(args.points)
    elif args.command == "init-config":
        init_config()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
