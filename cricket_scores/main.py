"""Command line entry point for cricket scores"""
import argparse
import sys
from typing import List, Optional

from colorama import Fore, Style, init

from .config import Config
from .errors import ConfigError, DeserializationError, FetchError
from .services.cricbuzz_client import CricbuzzClient
from .services.match_service import MatchService
from .services.score_fetcher import SCHEDULE_KINDS, ScoreFetcher
from .utils.logger import setup_logger

logger = setup_logger(__name__)

IPL_SERIES = "Indian Premier League"

FETCH_MESSAGES = {
    "live": "Fetching live cricket scores...",
    "recent": "Fetching recent cricket matches...",
    "upcoming": "Fetching upcoming cricket matches...",
    "schedule": "Fetching cricket schedule...",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per listing"""
    parser = argparse.ArgumentParser(
        prog="cricket-scores",
        description="Live scores, results and fixtures from Cricbuzz"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    helps = {
        "live": "Get live cricket scores",
        "recent": "Get recent cricket matches",
        "upcoming": "Get upcoming cricket matches",
        "schedule": "Get the cricket schedule",
    }
    for name, help_text in helps.items():
        sub = subparsers.add_parser(name, help=help_text)
        series = sub.add_mutually_exclusive_group()
        series.add_argument(
            "--series",
            type=str,
            default=None,
            help="Only show matches whose series name contains this text"
        )
        series.add_argument(
            "--ipl",
            action="store_true",
            help=f"Only show {IPL_SERIES} matches"
        )
        if name == "schedule":
            sub.add_argument(
                "--kind",
                choices=SCHEDULE_KINDS,
                default="international",
                help="Schedule to fetch (default: international)"
            )

    return parser


def create_fetcher(config: Config) -> ScoreFetcher:
    """Wire up the API client and services from configuration"""
    client = CricbuzzClient(
        api_key=config.api_key,
        api_host=config.api_host,
        base_url=config.base_url,
        timeout=config.request_timeout
    )
    return ScoreFetcher(
        client,
        match_service=MatchService(skip_malformed=config.skip_malformed),
        timezone=config.timezone
    )


def run(args: argparse.Namespace, fetcher: ScoreFetcher) -> int:
    """Fetch, filter and print one listing; returns the exit status"""
    series = IPL_SERIES if args.ipl else args.series
    print(f"{Fore.YELLOW}{FETCH_MESSAGES[args.command]}{Style.RESET_ALL}")

    try:
        if args.command == "schedule":
            items = fetcher.list_schedule(args.kind)
            items = fetcher.match_service.filter_by_series(items, series)
            print(fetcher.render_schedule(items))
            return 0

        if args.command == "live":
            records = fetcher.list_live()
            if not records:
                print(f"{Fore.RED}No live matches right now.{Style.RESET_ALL}")
                return 0
        elif args.command == "recent":
            records = fetcher.list_recent()
        else:
            records = fetcher.list_upcoming()

        records = fetcher.match_service.filter_by_series(records, series)
        print(fetcher.render(records))
        return 0

    except FetchError as e:
        logger.debug("Request failed", exc_info=True)
        print(f"{Fore.RED}Could not fetch matches: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 1
    except DeserializationError as e:
        logger.debug("Unexpected response", exc_info=True)
        print(f"{Fore.RED}Could not read API response: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    init()
    args = build_parser().parse_args(argv)

    try:
        config = Config()
    except ConfigError as e:
        logger.debug("Configuration error", exc_info=True)
        print(f"{Fore.RED}Configuration error: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 1

    return run(args, create_fetcher(config))


if __name__ == "__main__":
    sys.exit(main())
