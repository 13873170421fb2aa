"""Command-line entry point for Mercdex."""

import argparse
import logging
import sys
from pathlib import Path

import structlog

from mercdex.config import Settings, get_settings
from mercdex.display import format_character, format_filter_options, format_roster
from mercdex.errors import MercdexError
from mercdex.session import BrowserSession

logger = structlog.get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog from settings.

    Logs go to stderr so rendered output on stdout stays clean.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    argparser = argparse.ArgumentParser(description="Mercdex mercenary roster browser")
    argparser.add_argument("name", nargs="?", help="Mercenary to show in detail")
    argparser.add_argument("--data-dir", type=Path, help="Directory holding mercs.json")
    argparser.add_argument("--attack-type", default="", help="Only highlight this attack type")
    argparser.add_argument("--faction", default="", help="Only highlight this faction")
    argparser.add_argument("--subclass", default="", help="Only highlight this subclass")
    argparser.add_argument("--level", "-l", type=int, default=1, help="Level (1-based)")
    argparser.add_argument("--reboot", "-r", type=int, default=0, help="Reboot count")
    argparser.add_argument(
        "--options", action="store_true", help="List the selectable filter values"
    )
    argparser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return argparser


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name. If None, uses sys.argv.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)
    use_color = not args.no_color

    try:
        session = BrowserSession.from_data_dir(args.data_dir, settings)

        session.set_filter("attackType", args.attack_type)
        session.set_filter("faction", args.faction)
        session.set_filter("subclass", args.subclass)

        if args.options:
            print(format_filter_options(session.filter_options))
        elif args.name:
            session.select(args.name)
            session.set_progression(level=args.level, reboot=args.reboot)
            print(
                format_character(
                    session.selected,
                    session.stats(),
                    session.skills(),
                    session.selection,
                    use_color,
                )
            )
        else:
            print(format_roster(session.roster, session.matching_names(), use_color))

    except MercdexError as e:
        logger.error("mercdex_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
