# ABOUTME: Chatter entry point - replays recorded chat events into the chat logs
# ABOUTME: Validates configuration, runs the plugin against a JSON lines file or stdin

import argparse
import logging
import sys
from pathlib import Path

from .chat.clock import Clock
from .config import get_settings
from .plugin import ChatterPlugin
from .replay import ReplayChatSource, read_events

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chatter",
        description="Write recorded chat events to Chatter log files.",
    )
    parser.add_argument(
        "events",
        nargs="?",
        type=Path,
        help="JSON lines file with one chat event per line (default: stdin)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for Chatter."""
    args = parse_args(argv)
    logger.info("Starting Chatter - chat log writer")

    if args.events is not None and not args.events.is_file():
        logger.error(f"Chat events file does not exist: {args.events}")
        return 1

    # Load and validate settings
    try:
        settings = get_settings()
    except Exception as e:
        logger.error(f"Failed to load settings: {e}")
        return 1

    logging.getLogger().setLevel(settings.log_level)

    # Check for configuration errors
    errors = settings.validate_ready()
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        return 1

    try:
        configuration = settings.get_configuration()
    except ValueError as e:
        logger.error(f"Failed to load chat log configuration: {e}")
        return 1

    logger.info(f"Log directory: {configuration.log_directory}")
    logger.info(f"Time zone: {settings.timezone}")

    source = ReplayChatSource()
    with ChatterPlugin(
        configuration,
        source,
        clock=Clock(settings.timezone),
        default_home_world=settings.default_home_world,
    ) as plugin:
        if args.events is None:
            count = source.replay(read_events(sys.stdin))
        else:
            with args.events.open(encoding="utf-8") as events:
                count = source.replay(read_events(events))
        logger.info(f"Replayed {count} chat event(s)")
        plugin.dump_logs()

    return 0


if __name__ == "__main__":
    sys.exit(main())
