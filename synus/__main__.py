"""
Synus CLI entry point.

Provides command-line interface for running the bot and utility commands.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from synus import __version__
from synus.config.logging import get_logger, setup_logging
from synus.config.settings import Settings, load_settings
from synus.translation import (
    GoogleTranslateGateway,
    InvalidLanguageCode,
    NoTranslatableTarget,
    TranslationFailed,
    TranslationService,
    get_registry,
    parse_arguments,
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="synus",
        description="Discord bot for quick in-channel translation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Synus {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "run",
        help="Run the Discord bot",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    # Translate command (same argument syntax as the chat command, minus -m)
    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate text from the terminal, e.g. synus translate fr en Bonjour",
    )
    translate_parser.add_argument(
        "arguments",
        nargs="+",
        help="[from=auto] [to=en] query...",
    )

    languages_parser = subparsers.add_parser(
        "languages",
        help="List supported language codes",
    )
    languages_parser.add_argument(
        "--filter",
        default=None,
        help="Only show languages whose code or name contains this text",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== Synus Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Command Prefix: {settings.bot.command_prefix!r}")
    logger.info(f"Bot Token: {'Set' if settings.bot.token else 'Not set'}")
    logger.info(
        f"Allowed Channels: {settings.bot.allowed_channel_ids or 'all'}"
    )
    logger.info(f"\nDefault Source Language: {settings.translation.default_source}")
    logger.info(f"Default Target Language: {settings.translation.default_target}")
    logger.info(f"Monospace Tag: {settings.translation.monospace_tag}")
    logger.info(f"Translate Endpoints: {', '.join(settings.translation.service_urls)}")

    return 0


def cmd_run(settings: Settings) -> int:
    """Start the Discord bot."""
    logger = get_logger(__name__)

    if not settings.bot.token:
        logger.error(
            "Discord bot token not set. Add BOT__TOKEN=<your-token> to your .env file."
        )
        return 1

    from synus.bot import SynusBot

    bot = SynusBot(settings)
    logger.info(f"Starting {settings.bot.name}...")
    # log_handler=None: disable discord.py's default logging setup and use ours
    bot.run(settings.bot.token, log_handler=None)
    return 0


async def cmd_translate(args, settings: Settings) -> int:
    """
    Translate text from the command line.

    Uses the same parser, interpreter and formatter as the chat command, so
    this doubles as a quick check of the provider without a Discord token.
    There is no channel, so a query is required.
    """
    logger = get_logger(__name__)

    arguments = parse_arguments(
        " ".join(args.arguments),
        default_source=settings.translation.default_source,
        default_target=settings.translation.default_target,
    )

    try:
        async with GoogleTranslateGateway(settings.translation.service_urls) as gateway:
            service = TranslationService(registry=get_registry(), gateway=gateway)
            response = await service.translate(arguments)
    except InvalidLanguageCode as e:
        logger.error(f"{e.display_code} is not a valid {e.role} language code.")
        return 1
    except NoTranslatableTarget:
        logger.error("Nothing to translate. Usage: synus translate [from] [to] query...")
        return 1
    except TranslationFailed as e:
        logger.error(f"Translation failed: {e}", exc_info=e.cause)
        return 1

    print(response)
    return 0


def cmd_languages(args, settings: Settings) -> int:
    """List language codes known to the registry."""
    needle = (args.filter or "").lower()
    for entry in get_registry():
        if needle and needle not in entry.code and needle not in entry.display_name.lower():
            continue
        print(f"{entry.code:<8}{entry.display_name}")
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    # Execute command
    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        return cmd_run(settings)
    elif args.command == "translate":
        return asyncio.run(cmd_translate(args, settings))
    elif args.command == "languages":
        return cmd_languages(args, settings)
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
