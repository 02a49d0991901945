"""Command-line front end for the translation chat services.

Translates a text into one or more languages through the provider fallback chain. With
--progressive the text is posted to an in-memory chat room instead, and every partial update
of the message is printed as translations arrive.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import Config, ConfigLoader, ConfigLoaderError
from core.shared_data import SharedData
from core.trans.interface import TranslateExceptionError
from core.version import VERSION
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from models.message_models import ChatMessage
    from models.translation_models import TranslationResult

CFG_FILE: Final[str] = "translation_chat.ini"
CLI_ROOM_ID: Final[str] = "cli"


def check_python_version() -> None:
    """Check if Python version is 3.12 or later.

    Raises:
        RuntimeError: If Python version is below 3.12.
    """
    if sys.version_info < (3, 12):
        msg = "Python 3.12 or later is required"
        raise RuntimeError(msg)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate chat text with provider fallback",
        epilog="Example: python translate_chat.py -t ko -t ja 'Hello everyone'",
    )
    parser.add_argument("text", help="Text to translate")
    parser.add_argument(
        "-t",
        "--target",
        dest="targets",
        action="append",
        required=True,
        metavar="LANG",
        help="Target language code (repeatable)",
    )
    parser.add_argument("--source", dest="source", metavar="LANG", help="Source language code (default: detect)")
    parser.add_argument("--config", dest="config", default=CFG_FILE, metavar="FILE", help="Configuration file")
    parser.add_argument(
        "--provider",
        dest="preferred_provider",
        metavar="NAME",
        help="Override the preferred provider (auto, mymemory, libretranslate, offline)",
    )
    parser.add_argument("--progressive", action="store_true", help="Deliver through an in-memory chat room")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply CLI overrides.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).name
    return ConfigLoader(
        config_filename=args.config,
        script_name=script_name,
        debug=args.debug,
        preferred_provider=args.preferred_provider,
    ).config


def print_result(result: TranslationResult) -> None:
    confidence: str = f"{result.confidence:.2f}" if result.confidence is not None else "-"
    print(
        f"[{result.source_language} -> {result.target_language}] {result.translated_text}"
        f"  (provider: {result.provider}, confidence: {confidence})"
    )


def print_message_update(message: ChatMessage) -> None:
    state: str = "translating" if message.is_translating else "done"
    print(f"({message.translation_progress}/{message.translation_total} {state}) {message.translations}")
    if message.translation_error:
        print(f"  warning: {message.translation_error}")


async def run(args: argparse.Namespace, config: Config) -> int:
    shared = SharedData(config)
    await shared.async_init()
    try:
        if args.progressive:
            unsubscribe = shared.message_store.subscribe(CLI_ROOM_ID, print_message_update)
            try:
                await shared.chat_service.send_message(
                    CLI_ROOM_ID, "cli", "cli", args.text, args.targets, source_language=args.source
                )
                await shared.chat_service.wait_for_pending()
            finally:
                unsubscribe()
            return 0

        results: dict[str, TranslationResult] = await shared.engine.translate_to_multiple_languages(
            args.text, args.targets, args.source
        )
        for result in results.values():
            print_result(result)
        return 0
    except TranslateExceptionError as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1
    finally:
        await shared.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit status.
    """
    check_python_version()
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 1

    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")

    return asyncio.run(run(args, config))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
    except (OSError, RuntimeError, ValueError) as err:
        print(f"\nFatal error: {err}", file=sys.stderr)
        sys.exit(1)
