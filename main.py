#!/usr/bin/env python3
import sys
import argparse
import locale
import logging
import os
from curses import wrapper
from pathlib import Path

from dotenv import load_dotenv

import config
from operations.example_fetcher import ExampleFetcher, MissingCredentialError, get_api_key
from operations.session import FlashcardSession
from operations.vocabulary import VocabularyStore
from ui.flashcard_menu import FlashcardMenu

logger = logging.getLogger(__name__)


def parse_args(args=None):
    parser = argparse.ArgumentParser(description="Pinyin Vocab Flashcards - browse Chinese vocabulary in the terminal")

    parser.add_argument("--model", default=config.model, help="Chat completions model used for example sentences")
    parser.add_argument("--timeout", type=float, default=config.request_timeout, help="Seconds to wait for an example")
    parser.add_argument("--env-file", default=".env", help="Settings file loaded into the environment")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")

    return parser.parse_args(args)


def setup_logging(verbose=False):
    """Log to a file, the terminal belongs to curses."""
    log_path = Path(config.log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(args=None):
    parsed_args = parse_args(args)
    setup_logging(parsed_args.verbose)

    load_dotenv(parsed_args.env_file)
    try:
        api_key = get_api_key()
    except MissingCredentialError as e:
        logger.error("Startup aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    store = VocabularyStore()
    fetcher = ExampleFetcher(api_key, model=parsed_args.model, timeout=parsed_args.timeout)
    session = FlashcardSession(store, fetcher)
    fetcher.post = session.post

    # Start the UI with curses wrapper
    def start_ui(stdscr):
        ui = FlashcardMenu(stdscr, session)
        ui.run()

    locale.setlocale(locale.LC_ALL, "")
    os.environ.setdefault("ESCDELAY", "25")
    wrapper(start_ui)
    return 0


if __name__ == "__main__":
    sys.exit(main())
