"""
wordler_game.py

Command-line entry point for Wordler.

Starts a game immediately; every flag is optional.

Optional:
-dict PATH: pick the secret word from another newline-delimited word list.
-seed N: seed the random generator so the secret word is reproducible.
-debug: log the secret word (to stderr, at debug level). Implies -verbose.
-verbose: log game events at debug level.
"""

import argparse
import logging
import sys

import numpy as np

from wordler.errors import IoFailure
from wordler.game import Game
from wordler.words import load_dictionary, pick_word


log = logging.getLogger("wordler")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Wordle in the terminal. Can you guess the five letter word?"
    )
    parser.add_argument(
        "-dict",
        type=str,
        default=None,
        help="Newline-delimited word list to pick from (default: bundled dictionary).",
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for the random word choice (default: fresh entropy).",
    )
    parser.add_argument(
        "-debug",
        action="store_true",
        help="Log the secret word at the start of the game.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log game events to stderr.",
    )
    return parser.parse_args(argv)


def setup_logging(verbose):
    # stderr keeps log lines out of the game output on stdout
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def new_game(dictionary, seed=None, debug=False, stdin=None, stdout=None):
    """Seed the generator once and start a session on a fresh secret word."""
    rng = np.random.default_rng(seed)
    word = pick_word(dictionary, rng)
    if debug:
        log.debug("Secret word: %r", word)
    return Game(word, stdin=stdin, stdout=stdout)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)
    setup_logging(args.verbose or args.debug)

    try:
        dictionary = load_dictionary(args.dict)
    except OSError as exc:
        raise SystemExit(f"could not read dictionary: {exc}") from exc

    game = new_game(dictionary, args.seed, args.debug, stdin=stdin, stdout=stdout)
    try:
        game.repl()
    except IoFailure as exc:
        log.error("%s", exc)
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    main()
