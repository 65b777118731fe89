"""
Wordler: a Wordle REPL for the terminal.
"""

from .errors import GuessTooLong, GuessTooShort, InvalidCommand, IoFailure, WordlerError
from .game import Game, SessionState
from .patterns import Guess, GuessChar, compare
from .words import FALLBACK_WORD, load_dictionary, pick_word

__all__ = [
    "Game", "SessionState",
    "Guess", "GuessChar", "compare",
    "FALLBACK_WORD", "load_dictionary", "pick_word",
    "WordlerError", "GuessTooShort", "GuessTooLong", "InvalidCommand", "IoFailure",
]
