"""
game.py

The interactive session: holds the secret word and the used letters,
turns input lines into commands and runs the read-evaluate-print loop.
"""

import logging
import string
import sys
from enum import Enum

from .errors import InvalidCommand, IoFailure, WordlerError
from .patterns import compare


log = logging.getLogger(__name__)

PROMPT = "> "
CONGRATS = "Congrats! 🎉"
HELP_TEXT = """Welcome to Wordler!
A Wordle REPL thingy. Can you guess the five letter word?

COMMANDS:
\t/help\tPrints this help text.
\t/letters\tShows the letters that have not been tried yet.
\t/exit\tExits the game."""


class SessionState(Enum):
    PLAYING = "playing"
    WON = "won"
    TERMINATED = "terminated"


class Command(Enum):
    GUESS = "guess"
    HELP = "/help"
    LETTERS = "/letters"
    EXIT = "/exit"


def parse_command(line: str):
    """
    Split a trimmed input line into (Command, guess).

    Anything starting with "/" must be a known command, everything else is
    a guess. ``guess`` is None for meta-commands.
    """
    if line.startswith("/"):
        for cmd in (Command.HELP, Command.LETTERS, Command.EXIT):
            if line == cmd.value:
                return cmd, None
        raise InvalidCommand(line)
    return Command.GUESS, line


class Game:
    """
    One game session. The secret word is fixed at construction and the
    state only moves forward: PLAYING -> WON or PLAYING -> TERMINATED.
    """

    def __init__(self, word, stdin=None, stdout=None):
        self.word = word
        self.state = SessionState.PLAYING
        self.used_letters = {letter: False for letter in string.ascii_lowercase}
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    @property
    def done(self):
        return self.state is not SessionState.PLAYING

    def write(self, text, end="\n"):
        try:
            self.stdout.write(text + end)
        except OSError as exc:
            raise IoFailure(exc) from exc

    def read_line(self):
        """Prompt and block until a full line is available. None on EOF."""
        self.write(PROMPT, end="")
        try:
            self.stdout.flush()
            line = self.stdin.readline()
        except OSError as exc:
            raise IoFailure(exc) from exc
        if not line:
            return None
        return line.strip()

    def help(self):
        self.write(HELP_TEXT)

    def unused_letters(self) -> list[str]:
        return sorted(letter for letter, used in self.used_letters.items() if not used)

    def letters(self):
        self.write(" ".join(self.unused_letters()))

    def guess(self, guess: str):
        """Evaluate a guess and record its letters. Length errors propagate."""
        result = compare(self.word, guess)

        for c in guess:
            if c.lower() in self.used_letters:
                self.used_letters[c.lower()] = True

        log.debug("Guess %r -> %s", guess, result)
        return result

    def step(self, line: str) -> SessionState:
        """Process one trimmed input line and return the next state."""
        if self.done:
            return self.state

        try:
            cmd, guess = parse_command(line)
            if cmd is Command.GUESS:
                result = self.guess(guess)
                self.write(str(result))
                if result.correct:
                    self.write(CONGRATS)
                    self.state = SessionState.WON
            elif cmd is Command.HELP:
                self.help()
            elif cmd is Command.LETTERS:
                self.letters()
            elif cmd is Command.EXIT:
                self.state = SessionState.TERMINATED
        except WordlerError as exc:
            if not exc.retryable:
                raise
            log.debug("Rejected input %r: %s", line, exc)
            self.write(str(exc))

        if self.done:
            log.info("Game over: %s", self.state.value)
        return self.state

    def repl(self) -> SessionState:
        """
        Run the loop until the word is guessed or the player quits. Assumes
        line-buffered input such as a TTY. IoFailure propagates to the caller.
        """
        self.help()

        while not self.done:
            line = self.read_line()
            if line is None:
                log.info("End of input, leaving the game.")
                self.write("")
                self.state = SessionState.TERMINATED
                break
            self.step(line)

        return self.state
