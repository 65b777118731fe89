"""
errors.py

Error kinds raised while playing. Everything except IoFailure can be
reported to the player and the game carries on.
"""


class WordlerError(Exception):
    """Base class for all game errors."""

    retryable = True


class GuessTooShort(WordlerError):
    def __init__(self, length):
        super().__init__(f"guess too short, guesses must be {length} letters.")


class GuessTooLong(WordlerError):
    def __init__(self, length):
        super().__init__(f"guess too long, guesses must be {length} letters.")


class InvalidCommand(WordlerError):
    def __init__(self, command):
        self.command = command
        super().__init__("unknown command. use /help to list all available commands")


class IoFailure(WordlerError):
    """Reading from or writing to the terminal failed."""

    retryable = False

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"io error: {error}")
