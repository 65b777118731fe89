"""
patterns.py

Compares a guess against the secret word.

Each guess character gets one of four marks:

    🟩 correct       same letter, same position
    🟨 out of place  letter appears somewhere else in the secret
    ⬛ absent        letter is not in the secret
    ❌ out of bounds guess position past the end of the secret

Unlike standard Wordle, repeated letters are not reconciled against the
number of times they occur in the secret: every position is classified on
its own, so a letter guessed twice can be marked out of place twice even
if the secret holds it once.
"""

from enum import Enum

from .errors import GuessTooLong, GuessTooShort


class GuessChar(Enum):
    ABSENT = "⬛"
    OUT_OF_PLACE = "🟨"
    CORRECT = "🟩"
    OUT_OF_BOUNDS = "❌"

    def __str__(self):
        return self.value


class Guess(tuple):
    """A complete guessed word, one GuessChar per guessed character."""

    def __str__(self):
        return "".join(str(gc) for gc in self)

    def __repr__(self):
        return f"Guess({str(self)!r})"

    @property
    def correct(self) -> bool:
        return len(self) > 0 and all(gc is GuessChar.CORRECT for gc in self)


def check_length(secret: str, guess: str) -> None:
    """Raise GuessTooShort / GuessTooLong if the lengths differ."""
    if len(guess) < len(secret):
        raise GuessTooShort(len(secret))
    if len(guess) > len(secret):
        raise GuessTooLong(len(secret))


def classify(secret: str, guess: str, i: int) -> GuessChar:
    if i >= len(secret):
        return GuessChar.OUT_OF_BOUNDS
    if guess[i] == secret[i]:
        return GuessChar.CORRECT
    if guess[i] in secret:
        return GuessChar.OUT_OF_PLACE
    return GuessChar.ABSENT


def compare(secret: str, guess: str, strict: bool = True) -> Guess:
    """
    Evaluate a guess against the secret word.

    With ``strict`` (what the game uses) a guess of the wrong length is
    rejected before any comparison. Without it, guess positions past the
    end of the secret are marked OUT_OF_BOUNDS and secret positions past
    the end of the guess are ignored.
    """
    if strict:
        check_length(secret, guess)

    return Guess(classify(secret, guess, i) for i in range(len(guess)))
