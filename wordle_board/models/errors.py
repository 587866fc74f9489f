"""
Game Errors

Error taxonomy for the game. Submission errors carry the message shown to
the player; they never escape the game service.
"""

from typing import Optional


class WordleBoardError(Exception):
    """Base class for all game errors."""


class ConfigurationError(WordleBoardError):
    """Game setup is impossible with the given dictionary or dimensions."""


class IncompleteRowError(WordleBoardError):
    """A row was submitted before all of its cells were filled."""

    message = "Not enough letters"

    def __init__(self, message: Optional[str] = None):
        self.message = message or type(self).message
        super().__init__(self.message)


class UnknownWordError(WordleBoardError):
    """A submitted row is not in the dictionary."""

    message = "Not in word list"

    def __init__(self, word: str = "", message: Optional[str] = None):
        self.word = word
        self.message = message or type(self).message
        super().__init__(self.message)
