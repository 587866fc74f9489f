"""
Data Models Package

Contains all data models, enums and errors used throughout the application.
"""

from .game import (
    Attempt,
    BoardState,
    Cell,
    GameState,
    GameStatus,
    KeyboardFeedback,
    Verdict,
)
from .errors import (
    ConfigurationError,
    IncompleteRowError,
    UnknownWordError,
    WordleBoardError,
)

__all__ = [
    'Attempt', 'BoardState', 'Cell', 'GameState', 'GameStatus', 'KeyboardFeedback', 'Verdict',
    'ConfigurationError', 'IncompleteRowError', 'UnknownWordError', 'WordleBoardError'
]
