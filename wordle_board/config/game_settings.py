"""
Game Configuration Constants Module

This module defines all game configuration constants and the dictionary the
game draws its target words from. All game parameters are centralized here
to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List
from ..models.errors import ConfigurationError

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 4
"""
Number of letters in the target word and in every attempt.
"""

NUM_ATTEMPTS: Final[int] = 4
"""
Number of rows on the board, i.e. guesses allowed per game.
"""

# Info message timing, in seconds
MESSAGE_DISPLAY_SECONDS: Final[float] = 2.0
MESSAGE_FADE_SECONDS: Final[float] = 0.5

# Player-facing texts
WIN_MESSAGE: Final[str] = "NICE!"

# On-screen keyboard layout
KEYBOARD_ROWS: Final[List[List[str]]] = [
    ['Q', 'W', 'E', 'R', 'T', 'Y', 'U', 'I', 'O', 'P'],
    ['A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L'],
    ['Enter', 'Z', 'X', 'C', 'V', 'B', 'N', 'M', 'Backspace'],
]

ENTER_KEY: Final[str] = "Enter"
BACKSPACE_KEY: Final[str] = "Backspace"


def load_word_list(json_file_path: str) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words

    Returns:
        List[str]: List of uppercase words

    Raises:
        ConfigurationError: If the file is missing, malformed, empty or
            contains non-alphabetic entries
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Word list file not found: {json_file_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ConfigurationError("JSON file must contain an array of words")

    if not word_list:
        raise ConfigurationError("Word list cannot be empty")

    uppercase_words = []
    for word in word_list:
        if not isinstance(word, str) or not word.isascii() or not word.isalpha():
            raise ConfigurationError(f"Word '{word}' contains non-alphabetic characters")
        uppercase_words.append(word.upper())

    return uppercase_words


def _default_word_list_path() -> str:
    config_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(config_dir, 'words.json')


# Dictionary loaded once at import, shared read-only by every game
WORD_LIST: Final[List[str]] = load_word_list(_default_word_list_path())


def validate_word_list_integrity(word_list: List[str] = WORD_LIST,
                                 word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Character validation: Only alphabetic characters allowed
    2. Format validation: Consistent uppercase formatting
    3. Uniqueness validation: No duplicate entries
    4. Playability: At least one word has the configured length

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ConfigurationError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not word.isalpha():
            raise ConfigurationError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ConfigurationError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ConfigurationError(f"Duplicate words found in word list: {duplicates}")

    if not any(len(word) == word_length for word in word_list):
        raise ConfigurationError(f"No {word_length}-letter word in word list")

    return True


def get_word_statistics(word_list: List[str] = WORD_LIST) -> dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - words_by_length: How many words exist for each length
    """
    if not word_list:
        return {"error": "Word list is empty"}

    words_by_length: Dict[int, int] = {}
    for word in word_list:
        words_by_length[len(word)] = words_by_length.get(len(word), 0) + 1

    return {
        "total_words": len(word_list),
        "words_by_length": dict(sorted(words_by_length.items())),
    }
