"""
Game Service

Contains the core game logic: target selection, board input handling and
attempt submission.
"""

import logging
import random
import threading
from functools import wraps
from typing import Iterable, List, Optional
from ..config.game_settings import (
    BACKSPACE_KEY,
    ENTER_KEY,
    KEYBOARD_ROWS,
    NUM_ATTEMPTS,
    WIN_MESSAGE,
    WORD_LENGTH,
)
from ..models.errors import ConfigurationError, IncompleteRowError, UnknownWordError
from ..models.game import Attempt, BoardState, GameState, GameStatus, Verdict
from .message_service import MessageBoard
from .scoring import count_letters, fold_keyboard_feedback, is_letter, score_attempt

logger = logging.getLogger('wordle_board.game')


def synchronized(method):
    """Run a GameService method under the service lock."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def select_target_word(dictionary: Iterable[str], word_length: int,
                       rng: Optional[random.Random] = None) -> str:
    """
    Picks a uniformly random dictionary word of exactly word_length letters.

    Raises:
        ConfigurationError: If the dictionary has no such word
    """
    candidates = sorted({
        word.lower() for word in dictionary
        if len(word) == word_length and word.isascii() and word.isalpha()
    })
    if not candidates:
        raise ConfigurationError(f"No {word_length}-letter word in dictionary")
    return (rng or random).choice(candidates)


class GameService:
    """
    Core game service owning the state of the current game.

    This class handles:
    - Word selection when a game starts
    - Letter input and deletion on the current row
    - Attempt validation, scoring and keyboard feedback
    - Win and loss detection, reported through the info message

    HTTP requests, Socket.IO events and message timers run on different
    threads; every public operation holds the service lock.
    """

    def __init__(self,
                 dictionary: Iterable[str],
                 word_length: int = WORD_LENGTH,
                 num_attempts: int = NUM_ATTEMPTS,
                 messages: Optional[MessageBoard] = None,
                 rng: Optional[random.Random] = None):
        self.dictionary = frozenset(word.lower() for word in dictionary)
        self.messages = messages or MessageBoard()
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self.state: GameState = self.initialize(word_length, num_attempts)

    @synchronized
    def initialize(self, word_length: int, num_attempts: int,
                   dictionary: Optional[Iterable[str]] = None) -> GameState:
        """
        Starts a new game, discarding the current one.

        Args:
            word_length: Letters per word
            num_attempts: Rows on the board
            dictionary: Replacement dictionary, keeps the current one when omitted;
                only adopted once a target word has been chosen

        Returns:
            GameState: The fresh game state

        Raises:
            ConfigurationError: If the dimensions are not positive or no word fits
        """
        if word_length <= 0 or num_attempts <= 0:
            raise ConfigurationError(
                f"Invalid board size: {num_attempts} attempts of {word_length} letters"
            )

        words = self.dictionary
        if dictionary is not None:
            words = frozenset(word.lower() for word in dictionary)

        # The current game stays untouched if no target can be chosen
        target_word = select_target_word(words, word_length, self._rng)
        self.dictionary = words
        logger.debug("Target word: %s", target_word)

        self.state = GameState(
            target_word=target_word,
            word_length=word_length,
            num_attempts=num_attempts,
            base_counts=count_letters(target_word),
            attempts=[Attempt.empty(word_length) for _ in range(num_attempts)],
        )
        self.messages.clear()
        return self.state

    @synchronized
    def handle_key(self, key: str) -> bool:
        """
        Dispatches one key from the UI layer.

        Args:
            key: A single letter, "Backspace" or "Enter"

        Returns:
            bool: True if the board changed
        """
        if self.state.is_terminal:
            return False
        if is_letter(key):
            return self.type_letter(key)
        if key == BACKSPACE_KEY:
            return self.delete_letter()
        if key == ENTER_KEY:
            return self.submit_attempt() is not None
        return False

    @synchronized
    def type_letter(self, char: str) -> bool:
        """Writes a letter at the cursor unless the game is over or the row is full."""
        state = self.state
        if state.is_terminal or not is_letter(char):
            return False
        if state.cursor >= state.row_end:
            return False
        self._cell_at_cursor().text = char.lower()
        state.cursor += 1
        return True

    @synchronized
    def delete_letter(self) -> bool:
        """Clears the last letter of the current row."""
        state = self.state
        if state.is_terminal or state.cursor <= state.row_start:
            return False
        state.cursor -= 1
        self._cell_at_cursor().text = ""
        return True

    @synchronized
    def submit_attempt(self) -> Optional[List[Verdict]]:
        """
        Scores the current row and advances the game.

        Rejected rows leave the board untouched and only show a message.

        Returns:
            List[Verdict] for the scored row, or None if the row was rejected
            or the game is already over
        """
        state = self.state
        if state.is_terminal:
            return None

        attempt = state.current_attempt
        try:
            self._validate_attempt(attempt)
        except (IncompleteRowError, UnknownWordError) as e:
            logger.info("Attempt rejected: %s", e.message)
            self.messages.show(e.message)
            return None

        guess = attempt.word
        verdicts = score_attempt(guess, state.target_word, state.base_counts)
        for cell, verdict in zip(attempt.cells, verdicts):
            cell.verdict = verdict

        fold_keyboard_feedback(state.keyboard, guess, verdicts)
        state.submitted += 1

        if all(verdict == Verdict.FULL_MATCH for verdict in verdicts):
            state.won = True
            self.messages.show(WIN_MESSAGE)
        elif state.submitted >= state.num_attempts:
            # Answer stays on screen
            self.messages.show(state.target_word.upper(), hide=False)

        return verdicts

    @synchronized
    def get_board_state(self) -> BoardState:
        """
        Returns a snapshot of the board for rendering (answer hidden until game over).
        """
        state = self.state
        game_over = state.is_terminal

        grid = [
            [{"text": cell.text, "state": cell.verdict.value} for cell in attempt.cells]
            for attempt in state.attempts
        ]
        keyboard_rows = [
            [{"key": key, "class": state.keyboard.key_class(key)} for key in row]
            for row in KEYBOARD_ROWS
        ]

        return BoardState(
            word_length=state.word_length,
            max_attempts=state.num_attempts,
            cursor=state.cursor,
            attempts_used=state.submitted,
            status=state.status.value,
            won=state.won,
            game_over=game_over,
            grid=grid,
            keyboard=state.keyboard.as_dict(),
            keyboard_rows=keyboard_rows,
            message=self.messages.text,
            fade_message=self.messages.fading,
            answer=state.target_word.upper() if game_over else None
        )

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def _validate_attempt(self, attempt: Attempt) -> None:
        if not attempt.is_complete:
            raise IncompleteRowError()
        if attempt.word.lower() not in self.dictionary:
            raise UnknownWordError(attempt.word)

    def _cell_at_cursor(self):
        row, column = divmod(self.state.cursor, self.state.word_length)
        return self.state.attempts[row].cells[column]


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Iterable[str],
                            word_length: int = WORD_LENGTH,
                            num_attempts: int = NUM_ATTEMPTS,
                            messages: Optional[MessageBoard] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, word_length, num_attempts, messages, rng)
    return _game_service
