"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class Verdict(Enum):
    """Per-cell scoring outcome. PENDING marks a cell that has not been scored."""
    WRONG = "WRONG"
    PARTIAL_MATCH = "PARTIAL_MATCH"
    FULL_MATCH = "FULL_MATCH"
    PENDING = "PENDING"

    @property
    def strength(self) -> Optional[int]:
        """Ordering used by keyboard feedback; PENDING has none."""
        return _VERDICT_STRENGTH.get(self)

    def is_stronger_than(self, other: "Verdict") -> bool:
        if self.strength is None:
            return False
        if other.strength is None:
            return True
        return self.strength > other.strength


_VERDICT_STRENGTH: Dict[Verdict, int] = {
    Verdict.WRONG: 0,
    Verdict.PARTIAL_MATCH: 1,
    Verdict.FULL_MATCH: 2,
}

# On-screen keyboard classes, matching the stylesheet of the board
_KEY_CLASSES: Dict[Verdict, str] = {
    Verdict.FULL_MATCH: "match key",
    Verdict.PARTIAL_MATCH: "partial key",
    Verdict.WRONG: "wrong key",
}


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    EXHAUSTED = "EXHAUSTED"


@dataclass
class Cell:
    """One letter slot of an attempt."""
    text: str = ""
    verdict: Verdict = Verdict.PENDING

    @property
    def is_empty(self) -> bool:
        return self.text == ""


@dataclass
class Attempt:
    """One row of the board."""
    cells: List[Cell]

    @classmethod
    def empty(cls, word_length: int) -> "Attempt":
        return cls(cells=[Cell() for _ in range(word_length)])

    @property
    def word(self) -> str:
        return "".join(cell.text for cell in self.cells)

    @property
    def is_complete(self) -> bool:
        return all(not cell.is_empty for cell in self.cells)

    @property
    def verdicts(self) -> List[Verdict]:
        return [cell.verdict for cell in self.cells]


class KeyboardFeedback:
    """
    Strongest verdict observed for each letter, stored in a fixed 26-slot
    array indexed by alphabet position. PENDING marks a letter never guessed.
    """

    def __init__(self):
        self._states: List[Verdict] = [Verdict.PENDING] * len(ALPHABET)

    def get(self, letter: str) -> Verdict:
        return self._states[ALPHABET.index(letter.lower())]

    def update(self, letter: str, verdict: Verdict) -> bool:
        """Store verdict if it beats the current one. Returns True on upgrade."""
        index = ALPHABET.index(letter.lower())
        if verdict.is_stronger_than(self._states[index]):
            self._states[index] = verdict
            return True
        return False

    def key_class(self, key: str) -> str:
        """CSS class for an on-screen key; command keys are never colored."""
        if len(key) != 1 or key.lower() not in ALPHABET:
            return "key"
        return _KEY_CLASSES.get(self.get(key), "key")

    def as_dict(self) -> Dict[str, str]:
        return {letter: state.value for letter, state in zip(ALPHABET, self._states)}


@dataclass
class GameState:
    """Mutable state of one game, owned by the game service."""
    target_word: str
    word_length: int
    num_attempts: int
    base_counts: Tuple[int, ...]
    attempts: List[Attempt]
    keyboard: KeyboardFeedback = field(default_factory=KeyboardFeedback)
    cursor: int = 0
    submitted: int = 0
    won: bool = False

    @property
    def status(self) -> GameStatus:
        if self.won:
            return GameStatus.WON
        if self.submitted >= self.num_attempts:
            return GameStatus.EXHAUSTED
        return GameStatus.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def row_start(self) -> int:
        """Cursor position of the first cell of the current row."""
        return self.submitted * self.word_length

    @property
    def row_end(self) -> int:
        """Cursor position just past the last cell of the current row."""
        return (self.submitted + 1) * self.word_length

    @property
    def current_attempt(self) -> Attempt:
        return self.attempts[self.submitted]


@dataclass
class BoardState:
    """Read-only board snapshot handed to the UI layer."""
    word_length: int
    max_attempts: int
    cursor: int
    attempts_used: int
    status: str
    won: bool
    game_over: bool
    grid: List[List[Dict[str, str]]]  # Verdict as string for JSON serialization
    keyboard: Dict[str, str]
    keyboard_rows: List[List[Dict[str, str]]]
    message: str = ""
    fade_message: bool = False
    answer: Optional[str] = None  # Only included when game is over
