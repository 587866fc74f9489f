"""
Scoring Engine

Pure functions comparing one submitted row against the target word and
folding the result into the cumulative keyboard feedback.
"""

from typing import List, Optional, Sequence, Tuple
from ..models.game import ALPHABET, KeyboardFeedback, Verdict


def letter_index(letter: str) -> int:
    """Alphabet position of a lowercase ASCII letter."""
    return ord(letter) - ord("a")


def is_letter(key: str) -> bool:
    """True for a single ASCII letter in either case."""
    return isinstance(key, str) and len(key) == 1 and key.lower() in ALPHABET


def count_letters(word: str) -> Tuple[int, ...]:
    """
    Builds the per-letter occurrence counts of a word.

    Args:
        word: Lowercase alphabetic word

    Returns:
        Tuple[int, ...]: 26 counts indexed by alphabet position
    """
    counts = [0] * len(ALPHABET)
    for letter in word:
        counts[letter_index(letter)] += 1
    return tuple(counts)


def score_attempt(guess: str, target: str,
                  base_counts: Optional[Sequence[int]] = None) -> List[Verdict]:
    """
    Scores a guess against the target in a single left-to-right scan.

    Each position first checks for an exact match, then for the letter
    anywhere in the target; both consume one remaining occurrence of the
    letter. Because the scan is strictly sequential, an earlier partial
    match can use up the occurrence a later exact match would have needed:
    "eeee" against "teen" scores PARTIAL, FULL, WRONG, WRONG.

    Args:
        guess: Submitted word, same length as target
        target: Target word
        base_counts: Letter counts of the target, recomputed when omitted

    Returns:
        List[Verdict]: One verdict per position, never PENDING

    Raises:
        ValueError: If the words differ in length or contain non-letters
    """
    guess = guess.lower()
    target = target.lower()

    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' does not have {len(target)} letters")
    if not all(is_letter(letter) for letter in guess + target):
        raise ValueError("Guess and target must contain only letters")

    # Fresh scratch copy per row, the base counts stay untouched
    remaining = list(base_counts if base_counts is not None else count_letters(target))
    verdicts: List[Verdict] = []

    for expected, got in zip(target, guess):
        index = letter_index(got)
        verdict = Verdict.WRONG
        if expected == got and remaining[index] > 0:
            remaining[index] -= 1
            verdict = Verdict.FULL_MATCH
        elif got in target and remaining[index] > 0:
            remaining[index] -= 1
            verdict = Verdict.PARTIAL_MATCH
        verdicts.append(verdict)

    return verdicts


def fold_keyboard_feedback(keyboard: KeyboardFeedback, guess: str,
                           verdicts: Sequence[Verdict]) -> List[str]:
    """
    Updates keyboard feedback with a scored row.

    A letter only moves up (WRONG -> PARTIAL_MATCH -> FULL_MATCH), so a
    repeated letter marked WRONG later in the row never hides an earlier match.

    Returns:
        List[str]: Letters whose feedback was upgraded, in row order
    """
    upgraded = []
    for letter, verdict in zip(guess.lower(), verdicts):
        if keyboard.update(letter, verdict):
            upgraded.append(letter)
    return upgraded
