import pytest

from wordle_board.models.game import KeyboardFeedback, Verdict
from wordle_board.services.scoring import (
    count_letters,
    fold_keyboard_feedback,
    is_letter,
    letter_index,
    score_attempt,
)

W, P, F = Verdict.WRONG, Verdict.PARTIAL_MATCH, Verdict.FULL_MATCH


def test_count_letters_uses_alphabet_slots():
    counts = count_letters("teen")
    assert len(counts) == 26
    assert counts[letter_index("e")] == 2
    assert counts[letter_index("t")] == 1
    assert counts[letter_index("n")] == 1
    assert sum(counts) == 4


@pytest.mark.parametrize("key,expected", [
    ("a", True), ("Z", True), ("", False), ("ab", False), ("1", False),
    ("Enter", False), ("é", False), (None, False),
])
def test_is_letter(key, expected):
    assert is_letter(key) is expected


@pytest.mark.parametrize("word", ["able", "teen", "cool", "dust"])
def test_guessing_the_target_is_all_full_match(word):
    assert score_attempt(word, word) == [F] * len(word)


def test_guess_without_shared_letters_is_all_wrong():
    assert score_attempt("dust", "able") == [W, W, W, W]


def test_swapped_letters_are_partial_matches():
    assert score_attempt("bale", "able") == [P, P, F, F]


def test_repeated_guess_letter_only_matches_target_occurrences():
    verdicts = score_attempt("etee", "teen")

    assert verdicts == [P, P, F, W]
    e_verdicts = [v for letter, v in zip("etee", verdicts) if letter == "e"]
    assert sum(v != W for v in e_verdicts) == 2


def test_earlier_partial_match_consumes_later_exact_match():
    # Single sequential scan: position 0 takes one 'e' as a partial match,
    # position 2 then has no 'e' left despite matching exactly.
    assert score_attempt("eeee", "teen") == [P, F, W, W]


@pytest.mark.parametrize("guess,target,letter", [
    ("oooo", "cool", "o"),
    ("llll", "ball", "l"),
    ("eeee", "able", "e"),
    ("sass", "dust", "s"),
])
def test_matches_never_exceed_target_count(guess, target, letter):
    verdicts = score_attempt(guess, target)
    matched = [v for g, v in zip(guess, verdicts) if g == letter and v != W]
    assert len(matched) == target.count(letter)


def test_scoring_is_case_insensitive():
    assert score_attempt("BaLe", "ABLE") == [P, P, F, F]


def test_base_counts_are_not_consumed():
    base = list(count_letters("teen"))
    score_attempt("etee", "teen", base)
    score_attempt("etee", "teen", base)
    assert base == list(count_letters("teen"))


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        score_attempt("world", "able")


def test_non_letters_are_rejected():
    with pytest.raises(ValueError):
        score_attempt("ab1e", "able")


def test_keyboard_feedback_starts_pending():
    keyboard = KeyboardFeedback()
    assert set(keyboard.as_dict().values()) == {"PENDING"}
    assert keyboard.key_class("a") == "key"


def test_fold_upgrades_and_reports_letters():
    keyboard = KeyboardFeedback()
    upgraded = fold_keyboard_feedback(keyboard, "bale", [P, P, F, F])

    assert upgraded == ["b", "a", "l", "e"]
    assert keyboard.get("L") == F
    assert keyboard.key_class("L") == "match key"
    assert keyboard.key_class("b") == "partial key"
    assert keyboard.key_class("Enter") == "key"


def test_fold_never_downgrades():
    keyboard = KeyboardFeedback()
    fold_keyboard_feedback(keyboard, "able", [F, F, F, F])
    upgraded = fold_keyboard_feedback(keyboard, "bale", [P, P, F, F])

    assert upgraded == []
    assert keyboard.get("a") == F
    assert keyboard.get("b") == F


def test_fold_keeps_best_verdict_within_a_row():
    keyboard = KeyboardFeedback()
    fold_keyboard_feedback(keyboard, "etee", [P, P, F, W])
    assert keyboard.get("e") == F

    keyboard = KeyboardFeedback()
    fold_keyboard_feedback(keyboard, "eeee", [P, W, W, W])
    assert keyboard.get("e") == P
    assert keyboard.key_class("e") == "partial key"


def test_wrong_letters_are_marked():
    keyboard = KeyboardFeedback()
    fold_keyboard_feedback(keyboard, "dust", [W, W, W, W])
    assert keyboard.key_class("d") == "wrong key"


def test_verdict_strength_ordering():
    assert F.is_stronger_than(P)
    assert P.is_stronger_than(W)
    assert W.is_stronger_than(Verdict.PENDING)
    assert not Verdict.PENDING.is_stronger_than(W)
    assert not W.is_stronger_than(W)
    assert Verdict.PENDING.strength is None
