import dataclasses

import pytest

from correctness import compute
from guesser import FunctionGuesser, Guess
from wordle import CANONICAL_TURNS, MAX_TURNS, InvalidGuessError, Wordle

LINES = ["right 100", "wrong 50", "wrung 7"]


@pytest.fixture
def wordle():
    return Wordle.from_lines(LINES)


def _on_turn(k: int):
    """Guesser that plays "wrong" until turn *k*, then "right"."""
    def guess(history):
        if len(history) == k - 1:
            return "right"
        return "wrong"
    return FunctionGuesser(guess)


def test_solved_first_turn(wordle):
    assert wordle.play("right", FunctionGuesser(lambda history: "right")) == 1


@pytest.mark.parametrize("k", [2, 3, 10, MAX_TURNS])
def test_solved_on_turn_k(wordle, k):
    assert wordle.play("right", _on_turn(k)) == k


def test_exhausted_returns_none(wordle):
    calls = []

    def guess(history):
        calls.append(len(history))
        return "wrong"

    assert wordle.play("right", FunctionGuesser(guess)) is None
    assert calls == list(range(MAX_TURNS))


def test_custom_turn_limit():
    wordle = Wordle.from_lines(LINES, max_turns=CANONICAL_TURNS)
    assert wordle.max_turns == CANONICAL_TURNS
    assert wordle.play("right", _on_turn(CANONICAL_TURNS)) == CANONICAL_TURNS
    assert wordle.play("right", _on_turn(CANONICAL_TURNS + 1)) is None


def test_default_turn_limit_exceeds_canonical():
    assert MAX_TURNS == 32
    assert MAX_TURNS > CANONICAL_TURNS


def test_history_snapshots(wordle):
    seen = []

    def guess(history):
        seen.append(history)
        return ["wrong", "wrung", "right"][len(history)]

    assert wordle.play("right", FunctionGuesser(guess)) == 3
    assert seen[0] == ()
    assert all(isinstance(h, tuple) for h in seen)
    assert seen[2] == (
        Guess("wrong", compute("right", "wrong")),
        Guess("wrung", compute("right", "wrung")),
    )
    # earlier snapshots are unaffected by later turns
    assert len(seen[1]) == 1


def test_guess_record_is_immutable():
    g = Guess("wrong", compute("right", "wrong"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.word = "right"


def test_guess_matches():
    g = Guess("wrong", compute("right", "wrong"))
    assert g.matches("right")
    assert not g.matches("wrung")


def test_out_of_dictionary_guess_is_fatal(wordle):
    guesser = FunctionGuesser(lambda history: "wrong" if not history else "zzzzz")
    with pytest.raises(InvalidGuessError) as excinfo:
        wordle.play("right", guesser)
    assert excinfo.value.word == "zzzzz"
    assert excinfo.value.turn == 2
    assert isinstance(excinfo.value, ValueError)


def test_wrong_length_guess_is_rejected_as_invalid(wordle):
    with pytest.raises(InvalidGuessError):
        wordle.play("right", FunctionGuesser(lambda history: "rig"))


def test_answer_outside_dictionary(wordle):
    with pytest.raises(ValueError, match="not in the dictionary"):
        wordle.play("night", FunctionGuesser(lambda history: "night"))


@pytest.mark.parametrize("max_turns", [0, -1])
def test_max_turns_must_be_positive(max_turns):
    with pytest.raises(ValueError):
        Wordle.from_lines(LINES, max_turns=max_turns)


def test_default_dictionary():
    wordle = Wordle()
    assert "right" in wordle.lexicon
    assert "wrong" in wordle.lexicon
    assert wordle.play("right", _on_turn(2)) == 2


def test_guesser_name():
    def always_right(history):
        return "right"

    assert FunctionGuesser(always_right).name == "always_right"
    assert FunctionGuesser(always_right, name="Genius").name == "Genius"
