"""Game simulation: drive a guesser against a known answer."""

from __future__ import annotations

from typing import Iterable

from correctness import compute
from guesser import Guess, Guesser
from lexicon import Lexicon, load_lexicon, parse_lexicon

# The real game allows 6 guesses. We allow more so the score
# distribution is not chopped off when gathering statistics.
MAX_TURNS = 32
CANONICAL_TURNS = 6


class InvalidGuessError(ValueError):
    """A guesser returned a word that is neither the answer nor valid."""

    def __init__(self, word: str, turn: int) -> None:
        super().__init__(f"turn {turn}: {word!r} is not in the dictionary")
        self.word = word
        self.turn = turn


class Wordle:
    """Plays games against a fixed dictionary.

    Parameters
    ----------
    lexicon : Lexicon or None
        Valid guesses. None loads the bundled dictionary.
    max_turns : int
        Turns allowed before a game counts as unsolved.
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        max_turns: int = MAX_TURNS,
    ) -> None:
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {max_turns}")
        self._lexicon = lexicon if lexicon is not None else load_lexicon()
        self._max_turns = max_turns

    @classmethod
    def from_lines(cls, lines: Iterable[str], max_turns: int = MAX_TURNS) -> "Wordle":
        return cls(parse_lexicon(lines), max_turns=max_turns)

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def max_turns(self) -> int:
        return self._max_turns

    def play(self, answer: str, guesser: Guesser) -> int | None:
        """Play one game.

        Returns the turn on which *guesser* found *answer*, or None if it
        did not within ``max_turns``.

        Raises
        ------
        ValueError
            If *answer* is not in the dictionary.
        InvalidGuessError
            If the guesser returns a word that is not the answer and not
            in the dictionary.
        """
        if answer not in self._lexicon:
            raise ValueError(f"answer {answer!r} is not in the dictionary")

        history: list[Guess] = []
        for turn in range(1, self._max_turns + 1):
            word = guesser.guess(tuple(history))
            if word == answer:
                return turn
            if word not in self._lexicon:
                raise InvalidGuessError(word, turn)
            history.append(Guess(word=word, mask=compute(answer, word)))

        return None
