"""Random guesser: pick uniformly at random from remaining candidates."""

from __future__ import annotations

import random
from typing import Sequence

from correctness import filter_candidates
from guesser import Guess, Guesser
from lexicon import Lexicon


class RandomGuesser(Guesser):
    """Guess a random word from the set of remaining candidates."""

    def __init__(self, lexicon: Lexicon, seed: int | None = None) -> None:
        self._candidates = sorted(lexicon.words)
        self._rng = random.Random(seed)

    def guess(self, history: Sequence[Guess]) -> str:
        # Re-filter from scratch (simple & correct)
        candidates = self._candidates
        for g in history:
            candidates = filter_candidates(candidates, g.word, g.mask)
        if not candidates:
            # Only possible if the answer is not in the dictionary
            return self._candidates[0]
        return self._rng.choice(candidates)
