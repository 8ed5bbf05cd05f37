"""Max-count guesser: always guess the most common remaining candidate."""

from __future__ import annotations

from typing import Sequence

from correctness import filter_candidates
from guesser import Guess, Guesser
from lexicon import Lexicon


class MaxCountGuesser(Guesser):
    """Always guess the remaining candidate with the highest corpus count.

    Ties are broken alphabetically.
    """

    def __init__(self, lexicon: Lexicon) -> None:
        self._candidates = lexicon.by_count()

    def guess(self, history: Sequence[Guess]) -> str:
        candidates = self._candidates
        for g in history:
            candidates = filter_candidates(candidates, g.word, g.mask)
        if not candidates:
            return self._candidates[0]
        # Already sorted by count — return best
        return candidates[0]
