"""Entropy guesser: maximise expected information gain per guess."""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from correctness import WORD_LENGTH, compute, filter_candidates, pattern_code
from guesser import Guess, Guesser
from lexicon import Lexicon

# Performance caps
_MAX_GUESS_POOL = 200      # max guesses to evaluate
_MAX_EVAL_CANDIDATES = 500  # max candidates to compute feedback against

_NUM_PATTERNS = 3 ** WORD_LENGTH


class EntropyGuesser(Guesser):
    """Select the guess that maximises Shannon entropy of the feedback partition.

    The guess pool is the remaining candidates topped up with other
    dictionary words, which can split the candidates better than any
    candidate can. Ties prefer remaining candidates, then the more common
    word, so the first guess is stable for a given dictionary.
    """

    def __init__(self, lexicon: Lexicon, seed: int = 42) -> None:
        self._lexicon = lexicon
        self._candidates = lexicon.by_count()
        self._seed = seed

    def guess(self, history: Sequence[Guess]) -> str:
        candidates = self._candidates
        for g in history:
            candidates = filter_candidates(candidates, g.word, g.mask)

        if not candidates:
            return self._candidates[0]
        if len(candidates) <= 2:
            return candidates[0]

        # Seeded per turn so a game is reproducible regardless of call order
        rng = random.Random(self._seed + len(history))
        candidate_set = set(candidates)
        if len(candidates) <= _MAX_GUESS_POOL:
            guess_pool = list(candidates)
        else:
            guess_pool = rng.sample(candidates, _MAX_GUESS_POOL)
        room = _MAX_GUESS_POOL - len(guess_pool)
        if room > 0:
            others = [w for w in self._candidates if w not in candidate_set]
            if len(others) > room:
                others = rng.sample(others, room)
            guess_pool.extend(others)
        if len(candidates) <= _MAX_EVAL_CANDIDATES:
            eval_candidates = candidates
        else:
            eval_candidates = rng.sample(candidates, _MAX_EVAL_CANDIDATES)

        best_guess = candidates[0]
        best_key = (-1.0, False, -1)
        for g in guess_pool:
            ent = _partition_entropy(g, eval_candidates)
            key = (round(ent, 9), g in candidate_set, self._lexicon.count(g))
            if key > best_key:
                best_key = key
                best_guess = g

        return best_guess


def _partition_entropy(guess: str, candidates: Sequence[str]) -> float:
    """Entropy in bits of the feedback patterns *guess* induces on *candidates*."""
    codes = np.fromiter(
        (pattern_code(compute(c, guess)) for c in candidates),
        dtype=np.int64,
        count=len(candidates),
    )
    sizes = np.bincount(codes, minlength=_NUM_PATTERNS)
    p = sizes[sizes > 0] / len(candidates)
    return float(-np.sum(p * np.log2(p)))
