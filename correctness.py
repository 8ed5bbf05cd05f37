"""Feedback computation: score a guess against the answer."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

WORD_LENGTH = 5


class Correctness(IntEnum):
    """Per-letter feedback.

    The integer values follow the usual encoding:
    2 = green, 1 = yellow, 0 = gray.
    """

    ABSENT = 0
    MISPLACED = 1
    CORRECT = 2


_SQUARES = {
    Correctness.CORRECT: "\U0001f7e9",
    Correctness.MISPLACED: "\U0001f7e8",
    Correctness.ABSENT: "⬛",
}


def compute(answer: str, guess: str) -> tuple[Correctness, ...]:
    """Return the feedback mask for *guess* against *answer*.

    Repeated letters are credited at most once per occurrence in the
    answer: exact matches are consumed first, then each remaining guess
    letter takes the leftmost unconsumed occurrence.
    """
    if len(answer) != WORD_LENGTH:
        raise ValueError(
            f"answer length ({len(answer)}) != {WORD_LENGTH}: {answer!r}"
        )
    if len(guess) != WORD_LENGTH:
        raise ValueError(
            f"guess length ({len(guess)}) != {WORD_LENGTH}: {guess!r}"
        )

    mask = [Correctness.ABSENT] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1 – greens
    for i, (a, g) in enumerate(zip(answer, guess)):
        if a == g:
            mask[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2 – yellows
    for i, g in enumerate(guess):
        if mask[i] == Correctness.CORRECT:
            continue
        for j, a in enumerate(answer):
            if a == g and not used[j]:
                used[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


def filter_candidates(
    candidates: Iterable[str],
    guess: str,
    mask: Sequence[int],
) -> list[str]:
    """Keep only candidates that would have produced *mask* for *guess*."""
    mask = tuple(mask)
    return [w for w in candidates if compute(w, guess) == mask]


def pattern_code(mask: Sequence[int]) -> int:
    """Encode a mask as a single base-3 integer."""
    val = 0
    for i, c in enumerate(mask):
        val += int(c) * (3 ** i)
    return val


def render(mask: Sequence[int]) -> str:
    return "".join(_SQUARES[Correctness(c)] for c in mask)
