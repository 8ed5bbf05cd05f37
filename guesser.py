"""Guess records and the interface every guesser implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence

from correctness import Correctness, compute


@dataclass(frozen=True)
class Guess:
    """One played turn: the word and the feedback it received.

    Attributes
    ----------
    word : str
        The guessed word.
    mask : tuple[Correctness, ...]
        One feedback value per letter position.
    """

    word: str
    mask: tuple[Correctness, ...]

    def matches(self, word: str) -> bool:
        """True if *word* could be the answer given this feedback."""
        return compute(word, self.word) == self.mask


class Guesser(ABC):
    """Interface that every guessing strategy must implement."""

    @property
    def name(self) -> str:
        """Human-readable guesser name (used in reports)."""
        return type(self).__name__

    @abstractmethod
    def guess(self, history: Sequence[Guess]) -> str:
        """Return the next guess given the guesses played so far.

        *history* is empty on the first turn. The returned word must be in
        the dictionary unless it is the answer itself.
        """
        ...


class FunctionGuesser(Guesser):
    """Wrap a plain ``func(history) -> str`` as a :class:`Guesser`."""

    def __init__(
        self,
        func: Callable[[Sequence[Guess]], str],
        name: str | None = None,
    ) -> None:
        self._func = func
        self._name = name or getattr(func, "__name__", "Function")

    @property
    def name(self) -> str:
        return self._name

    def guess(self, history: Sequence[Guess]) -> str:
        return self._func(history)
