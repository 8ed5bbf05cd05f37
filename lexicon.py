"""Dictionary loading.

The dictionary source is a sequence of ``word count`` lines: every word
that may be guessed, followed by how often it occurs in a reference
corpus. The counts are not used by the game itself; they are handed to
guessers that want to prefer common words.

The answers list is a plain whitespace-separated list of words.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from correctness import WORD_LENGTH

_DIR = Path(__file__).resolve().parent
DICTIONARY_PATH = _DIR / "data" / "dictionary.txt"
ANSWERS_PATH = _DIR / "data" / "answers.txt"


class LexiconFormatError(ValueError):
    """A dictionary line is not ``word<space>count``."""

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        super().__init__(f"line {lineno}: {reason}: {line!r}")
        self.lineno = lineno
        self.line = line


@dataclass(frozen=True)
class Lexicon:
    """The set of valid guesses with their corpus counts."""

    counts: Mapping[str, int]
    words: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        counts = MappingProxyType(dict(self.counts))
        object.__setattr__(self, "counts", counts)
        object.__setattr__(self, "words", frozenset(counts))

    def __hash__(self) -> int:
        return hash(self.words)

    def __reduce__(self):
        # mappingproxy does not pickle; rebuild from a plain dict
        return (type(self), (dict(self.counts),))

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def count(self, word: str) -> int:
        return self.counts.get(word, 0)

    def by_count(self) -> list[str]:
        """Words sorted by descending count, then alphabetically."""
        return sorted(self.words, key=lambda w: (-self.counts[w], w))


def parse_lexicon(lines: Iterable[str]) -> Lexicon:
    """Build a :class:`Lexicon` from ``word count`` lines.

    Blank lines are skipped. Anything else that does not parse raises
    :class:`LexiconFormatError`.
    """
    counts: dict[str, int] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue
        word, sep, count = line.partition(" ")
        if not sep:
            raise LexiconFormatError(lineno, raw, "expected 'word count'")
        if len(word) != WORD_LENGTH:
            raise LexiconFormatError(
                lineno, raw, f"word is not {WORD_LENGTH} letters"
            )
        try:
            counts[word] = int(count)
        except ValueError:
            raise LexiconFormatError(lineno, raw, "count is not an integer") from None
    return Lexicon(counts=counts)


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Load the dictionary from *path* (default: the bundled word list)."""
    src = Path(path) if path is not None else DICTIONARY_PATH
    if not src.exists():
        raise FileNotFoundError(f"Dictionary not found: {src}")
    return parse_lexicon(src.read_text(encoding="utf-8").splitlines())


def load_answers(path: str | Path | None = None) -> list[str]:
    """Load the answers list from *path* (default: the bundled list)."""
    src = Path(path) if path is not None else ANSWERS_PATH
    if not src.exists():
        raise FileNotFoundError(f"Answers list not found: {src}")
    return src.read_text(encoding="utf-8").split()
