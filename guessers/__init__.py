"""Auto-discovery of built-in Guesser subclasses."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from guesser import Guesser

_PKG_DIR = Path(__file__).resolve().parent


def _subclasses_in_module(mod) -> list[type[Guesser]]:
    found: list[type[Guesser]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Guesser)
            and obj is not Guesser
            and obj.__module__ == mod.__name__
        ):
            found.append(obj)
    return found


def discover_guessers() -> list[type[Guesser]]:
    """Import all modules in this package and return their Guesser classes."""
    found: list[type[Guesser]] = []
    for info in pkgutil.iter_modules([str(_PKG_DIR)]):
        mod = importlib.import_module(f"guessers.{info.name}")
        found.extend(_subclasses_in_module(mod))
    return found


def find_guesser(name: str) -> type[Guesser]:
    """Look up a built-in guesser class by name (case-insensitive).

    Accepts either the class name or its short name without the
    ``Guesser`` suffix, e.g. ``"entropy"`` for ``EntropyGuesser``.
    """
    wanted = name.lower()
    classes = discover_guessers()
    for cls in classes:
        full = cls.__name__.lower()
        if wanted in (full, full.removesuffix("guesser")):
            return cls
    available = sorted(cls.__name__ for cls in classes)
    raise KeyError(f"Guesser {name!r} not found. Available: {available}")
