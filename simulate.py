#!/usr/bin/env python3
"""Play a guesser against every answer and report the turn distribution."""

from __future__ import annotations

import argparse
import inspect
import json
import random
import sys
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from correctness import compute, render
from guesser import Guess, Guesser
from guessers import find_guesser
from lexicon import Lexicon, load_answers, load_lexicon
from wordle import CANONICAL_TURNS, MAX_TURNS, Wordle


@dataclass
class GameResult:
    answer: str
    turns: int | None

    @property
    def solved(self) -> bool:
        return self.turns is not None


class _Recorder(Guesser):
    """Pass-through guesser that remembers every word it returned."""

    def __init__(self, inner: Guesser) -> None:
        self._inner = inner
        self.words: list[str] = []

    @property
    def name(self) -> str:
        return self._inner.name

    def guess(self, history: Sequence[Guess]) -> str:
        word = self._inner.guess(history)
        self.words.append(word)
        return word


def build_guesser(name: str, lexicon: Lexicon, seed: int | None = None) -> Guesser:
    """Instantiate the built-in guesser called *name*."""
    cls = find_guesser(name)
    if seed is not None and "seed" in inspect.signature(cls).parameters:
        return cls(lexicon, seed=seed)
    return cls(lexicon)


def _game_seed(seed: int | None, index: int) -> int | None:
    """Seed for the game at *index* in the answers list."""
    return None if seed is None else seed + index


def _play_indexed(
    games: Sequence[tuple[int, str]],
    guesser_name: str,
    lexicon: Lexicon | None,
    max_turns: int,
    seed: int | None,
    verbose: bool = False,
    progress: bool = True,
) -> list[tuple[int, GameResult]]:
    """Play ``(index, answer)`` pairs; each game gets a fresh guesser."""
    wordle = Wordle(lexicon, max_turns=max_turns)

    results: list[tuple[int, GameResult]] = []
    for index, answer in tqdm(games, desc=guesser_name, disable=not progress):
        guesser = build_guesser(guesser_name, wordle.lexicon, seed=_game_seed(seed, index))
        recorder = _Recorder(guesser)
        turns = wordle.play(answer, recorder)
        results.append((index, GameResult(answer=answer, turns=turns)))

        if verbose:
            tqdm.write(f"\n--- {answer} ---")
            for i, word in enumerate(recorder.words, 1):
                tqdm.write(f"  Guess {i}: {word}  {render(compute(answer, word))}")
            status = f"SOLVED in {turns}" if turns is not None else "FAILED"
            tqdm.write(f"  -> {status}")

    return results


def run_games(
    answers: Sequence[str],
    guesser_name: str,
    lexicon: Lexicon | None = None,
    max_turns: int = MAX_TURNS,
    seed: int | None = None,
    verbose: bool = False,
    progress: bool = True,
) -> list[GameResult]:
    """Play one game per answer in this process.

    The game at position ``i`` is seeded with ``seed + i``, so results do
    not depend on how the answers are split across workers.
    """
    played = _play_indexed(
        list(enumerate(answers)), guesser_name, lexicon,
        max_turns, seed, verbose=verbose, progress=progress,
    )
    return [r for _, r in played]


def _run_chunk(
    games: list[tuple[int, str]],
    guesser_name: str,
    dictionary: str | None,
    max_turns: int,
    seed: int | None,
) -> list[tuple[int, GameResult]]:
    """Worker: every process builds its own simulator."""
    lexicon = load_lexicon(dictionary)
    return _play_indexed(games, guesser_name, lexicon, max_turns, seed, progress=False)


def run_parallel(
    answers: Sequence[str],
    guesser_name: str,
    dictionary: str | None = None,
    max_turns: int = MAX_TURNS,
    seed: int | None = None,
    workers: int = 2,
) -> list[GameResult]:
    """Split *answers* across *workers* processes; results keep input order."""
    games = list(enumerate(answers))
    chunks = [games[i::workers] for i in range(workers)]
    results: list[GameResult | None] = [None] * len(games)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_run_chunk, chunk, guesser_name, dictionary, max_turns, seed)
            for chunk in chunks if chunk
        ]
        with tqdm(total=len(games), desc=guesser_name) as pbar:
            for fut in as_completed(futures):
                chunk_results = fut.result()
                for index, r in chunk_results:
                    results[index] = r
                pbar.update(len(chunk_results))
    return results


def summarize(results: Sequence[GameResult], max_turns: int = MAX_TURNS) -> dict:
    """Aggregate per-game results.

    Turn statistics are over solved games only; unsolved games are
    counted under ``"failed"`` in the distribution.
    """
    n = len(results)
    turns = sorted(r.turns for r in results if r.turns is not None)
    solved = len(turns)
    dist: dict[str, int] = {}
    for r in results:
        key = str(r.turns) if r.turns is not None else "failed"
        dist[key] = dist.get(key, 0) + 1

    if turns:
        mean = sum(turns) / solved
        median = turns[solved // 2] if solved % 2 == 1 else (
            turns[solved // 2 - 1] + turns[solved // 2]
        ) / 2
    else:
        mean = median = 0

    return {
        "games": n,
        "solved": solved,
        "solve_rate": round(solved / n, 4) if n else 0,
        "mean_turns": round(mean, 3),
        "median_turns": median,
        "max_turns": max(turns) if turns else 0,
        "over_canonical": sum(1 for t in turns if t > CANONICAL_TURNS),
        "turn_limit": max_turns,
        "distribution": dist,
    }


def print_summary(summary: dict, guesser_name: str) -> None:
    n = summary["games"]
    print(f"\n=== {guesser_name} — {n} games ===")
    if not n:
        return
    print(f"  Solved: {summary['solved']}/{n} ({100 * summary['solve_rate']:.1f}%)"
          f" within {summary['turn_limit']} turns")
    print(f"  Turns — mean: {summary['mean_turns']:.2f}, "
          f"median: {summary['median_turns']:.1f}, max: {summary['max_turns']}")
    if summary["over_canonical"]:
        print(f"  {summary['over_canonical']} game(s) needed more than "
              f"{CANONICAL_TURNS} turns")


def plot_distribution(results: Sequence[GameResult], guesser_name: str, path: Path) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    turns = [r.turns for r in results if r.turns is not None]
    mx = max(turns) if turns else CANONICAL_TURNS
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(turns, bins=bins, edgecolor="black", align="left")
    ax.axvline(CANONICAL_TURNS + 0.5, color="red", linestyle="--", linewidth=1)
    ax.set_title(f"{guesser_name} — turn distribution")
    ax.set_xlabel("Turns")
    ax.set_ylabel("Count")
    fig.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {path}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate word-guessing games for one guesser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python simulate.py --guesser entropy                   # every bundled answer
  python simulate.py --guesser random --num-games 50     # subsample 50 answers
  python simulate.py --guesser maxcount --max-turns 6    # canonical rules
  python simulate.py --guesser entropy --workers 4 --json out.json
""",
    )
    parser.add_argument("--guesser", type=str, required=True, help="Guesser name")
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Path to dictionary ('word count' per line)")
    parser.add_argument("--answers", type=str, default=None,
                        help="Path to answers list (whitespace separated)")
    parser.add_argument("--num-games", type=int, default=None,
                        help="Limit number of answers to play")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--max-turns", type=int, default=MAX_TURNS,
                        help=f"Turn limit per game (default: {MAX_TURNS})")
    parser.add_argument("--workers", type=int, default=1,
                        help="Parallel worker processes (default: 1)")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    for flag in ("num_games", "max_turns", "workers"):
        value = getattr(args, flag)
        if value is not None and value < 1:
            parser.error(f"--{flag.replace('_', '-')} must be positive, got {value}")
    if args.verbose and args.workers > 1:
        parser.error("--verbose cannot be combined with --workers > 1")

    try:
        find_guesser(args.guesser)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 1

    lexicon = load_lexicon(args.dictionary)
    answers = load_answers(args.answers)
    if args.num_games is not None and args.num_games < len(answers):
        answers = random.Random(args.seed).sample(answers, args.num_games)
    print(f"Dictionary: {len(lexicon)} words | answers: {len(answers)} "
          f"| turn limit: {args.max_turns}")

    if args.workers > 1:
        results = run_parallel(
            answers, args.guesser, args.dictionary,
            max_turns=args.max_turns, seed=args.seed, workers=args.workers,
        )
    else:
        results = run_games(
            answers, args.guesser, lexicon,
            max_turns=args.max_turns, seed=args.seed, verbose=args.verbose,
        )

    summary = summarize(results, args.max_turns)
    print_summary(summary, args.guesser)

    if args.plot:
        plot_distribution(results, args.guesser, Path(args.plot))

    if args.json:
        json_path = Path(args.json)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        output = {
            "guesser": args.guesser,
            "config": {
                "max_turns": args.max_turns,
                "num_games": len(answers),
                "seed": args.seed,
                "workers": args.workers,
            },
            "summary": summary,
            "games": [asdict(r) for r in results],
        }
        json_path.write_text(json.dumps(output, indent=2), encoding="utf-8")
        print(f"JSON saved to {json_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
