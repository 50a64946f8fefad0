#!/usr/bin/env python3
"""Run a single guessing strategy against the adversarial engine."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Iterable

import numpy as np

from hangman_env import GameState, MAX_ALLOWED_RETRIES, new_game
from lexicon import Dictionary, load_dictionary
from strategy import Strategy, GameConfig
from strategies import find_strategy

RESULTS_DIR = Path(__file__).resolve().parent / "results"

logger = logging.getLogger(__name__)


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


def run_experiment(
    strat: Strategy,
    dictionary: Dictionary,
    lengths: Iterable[int] | None = None,
    max_retries: int = 6,
    num_games: int = 10,
    seed: int = 42,
    verbose: bool = False,
    max_allowed_retries: int = MAX_ALLOWED_RETRIES,
) -> list[dict]:
    """Play *num_games* games per word length and return one log per game.

    Raises
    ------
    ValueError
        If a length has no dictionary word or *max_retries* is out of range.
    """
    lengths = list(lengths) if lengths is not None else dictionary.lengths
    logs: list[dict] = []

    for length in lengths:
        for i in range(num_games):
            game, err = new_game(dictionary, length, max_retries, max_allowed_retries)
            if game is None:
                raise ValueError(
                    f"Cannot start a game (length={length}, retries={max_retries}): "
                    f"{err.name}"
                )
            config = GameConfig(
                word_length=length,
                vocabulary=dictionary.words(length),
                max_retries=max_retries,
                seed=seed + length * num_games + i,
            )
            strat.begin_game(config)

            if verbose:
                print(f"\n--- Game {i + 1}/{num_games} | length {length} ---")

            steps: list[dict] = []
            while not game.game_over():
                letter = strat.guess(game.pattern, game.used_letters)
                accepted, guess_err = game.check_user_input(letter)
                if guess_err is not None:
                    raise RuntimeError(
                        f"{strat.name} guessed {letter!r} in an invalid way: "
                        f"{guess_err.name}"
                    )
                remaining = len(game.candidates)
                steps.append({
                    "letter": letter,
                    "accepted": accepted,
                    "pattern": game.pattern,
                    "remaining": remaining,
                    "entropy_bits": round(_entropy_bits(remaining), 3),
                })
                if verbose:
                    mark = "+" if accepted else "-"
                    print(
                        f"  {mark} {letter}  {game.pattern}  "
                        f"remaining={remaining}  tries={game.remaining_retries}"
                    )

            won = game.state is GameState.WON
            wrong = sum(1 for _, ok in game.history if not ok)
            strat.end_game(won, game.pattern, wrong)
            logs.append({
                "game": i + 1,
                "word_length": length,
                "won": won,
                "num_guesses": len(game.history),
                "wrong_guesses": wrong,
                "pattern": game.pattern,
                "word": game.pattern if won else game.candidates[0],
                "steps": steps,
            })
            logger.info(
                "%s: length %d game %d %s after %d guesses",
                strat.name, length, i + 1, "won" if won else "lost", len(game.history),
            )
            if verbose:
                print(f"  -> {'WON' if won else 'LOST'} in {len(game.history)} guesses")

    return logs


def summarize(logs: list[dict]) -> dict:
    """Aggregate per-game logs into headline numbers."""
    if not logs:
        return {"games": 0, "wins": 0, "win_rate": 0.0,
                "mean_guesses": 0.0, "median_guesses": 0.0, "mean_wrong": 0.0}
    wins = np.array([g["won"] for g in logs], dtype=bool)
    guesses = np.array([g["num_guesses"] for g in logs], dtype=float)
    wrong = np.array([g["wrong_guesses"] for g in logs], dtype=float)
    return {
        "games": len(logs),
        "wins": int(wins.sum()),
        "win_rate": round(float(wins.mean()), 4),
        "mean_guesses": round(float(np.mean(guesses)), 3),
        "median_guesses": float(np.median(guesses)),
        "mean_wrong": round(float(np.mean(wrong)), 3),
    }


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    s = summarize(logs)
    n = s["games"]
    print(f"\n=== {strategy_name} — {n} games ===")
    if not n:
        return
    print(f"  Won: {s['wins']}/{n} ({100 * s['win_rate']:.1f}%)")
    print(f"  Guesses — mean: {s['mean_guesses']:.2f}, median: {s['median_guesses']:.1f}")
    print(f"  Wrong guesses — mean: {s['mean_wrong']:.2f}")


def plot_distribution(logs: list[dict], strategy_name: str, path: Path | None = None) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed — skipping plot", file=sys.stderr)
        return

    wrong = [g["wrong_guesses"] for g in logs]
    mx = max(wrong) if wrong else MAX_ALLOWED_RETRIES
    bins = list(range(0, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(wrong, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} — wrong guesses per game")
    ax.set_xlabel("Wrong guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / f"experiment_{strategy_name.lower()}.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Single-strategy Hangman experiment")
    parser.add_argument("--strategy", type=str, required=True, help="Strategy name")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--length", type=int, action="append", default=None,
                        help="Word length (repeatable; default: every length)")
    parser.add_argument("--max-retries", type=int, default=6,
                        help="Wrong guesses allowed per game (default: 6)")
    parser.add_argument("--num-games", type=int, default=10, help="Games per length")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    dictionary = load_dictionary(path=args.words)
    print(f"Dictionary: {len(dictionary)} words, lengths {dictionary.lengths}")

    try:
        cls = find_strategy(args.strategy)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        sys.exit(1)
    strat = cls()
    print(f"Strategy: {strat.name}")

    try:
        logs = run_experiment(
            strat=strat,
            dictionary=dictionary,
            lengths=args.length,
            max_retries=args.max_retries,
            num_games=args.num_games,
            seed=args.seed,
            verbose=args.verbose,
        )
    except ValueError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    print_experiment_summary(logs, strat.name)

    plot_path = Path(args.plot) if args.plot else RESULTS_DIR / f"experiment_{strat.name.lower()}.png"
    plot_distribution(logs, strat.name, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{strat.name.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "strategy": strat.name,
        "config": {
            "lengths": args.length or dictionary.lengths,
            "max_retries": args.max_retries,
            "num_games": args.num_games,
            "seed": args.seed,
        },
        "summary": summarize(logs),
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
