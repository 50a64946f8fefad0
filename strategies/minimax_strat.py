"""Minimax strategy: play against the adversary's own resolution rule.

For every unused letter, ask the engine how it would answer and pick the
letter that leaves it the fewest words.  Among equally good letters,
prefer one the engine would have to accept, since that costs no retry.
"""

from __future__ import annotations

from hangman_env import consistent_candidates, resolve_guess
from strategy import ALPHABET, Strategy, GameConfig, first_unused


class MinimaxStrategy(Strategy):
    """Pick the letter whose adversarial answer shrinks the candidates most."""

    @property
    def name(self) -> str:
        return "Minimax"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)

    def guess(self, pattern: str, used_letters: tuple[str, ...]) -> str:
        wrong = [ch for ch in used_letters if ch not in pattern]
        candidates = consistent_candidates(self._vocab, pattern, wrong)
        if not candidates:
            return first_unused(used_letters)

        best: tuple[int, int, str] | None = None
        for ch in ALPHABET:
            if ch in used_letters:
                continue
            survivors, new_pattern = resolve_guess(candidates, pattern, ch)
            rejected = int(new_pattern == pattern)
            key = (len(survivors), rejected, ch)
            if best is None or key < best:
                best = key
        if best is None:
            return first_unused(used_letters)
        return best[2]
