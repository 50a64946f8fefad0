"""Random strategy: pick uniformly at random from the unused letters."""

from __future__ import annotations

import random

from strategy import ALPHABET, Strategy, GameConfig


class RandomStrategy(Strategy):
    """Guess a random letter that has not been tried yet."""

    @property
    def name(self) -> str:
        return "Random"

    def begin_game(self, config: GameConfig) -> None:
        self._rng = random.Random(config.seed)

    def guess(self, pattern: str, used_letters: tuple[str, ...]) -> str:
        unused = [ch for ch in ALPHABET if ch not in used_letters]
        if not unused:
            raise RuntimeError("Every letter has already been guessed")
        return self._rng.choice(unused)
