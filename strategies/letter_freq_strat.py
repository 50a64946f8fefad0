"""Letter-frequency strategy: guess the letter most words could still contain."""

from __future__ import annotations

from collections import Counter

from hangman_env import consistent_candidates
from strategy import Strategy, GameConfig, first_unused


class LetterFreqStrategy(Strategy):
    """Guess the unused letter appearing in the most consistent words.

    Each word counts a letter once, however often it repeats.  Ties go
    to the alphabetically first letter.
    """

    @property
    def name(self) -> str:
        return "LetterFreq"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)

    def guess(self, pattern: str, used_letters: tuple[str, ...]) -> str:
        wrong = [ch for ch in used_letters if ch not in pattern]
        candidates = consistent_candidates(self._vocab, pattern, wrong)

        counts: Counter[str] = Counter()
        for w in candidates:
            counts.update(set(w) - set(used_letters))
        if not counts:
            return first_unused(used_letters)
        return min(counts, key=lambda ch: (-counts[ch], ch))
