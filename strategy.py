"""Abstract base class for Hangman guessers."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from dataclasses import dataclass

ALPHABET = string.ascii_lowercase


@dataclass(frozen=True)
class GameConfig:
    """All information a strategy receives at the start of each game.

    Attributes
    ----------
    word_length : int
        Number of letters in the word being guessed.
    vocabulary : tuple[str, ...]
        Every dictionary word of that length (immutable).  The program
        may end up "choosing" any of them.
    max_retries : int
        Wrong guesses tolerated before the game is lost.
    seed : int or None
        Seed for strategies that use randomness.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    max_retries: int
    seed: int | None = None


class Strategy(ABC):
    """Interface that every Hangman strategy must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called at the start of each game.

        The default implementation does nothing.
        """

    @abstractmethod
    def guess(self, pattern: str, used_letters: tuple[str, ...]) -> str:
        """Return the next letter given the shown pattern and the letters used so far."""
        ...

    def end_game(self, won: bool, pattern: str, wrong_guesses: int) -> None:
        """Called at the end of each game.

        The default implementation does nothing.
        """


def first_unused(used_letters: tuple[str, ...]) -> str:
    """Fallback guess: the first letter of the alphabet not used yet."""
    for ch in ALPHABET:
        if ch not in used_letters:
            return ch
    raise RuntimeError("Every letter has already been guessed")
