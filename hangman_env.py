"""Hangman environment: adversarial game logic for any word length.

The program never commits to a secret word.  It keeps every dictionary
word still consistent with the answers given so far and, on each guess,
answers with whichever outcome leaves it the most room.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Sequence

from lexicon import Dictionary


logger = logging.getLogger(__name__)

# Marker for a slot the guesser has not uncovered yet.
UNKNOWN = "_"

# Ceiling on the retries a player may ask for.
MAX_ALLOWED_RETRIES = 10


class GameState(enum.Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"


class InputError(enum.IntEnum):
    """Outcome of :func:`new_game`."""

    NO_ERROR = 0
    INVALID_RETRIES = 1
    INVALID_LENGTH = 2


class GuessError(enum.Enum):
    """Reasons :meth:`HangmanGame.check_user_input` refuses a letter."""

    DUPLICATE_INPUT = "duplicate_input"
    INVALID_STATE = "invalid_state"


# ------------------------------------------------------------------
# Partition engine
# ------------------------------------------------------------------

def blank_pattern(length: int) -> str:
    return UNKNOWN * length


def count_unknown(pattern: str) -> int:
    return pattern.count(UNKNOWN)


def reveal(word: str, pattern: str, letter: str) -> str:
    """Return the pattern shown if *word* were the secret and *letter* the guess."""
    if letter not in word:
        return pattern
    return "".join(
        letter if ch == letter else slot for ch, slot in zip(word, pattern)
    )


def partition(
    candidates: Iterable[str],
    pattern: str,
    letter: str,
) -> dict[str, list[str]]:
    """Group *candidates* by the pattern each would produce under *letter*."""
    groups: dict[str, list[str]] = {}
    for w in candidates:
        groups.setdefault(reveal(w, pattern, letter), []).append(w)
    return groups


def _preference(item: tuple[str, list[str]]) -> tuple[int, int, str]:
    # Bigger group, then more hidden slots, then smaller pattern string.
    pat, words = item
    return (-len(words), -count_unknown(pat), pat)


def resolve_guess(
    candidates: Sequence[str],
    pattern: str,
    letter: str,
) -> tuple[list[str], str]:
    """Answer *letter* in the way that least helps the guesser.

    Returns the surviving candidates and the pattern to show.  If the
    returned pattern equals *pattern*, the letter was rejected, even when
    some of the candidates contained it.

    Raises
    ------
    ValueError
        If *candidates* is empty or holds a word whose length differs
        from *pattern*.
    """
    if not candidates:
        raise ValueError("resolve_guess needs at least one candidate")
    n = len(pattern)
    bad = [w for w in candidates if len(w) != n]
    if bad:
        raise ValueError(
            f"Candidates with wrong length (expected {n}): {bad[:5]}"
        )

    groups = partition(candidates, pattern, letter)
    best_pattern, best_words = min(groups.items(), key=_preference)
    logger.debug(
        "Letter %r split %d candidates into %d groups %s; chose %r (%d words)",
        letter, len(candidates), len(groups),
        {p: len(ws) for p, ws in groups.items()}, best_pattern, len(best_words),
    )
    return best_words, best_pattern


def consistent_candidates(
    words: Iterable[str],
    pattern: str,
    wrong_letters: Iterable[str] = (),
) -> list[str]:
    """Keep only words a guesser could still face given what it has seen.

    Revealed slots must match exactly.  A hidden slot may hold neither a
    revealed letter (all its positions would have been shown) nor a
    rejected one.
    """
    revealed = {ch for ch in pattern if ch != UNKNOWN}
    excluded = revealed | set(wrong_letters)
    out: list[str] = []
    for w in words:
        if len(w) != len(pattern):
            continue
        if all(
            ch == slot if slot != UNKNOWN else ch not in excluded
            for ch, slot in zip(w, pattern)
        ):
            out.append(w)
    return out


# ------------------------------------------------------------------
# Game session
# ------------------------------------------------------------------

class HangmanGame:
    """A single adversarial Hangman game.

    Use :func:`new_game` to create one; it validates the inputs.

    Parameters
    ----------
    candidates : sequence of str
        Every dictionary word of the chosen length.
    expected_length : int
        Length of the word being guessed.
    allowed_retries : int
        Wrong guesses tolerated before the game is lost.
    """

    def __init__(
        self,
        candidates: Sequence[str],
        expected_length: int,
        allowed_retries: int,
    ) -> None:
        self._expected_length = expected_length
        self._allowed_retries = allowed_retries
        self._remaining_retries = allowed_retries
        self._candidates = list(candidates)
        self._pattern = blank_pattern(expected_length)
        self._used: list[str] = []
        self._history: list[tuple[str, bool]] = []
        self._state = GameState.RUNNING

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_user_input(self, letter: str) -> tuple[bool, GuessError | None]:
        """Submit one letter.

        Returns ``(accepted, error)``.  ``accepted`` is True when the
        letter uncovered at least one slot.  ``error`` is set (and the
        game left untouched) when the game is over or *letter* was
        already used.
        """
        if self._state is not GameState.RUNNING:
            return False, GuessError.INVALID_STATE
        if letter in self._used:
            return False, GuessError.DUPLICATE_INPUT

        self._used.append(letter)
        new_candidates, new_pattern = resolve_guess(
            self._candidates, self._pattern, letter
        )
        self._candidates = new_candidates

        if new_pattern == self._pattern:
            self._remaining_retries -= 1
            if self._remaining_retries < 0:
                self._state = GameState.LOST
            self._history.append((letter, False))
            return False, None

        self._pattern = new_pattern
        if UNKNOWN not in new_pattern:
            self._state = GameState.WON
        self._history.append((letter, True))
        return True, None

    def game_over(self) -> bool:
        return self._state is not GameState.RUNNING

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def expected_length(self) -> int:
        return self._expected_length

    @property
    def allowed_retries(self) -> int:
        return self._allowed_retries

    @property
    def remaining_retries(self) -> int:
        return self._remaining_retries

    @property
    def used_letters(self) -> tuple[str, ...]:
        return tuple(self._used)

    @property
    def pattern(self) -> str:
        """Current pattern shown to the player, ``_`` for hidden slots."""
        return self._pattern

    @property
    def candidates(self) -> list[str]:
        """Words the program can still claim it was thinking of."""
        return list(self._candidates)

    @property
    def history(self) -> list[tuple[str, bool]]:
        return list(self._history)


def new_game(
    dictionary: Dictionary,
    expected_length: int,
    max_retries: int,
    max_allowed_retries: int = MAX_ALLOWED_RETRIES,
) -> tuple[HangmanGame | None, InputError]:
    """Start a game, or report why the request is invalid.

    Returns ``(game, InputError.NO_ERROR)`` on success and
    ``(None, code)`` otherwise.  Length is checked before retries.
    """
    if not dictionary.has_length(expected_length):
        return None, InputError.INVALID_LENGTH
    if max_retries < 0 or max_retries > max_allowed_retries:
        return None, InputError.INVALID_RETRIES
    game = HangmanGame(
        candidates=dictionary.words(expected_length),
        expected_length=expected_length,
        allowed_retries=max_retries,
    )
    return game, InputError.NO_ERROR
