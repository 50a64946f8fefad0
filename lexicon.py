"""Word-list loading and length indexing (self-contained).

Supports one format:
  - Plain text: one word per line

Every word must consist solely of ASCII letters.  Anything else is
discarded with a warning, never an error: one malformed line must not
take the whole dictionary down with it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping


logger = logging.getLogger(__name__)

_DIR = Path(__file__).resolve().parent
DEFAULT_DICTIONARY = _DIR / "data" / "dictionary.txt"

_VALID_WORD = re.compile(r"^[a-zA-Z]+$")


def is_valid_word(word: str) -> bool:
    return bool(_VALID_WORD.match(word))


# ------------------------------------------------------------------
# Dictionary dataclass
# ------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Dictionary:
    """Words grouped by length.  Read-only once built.

    Attributes
    ----------
    by_length : Mapping[int, tuple[str, ...]]
        Word length -> words of that length, in input order.
    """

    by_length: Mapping[int, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def words(self, length: int) -> tuple[str, ...]:
        """Return every word of *length* (empty tuple if there is none)."""
        return self.by_length.get(length, ())

    def has_length(self, length: int) -> bool:
        return bool(self.by_length.get(length))

    @property
    def lengths(self) -> list[int]:
        return sorted(self.by_length)

    def __len__(self) -> int:
        return sum(len(ws) for ws in self.by_length.values())


# ------------------------------------------------------------------
# Building
# ------------------------------------------------------------------

def build_dictionary(words: Iterable[str]) -> Dictionary:
    """Validate *words* and index them by length.

    Invalid words are logged and skipped; exact duplicates are kept once.
    No case normalization is applied.
    """
    seen: set[str] = set()
    grouped: dict[int, list[str]] = {}
    discarded = 0
    for w in words:
        if not is_valid_word(w):
            logger.warning("Discarding word %r since it has invalid characters", w)
            discarded += 1
            continue
        if w in seen:
            continue
        seen.add(w)
        grouped.setdefault(len(w), []).append(w)

    by_length = MappingProxyType({n: tuple(ws) for n, ws in grouped.items()})
    logger.info(
        "Indexed %d words over %d lengths (%d discarded)",
        len(seen), len(by_length), discarded,
    )
    return Dictionary(by_length=by_length)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def load_words(path: str | Path) -> list[str]:
    """Load plain-text word list (one word per line, blanks skipped)."""
    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")
    words: list[str] = []
    # Undecodable bytes become U+FFFD and fail word validation.
    for raw in src.read_text(encoding="utf-8", errors="replace").splitlines():
        w = raw.strip()
        if w:
            words.append(w)
    return words


def load_dictionary(
    custom_word_list: Iterable[str] | None = None,
    path: str | Path | None = None,
) -> Dictionary:
    """Build the dictionary shared by every game.

    Parameters
    ----------
    custom_word_list : iterable of str or None
        Words to index directly (mainly for tests).  None or empty means
        "load from file".
    path : str or None
        Word file used when no custom list is given.  None falls back to
        ``data/dictionary.txt`` next to this module.

    Returns
    -------
    Dictionary
        A fresh value; calling again never mutates an earlier result.
    """
    words = list(custom_word_list) if custom_word_list is not None else []
    if words:
        return build_dictionary(words)

    src = Path(path) if path is not None else DEFAULT_DICTIONARY
    dictionary = build_dictionary(load_words(src))
    if not len(dictionary):
        raise ValueError(f"No valid words found in {src}")
    logger.info("Loaded dictionary from %s", src)
    return dictionary
