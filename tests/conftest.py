from __future__ import annotations

import pytest

from lexicon import Dictionary, build_dictionary

WORDS = ["last", "fast", "bets", "code"]


@pytest.fixture
def dictionary() -> Dictionary:
    return build_dictionary(WORDS)
