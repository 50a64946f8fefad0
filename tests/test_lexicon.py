from __future__ import annotations

import logging

import pytest

from lexicon import (
    DEFAULT_DICTIONARY,
    build_dictionary,
    is_valid_word,
    load_dictionary,
    load_words,
)


def test_groups_by_length_in_input_order():
    d = build_dictionary(["last", "cat", "fast", "dog", "bets"])
    assert d.words(4) == ("last", "fast", "bets")
    assert d.words(3) == ("cat", "dog")
    assert d.lengths == [3, 4]
    assert len(d) == 5


def test_discards_invalid_words_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="lexicon"):
        d = build_dictionary(["code", "can't", "e-mail", "über", "b3ts", "", "last"])
    assert d.words(4) == ("code", "last")
    assert not d.has_length(5)
    discarded = [r for r in caplog.records if "Discarding" in r.getMessage()]
    assert len(discarded) == 5


def test_no_case_normalization_and_no_duplicates():
    d = build_dictionary(["Code", "code", "code"])
    assert d.words(4) == ("Code", "code")


def test_missing_length():
    d = build_dictionary(["code"])
    assert d.words(7) == ()
    assert not d.has_length(7)


def test_dictionary_is_read_only():
    d = build_dictionary(["code"])
    with pytest.raises(TypeError):
        d.by_length[4] = ("last",)


@pytest.mark.parametrize("word, ok", [("abc", True), ("ABc", True), ("ab c", False), ("", False)])
def test_is_valid_word(word, ok):
    assert is_valid_word(word) is ok


def test_load_words_skips_blank_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("last\n  fast  \n\nbets\n", encoding="utf-8")
    assert load_words(path) == ["last", "fast", "bets"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")


def test_load_dictionary_prefers_custom_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\n", encoding="utf-8")
    d = load_dictionary(["code"], path=path)
    assert d.lengths == [4]


def test_load_dictionary_empty_list_reads_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nlemon\n", encoding="utf-8")
    d = load_dictionary([], path=path)
    assert d.words(5) == ("apple", "lemon")


def test_load_dictionary_rejects_file_without_valid_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("123\n???\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_dictionary(path=path)


def test_reloading_builds_a_fresh_value():
    first = load_dictionary(["code"])
    second = load_dictionary(["apple"])
    assert first.lengths == [4]
    assert second.lengths == [5]


def test_default_dictionary():
    assert DEFAULT_DICTIONARY.exists()
    d = load_dictionary()
    assert d.has_length(4)
    assert "code" in d.words(4)


def test_undecodable_line_is_discarded_not_fatal(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_bytes(b"last\nfast\ncaf\xe9\nbets\ncode\n")
    with caplog.at_level(logging.WARNING, logger="lexicon"):
        d = load_dictionary(path=path)
    assert d.words(4) == ("last", "fast", "bets", "code")
    discarded = [r for r in caplog.records if "Discarding" in r.getMessage()]
    assert len(discarded) == 1


def test_dictionary_is_hashable():
    d = load_dictionary(["code"])
    assert {d: "shared"}[d] == "shared"
    assert hash(d) == hash(d)
