from __future__ import annotations

import random

import pytest

import cli


def _feed(monkeypatch, *lines: str) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_winning_game(monkeypatch, capsys, dictionary):
    _feed(monkeypatch, "y", "4", "2", "a", "b", "c", "o", "d", "e", "n")
    cli.play(dictionary)
    out = capsys.readouterr().out
    assert "Sorry its a wrong input. Remaining tries: 1" in out
    assert "You guessed a right character!!" in out
    assert "You won! Congratulations!!!" in out


def test_losing_game_reveals_a_candidate(monkeypatch, capsys, dictionary):
    _feed(monkeypatch, "y", "4", "0", "a", "n")
    cli.play(dictionary, rng=random.Random(0))
    out = capsys.readouterr().out
    assert "All retries finished, you lose!! Chosen word was: " in out
    word = out.split("Chosen word was: ")[1].split()[0]
    assert word in {"bets", "code"}


def test_invalid_construction_messages(monkeypatch, capsys, dictionary):
    _feed(monkeypatch, "y", "5", "3", "y", "4", "15", "y", "x", "n")
    cli.play(dictionary)
    out = capsys.readouterr().out
    assert "Sorry we do not have any words of length 5" in out
    assert "Invalid value of expected retries" in out
    assert "is not a number" in out


def test_duplicate_and_invalid_characters(monkeypatch, capsys, dictionary):
    _feed(monkeypatch, "maybe", "y", "4", "8", "i", "i", "ab", "7")
    cli.play(dictionary)
    out = capsys.readouterr().out
    assert out.count("Invalid character, please input the character again") == 3
    assert "Character i has been used. Please enter a new character." in out


def test_unexpected_answer(monkeypatch, capsys, dictionary):
    _feed(monkeypatch, "q", "n")
    cli.play(dictionary)
    assert "please enter a valid input (y/n)" in capsys.readouterr().out


def test_main_with_missing_dictionary(tmp_path, capsys):
    with pytest.raises(SystemExit):
        cli.main(["--dictionary", str(tmp_path / "missing.txt")])
    assert "Unable to load dictionary" in capsys.readouterr().err


def test_main_plays_with_custom_dictionary(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("last\nfast\nbets\ncode\n", encoding="utf-8")
    _feed(monkeypatch, "y", "4", "11")
    cli.main(["--dictionary", str(words), "--max-allowed-retries", "12", "--seed", "1"])
    out = capsys.readouterr().out
    assert "____" in out
