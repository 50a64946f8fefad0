#!/usr/bin/env python3
"""Interactive adversarial Hangman.

Usage:
    python3 cli.py
    python3 cli.py --dictionary words.txt --max-allowed-retries 8
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from hangman_env import (
    GameState,
    GuessError,
    HangmanGame,
    InputError,
    MAX_ALLOWED_RETRIES,
    new_game,
)
from lexicon import Dictionary, load_dictionary


logger = logging.getLogger(__name__)


def read_char(prompt: str) -> str:
    """Prompt until the player types exactly one alphabetic character.

    Raises EOFError when input runs out.
    """
    while True:
        text = input(prompt).strip()
        if len(text) == 1 and text.isalpha():
            return text
        print("Invalid character, please input the character again")


def read_int(prompt: str) -> int | None:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        print(f"Invalid input given: {text!r} is not a number")
        return None


def _report_input_error(err: InputError, length: int) -> None:
    if err is InputError.INVALID_LENGTH:
        print(f"Sorry we do not have any words of length {length} "
              "in the dictionary. Please try again!")
    elif err is InputError.INVALID_RETRIES:
        print("Invalid value of expected retries, please try again")
    else:
        print("Oops, input validation failed! Please try again.")


def play_round(game: HangmanGame, rng: random.Random) -> GameState:
    """Drive one game to its end and return the final state."""
    while not game.game_over():
        print(game.pattern)
        char = read_char(
            f"Enter a character (previous characters: {''.join(game.used_letters)}, "
            f"remaining tries {game.remaining_retries}): "
        )
        accepted, err = game.check_user_input(char)
        if err is GuessError.DUPLICATE_INPUT:
            print(f"Character {char} has been used. Please enter a new character.")
            continue
        if err is GuessError.INVALID_STATE:
            break

        if game.state is GameState.WON:
            print(game.pattern)
            print("You won! Congratulations!!!")
        elif game.state is GameState.LOST:
            word = rng.choice(game.candidates)
            print(f"All retries finished, you lose!! Chosen word was: {word}")
        elif accepted:
            print("You guessed a right character!!")
        else:
            print(f"Sorry its a wrong input. Remaining tries: {game.remaining_retries}")
    return game.state


def play(
    dictionary: Dictionary,
    max_allowed_retries: int = MAX_ALLOWED_RETRIES,
    rng: random.Random | None = None,
) -> None:
    """Offer games until the player says no or input runs out."""
    rng = rng or random.Random()
    try:
        while True:
            answer = read_char("Do you want to play a new game? (Y/N): ").lower()
            if answer == "n":
                break
            if answer != "y":
                print("Invalid input character, please enter a valid input (y/n)")
                continue

            length = read_int("Enter the expected length of the word: ")
            if length is None:
                continue
            retries = read_int(
                f"Enter the expected number of retries (max allowed retries: "
                f"{max_allowed_retries}): "
            )
            if retries is None:
                continue

            game, err = new_game(dictionary, length, retries, max_allowed_retries)
            if game is None:
                _report_input_error(err, length)
                continue
            logger.info("New game: length %d, retries %d, %d candidates",
                        length, retries, len(game.candidates))
            play_round(game, rng)
    except EOFError:
        print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play adversarial Hangman")
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Path of the word file, one word per line "
                             "(default: bundled dictionary)")
    parser.add_argument("--max-allowed-retries", type=int, default=MAX_ALLOWED_RETRIES,
                        help=f"Max number of allowed retries (default: {MAX_ALLOWED_RETRIES})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for revealing the chosen word on a loss")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        dictionary = load_dictionary(path=args.dictionary)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Unable to load dictionary: {exc}", file=sys.stderr)
        sys.exit(1)

    play(dictionary, args.max_allowed_retries, random.Random(args.seed))


if __name__ == "__main__":
    main()
