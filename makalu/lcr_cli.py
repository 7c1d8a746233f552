"""Interactive console front end for the Left-Center-Right dice game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from functools import partial
from typing import TextIO

from makalu.lcr import Dice, DiceFace, Game

MIN_PLAYERS = 3
EXIT_COMMAND = "Exit"


def _first_token(line: str) -> str:
    parts = line.split()
    return parts[0] if parts else ""


def _parse_int(line: str, previous: int) -> int:
    """Parse the first token as an integer, keeping ``previous`` on bad input."""
    try:
        return int(_first_token(line))
    except ValueError:
        return previous


def _format_faces(faces: list[DiceFace]) -> str:
    return "[" + " ".join(str(face) for face in faces) + "]"


def play(
    input_lines: Iterable[str],
    output: TextIO,
    rng: random.Random | None = None,
) -> str | None:
    """Run a game reading answers from ``input_lines``.

    Returns the winner's name, or None when the game is abandoned or the
    input runs out.
    """
    lines: Iterator[str] = iter(input_lines)
    say = partial(print, file=output)
    dice = Dice(rng)

    say("Welcome to LCR dice game :D")
    game = Game()
    say("Please enter how many players will play the game?")
    say(f"Note: enter number more than {MIN_PLAYERS - 1}.")

    count = 0
    while True:
        line = next(lines, None)
        if line is None:
            return None
        count = _parse_int(line, count)
        if count >= MIN_PLAYERS:
            break
        say(f"Note: enter number more than {MIN_PLAYERS - 1}.")

    for index in range(count):
        player = game.join(f"P{index}")
        say(f"player: {player.name} joined.")

    while True:
        if not any(player.tokens > 0 for player in game.players):
            return None
        turn = game.next_turn()
        if turn.tokens == 0:
            say(f"\nplayer {turn.name}, you have 0 tokens.")
            continue

        say(
            f"\nplayer {turn.name}, you have {turn.tokens} tokens. "
            "hit any key to roll dices"
        )
        line = next(lines, None)
        if line is None:
            return None
        if _first_token(line) == EXIT_COMMAND:
            say("You killed the game :(")
            return None

        faces = turn.roll_dice(dice)
        say("You got:", _format_faces(faces))
        for player in game.players:
            say(f"player {player.name}, have {player.tokens} tokens")

        winner = game.finished()
        if winner is not None:
            say("\nWinner: ", winner.name)
            return winner.name


def main(argv: list[str] | None = None) -> int:
    """Play the game on the terminal."""
    parser = argparse.ArgumentParser(description="Play the LCR dice game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)
    play(sys.stdin, sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())