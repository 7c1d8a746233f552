"""The Left-Center-Right dice game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

STARTING_TOKENS = 3
MAX_DICE = 3


class DiceFace(str, Enum):
    RIGHT = "right"
    LEFT = "left"
    CENTER = "center"
    NOTHING = "DoNothing"

    def __str__(self) -> str:
        return self.value


_FACES = (DiceFace.RIGHT, DiceFace.LEFT, DiceFace.CENTER)


class _Roller(Protocol):
    def roll(self) -> DiceFace:
        ...


class Dice:
    """A six-sided die: right, left, center, and three blank faces."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> DiceFace:
        """Roll the die and return the face that came up."""
        r = self._rng.randrange(6)
        return _FACES[r] if r < len(_FACES) else DiceFace.NOTHING


@dataclass(eq=False)
class Player:
    name: str
    tokens: int = STARTING_TOKENS
    right: Player | None = field(default=None, repr=False)
    left: Player | None = field(default=None, repr=False)

    def roll_dice(self, dice: _Roller) -> list[DiceFace]:
        """Roll one die per token, up to three, and pass tokens on."""
        results = []
        for _ in range(min(self.tokens, MAX_DICE)):
            face = dice.roll()
            results.append(face)
            if face is DiceFace.RIGHT:
                self._give(self.right)
            elif face is DiceFace.LEFT:
                self._give(self.left)
            elif face is DiceFace.CENTER:
                self.tokens -= 1
        return results

    def _give(self, neighbour: Player | None) -> None:
        if neighbour is None:
            raise RuntimeError(f"player {self.name} has no neighbour to pass to")
        self.tokens -= 1
        neighbour.tokens += 1


class Game:
    """Players seated in a ring, taking turns in join order."""

    def __init__(self) -> None:
        self.players: list[Player] = []
        self._turn: Player | None = None

    def join(self, player_name: str) -> Player:
        """Seat a new player between the last one to join and the first."""
        player = Player(player_name)
        if self.players:
            first, last = self.players[0], self.players[-1]
            player.left = last
            player.right = first
            last.right = player
            first.left = player
        self.players.append(player)
        return player

    def finished(self) -> Player | None:
        """Return the only player still holding tokens, if there is exactly one."""
        holders = [player for player in self.players if player.tokens > 0]
        return holders[0] if len(holders) == 1 else None

    def next_turn(self) -> Player:
        """Return the player whose turn it is now, moving round to the right."""
        if not self.players:
            raise ValueError("no players have joined the game")
        if self._turn is None:
            self._turn = self.players[0]
        elif self._turn.right is not None:
            self._turn = self._turn.right
        return self._turn