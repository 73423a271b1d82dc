"""Cube moves, scramble generation and scramble simplification."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable

SCRAMBLE_LENGTH = 30


class Face(Enum):
    """A face of the cube, valued by its notation letter."""

    FRONT = "F"
    BACK = "B"
    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"


_SUFFIX_TURNS = {"": 1, "2": 2, "P": 3}
_TURN_SUFFIX = {1: "", 2: "_2", 3: "_P"}
_TURN_NOTATION = {1: "", 2: "2", 3: "'"}


class Move(Enum):
    """A single face turn: clockwise, prime (counter-clockwise) or double."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3
    FRONT = 4
    BACK = 5
    RIGHT_P = 6
    LEFT_P = 7
    UP_P = 8
    DOWN_P = 9
    FRONT_P = 10
    BACK_P = 11
    RIGHT_2 = 12
    LEFT_2 = 13
    UP_2 = 14
    DOWN_2 = 15
    FRONT_2 = 16
    BACK_2 = 17

    @property
    def face(self) -> Face:
        """The face this move turns."""
        return Face[self.name.split("_")[0]]

    @property
    def turns(self) -> int:
        """Number of clockwise quarter turns: 1, 2 or 3."""
        _, _, suffix = self.name.partition("_")
        return _SUFFIX_TURNS[suffix]

    @classmethod
    def from_face(cls, face: Face, turns: int) -> "Move":
        """Build the move turning ``face`` by ``turns`` clockwise quarter turns."""
        turns %= 4
        if turns == 0:
            raise ValueError("a move needs a non-zero number of quarter turns")
        return cls[face.name + _TURN_SUFFIX[turns]]

    def __str__(self) -> str:
        return self.face.value + _TURN_NOTATION[self.turns]


# Random moves are drawn from the first seventeen moves only; BACK_2 is never drawn.
_RANDOM_POOL = tuple(move for move in Move if move.value < 17)


def simplify_scramble(moves: Iterable[Move]) -> list[Move]:
    """Merge neighbouring turns of the same face, dropping those that cancel."""
    result = list(moves)
    i = 0
    while i < len(result) - 1:
        first, second = result[i], result[i + 1]
        if first.face is not second.face:
            i += 1
            continue
        turns = (first.turns + second.turns) % 4
        if turns == 0:
            del result[i : i + 2]
        else:
            result[i : i + 2] = [Move.from_face(first.face, turns)]
        if i > 0:
            i -= 1
    return result


def generate_scramble(rng: random.Random | None = None) -> list[Move]:
    """Draw a random scramble of up to thirty moves and simplify it."""
    chooser = rng if rng is not None else random.Random()
    drawn = [chooser.choice(_RANDOM_POOL) for _ in range(SCRAMBLE_LENGTH)]
    return simplify_scramble(drawn)


def scramble_to_string(moves: Iterable[Move]) -> str:
    """Render moves in standard notation, separated by single spaces."""
    return " ".join(str(move) for move in moves)