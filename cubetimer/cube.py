"""A sticker model of a 3x3 cube with face turns and terminal rendering."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from cubetimer.scramble import Face, Move

UP, LEFT, FRONT, RIGHT, BACK, DOWN = range(6)


class Color(Enum):
    """Sticker colours, valued by their ANSI background escape."""

    WHITE = "\033[47m"
    YELLOW = "\033[43m"
    BLUE = "\033[44m"
    GREEN = "\033[42m"
    RED = "\033[41m"
    ORANGE = "\033[48;5;208m"


_SOLVED_COLORS = (
    Color.WHITE,
    Color.ORANGE,
    Color.GREEN,
    Color.RED,
    Color.BLUE,
    Color.YELLOW,
)


def _square(color: Color) -> str:
    return f"{color.value}  \033[0m"


def _rotate_face_cw(face: list[Color]) -> None:
    face[0], face[2], face[8], face[6] = face[6], face[0], face[2], face[8]
    face[1], face[5], face[7], face[3] = face[3], face[1], face[5], face[7]


class Cube:
    """Six faces of nine stickers each, ordered up, left, front, right, back, down."""

    def __init__(self) -> None:
        self.faces: list[list[Color]] = [[color] * 9 for color in _SOLVED_COLORS]

    def f_move(self) -> None:
        """Turn the front face clockwise."""
        up, left, right, down = (
            self.faces[UP],
            self.faces[LEFT],
            self.faces[RIGHT],
            self.faces[DOWN],
        )
        _rotate_face_cw(self.faces[FRONT])
        saved = up[6:9]
        up[6], up[7], up[8] = left[8], left[5], left[2]
        left[8], left[5], left[2] = down[2], down[1], down[0]
        down[2], down[1], down[0] = right[0], right[3], right[6]
        right[0], right[3], right[6] = saved

    def b_move(self) -> None:
        """Turn the back face clockwise."""
        up, left, right, down = (
            self.faces[UP],
            self.faces[LEFT],
            self.faces[RIGHT],
            self.faces[DOWN],
        )
        _rotate_face_cw(self.faces[BACK])
        for i in range(3):
            saved = up[i]
            up[i] = right[2 + i * 3]
            right[2 + i * 3] = down[8 - i]
            down[8 - i] = left[6 - i * 3]
            left[6 - i * 3] = saved

    def r_move(self) -> None:
        """Turn the right face clockwise."""
        up, front, back, down = (
            self.faces[UP],
            self.faces[FRONT],
            self.faces[BACK],
            self.faces[DOWN],
        )
        _rotate_face_cw(self.faces[RIGHT])
        for i in range(3):
            saved = up[2 + i * 3]
            up[2 + i * 3] = front[2 + i * 3]
            front[2 + i * 3] = down[2 + i * 3]
            down[2 + i * 3] = back[6 - i * 3]
            back[6 - i * 3] = saved

    def l_move(self) -> None:
        """Turn the left face clockwise."""
        up, front, back, down = (
            self.faces[UP],
            self.faces[FRONT],
            self.faces[BACK],
            self.faces[DOWN],
        )
        _rotate_face_cw(self.faces[LEFT])
        for i in range(3):
            saved = up[i * 3]
            up[i * 3] = back[8 - i * 3]
            back[8 - i * 3] = down[i * 3]
            down[i * 3] = front[i * 3]
            front[i * 3] = saved

    def u_move(self) -> None:
        """Turn the up face clockwise."""
        front, left, right, back = (
            self.faces[FRONT],
            self.faces[LEFT],
            self.faces[RIGHT],
            self.faces[BACK],
        )
        _rotate_face_cw(self.faces[UP])
        for i in range(3):
            front[i], right[i], back[i], left[i] = right[i], back[i], left[i], front[i]

    def d_move(self) -> None:
        """Turn the down face clockwise."""
        front, left, right, back = (
            self.faces[FRONT],
            self.faces[LEFT],
            self.faces[RIGHT],
            self.faces[BACK],
        )
        _rotate_face_cw(self.faces[DOWN])
        for i in range(6, 9):
            front[i], left[i], back[i], right[i] = left[i], back[i], right[i], front[i]

    def apply(self, moves: Iterable[Move]) -> None:
        """Apply each move in order, as repeated clockwise quarter turns."""
        turn_for = {
            Face.FRONT: self.f_move,
            Face.BACK: self.b_move,
            Face.UP: self.u_move,
            Face.DOWN: self.d_move,
            Face.LEFT: self.l_move,
            Face.RIGHT: self.r_move,
        }
        for move in moves:
            turn = turn_for[move.face]
            for _ in range(move.turns):
                turn()

    def is_solved(self) -> bool:
        """True when every sticker matches the solved cube."""
        return all(
            all(sticker is color for sticker in face)
            for face, color in zip(self.faces, _SOLVED_COLORS)
        )

    def render(self) -> str:
        """Draw the cube as an unfolded net using ANSI background colours."""
        lines = []
        for row in range(3):
            lines.append("      " + "".join(_square(c) for c in self.faces[UP][row * 3 : row * 3 + 3]))
        for row in range(3):
            lines.append(
                "".join(
                    _square(c)
                    for face in self.faces[LEFT : BACK + 1]
                    for c in face[row * 3 : row * 3 + 3]
                )
            )
        for row in range(3):
            lines.append("      " + "".join(_square(c) for c in self.faces[DOWN][row * 3 : row * 3 + 3]))
        return "".join(line + "\n" for line in lines)