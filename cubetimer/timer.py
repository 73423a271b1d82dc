"""Interactive space-bar solve timer."""

from __future__ import annotations

import random
import sys
import time
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import IO, Any, Callable

from cubetimer.cube import Cube
from cubetimer.scramble import Move, generate_scramble
from cubetimer.term import RawTerminal, clear_term

_POLL_INTERVAL = 0.0005


@dataclass
class TimerResult:
    """A finished timed solve: elapsed seconds and the scramble used."""

    time: float
    moves: list[Move]


def start_cube_timer(
    rng: random.Random | None = None,
    read_key: Callable[[], str] | None = None,
    out: IO[str] | None = None,
    clock: Callable[[], float] | None = None,
    terminal: AbstractContextManager[Any] | None = None,
) -> TimerResult:
    """Show a scramble, then time the solve between two presses of space.

    Keys come from ``read_key`` when given, otherwise from the entered
    ``terminal`` (a non-blocking raw terminal on standard input by default).
    """
    out = sys.stdout if out is None else out
    clock = time.monotonic if clock is None else clock
    if terminal is None:
        terminal = nullcontext() if read_key is not None else RawTerminal(min_bytes=0)

    moves = generate_scramble(rng)
    clear_term(out)
    out.write("".join(f"{move} " for move in moves) + "\n")
    out.write("Press <Space> to Start & Stop\n")
    cube = Cube()
    cube.apply(moves)
    out.write(cube.render())
    out.flush()

    with terminal as raw:
        key = read_key if read_key is not None else raw.read_key
        while key() != " ":
            pass

        start = clock()
        while True:
            elapsed = clock() - start
            clear_term(out)
            out.write(f"{elapsed:.3f}\n")
            out.flush()
            if key() == " ":
                break
            time.sleep(_POLL_INTERVAL)

    clear_term(out)
    return TimerResult(elapsed, moves)