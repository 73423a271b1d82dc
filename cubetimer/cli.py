"""Command-line entry point for the cubing timer."""

from __future__ import annotations

import random
import sys
import time
from contextlib import AbstractContextManager, nullcontext
from enum import Enum
from typing import IO, Any, Callable, Sequence

from cubetimer.cube import Cube
from cubetimer.db import DEFAULT_DB_PATH, SolveStore, StoreError
from cubetimer.scramble import Move, generate_scramble
from cubetimer.term import RawTerminal, TerminalError, clear_term
from cubetimer.timer import start_cube_timer

HELP_TEXT = (
    "Commands: help, stats, run\n"
    "help: information\n"
    "stats: prints some stats (personal best, all time count/avg, last 5 solves)\n"
    "run: starts solve\n"
    "delete: delete the last solve\n"
    "plus2: adds 2 to the last solve\n"
    "typing: allows for manually typing timer\n"
    "virtual: virtual cube solver\n"
    "genscram: generates scramble\n"
)

INVALID_TEXT = "Invalid Command: try running the help cmd\n"

VIRTUAL_HELP = "f: front\nb: back\nl: left\nr: right\nu: up\nd: down\n"

_VIRTUAL_TURNS = {
    "f": Cube.f_move,
    "b": Cube.b_move,
    "u": Cube.u_move,
    "d": Cube.d_move,
    "r": Cube.r_move,
    "l": Cube.l_move,
}


class Command(Enum):
    """Subcommands, valued by the word that selects them."""

    RUN = "run"
    STATS = "stats"
    HELP = "help"
    INVALID = ""
    DELETE = "delete"
    PLUS_TWO = "plus2"
    TYPING = "typing"
    VIRTUAL = "virtual"
    GEN_SCRAM = "genscram"


def parse_args(argv: Sequence[str]) -> Command:
    """Pick the command named by the first argument."""
    if not argv or not argv[0]:
        return Command.INVALID
    try:
        return Command(argv[0])
    except ValueError:
        return Command.INVALID


def _out(out: IO[str] | None) -> IO[str]:
    return sys.stdout if out is None else out


def _moves_line(moves: Sequence[Move]) -> str:
    return "".join(f"{move} " for move in moves)


def _record(db_path: str, solve_time: float, moves: Sequence[Move]) -> None:
    with SolveStore(db_path) as store:
        store.init_tables()
        store.insert_solve(solve_time, moves)


def cmd_run(db_path: str = DEFAULT_DB_PATH, out: IO[str] | None = None) -> None:
    """Time a solve with the space bar and record it."""
    out = _out(out)
    result = start_cube_timer(out=out)
    out.write(_moves_line(result.moves) + f"\nTime: {result.time:.3f}\n")
    _record(db_path, result.time, result.moves)


def cmd_stats(db_path: str = DEFAULT_DB_PATH, out: IO[str] | None = None) -> None:
    """Print recent solves, the all-time average and count, and the best time."""
    out = _out(out)
    with SolveStore(db_path) as store:
        avg, count = store.average_all_time()
        best, best_scramble = store.personal_best()
        recent = store.last_five()
    out.write(f"Last {len(recent)} Scrambles:\n")
    for solve_time, scramble in recent:
        out.write(f"Time: {solve_time:.3f} - {scramble}\n")
    out.write("\n")
    out.write(f"All Time Avg: {avg:.3f}\n")
    out.write(f"All Time Count: {count}\n")
    out.write(f"Personal Best: {best:.3f}: {best_scramble}\n")


def cmd_delete(db_path: str = DEFAULT_DB_PATH, out: IO[str] | None = None) -> None:
    """Delete the most recent solve."""
    with SolveStore(db_path) as store:
        store.delete_last_solve()
    _out(out).write("Deleted Last Solve\n")


def cmd_plus_two(db_path: str = DEFAULT_DB_PATH, out: IO[str] | None = None) -> None:
    """Add a two-second penalty to the most recent solve."""
    with SolveStore(db_path) as store:
        try:
            store.add_two_last()
        finally:
            _out(out).write("Adding 2 to last time\n")


def _read_time(infile: IO[str]) -> float:
    for line in infile:
        tokens = line.split()
        if tokens:
            try:
                return float(tokens[0])
            except ValueError:
                raise ValueError(f"not a time: {tokens[0]!r}") from None
    raise ValueError("no time given")


def cmd_typing(
    db_path: str = DEFAULT_DB_PATH,
    rng: random.Random | None = None,
    infile: IO[str] | None = None,
    out: IO[str] | None = None,
) -> None:
    """Show a scramble, read a typed time and record it."""
    out = _out(out)
    infile = sys.stdin if infile is None else infile
    moves = generate_scramble(rng)
    out.write(_moves_line(moves) + "\n")
    cube = Cube()
    cube.apply(moves)
    out.write(cube.render())
    out.write("Insert Time Below:\n")
    out.flush()
    solve_time = _read_time(infile)
    _record(db_path, solve_time, moves)


def cmd_virtual(
    db_path: str = DEFAULT_DB_PATH,
    rng: random.Random | None = None,
    read_key: Callable[[], str] | None = None,
    out: IO[str] | None = None,
    clock: Callable[[], float] | None = None,
    terminal: AbstractContextManager[Any] | None = None,
) -> None:
    """Solve a scrambled virtual cube with key presses, timed from the first turn."""
    out = _out(out)
    clock = time.monotonic if clock is None else clock
    if terminal is None:
        terminal = nullcontext() if read_key is not None else RawTerminal(min_bytes=1)

    moves = generate_scramble(rng)
    cube = Cube()
    cube.apply(moves)

    have_moved = False
    elapsed = 0.0
    start = 0.0
    with terminal as raw:
        key = read_key if read_key is not None else raw.read_key
        while not cube.is_solved():
            clear_term(out)
            out.write(cube.render())
            out.write(f"{elapsed:.3f}\n\n")
            out.write(VIRTUAL_HELP)
            out.flush()

            turn = _VIRTUAL_TURNS.get(key())
            if turn is not None:
                turn(cube)

            now = clock()
            if not have_moved:
                start = now
            elapsed = now - start
            if turn is not None:
                have_moved = True

    clear_term(out)
    out.write(_moves_line(moves) + f"\nTime: {elapsed:.3f}\n")
    _record(db_path, elapsed, moves)


def cmd_gen_scram(rng: random.Random | None = None, out: IO[str] | None = None) -> None:
    """Print a fresh scramble."""
    _out(out).write(_moves_line(generate_scramble(rng)) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named on the command line and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    command = parse_args(args)
    if command is Command.INVALID:
        sys.stdout.write(INVALID_TEXT)
        return -1
    if command is Command.HELP:
        sys.stdout.write(HELP_TEXT)
        return 0

    handlers: dict[Command, Callable[[], None]] = {
        Command.RUN: cmd_run,
        Command.STATS: cmd_stats,
        Command.DELETE: cmd_delete,
        Command.PLUS_TWO: cmd_plus_two,
        Command.TYPING: cmd_typing,
        Command.VIRTUAL: cmd_virtual,
        Command.GEN_SCRAM: cmd_gen_scram,
    }
    try:
        handlers[command]()
    except (StoreError, TerminalError, ValueError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0