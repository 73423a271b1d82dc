import io
import random

import pytest

from cubetimer.scramble import generate_scramble, scramble_to_string
from cubetimer.term import TerminalError
from cubetimer.timer import start_cube_timer


class FakeTerminal:
    def __init__(self, keys):
        self._keys = iter(keys)
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *args):
        self.exited = True
        return False

    def read_key(self):
        return next(self._keys)


def _keys(seq):
    it = iter(seq)
    return lambda: next(it)


def test_time_is_between_space_presses():
    clock_values = [100.0, 101.0, 102.0, 103.5]
    clock = _keys(clock_values)
    out = io.StringIO()
    result = start_cube_timer(
        rng=random.Random(3),
        read_key=_keys(["x", " ", "", "", " "]),
        out=out,
        clock=clock,
    )
    assert result.time == clock_values[-1] - clock_values[0]


def test_uses_seeded_scramble_and_prints_it():
    out = io.StringIO()
    result = start_cube_timer(
        rng=random.Random(11),
        read_key=_keys([" ", " "]),
        out=out,
        clock=_keys([1.0, 1.0]),
    )
    assert result.moves == generate_scramble(random.Random(11))
    text = out.getvalue()
    assert scramble_to_string(result.moves) in text
    assert "Press <Space> to Start & Stop\n" in text
    assert text.endswith("\033[2J\033[H")


def test_displays_running_time():
    out = io.StringIO()
    start_cube_timer(
        rng=random.Random(5),
        read_key=_keys([" ", " "]),
        out=out,
        clock=_keys([2.0, 2.0]),
    )
    assert "0.000\n" in out.getvalue()


def test_terminal_is_entered_and_exited():
    term = FakeTerminal([" ", "a", " "])
    result = start_cube_timer(
        rng=random.Random(1),
        out=io.StringIO(),
        clock=_keys([0.0, 0.0, 0.0]),
        terminal=term,
    )
    assert term.entered and term.exited
    assert result.time == 0.0


def test_read_error_propagates_and_restores_terminal():
    term = FakeTerminal([])

    def broken():
        raise TerminalError("boom")

    with pytest.raises(TerminalError):
        start_cube_timer(
            rng=random.Random(1),
            read_key=broken,
            out=io.StringIO(),
            clock=_keys([0.0]),
            terminal=term,
        )
    assert term.exited