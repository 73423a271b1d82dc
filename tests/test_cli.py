import io
import itertools
import random

import pytest

from cubetimer.cli import (
    Command,
    cmd_delete,
    cmd_gen_scram,
    cmd_plus_two,
    cmd_stats,
    cmd_typing,
    cmd_virtual,
    main,
    parse_args,
)
from cubetimer.db import SolveStore, StoreError
from cubetimer.scramble import Move, generate_scramble, scramble_to_string


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "solves.db")


def _store_with(db_path, solves):
    with SolveStore(db_path) as store:
        store.init_tables()
        for solve_time, moves in solves:
            store.insert_solve(solve_time, moves)


@pytest.mark.parametrize("command", [c for c in Command if c is not Command.INVALID])
def test_parse_args_known_words(command):
    assert parse_args([command.value]) is command


def test_parse_args_specific_words():
    assert parse_args(["plus2"]) is Command.PLUS_TWO
    assert parse_args(["genscram"]) is Command.GEN_SCRAM


@pytest.mark.parametrize("argv", [[], ["bogus"], [""], ["RUN"]])
def test_parse_args_invalid(argv):
    assert parse_args(argv) is Command.INVALID


def test_gen_scram_prints_seeded_scramble():
    out = io.StringIO()
    cmd_gen_scram(random.Random(7), out)
    expected = generate_scramble(random.Random(7))
    assert out.getvalue().endswith("\n")
    assert out.getvalue().split() == [str(m) for m in expected]


def test_typing_records_time(db_path):
    out = io.StringIO()
    cmd_typing(db_path, random.Random(4), io.StringIO("\n  12.5\n"), out)
    moves = generate_scramble(random.Random(4))
    assert "Insert Time Below:\n" in out.getvalue()
    with SolveStore(db_path) as store:
        assert store.last_five() == [(12.5, scramble_to_string(moves))]


def test_typing_rejects_bad_input(db_path, tmp_path):
    with pytest.raises(ValueError):
        cmd_typing(db_path, random.Random(4), io.StringIO("fast\n"), io.StringIO())
    assert not (tmp_path / "solves.db").exists()


def test_typing_rejects_empty_input(db_path):
    with pytest.raises(ValueError):
        cmd_typing(db_path, random.Random(4), io.StringIO(""), io.StringIO())


def test_stats_output(db_path):
    _store_with(db_path, [(9.0, [Move.RIGHT, Move.UP]), (11.0, [Move.FRONT_P])])
    out = io.StringIO()
    cmd_stats(db_path, out)
    text = out.getvalue()
    assert text.startswith("Last 2 Scrambles:\n")
    assert "Time: 9.000 - R U\n" in text
    assert "All Time Avg: 10.000\n" in text
    assert "All Time Count: 2\n" in text
    assert text.endswith("Personal Best: 9.000: R U\n")


def test_stats_without_solves_raises(db_path):
    _store_with(db_path, [])
    with pytest.raises(StoreError):
        cmd_stats(db_path, io.StringIO())


def test_delete_removes_solve(db_path):
    _store_with(db_path, [(10.0, [Move.LEFT])])
    out = io.StringIO()
    cmd_delete(db_path, out)
    assert out.getvalue() == "Deleted Last Solve\n"
    with SolveStore(db_path) as store:
        assert store.last_five() == []


def test_plus_two_adds_penalty(db_path):
    _store_with(db_path, [(10.0, [Move.DOWN])])
    out = io.StringIO()
    cmd_plus_two(db_path, out)
    assert out.getvalue() == "Adding 2 to last time\n"
    with SolveStore(db_path) as store:
        assert store.last_five() == [(12.0, "D")]


def test_plus_two_without_table_still_reports(db_path):
    out = io.StringIO()
    with pytest.raises(StoreError):
        cmd_plus_two(db_path, out)
    assert out.getvalue() == "Adding 2 to last time\n"


def _solving_keys(moves):
    return [move.face.value.lower() for move in reversed(moves) for _ in range(4 - move.turns)]


def test_virtual_solve_is_recorded(db_path):
    moves = generate_scramble(random.Random(21))
    solving = _solving_keys(moves)
    keys = iter(["x"] + solving)
    counter = itertools.count()
    out = io.StringIO()
    cmd_virtual(
        db_path,
        random.Random(21),
        lambda: next(keys),
        out,
        lambda: float(next(counter)),
    )
    with SolveStore(db_path) as store:
        recorded = store.last_five()
    assert recorded == [(float(len(solving) - 1), scramble_to_string(moves))]
    assert out.getvalue().endswith(f"\nTime: {len(solving) - 1:.3f}\n")


def test_main_help(capsys):
    assert main(["help"]) == 0
    assert "genscram: generates scramble" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["nope"]])
def test_main_invalid(argv, capsys):
    assert main(argv) == -1
    assert "help" in capsys.readouterr().out


def test_main_genscram(capsys):
    assert main(["genscram"]) == 0
    assert capsys.readouterr().out.count("\n") == 1


def test_main_stats_without_database_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["stats"]) == 1