# cubetimer

A terminal timer for 3x3 speedcubing. It generates random scrambles and shows
the scrambled cube in colour as an unfolded net. You can time your solves with
the space bar, type in times by hand, or solve a virtual cube with the keyboard.
Every solve is kept in a SQLite database named `cubing.db` in the current
directory.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
cubetimer <command>
```

| Command    | What it does                                                          |
|------------|-----------------------------------------------------------------------|
| `help`     | Lists the commands                                                    |
| `run`      | Shows a scramble, then times the solve: press space to start and stop |
| `stats`    | Last 5 solves, all-time average and count, personal best              |
| `delete`   | Deletes the most recent solve                                         |
| `plus2`    | Adds a two-second penalty to the most recent solve                    |
| `typing`   | Shows a scramble and reads the time you type in on standard input     |
| `virtual`  | Solve a scrambled virtual cube with the keys `f b l r u d`            |
| `genscram` | Prints a scramble                                                     |

Scrambles are thirty random moves with neighbouring turns of the same face
merged or cancelled, so they are often a little shorter than thirty.

In `virtual` mode each key turns that face clockwise; other keys are ignored.
The clock starts at your first turn and stops once the cube is solved. The `run`
and `virtual` commands need a POSIX terminal, because they read single key
presses in raw mode.

The command exits with status 0 on success, 1 when the database, the terminal
or a typed time gives an error (the message is written to standard error), and
-1 for an unknown or missing command.

## Library use

```python
import random
from cubetimer.scramble import generate_scramble, scramble_to_string
from cubetimer.cube import Cube
from cubetimer.db import SolveStore

moves = generate_scramble(random.Random(1))
print(scramble_to_string(moves))

cube = Cube()
cube.apply(moves)
print(cube.render())
print(cube.is_solved())

with SolveStore("cubing.db") as store:
    store.init_tables()
    store.insert_solve(12.345, moves)
    print(store.personal_best())     # (time, scramble)
    print(store.average_all_time())  # (average, count)
    print(store.last_five())         # [(time, scramble), ...], newest first
```

The command functions in `cubetimer.cli` (`cmd_run`, `cmd_stats`,
`cmd_typing`, `cmd_virtual`, ...) accept a database path, an output stream, a
random generator and, for the interactive ones, a key reader and clock, so they
can be driven from code as well as from the command line.

## Limitations

- The command line always uses `cubing.db` in the current directory; a
  different database can only be chosen through the library functions.
- `stats` reports an error when no solve has been recorded yet.
- The virtual cube only offers clockwise face turns from the keyboard.