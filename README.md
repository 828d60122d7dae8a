# forestfire

A small simulation of a fire spreading across a forest grid while an animal
tries to escape it.

In each iteration:

1. The animal takes one step if it can. It prefers water, then an empty cell
   or a tree it has not visited yet, then a burnt cell it has not visited yet.
   It checks its neighbours in the order up, down, left, right.
2. The cells that were burning in the previous iteration become burnt (3).
3. Every burning cell sets fire to the neighbouring trees in the directions
   the wind allows.

When the animal steps onto water, the cell under it becomes empty. The cells
around it, except other water, become trees again.

If the fire is about to reach the animal while it stands on a tree, the
animal gets a second move. In this move it may go back to cells it has
already visited. If it cannot move at all, it dies. The iteration of its death
is recorded. An animal standing on an empty cell may instead wait up to three
iterations.

The simulation stops when no cell is burning or when the iteration limit is
reached.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Input format

The first line holds four integers:

- the number of rows
- the number of columns
- the row where the fire starts
- the column where the fire starts

The grid values follow, separated by whitespace:

| value | meaning            |
|-------|--------------------|
| 0     | empty, safe ground |
| 1     | tree               |
| 2     | burning            |
| 3     | burnt              |
| 4     | water              |

Example:

```
5 5 1 1
1 1 1 1 4
1 1 1 1 1
1 0 1 1 1
1 1 1 1 1
1 1 4 1 0
```

The fire is placed at the start cell. The animal then starts on the first
empty cell (value 0), scanning the rows in order.

`read_forest` raises `InputError` in these cases:

- the file is missing or empty
- the header has fewer than four integers
- a value is not an integer
- the dimensions are not positive
- the grid has fewer values than rows × columns

`Simulation` raises `InputError` when the start of the fire lies outside the
grid.

`Animal` raises `NoStartingPositionError` when the grid has no empty cell.

## Command line

```
forestfire --help
```

Options:

| option                  | meaning                                           |
|-------------------------|---------------------------------------------------|
| `-i`, `--input PATH`    | forest input file (default `arquivos/input.dat`)  |
| `-o`, `--output PATH`   | report file (default `arquivos/output.dat`)       |
| `-w`, `--wind N`        | wind direction from 0 to 14 (default 0)           |
| `--max-iterations N`    | iteration limit (default 1 000 000 000)           |
| `--no-emoji`            | print plain numbers instead of emoji              |

The command prints these to the terminal:

- the input grid
- the animal's start position
- every iteration

At the end it prints a summary:

- the animal's path, with `9` for the animal and `*` for the cells it left
- the number of steps
- how often it found water
- whether it survived, and the iteration of its death if it died

The report file holds every fire change, the grid after each iteration and
the same final summary.

If the input cannot be read, or the animal has no place to start, the command
prints the error and exits with status 1. If the report file cannot be
created, the command still runs the simulation, without a report.

## Wind directions

The wind is an index from 0 to 14. It chooses the directions in which fire
spreads:

| index | spreads towards       |
|-------|-----------------------|
| 0     | all four (no wind)    |
| 1     | up                    |
| 2     | down                  |
| 3     | left                  |
| 4     | right                 |
| 5     | up, left              |
| 6     | up, right             |
| 7     | down, left            |
| 8     | down, right           |
| 9     | up, left, right       |
| 10    | up, down, left        |
| 11    | up, down, right       |
| 12    | down, left, right     |
| 13    | left, right           |
| 14    | up, down              |

## Library use

```python
import sys

from forestfire.files import SimulationLog, read_forest
from forestfire.simulation import Simulation, render_grid

forest = read_forest("input.dat")

with SimulationLog("output.dat") as log:
    sim = Simulation(forest, log, wind=0, max_iterations=1000, emoji=False, out=sys.stdout)
    iterations = sim.run()

print(iterations, sim.animal.steps, sim.animal.died)
print(render_grid(sim.grid, emoji=True))
```

`Simulation.run` returns the number of iterations. It closes the log when it
finishes, and closing it again is harmless.

`log` may be `None` if no report file is wanted. `out` defaults to standard
output.

`render_grid` renders either grid values or the characters of the animal's
path.