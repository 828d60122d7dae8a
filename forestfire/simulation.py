"""Fire spreading through the forest while the animal tries to escape."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Sequence

from forestfire.animal import (
    ANIMAL,
    BURNT,
    EMPTY,
    TREE,
    Animal,
    NoStartingPositionError,
)
from forestfire.files import ForestInput, InputError, SimulationLog, read_forest

Grid = list[list[int]]
Position = tuple[int, int]

FIRE = 2
MAX_ITERATIONS = 1_000_000_000
DEFAULT_INPUT = "arquivos/input.dat"
DEFAULT_OUTPUT = "arquivos/output.dat"

# Each wind setting lists the directions the fire may spread in.
WIND_DIRECTIONS: tuple[tuple[Position, ...], ...] = (
    ((-1, 0), (1, 0), (0, -1), (0, 1)),  # 0: no wind
    ((-1, 0),),  # 1: up
    ((1, 0),),  # 2: down
    ((0, -1),),  # 3: left
    ((0, 1),),  # 4: right
    ((-1, 0), (0, -1)),  # 5: up and left
    ((-1, 0), (0, 1)),  # 6: up and right
    ((1, 0), (0, -1)),  # 7: down and left
    ((1, 0), (0, 1)),  # 8: down and right
    ((-1, 0), (0, -1), (0, 1)),  # 9: up, left and right
    ((-1, 0), (1, 0), (0, -1)),  # 10: up, down and left
    ((-1, 0), (1, 0), (0, 1)),  # 11: up, down and right
    ((1, 0), (0, -1), (0, 1)),  # 12: down, left and right
    ((0, -1), (0, 1)),  # 13: left and right
    ((-1, 0), (1, 0)),  # 14: up and down
)

_EMOJI: dict[object, str] = {
    0: "\U0001FAA8  ",
    "0": "\U0001FAA8  ",
    1: "\U0001F332 ",
    "1": "\U0001F332 ",
    2: "\U0001F525 ",
    "2": "\U0001F525 ",
    3: "\U00002B1B ",
    "3": "\U00002B1B ",
    4: "\U0001F4A7 ",
    "4": "\U0001F4A7 ",
    9: "\U0001F412 ",
    "9": "\U0001F412 ",
    "*": "\U0001F43E ",
}


def render_grid(grid: Sequence[Sequence[object]], emoji: bool = True) -> str:
    """Render a grid of cell values or path characters, one line per row."""
    lines = []
    for row in grid:
        if emoji:
            cells = "".join(_EMOJI.get(cell, f"{cell} ") for cell in row)
        else:
            cells = "".join(f"{cell}  " for cell in row)
        lines.append(cells + "\n")
    return "".join(lines)


class Simulation:
    """One run of the fire spreading across a forest with a fleeing animal."""

    def __init__(
        self,
        forest: ForestInput,
        log: SimulationLog | None = None,
        wind: int = 0,
        max_iterations: int = MAX_ITERATIONS,
        emoji: bool = True,
        out: IO[str] | None = None,
    ) -> None:
        if not 0 <= wind < len(WIND_DIRECTIONS):
            raise ValueError(f"Direção de vento inválida: {wind}")
        self.rows = forest.rows
        self.cols = forest.cols
        if not self._in_bounds(forest.focus_x, forest.focus_y):
            raise InputError("Foco de incêndio fora da matriz.")
        self.grid: Grid = [list(row) for row in forest.grid]
        self.grid[forest.focus_x][forest.focus_y] = FIRE
        self.animal = Animal(self.grid)

        self.log = log
        self.wind = wind
        self.max_iterations = max_iterations
        self.emoji = emoji
        self.out: IO[str] = out if out is not None else sys.stdout
        self.iteration = 0
        self.fire_origins: list[Position] = []

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _show(self, grid: Sequence[Sequence[object]]) -> None:
        self.out.write(render_grid(grid, self.emoji))

    def _log_change(self, x: int, y: int, value: int, dx: int, dy: int) -> None:
        if self.log is not None:
            self.log.fire_change(x, y, value, dx, dy)

    def run(self) -> int:
        """Run until the fire dies out or the iteration limit; return the iteration count."""
        animal = self.animal
        self._print("\nMatriz de entrada:")
        self._show(self.grid)
        x, y = animal.position
        self._print(f"\nPosição do animal: {x}, {y}")
        self._show(animal.grid)

        while True:
            if not self.has_fire():
                self._print("Não há mais fogo na matriz.")
                break
            if self.iteration >= self.max_iterations:
                break

            if not animal.died:
                animal.move(self.grid, False)

            self._print(f"\nITERAÇÃO {self.iteration}:")
            if not animal.died:
                self._print("Movimentação do animal: ")
                self._show(animal.grid)

            for fx, fy in self.fire_origins:
                self.grid[fx][fy] = BURNT
                self._log_change(fx, fy, BURNT, -1, -1)

            self.propagate_fire()

            if animal.put_out_fire:
                ax, ay = animal.position
                self.grid[ax][ay] = EMPTY
                animal.spread_moisture(ax, ay, self.grid)

            self._print("Movimentação do fogo: ")
            self._show(self.grid)
            self._print("====================================")

            self.iteration += 1
            if self.log is not None:
                self.log.write_iteration(self.iteration, self.grid)

        self._print("Caminho percorrido pelo animal: ")
        self.update_step_grid()
        self._print(f"Total de passos: {animal.steps}")
        self._print(f"Quantidade de vezes que encontrou água: {animal.water_found}")
        self._print(
            f"Condição final do animal: {'morreu' if animal.died else 'sobreviveu'}"
        )
        if animal.died:
            self._print(f"Iteração em que o animal morreu: {animal.death_iteration}")

        if self.log is not None:
            self.log.write_animal_summary(
                animal.steps_grid,
                animal.steps,
                animal.died,
                animal.death_iteration,
                animal.water_found,
            )
            self.log.close()
        return self.iteration

    def propagate_fire(self) -> None:
        """Spread every burning cell once; the burning cells become next round's origins."""
        self.fire_origins.clear()
        new_grid = [list(row) for row in self.grid]
        for x, row in enumerate(self.grid):
            for y, value in enumerate(row):
                if value == FIRE:
                    new_grid = self.spread_fire(x, y, new_grid)
                    self.fire_origins.append((x, y))
        self.grid = new_grid

    def spread_fire(self, x: int, y: int, new_grid: Sequence[Sequence[int]]) -> Grid:
        """Return a copy of ``new_grid`` with the fire at (x, y) spread along the wind."""
        grid = [list(row) for row in new_grid]
        animal = self.animal
        for dx, dy in WIND_DIRECTIONS[self.wind]:
            nx, ny = x + dx, y + dy
            if not self._in_bounds(nx, ny):
                continue

            if animal.grid[nx][ny] == ANIMAL and animal.previous_value == TREE:
                # The animal's cell is about to burn: it gets a second move.
                animal.move(grid, True)
                if animal.choice is None:
                    if animal.previous_value == EMPTY and animal.idle_time < 3:
                        self._print(
                            "Como o valor da casa é 0 ele pode ficar parado por 3 iterações"
                        )
                        self.out.write(f"Número de iterações parado: {animal.idle_time}")
                    else:
                        self._print(
                            "Não há casas sem fogo ao redor e a casa atual é igual a 1."
                        )
                        self._print("Animal morreu!")
                        animal.died = True
                        animal.death_iteration = self.iteration
                else:
                    self._print("Fogo atingiu a casa do animal e ele deu o 2 movimento.")

                grid[nx][ny] = FIRE
                animal.grid[nx][ny] = FIRE
                self._log_change(nx, ny, FIRE, dx, dy)
                self._show(animal.grid)
                self.out.write("\n")

            if grid[nx][ny] == TREE:
                grid[nx][ny] = FIRE
                self._log_change(nx, ny, FIRE, dx, dy)
        return grid

    def has_fire(self) -> bool:
        """Whether any cell of the grid is still burning."""
        return any(FIRE in row for row in self.grid)

    def update_step_grid(self) -> None:
        """Fill the untouched cells of the animal's path with the final grid, and print it."""
        for steps_row, row in zip(self.animal.steps_grid, self.grid):
            for y, value in enumerate(row):
                if steps_row[y] not in ("*", "9"):
                    steps_row[y] = chr(ord("0") + value)
        self._show(self.animal.steps_grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: read the forest, run the simulation, write the report."""
    parser = argparse.ArgumentParser(
        prog="forestfire", description="Simulate a forest fire and a fleeing animal."
    )
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT, help="forest input file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="report file")
    parser.add_argument(
        "-w",
        "--wind",
        type=int,
        default=0,
        choices=range(len(WIND_DIRECTIONS)),
        help="wind direction (0 means no wind)",
    )
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument(
        "--no-emoji", dest="emoji", action="store_false", help="print plain numbers"
    )
    args = parser.parse_args(argv)

    try:
        forest = read_forest(args.input)
    except InputError as exc:
        print(exc)
        return 1

    log: SimulationLog | None
    try:
        log = SimulationLog(args.output)
    except OSError:
        print("Erro ao criar arquivo de saída!", file=sys.stderr)
        log = None

    try:
        simulation = Simulation(
            forest, log, args.wind, args.max_iterations, args.emoji
        )
    except (InputError, NoStartingPositionError) as exc:
        print(exc)
        if log is not None:
            log.close()
        return 1

    simulation.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())