"""The animal that flees the fire across the forest grid."""

from __future__ import annotations

from typing import Sequence

Grid = list[list[int]]
Position = tuple[int, int]

# up, down, left, right
_STEPS: tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

ANIMAL = 9
WATER = 4
BURNT = 3
TREE = 1
EMPTY = 0


def _cell_char(value: int) -> str:
    return chr(ord("0") + value)


class NoStartingPositionError(Exception):
    """Raised when the grid has no empty cell for the animal to start on."""


class Animal:
    """State of the animal: its position, its view of the grid and its path."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self.rows = len(grid)
        self.cols = len(grid[0]) if grid else 0
        self.grid: Grid = [list(row) for row in grid]
        self.steps_grid: list[list[str]] = [
            [_cell_char(value) for value in row] for row in grid
        ]
        self.visited = [[False] * self.cols for _ in range(self.rows)]

        start = next(
            (
                (r, c)
                for r, row in enumerate(grid)
                for c, value in enumerate(row)
                if value == EMPTY
            ),
            None,
        )
        if start is None:
            raise NoStartingPositionError(
                "Não foi encontrada nenhuma posição vazia para o animal começar!"
            )
        r, c = start
        self.position: Position = start
        self.grid[r][c] = ANIMAL
        self.steps_grid[r][c] = "9"
        self.visited[r][c] = True

        self.death_iteration = -1
        self.idle_time = 0
        self.previous_value = 0
        self.steps = 0
        self.died = False
        self.choice: int | None = None
        self.put_out_fire = False
        self.water_found = 0

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def _neighbours(self, x: int, y: int):
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                yield nx, ny

    def move(self, grid: Sequence[Sequence[int]], allow_visited: bool) -> None:
        """Take one step on a copy of ``grid``, or stay put if nothing is reachable."""
        self.grid = [list(row) for row in grid]
        cx, cy = self.position
        self.grid[cx][cy] = ANIMAL
        self.put_out_fire = False

        positions = list(self._neighbours(cx, cy))
        values = [self.grid[x][y] for x, y in positions]

        self.choice = self.best_option(values, positions, allow_visited)
        if self.choice is None:
            self.idle_time += 1
            return

        nx, ny = positions[self.choice]
        self.grid[cx][cy] = self.previous_value
        self.grid[nx][ny] = ANIMAL
        self.visited[cx][cy] = True
        self.steps_grid[cx][cy] = "*"
        self.steps_grid[nx][ny] = "9"
        self.steps += 1
        self.idle_time = 0

        self.previous_value = values[self.choice]
        if self.previous_value == WATER:
            self.spread_moisture(nx, ny, self.grid)
            self.put_out_fire = True
            self.water_found += 1

        self.position = (nx, ny)

    def best_option(
        self,
        values: Sequence[int],
        positions: Sequence[Position],
        allow_visited: bool,
    ) -> int | None:
        """Index of the preferred neighbour: water, then empty or tree, then burnt.

        Returns None when no neighbour can be entered.
        """
        open_choice: int | None = None
        burnt_choice: int | None = None
        for index, (value, (x, y)) in enumerate(zip(values, positions)):
            if value == WATER:
                return index
            reachable = allow_visited or not self.visited[x][y]
            if value in (TREE, EMPTY) and reachable and open_choice is None:
                open_choice = index
            elif value == BURNT and reachable and burnt_choice is None:
                burnt_choice = index
        return open_choice if open_choice is not None else burnt_choice

    def spread_moisture(self, x: int, y: int, grid: Grid) -> None:
        """Turn the cells around (x, y) into trees, keeping water; resets the cell under the animal."""
        self.previous_value = 0
        for nx, ny in self._neighbours(x, y):
            if grid[nx][ny] != WATER:
                grid[nx][ny] = TREE