"""Reading the forest description and writing the simulation report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Sequence

Grid = list[list[int]]

_DIRECTIONS = {
    (-1, 0): "acima",
    (1, 0): "abaixo",
    (0, -1): "esquerda",
    (0, 1): "direita",
    (-1, -1): "",
}


class InputError(Exception):
    """Raised when the forest input file is missing or malformed."""


@dataclass
class ForestInput:
    """Dimensions, fire origin and cell values read from an input file."""

    rows: int
    cols: int
    focus_x: int
    focus_y: int
    grid: Grid = field(default_factory=list)


def _parse_ints(tokens: Sequence[str], what: str) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise InputError(f"Valor inválido em {what}: {exc}") from exc


def read_forest(path: str | Path) -> ForestInput:
    """Read a forest file: a header line "rows cols fx fy" followed by the cells."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputError("Arquivo não encontrado") from exc

    header, _, body = text.partition("\n")
    header_tokens = header.split()
    if not header_tokens:
        raise InputError("Arquivo vazio.")
    if len(header_tokens) < 4:
        raise InputError("Cabeçalho incompleto.")
    rows, cols, focus_x, focus_y = _parse_ints(header_tokens[:4], "cabeçalho")

    if rows <= 0 or cols <= 0:
        raise InputError("Dimensões da matriz inválidas.")

    values = _parse_ints(body.split(), "matriz")
    if len(values) < rows * cols:
        raise InputError("Matriz incompleta.")

    grid = [values[r * cols:(r + 1) * cols] for r in range(rows)]
    return ForestInput(rows, cols, focus_x, focus_y, grid)


def direction_label(dx: int, dy: int) -> str:
    """Describe a unit step; (-1, -1) means no direction and gives ""."""
    return _DIRECTIONS.get((dx, dy), "direção inválida")


class SimulationLog:
    """Text report of a simulation run, written to a file."""

    def __init__(self, path: str | Path) -> None:
        self._out: IO[str] = open(path, "w", encoding="utf-8")
        self._out.write("RESULTADO DA SIMULAÇÃO: \n\n")

    def _write_grid(self, grid: Sequence[Sequence[object]]) -> None:
        for row in grid:
            self._out.write("".join(f"{cell} " for cell in row) + "\n")

    def write_iteration(self, iteration: int, grid: Sequence[Sequence[int]]) -> None:
        """Record the fire grid after an iteration."""
        self._out.write(f"Iteração: {iteration}\n")
        self._write_grid(grid)
        self._out.write("\n")

    def fire_change(self, x: int, y: int, value: int, dx: int, dy: int) -> None:
        """Record a single cell change caused by the fire."""
        line = f"- ({x}, {y}) vira {value}"
        label = direction_label(dx, dy)
        if label:
            line += f" ({label})"
        self._out.write(line + "\n")

    def write_animal_summary(
        self,
        steps_grid: Sequence[Sequence[str]],
        steps: int,
        died: bool,
        death_iteration: int,
        water_found: int,
    ) -> None:
        """Record the path taken by the animal and its final state."""
        self._out.write("DADOS FINAIS: \n")
        self._out.write("Caminho percorrido pelo animal: \n")
        self._write_grid(steps_grid)
        self._out.write(f"Total de passos: {steps}\n")
        self._out.write(f"Quantidade de vezes que encontrou água: {water_found}\n")
        self._out.write(
            f"Condição final do animal: {'morreu' if died else 'sobreviveu'}\n"
        )
        if died:
            self._out.write(f"Iteração em que o animal morreu: {death_iteration}")

    @property
    def closed(self) -> bool:
        return self._out.closed

    def close(self) -> None:
        """Close the report file; closing twice is harmless."""
        if not self._out.closed:
            self._out.close()

    def __enter__(self) -> SimulationLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()