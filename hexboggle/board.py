from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from hexboggle.neighbors import Location, init_neighbors


@dataclass(frozen=True, order=True)
class Cell:
    """A letter on the board. Cells compare by location only."""

    char: str = field(compare=False)
    location: Location

    def __str__(self):
        return f"{self.char!r} @ {self.location}"


class BoardShapeError(ValueError):
    """A row or ring of the input has the wrong number of letters."""

    def __init__(self, kind: str, index: int, expected: int, actual: int):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{kind} {index}: expected {expected} letters, got {actual}"
        )


class Board(ABC):
    """A fixed set of cells plus an adjacency relation between them."""

    _cells: dict[Location, Cell]

    @abstractmethod
    def get_cell(self, loc: Location) -> Cell: ...

    @abstractmethod
    def neighbors(self, cell: Cell) -> list[Cell]: ...

    def all_cells(self) -> list[Cell]:
        return list(self._cells.values())

    def num_cells(self) -> int:
        return len(self._cells)


class RectBoard(Board):
    """A rectangular board with 8-way adjacency.

    Row y of the input supplies the cells (0, y) .. (width - 1, y).
    """

    width: int
    height: int

    def __init__(self, rows: Sequence[str]):
        if not rows:
            raise BoardShapeError("row", 0, 1, 0)
        self.width = len(rows[0])
        self.height = len(rows)
        if self.width == 0:
            raise BoardShapeError("row", 0, 1, 0)
        self._cells = {}
        for y, row in enumerate(rows):
            if len(row) != self.width:
                raise BoardShapeError("row", y, self.width, len(row))
            for x, ch in enumerate(row):
                self._cells[(x, y)] = Cell(ch, (x, y))
        self._neighbors = init_neighbors(self.width, self.height)

    def get_cell(self, loc: Location) -> Cell:
        return self._cells[loc]

    def neighbors(self, cell: Cell) -> list[Cell]:
        return [self._cells[loc] for loc in self._neighbors[cell.location]]

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __str__(self):
        return "\n".join(
            "".join(self._cells[(x, y)].char for x in range(self.width))
            for y in range(self.height)
        )
