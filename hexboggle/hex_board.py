"""A board of hexagonal cells laid out in rings around a center cell.

With three layers the board looks like this, where each cell is labeled with
its (layer, position):

            (2,4)   (2,3)   (2,2)
        (2,5)   (1,2)   (1,1)   (2,1)
    (2,6)   (1,3)   (0,0)   (1,0)   (2,0)
        (2,7)   (1,4)   (1,5)   (2,11)
            (2,8)   (2,9)   (2,10)

Every ring is numbered counterclockwise starting from the same axis, so
(l, 0) is always a corner and (l, k*l) lies radially outward from
(l-1, k*(l-1)).
"""

from typing import Sequence

from hexboggle.board import Board, BoardShapeError, Cell
from hexboggle.neighbors import Location, hex_neighbors, positions_in_layer


class HexBoard(Board):
    num_layers: int

    def __init__(self, layers: Sequence[str]):
        if not layers:
            raise BoardShapeError("ring", 0, 1, 0)
        self.num_layers = len(layers)
        self._cells = {}
        for layer, letters in enumerate(layers):
            expected = positions_in_layer(layer)
            if len(letters) != expected:
                raise BoardShapeError("ring", layer, expected, len(letters))
            for p, ch in enumerate(letters):
                self._cells[(layer, p)] = Cell(ch, (layer, p))

    def max_layer(self) -> int:
        return self.num_layers - 1

    def get_cell(self, loc: Location) -> Cell:
        """Look up a cell, wrapping the position around its ring."""
        layer, p = loc
        if not 0 <= layer < self.num_layers:
            raise KeyError(loc)
        return self._cells[(layer, p % positions_in_layer(layer))]

    def neighbors(self, cell: Cell) -> list[Cell]:
        out = []
        seen = set()
        for loc in hex_neighbors(cell.location):
            if loc[0] >= self.num_layers:
                continue
            n = self.get_cell(loc)
            if n.location in seen:
                continue
            seen.add(n.location)
            out.append(n)
        return out

    def __str__(self):
        return "\n".join(
            "".join(
                self._cells[(layer, p)].char
                for p in range(positions_in_layer(layer))
            )
            for layer in range(self.num_layers)
        )
