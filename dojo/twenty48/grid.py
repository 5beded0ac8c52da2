"""The board of a 2048 game: a square of tiles addressed as cells[x][y]."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field


class CellOutOfBoundsError(IndexError):
    """Raised when a position lies outside the grid."""


@dataclass
class Tile:
    """One cell of the board; an empty cell is a tile with ``is_empty`` set."""

    x: int = 0
    y: int = 0
    value: int = 0
    is_empty: bool = False
    merged_from: list[Tile] = field(default_factory=list)

    def update_position(self, pos: Tile) -> None:
        """Take over the coordinates of ``pos``."""
        self.x = pos.x
        self.y = pos.y


class Grid:
    """A square board of ``size`` by ``size`` tiles."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.cells: list[list[Tile]] = []

    def setup(self, pre_tiles: list[list[Tile]]) -> None:
        """Use the given tiles, or fill the board with empty cells if there are none."""
        if pre_tiles:
            self.cells = pre_tiles
        else:
            self.cells = [
                [Tile(x=x, y=y, is_empty=True) for y in range(self.size)]
                for x in range(self.size)
            ]

    def random_available_cell(self) -> Tile:
        """Pick a random empty cell, or an empty tile at the origin when the board is full."""
        cells = self.available_cells()
        if cells:
            return random.choice(cells)
        return Tile(is_empty=True)

    def insert_tile(self, tile: Tile) -> None:
        self.cells[tile.x][tile.y] = tile

    def cells_available(self) -> bool:
        """Whether any cell is empty."""
        return any(item.is_empty for row in self.cells for item in row)

    def each_cell(self) -> Iterator[tuple[int, int, Tile]]:
        """Yield ``(x, y, tile)`` for every cell, column by column."""
        for x in range(self.size):
            for y in range(self.size):
                yield x, y, self.cells[x][y]

    def cell_available(self, cell: Tile) -> bool:
        """Whether the position lies on the board and is empty."""
        return self.within_bounds(cell) and self.cell_content(cell).is_empty

    def within_bounds(self, position: Tile) -> bool:
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def available_cells(self) -> list[Tile]:
        return [tile for _, _, tile in self.each_cell() if tile.is_empty]

    def remove_tile(self, tile: Tile) -> None:
        """Mark the cell at the tile's position as empty."""
        self.cells[tile.x][tile.y].is_empty = True

    def cell_content(self, cell: Tile) -> Tile:
        """Return the tile stored at the position of ``cell``."""
        if not self.within_bounds(cell):
            raise CellOutOfBoundsError("The cells doesn't exist")
        return self.cells[cell.x][cell.y]