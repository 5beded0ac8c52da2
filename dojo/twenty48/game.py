"""Rules of 2048: sliding and merging tiles, scoring and detecting the end."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from dojo.twenty48.events import EventBus
from dojo.twenty48.grid import Grid, Tile


@dataclass(frozen=True)
class Vector:
    x: int
    y: int


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def vector(self) -> Vector:
        return _VECTORS[self]


_VECTORS = {
    Direction.UP: Vector(0, -1),
    Direction.RIGHT: Vector(1, 0),
    Direction.DOWN: Vector(0, 1),
    Direction.LEFT: Vector(-1, 0),
}


@dataclass
class Traversals:
    x: list[int]
    y: list[int]


class _Drawer(Protocol):
    def redraw(self, grid: Grid, score: int, high_score: int, is_over: bool) -> None: ...


class _Info(Protocol):
    high_score: int
    current_score: int

    def tiles(self) -> list[list[Tile]]: ...


def _copy(tile: Tile) -> Tile:
    return Tile(x=tile.x, y=tile.y, value=tile.value, is_empty=tile.is_empty)


class Game:
    def __init__(
        self,
        grid_size: int = 4,
        drawer: _Drawer | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.grid_size = grid_size
        self.drawer = drawer
        self.bus = bus if bus is not None else EventBus()
        self.score = 0
        self.high_score = 0
        self.over = False
        self.won = False
        self.grid = Grid(grid_size)

    def setup(self, game_info: _Info) -> None:
        """Load the board and scores, and register the move listeners."""
        tiles = game_info.tiles()
        self.grid = Grid(self.grid_size)
        self.grid.setup(tiles)
        self.high_score = game_info.high_score
        self.score = game_info.current_score

        if not tiles:
            self.add_start_tiles(2)

        self.bus.add("up", lambda message: self.move_with(Vector(0, -1)))
        self.bus.add("right", lambda message: self.move(Direction.RIGHT))
        self.bus.add("down", lambda message: self.move(Direction.DOWN))
        self.bus.add("left", lambda message: self.move(Direction.LEFT))

    def add_start_tiles(self, count: int) -> None:
        for _ in range(count):
            self.add_random_tile()

    def add_random_tile(self) -> None:
        """Put a 4 (nine times in ten) or a 2 on a random empty cell."""
        if self.grid.cells_available():
            value = 4 if random.random() < 0.9 else 2
            cell = self.grid.random_available_cell()
            self.grid.insert_tile(Tile(x=cell.x, y=cell.y, value=value))

    def get_vector(self, direction: int) -> Vector:
        """Vector for 0 (up), 1 (right), 2 (down) or 3 (left); ValueError otherwise."""
        return Direction(direction).vector

    def move_tile(self, tile: Tile, far_pos: Tile) -> Tile:
        self.grid.remove_tile(tile)
        moved = Tile(
            x=far_pos.x,
            y=far_pos.y,
            value=tile.value,
            merged_from=tile.merged_from,
        )
        self.grid.cells[far_pos.x][far_pos.y] = moved
        return moved

    def is_game_terminated(self) -> bool:
        return False

    def build_traversals(self, vector: Vector) -> Traversals:
        """Visiting order so that tiles nearest the moving edge go first."""
        xs = list(range(self.grid_size))
        ys = list(range(self.grid_size))
        if vector.x == 1:
            xs.reverse()
        if vector.y == 1:
            ys.reverse()
        return Traversals(x=xs, y=ys)

    def find_farthest_position(self, cell: Tile, vector: Vector) -> tuple[Tile, Tile]:
        """Return the last free position along ``vector`` and the position just past it."""
        previous = cell
        cell = Tile(x=previous.x + vector.x, y=previous.y + vector.y)
        while self.grid.cell_available(cell):
            previous = cell
            cell = Tile(x=previous.x + vector.x, y=previous.y + vector.y)
        return previous, cell

    def positions_equal(self, first: Tile, second: Tile) -> bool:
        return first.x == second.x and first.y == second.y

    def tile_matches_available(self) -> bool:
        """Whether two neighbouring tiles hold the same value."""
        grid = self.grid
        for y in range(grid.size):
            for x in range(grid.size):
                tile = grid.cell_content(Tile(x=x, y=y))
                if tile.is_empty:
                    continue
                for direction in Direction:
                    vec = direction.vector
                    neighbour = Tile(x=x + vec.x, y=y + vec.y)
                    if not grid.within_bounds(neighbour):
                        continue
                    other = grid.cell_content(neighbour)
                    if not other.is_empty and other.value == tile.value:
                        return True
        return False

    def moves_available(self) -> bool:
        return self.grid.cells_available() or self.tile_matches_available()

    def move(self, direction: int) -> None:
        self.move_with(self.get_vector(direction))

    def move_with(self, vector: Vector) -> None:
        """Slide every tile along ``vector``, merging equal neighbours."""
        if self.is_game_terminated():
            return

        moved = False
        traversals = self.build_traversals(vector)

        for x in traversals.x:
            for y in traversals.y:
                cell = Tile(x=x, y=y)
                tile = self.grid.cell_content(cell)
                if tile.is_empty:
                    continue

                far_pos, next_pos = self.find_farthest_position(cell, vector)
                if (
                    self.grid.within_bounds(next_pos)
                    and self.grid.cell_content(next_pos).value == tile.value
                ):
                    merged = Tile(
                        x=next_pos.x,
                        y=next_pos.y,
                        value=tile.value * 2,
                        merged_from=[_copy(tile), _copy(next_pos)],
                    )
                    self.grid.insert_tile(merged)
                    self.grid.remove_tile(tile)
                    tile = _copy(tile)
                    tile.update_position(next_pos)
                    self.score += merged.value
                else:
                    tile = self.move_tile(tile, far_pos)

                if not self.positions_equal(cell, tile):
                    moved = True

        if moved:
            self.add_random_tile()
            if not self.moves_available():
                self.over = True
            self.actuate()

        if self.score > self.high_score:
            self.high_score = self.score

    def actuate(self) -> None:
        if self.drawer is not None:
            self.drawer.redraw(self.grid, self.score, self.high_score, self.over)