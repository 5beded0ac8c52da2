"""Saved game state: scores and the tile layout, stored as TOML."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from dojo.twenty48.grid import Tile


def tile_to_primitive(cells: list[list[Tile]]) -> list[list[list[int]]]:
    """Turn the board into ``[x, y, value]`` triples; empty cells get value 0."""
    return [
        [[tile.x, tile.y, 0 if tile.is_empty else tile.value] for tile in row]
        for row in cells
    ]


@dataclass
class GameInfo:
    high_score: int = 0
    current_score: int = 0
    tile_state: list[list[list[int]]] = field(default_factory=list)

    def tiles(self) -> list[list[Tile]]:
        """Rebuild the board from the stored triples; value 0 means empty."""
        return [
            [Tile(x=x, y=y, value=value, is_empty=value == 0) for x, y, value in row]
            for row in self.tile_state
        ]

    @classmethod
    def load(cls, path: str | Path) -> GameInfo:
        """Read the state at ``path``, creating a fresh file if there is none."""
        path = Path(path)
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        if path.exists():
            with path.open("rb") as fh:
                data = tomllib.load(fh)
            return cls(
                high_score=data.get("HighScore", 0),
                current_score=data.get("CurrentScore", 0),
                tile_state=data.get("TileState", []),
            )
        info = cls()
        info.save(path)
        return info

    def save(self, path: str | Path) -> None:
        document = {
            "HighScore": self.high_score,
            "CurrentScore": self.current_score,
            "TileState": self.tile_state,
        }
        with Path(path).open("wb") as fh:
            tomli_w.dump(document, fh)