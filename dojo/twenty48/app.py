"""Terminal front end of the 2048 game: drawing, key handling and the command."""

from __future__ import annotations

import argparse
import os
import sys
import tomllib
import unicodedata
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from typing import Protocol

from dojo.twenty48.events import EventBus, Message
from dojo.twenty48.game import Game
from dojo.twenty48.grid import Grid, Tile
from dojo.twenty48.state import GameInfo, tile_to_primitive

GAME_WIDTH = 80
GAME_HEIGHT = 40
GAME_TOP_OFFSET = 1


class _Color(StrEnum):
    DEFAULT = "default"
    WHITE = "white"
    GREEN = "green"
    MAGENTA = "magenta"
    CYAN = "cyan"
    RED = "red"


_COLOR_MAP = {
    2: _Color.WHITE,
    4: _Color.WHITE,
    8: _Color.WHITE,
    16: _Color.WHITE,
    32: _Color.WHITE,
    64: _Color.GREEN,
    128: _Color.MAGENTA,
    256: _Color.MAGENTA,
    512: _Color.MAGENTA,
    1024: _Color.CYAN,
    2048: _Color.RED,
}

_COMMANDS = {"d": "down", "l": "left", "r": "right", "u": "up"}


def color_for(value: int) -> _Color:
    """Colour of a tile's number; unknown values are red."""
    return _COLOR_MAP.get(value, _Color.RED)


def config_dir() -> Path:
    return Path(os.environ.get("HOME", "")) / ".config" / "2048"


def config_file() -> Path:
    return config_dir() / "game.toml"


class _Screen(Protocol):
    def set_cell(self, x: int, y: int, ch: str, color: _Color) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...


class _CursesScreen:
    """Cell-addressed drawing on a curses window."""

    def __init__(self, window) -> None:
        import curses

        self._curses = curses
        self._window = window
        self._attrs = {color: 0 for color in _Color}
        if curses.has_colors():
            curses.start_color()
            background = -1
            try:
                curses.use_default_colors()
            except curses.error:
                background = curses.COLOR_BLACK
            constants = {
                _Color.WHITE: curses.COLOR_WHITE,
                _Color.GREEN: curses.COLOR_GREEN,
                _Color.MAGENTA: curses.COLOR_MAGENTA,
                _Color.CYAN: curses.COLOR_CYAN,
                _Color.RED: curses.COLOR_RED,
            }
            for pair, (color, constant) in enumerate(constants.items(), start=1):
                curses.init_pair(pair, constant, background)
                self._attrs[color] = curses.color_pair(pair)

    def set_cell(self, x: int, y: int, ch: str, color: _Color) -> None:
        try:
            self._window.addstr(y, x, ch, self._attrs[color])
        except self._curses.error:
            pass  # cells outside the window are dropped

    def clear(self) -> None:
        self._window.erase()

    def flush(self) -> None:
        self._window.refresh()


def _rune_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _draw_message(screen: _Screen, x: int, y: int, text: str, color: _Color) -> None:
    for offset, ch in enumerate(text):
        screen.set_cell(x + offset, y, ch, color)


def _fill(screen: _Screen, x: int, y: int, w: int, h: int, ch: str, color: _Color) -> None:
    for ly in range(h):
        for lx in range(w):
            screen.set_cell(x + lx, y + ly, ch, color)


def _print_wide(screen: _Screen, x: int, y: int, color: _Color, text: str) -> None:
    for ch in text:
        screen.set_cell(x, y, ch, color)
        x += _rune_width(ch)


def _draw_cell(screen: _Screen, tile: Tile, left: int, top: int, width: int, height: int) -> None:
    plain = _Color.DEFAULT
    _fill(screen, left, top, width, 1, "─", plain)
    _fill(screen, left, top, 1, height, "|", plain)
    _fill(screen, left, top + height, width, 1, "─", plain)
    _fill(screen, left + width, top, 1, height, "|", plain)
    if not tile.is_empty:
        _print_wide(
            screen, left + width // 2, top + height // 2, color_for(tile.value), str(tile.value)
        )


def _draw_cells(screen: _Screen, grid: Grid) -> None:
    width = GAME_WIDTH // grid.size
    height = GAME_HEIGHT // grid.size
    for ly in range(grid.size):
        for lx in range(grid.size):
            _draw_cell(
                screen,
                grid.cells[lx][ly],
                lx * width,
                GAME_TOP_OFFSET + ly * height,
                width,
                height,
            )


def _draw_over(screen: _Screen) -> None:
    game_over = "Game Over"
    last_message = "If you quit it, please press ESC"
    top = GAME_HEIGHT // 2
    width = (GAME_WIDTH - len(game_over)) // 2
    red = _Color.RED

    _fill(screen, 0, top, width, 1, "=", red)
    _draw_message(screen, width, top, game_over, red)
    _fill(screen, width + len(game_over), top, width, 1, "=", red)
    _draw_message(screen, (GAME_WIDTH - len(last_message)) // 2, top + 1, last_message, red)


def _grid_draw(screen: _Screen, grid: Grid, score: int, high_score: int, is_over: bool) -> None:
    screen.clear()
    _draw_cells(screen, grid)
    _draw_message(screen, 0, 0, f"Score: {score}", _Color.DEFAULT)
    high = f"High Score: {high_score}"
    _draw_message(screen, GAME_WIDTH - len(high), 0, high, _Color.DEFAULT)
    if is_over:
        _draw_over(screen)
    screen.flush()


def dump_cells(grid: Grid, score: int, high_score: int, is_over: bool) -> None:
    """Print a plain-text summary of the board to standard output."""
    sum_value = 0
    not_empty = 0
    for ly in range(grid.size):
        for lx in range(grid.size):
            if not grid.cells[lx][ly].is_empty:
                sum_value += grid.cells[lx][ly].value
                shown = grid.cells[ly][lx]
                print("==========================================", shown.x, shown.y, shown.value)
                not_empty += 1
    print("==================isOver================", str(is_over).lower())
    print("==================sumValue================", sum_value)
    print("================countIsNotEmpty===========", grid.size * grid.size - not_empty)


class Drawer:
    """Shows the board after each move and saves the game state."""

    def __init__(self, screen: _Screen | None, path: str | Path, debug: bool = False) -> None:
        self.screen = screen
        self.path = Path(path)
        self.debug = debug

    def redraw(self, grid: Grid, score: int, high_score: int, is_over: bool) -> None:
        if self.debug:
            dump_cells(grid, score, high_score, is_over)
        elif self.screen is not None:
            _grid_draw(self.screen, grid, score, high_score, is_over)

        if is_over:
            info = GameInfo(high_score=score)
        else:
            info = GameInfo(
                high_score=score,
                current_score=score,
                tile_state=tile_to_primitive(grid.cells),
            )
        info.save(self.path)


def control_from_commands(lines: Iterable[str], bus: EventBus) -> None:
    """Dispatch a move for each line that reads d, l, r or u; ignore the rest."""
    for line in lines:
        event = _COMMANDS.get(line.rstrip("\r\n"))
        if event is not None:
            bus.dispatch(event, Message(data="push left"))


def _handle_keys(window, bus: EventBus) -> None:
    import curses

    keys = {
        curses.KEY_DOWN: "down",
        curses.KEY_LEFT: "left",
        curses.KEY_RIGHT: "right",
        curses.KEY_UP: "up",
    }
    while True:
        key = window.getch()
        if key == 27:
            return
        event = keys.get(key)
        if event is not None:
            bus.dispatch(event, Message(data="push left"))


def _run_terminal(window, game: Game, drawer: Drawer, bus: EventBus) -> None:
    import curses

    window.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.set_escdelay(25)
    except (AttributeError, curses.error):
        pass
    screen = _CursesScreen(window)
    drawer.screen = screen
    _grid_draw(screen, game.grid, game.score, game.high_score, False)
    _handle_keys(window, bus)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="2048", description="Play 2048 in the terminal.")
    parser.add_argument("-debug", "--debug", action="store_true", help="read moves from stdin")
    args = parser.parse_args(argv)

    path = config_file()
    try:
        info = GameInfo.load(path)
    except (OSError, tomllib.TOMLDecodeError):
        info = GameInfo()

    bus = EventBus()
    drawer = Drawer(None, path, args.debug)
    game = Game(grid_size=4, drawer=drawer, bus=bus)
    game.setup(info)

    if args.debug:
        control_from_commands(sys.stdin, bus)
    else:
        import curses

        curses.wrapper(_run_terminal, game, drawer, bus)
    return 0