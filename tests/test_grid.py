import pytest

from dojo.twenty48.grid import CellOutOfBoundsError, Grid, Tile


def make_grid(size=4):
    grid = Grid(size)
    grid.setup([])
    return grid


def test_setup_creates_empty_cells_with_coordinates():
    grid = make_grid(4)
    assert len(grid.cells) == 4
    for x, column in enumerate(grid.cells):
        assert len(column) == 4
        for y, tile in enumerate(column):
            assert (tile.x, tile.y, tile.is_empty, tile.value) == (x, y, True, 0)


def test_setup_uses_given_tiles():
    tiles = [[Tile(x=0, y=0, value=2), Tile(x=0, y=1, is_empty=True)]]
    grid = Grid(4)
    grid.setup(tiles)
    assert grid.cells is tiles


def test_insert_and_remove_tile():
    grid = make_grid()
    grid.insert_tile(Tile(x=1, y=2, value=8))
    assert grid.cells[1][2].value == 8
    assert not grid.cell_available(Tile(x=1, y=2))
    grid.remove_tile(Tile(x=1, y=2))
    assert grid.cells[1][2].is_empty
    assert grid.cell_available(Tile(x=1, y=2))


def test_within_bounds():
    grid = make_grid()
    assert grid.within_bounds(Tile(x=0, y=0))
    assert grid.within_bounds(Tile(x=3, y=3))
    assert not grid.within_bounds(Tile(x=4, y=0))
    assert not grid.within_bounds(Tile(x=0, y=-1))


def test_cell_content_out_of_bounds_raises():
    grid = make_grid()
    with pytest.raises(CellOutOfBoundsError):
        grid.cell_content(Tile(x=-1, y=0))


def test_cell_available_out_of_bounds_is_false():
    grid = make_grid()
    assert grid.cell_available(Tile(x=0, y=4)) is False


def test_available_cells_and_cells_available():
    grid = make_grid(2)
    assert len(grid.available_cells()) == 4
    for _, _, tile in list(grid.each_cell()):
        grid.insert_tile(Tile(x=tile.x, y=tile.y, value=2))
    assert grid.available_cells() == []
    assert grid.cells_available() is False


def test_each_cell_visits_every_position_once():
    grid = make_grid(3)
    positions = [(x, y) for x, y, _ in grid.each_cell()]
    assert sorted(positions) == sorted({(t.x, t.y) for col in grid.cells for t in col})
    assert len(positions) == 9
    assert all(grid.cells[x][y] is tile for x, y, tile in grid.each_cell())


def test_random_available_cell_is_empty():
    grid = make_grid()
    grid.insert_tile(Tile(x=0, y=0, value=2))
    for _ in range(20):
        cell = grid.random_available_cell()
        assert cell.is_empty
        assert (cell.x, cell.y) != (0, 0)


def test_random_available_cell_on_full_grid():
    grid = make_grid(1)
    grid.insert_tile(Tile(x=0, y=0, value=2))
    cell = grid.random_available_cell()
    assert cell.is_empty is True
    assert (cell.x, cell.y) == (0, 0)


def test_update_position():
    tile = Tile(x=0, y=0, value=4)
    tile.update_position(Tile(x=2, y=3))
    assert (tile.x, tile.y, tile.value) == (2, 3, 4)