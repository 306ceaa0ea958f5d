"""Block movement and contact tests."""

from __future__ import annotations

import pytest

from backend.models.block import DIRECTIONS, Block, Direction, Orientation
from backend.models.terrain import Terrain, Tile

UPRIGHT = Orientation.UPRIGHT
HORIZONTAL = Orientation.HORIZONTAL
VERTICAL = Orientation.VERTICAL


def _slanted_rectangle() -> Terrain:
    return Terrain.from_rows([
        ". # . .",
        "# # # .",
        ". # # #",
        ". . # .",
    ])


def _dumbbell() -> Terrain:
    return Terrain.from_rows([
        "# # # . . . # # $",
        "# # # ! ! ! # # #",
        "# # # ! ! ! # # #",
        "# # # . . . # # $",
    ])


# -- movement -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("block", "direction", "expected"),
    [
        (Block((0, 0), UPRIGHT), Direction.LEFT, Block((-2, 0), HORIZONTAL)),
        (Block((3, 1), UPRIGHT), Direction.RIGHT, Block((4, 1), HORIZONTAL)),
        (Block((0, 0), UPRIGHT), Direction.UP, Block((0, -2), VERTICAL)),
        (Block((4, 1), UPRIGHT), Direction.DOWN, Block((4, 2), VERTICAL)),
        (Block((0, 3), HORIZONTAL), Direction.LEFT, Block((-1, 3), UPRIGHT)),
        (Block((5, 9), HORIZONTAL), Direction.RIGHT, Block((7, 9), UPRIGHT)),
        (Block((6, 1), HORIZONTAL), Direction.UP, Block((6, 0), HORIZONTAL)),
        (Block((2, 6), HORIZONTAL), Direction.DOWN, Block((2, 7), HORIZONTAL)),
        (Block((1, 6), VERTICAL), Direction.LEFT, Block((0, 6), VERTICAL)),
        (Block((5, 3), VERTICAL), Direction.RIGHT, Block((6, 3), VERTICAL)),
        (Block((3, 0), VERTICAL), Direction.UP, Block((3, -1), UPRIGHT)),
        (Block((5, 8), VERTICAL), Direction.DOWN, Block((5, 10), UPRIGHT)),
    ],
    ids=lambda v: v.value if isinstance(v, Direction) else None,
)
def test_move(block: Block, direction: Direction, expected: Block) -> None:
    assert block.move(direction) == expected


def test_move_does_not_mutate() -> None:
    block = Block((2, 2), UPRIGHT)
    block.move(Direction.RIGHT)
    assert block == Block((2, 2), UPRIGHT)


@pytest.mark.parametrize("orientation", list(Orientation))
def test_opposite_moves_return_to_start(orientation: Orientation) -> None:
    block = Block((4, 4), orientation)
    assert block.move(Direction.LEFT).move(Direction.RIGHT) == block
    assert block.move(Direction.UP).move(Direction.DOWN) == block


def test_blocks_are_hashable_values() -> None:
    seen = {Block((1, 2), VERTICAL), Block((1, 2), VERTICAL), Block((1, 2), UPRIGHT)}
    assert len(seen) == 2
    assert Block((0, 0), UPRIGHT) < Block((0, 1), UPRIGHT)


# -- footprint ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("block", "expected"),
    [
        (Block((3, 4), UPRIGHT), ((3, 4), (3, 4))),
        (Block((3, 4), HORIZONTAL), ((3, 4), (4, 4))),
        (Block((3, 4), VERTICAL), ((3, 4), (3, 5))),
        (Block((-1, -1), HORIZONTAL), ((-1, -1), (0, -1))),
    ],
)
def test_footprint(block: Block, expected: tuple) -> None:
    assert block.footprint() == expected


# -- contact ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("block", "tile", "expected"),
    [
        (Block((1, 2), UPRIGHT), Tile.EMPTY, False),
        (Block((3, 1), UPRIGHT), Tile.EMPTY, True),
        (Block((0, 1), HORIZONTAL), Tile.EMPTY, False),
        (Block((1, 3), HORIZONTAL), Tile.EMPTY, True),
        (Block((3, 2), HORIZONTAL), Tile.EMPTY, True),
        (Block((-1, 2), HORIZONTAL), Tile.EMPTY, True),
        (Block((2, 1), VERTICAL), Tile.EMPTY, False),
        (Block((1, -1), VERTICAL), Tile.EMPTY, True),
        (Block((3, 2), VERTICAL), Tile.EMPTY, True),
        (Block((3, 0), VERTICAL), Tile.EMPTY, True),
    ],
)
def test_is_touching(block: Block, tile: Tile, expected: bool) -> None:
    assert block.is_touching(tile, _slanted_rectangle()) is expected


@pytest.mark.parametrize(
    ("block", "tile", "expected"),
    [
        (Block((0, 0), UPRIGHT), Tile.GOAL, False),
        (Block((4, 1), UPRIGHT), Tile.FRAGILE, True),
        (Block((8, 3), UPRIGHT), Tile.GOAL, True),
        (Block((8, 3), UPRIGHT), Tile.FRAGILE, False),
        (Block((6, 3), HORIZONTAL), Tile.GOAL, False),
        (Block((5, 1), HORIZONTAL), Tile.FRAGILE, False),
        (Block((7, 0), HORIZONTAL), Tile.GOAL, False),
        (Block((3, 2), HORIZONTAL), Tile.FRAGILE, False),
        (Block((0, 1), VERTICAL), Tile.FRAGILE, False),
        (Block((8, 0), VERTICAL), Tile.GOAL, False),
        (Block((8, 2), VERTICAL), Tile.GOAL, False),
        (Block((3, 1), VERTICAL), Tile.FRAGILE, False),
    ],
)
def test_is_standing_on(block: Block, tile: Tile, expected: bool) -> None:
    assert block.is_standing_on(tile, _dumbbell()) is expected


@pytest.mark.parametrize("tile", list(Tile))
@pytest.mark.parametrize("orientation", [HORIZONTAL, VERTICAL])
def test_lying_block_never_stands(orientation: Orientation, tile: Tile) -> None:
    terrain = Terrain.from_rows([tile.value * 2] * 2)
    block = Block((0, 0), orientation)
    assert block.is_touching(tile, terrain)
    assert not block.is_standing_on(tile, terrain)


def test_directions_cover_every_direction_once() -> None:
    assert sorted(DIRECTIONS) == sorted(Direction)
    assert len(DIRECTIONS) == 4
