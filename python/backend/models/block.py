"""The player-controlled block and its movement rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.terrain import Coordinates, Terrain, Tile


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Iteration order only decides which optimal path wins a tie.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
)


class Orientation(StrEnum):
    UPRIGHT = "upright"  # covers 1×1
    HORIZONTAL = "horizontal"  # covers 2×1
    VERTICAL = "vertical"  # covers 1×2


# Upright:  | Horizontal: | Vertical:
#           |             |
#   U       |             |
#   u       |  Uu         |  U
# LlSRr     | LSsR        | LSR
#   D       |  Dd         | lsr
#   d       |             |  D
#
# S: start, L/R/U/D: after moving left/right/up/down.
# Capitals mark the square the block's position refers to.
_MOVES: dict[tuple[Orientation, Direction], tuple[int, int, Orientation]] = {
    (Orientation.UPRIGHT, Direction.LEFT): (-2, 0, Orientation.HORIZONTAL),
    (Orientation.UPRIGHT, Direction.RIGHT): (1, 0, Orientation.HORIZONTAL),
    (Orientation.UPRIGHT, Direction.UP): (0, -2, Orientation.VERTICAL),
    (Orientation.UPRIGHT, Direction.DOWN): (0, 1, Orientation.VERTICAL),
    (Orientation.HORIZONTAL, Direction.LEFT): (-1, 0, Orientation.UPRIGHT),
    (Orientation.HORIZONTAL, Direction.RIGHT): (2, 0, Orientation.UPRIGHT),
    (Orientation.HORIZONTAL, Direction.UP): (0, -1, Orientation.HORIZONTAL),
    (Orientation.HORIZONTAL, Direction.DOWN): (0, 1, Orientation.HORIZONTAL),
    (Orientation.VERTICAL, Direction.LEFT): (-1, 0, Orientation.VERTICAL),
    (Orientation.VERTICAL, Direction.RIGHT): (1, 0, Orientation.VERTICAL),
    (Orientation.VERTICAL, Direction.UP): (0, -1, Orientation.UPRIGHT),
    (Orientation.VERTICAL, Direction.DOWN): (0, 2, Orientation.UPRIGHT),
}

_FOOTPRINT_OFFSETS: dict[Orientation, Coordinates] = {
    Orientation.UPRIGHT: (0, 0),
    Orientation.HORIZONTAL: (1, 0),
    Orientation.VERTICAL: (0, 1),
}


@dataclass(frozen=True, order=True)
class Block:
    """The rectangular block the player controls.

    *position* is the top-left square of the covered area.  A block is not
    tied to any terrain: on its own it can move to any integer coordinates.
    """

    position: Coordinates
    orientation: Orientation

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> Block:
        """Return the block after tipping it once in *direction*."""
        dx, dy, orientation = _MOVES[self.orientation, direction]
        x, y = self.position
        return Block((x + dx, y + dy), orientation)

    # -- queries --------------------------------------------------------------

    def footprint(self) -> tuple[Coordinates, Coordinates]:
        """Return both squares covered by the block.

        An upright block reports the same square twice.
        """
        x, y = self.position
        dx, dy = _FOOTPRINT_OFFSETS[self.orientation]
        return (x, y), (x + dx, y + dy)

    def is_touching(self, tile: Tile, terrain: Terrain) -> bool:
        """Whether any covered square of *terrain* holds *tile*."""
        return any(terrain.tile_at(c) == tile for c in self.footprint())

    def is_standing_on(self, tile: Tile, terrain: Terrain) -> bool:
        """Whether the block stands upright on a *tile* square.

        A lying block never stands on anything, even when both of its
        squares hold *tile*.
        """
        return self.orientation == Orientation.UPRIGHT and self.is_touching(
            tile, terrain
        )
