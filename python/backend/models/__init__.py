from backend.models.block import DIRECTIONS, Block, Direction, Orientation
from backend.models.terrain import Coordinates, Terrain, Tile

__all__ = [
    "DIRECTIONS",
    "Block",
    "Coordinates",
    "Direction",
    "Orientation",
    "Terrain",
    "Tile",
]
