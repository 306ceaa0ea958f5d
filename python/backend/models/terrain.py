"""Terrain model for a Bloxorz stage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

Coordinates = tuple[int, int]


class Tile(StrEnum):
    """A square of terrain. The value is the symbol used in level text."""

    EMPTY = "."
    REGULAR = "#"
    FRAGILE = "!"
    GOAL = "$"


@dataclass(frozen=True)
class Terrain:
    """The fixed map of tiles a block moves over.

    Tiles are stored row-major, so ``tiles[y][x]`` is the tile at ``(x, y)``
    with ``(0, 0)`` in the top-left corner.  Unlike the published game, a
    terrain may hold any number of goal tiles.
    """

    tiles: tuple[tuple[Tile, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Terrain:
        """Create a terrain from rows of tile symbols.

        Whitespace inside a row is ignored, so both spellings work::

            Terrain.from_rows(["# # $", "! ! #"])
            Terrain.from_rows(["##$", "!!#"])
        """
        parsed: list[tuple[Tile, ...]] = []
        for y, row in enumerate(rows):
            symbols = "".join(row.split())
            try:
                parsed.append(tuple(Tile(s) for s in symbols))
            except ValueError as exc:
                raise ValueError(f"Unknown tile symbol in row {y}: {row!r}") from exc

        if not parsed:
            raise ValueError("A terrain needs at least one row.")

        width = len(parsed[0])
        if width == 0:
            raise ValueError("A terrain needs at least one column.")
        for y, tiles in enumerate(parsed):
            if len(tiles) != width:
                raise ValueError(
                    f"Row {y} has {len(tiles)} tiles, expected {width}."
                )
        return cls(tiles=tuple(parsed))

    @classmethod
    def from_text(cls, text: str) -> Terrain:
        """Create a terrain from a block of text, one row per non-blank line."""
        return cls.from_rows(line for line in text.splitlines() if line.strip())

    # -- queries --------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self.tiles[0])

    @property
    def height(self) -> int:
        return len(self.tiles)

    def tile_at(self, coordinates: Coordinates) -> Tile:
        """Return the tile at *coordinates*.

        Out-of-bounds locations are treated as empty space.
        """
        x, y = coordinates
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.tiles[y][x]
        return Tile.EMPTY

    def __str__(self) -> str:
        return "\n".join(" ".join(tile.value for tile in row) for row in self.tiles)
