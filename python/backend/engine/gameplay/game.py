"""Core gameplay rules: classifies a game and advances ongoing ones."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from backend.models.block import Block, Direction
from backend.models.terrain import Terrain, Tile


class FinishedGameError(ValueError):
    """Raised when a move is made in a game that is already won or lost."""


@dataclass(frozen=True)
class Win:
    """The block stands upright on a goal."""


@dataclass(frozen=True)
class Loss:
    """The block fell off the terrain or broke a fragile tile."""


@dataclass(frozen=True)
class Active:
    """An ongoing game in which the player can still make moves."""

    terrain: Terrain
    block: Block

    def advance(self, direction: Direction) -> Game:
        """Return the game after moving the block once in *direction*.

        The result is not classified; call ``status()`` on it.
        """
        return Game(self.terrain, self.block.move(direction))


Status = Win | Loss | Active


@dataclass(frozen=True)
class Game:
    """A snapshot of a Bloxorz stage: a terrain and the block on it."""

    terrain: Terrain
    block: Block

    def status(self) -> Status:
        """Evaluate the game against the rules, first match wins.

        Touching empty space loses before anything else is considered, so a
        block hanging off the edge never wins even if it also covers a goal.
        """
        terrain, block = self.terrain, self.block
        if block.is_touching(Tile.EMPTY, terrain):
            return Loss()
        if block.is_standing_on(Tile.FRAGILE, terrain):
            return Loss()
        if block.is_standing_on(Tile.GOAL, terrain):
            return Win()
        return Active(terrain, block)

    def replay(self, directions: Iterable[Direction]) -> Game:
        """Play *directions* in order and return the resulting game.

        Raises ``FinishedGameError`` if a move is left over once the game
        has been won or lost.
        """
        game = self
        for i, direction in enumerate(directions):
            match game.status():
                case Active() as active:
                    game = active.advance(direction)
                case Win() | Loss():
                    raise FinishedGameError(
                        f"Move {i} ({direction.value}) made in a finished game "
                        f"at {game.block.position}."
                    )
        return game
