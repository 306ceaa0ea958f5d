"""Bloxorz solver — breadth-first search over block positions."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gameplay.game import Active, Game, Loss, Win
from backend.models.block import DIRECTIONS, Block, Direction

logger = logging.getLogger(__name__)

# Maps a block to the move that first reached it and the block it came from.
# The initial block maps to None.
Predecessors = dict[Block, tuple[Direction, Block] | None]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(game: Game) -> list[Direction] | None:
        """Return a shortest move sequence that wins *game*, or ``None``.

        The terrain stays fixed, so a search state is just a ``Block``.  Any
        block sticking out of the terrain is a loss and never expanded, which
        bounds the search to ``width * height * 3`` blocks.

        When several shortest solutions exist it is unspecified which one is
        returned.
        """
        start = game.block
        queue: deque[Block] = deque([start])
        visited: Predecessors = {start: None}

        while queue:
            block = queue.popleft()
            match Game(game.terrain, block).status():
                case Win():
                    moves = _trace_moves(visited, block)
                    logger.debug(
                        "Solved in %d moves (%d blocks visited)",
                        len(moves),
                        len(visited),
                    )
                    return moves
                case Loss():
                    continue
                case Active() as active:
                    for direction in DIRECTIONS:
                        neighbour = active.advance(direction).block
                        # Marked on insertion so nothing is queued twice.
                        if neighbour not in visited:
                            visited[neighbour] = (direction, block)
                            queue.append(neighbour)

        logger.debug("No solution (%d blocks visited)", len(visited))
        return None

    @staticmethod
    def hint(game: Game) -> Direction | None:
        """Return the first move of a shortest solution.

        ``None`` if the game is already won or cannot be won.
        """
        moves = Solver.solve(game)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(game: Game) -> bool:
        """Return True if *game* can reach a win."""
        return Solver.solve(game) is not None


def _trace_moves(visited: Predecessors, final_block: Block) -> list[Direction]:
    """Walk predecessors back from *final_block* and return moves in play order."""
    moves: list[Direction] = []
    step = visited[final_block]
    while step is not None:
        direction, previous = step
        moves.append(direction)
        step = visited[previous]
    moves.reverse()
    return moves
