"""Rich terminal frontend — prints the solution to a Bloxorz stage.

Solves the given game once and reports the moves as a styled table,
replaying them through the real game engine so every row shows where
the block ends up.
"""

from __future__ import annotations

import rich.box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import Active, Game, Loss, Win
from backend.engine.gamesolver import Solver
from backend.models.block import Block, Direction

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_block(block: Block) -> str:
    x, y = block.position
    return f"({x}, {y}) {block.orientation.value}"


# -- solution rendering -------------------------------------------------------


def _render_solution(game: Game, moves: list[Direction]) -> Table:
    """Return a Rich Table listing each move and the block it leads to."""
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Move", style="bold cyan")
    table.add_column("Block", style="yellow")

    for i, direction in enumerate(moves, 1):
        match game.status():
            case Active() as active:
                game = active.advance(direction)
            case Win() | Loss():
                break
        table.add_row(str(i), direction.value, _format_block(game.block))

    return table


# -- public entry point -------------------------------------------------------


def run(game: Game, *, hint: bool = False) -> bool:
    """Solve *game* and print the result.

    With *hint* only the next move is printed.  Returns False if the game
    cannot be won.
    """
    moves = Solver.solve(game)
    start = Text(f"  Start: {_format_block(game.block)}", style="dim")

    if moves is None:
        console.print(start)
        console.print("[bold red]No solution.[/bold red]")
        return False

    if not moves:
        console.print(start)
        console.print("[green]Already solved![/green]")
        return True

    if hint:
        console.print(f"[cyan]Hint:[/cyan] move [bold]{moves[0].value}[/bold]")
        return True

    panel = Panel(
        _render_solution(game, moves),
        title="[bold cyan]Solution[/bold cyan]",
        border_style="bright_blue",
        padding=(0, 1),
    )
    console.print(start)
    console.print(panel)
    console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")
    return True
