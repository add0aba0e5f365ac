"""Rich terminal frontend: tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same backend
as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import PuzzleSolver
from backend.models.puzzle import Puzzle

console = Console()


# -- puzzle rendering ---------------------------------------------------------


def render_puzzle(puzzle: Puzzle) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(puzzle.tile_count))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(puzzle.width):
        table.add_column(width=width + 1, justify="center")

    for y in range(puzzle.height):
        cells: list[str] = []
        for x in range(puzzle.width):
            val = puzzle.value_at(x, y)
            if val == puzzle.tile_count:
                cells.append("[dim]·[/dim]")
            elif puzzle.is_correct_position(val):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _panel(puzzle: Puzzle, title: str) -> Panel:
    return Panel(
        Align.center(render_puzzle(puzzle)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )


# -- screens ------------------------------------------------------------------


def report(puzzle: Puzzle, out: Console | None = None) -> None:
    """Print the puzzle with its solvability and fitness."""
    out = out or console
    out.print(Align.center(_panel(puzzle, f"{puzzle.width}×{puzzle.height}")))

    stats = Text()
    stats.append("  Solvable: ", style="dim")
    stats.append("yes" if puzzle.solvable else "no",
                 style="bold green" if puzzle.solvable else "bold red")
    stats.append("    Fitness: ", style="dim")
    stats.append(str(puzzle.fitness), style="bold yellow")
    stats.append("    Misplaced: ", style="dim")
    stats.append(str(puzzle.incorrect_tiles), style="bold yellow")
    out.print(Align.center(stats))


def run(puzzle: Puzzle, delay: float = 0.0, out: Console | None = None) -> int:
    """Solve *puzzle*, replay the moves, and return how many were made."""
    out = out or console
    report(puzzle, out)

    with out.status("[bold cyan]Searching…[/bold cyan]"):
        solution = PuzzleSolver().solve(puzzle)

    game = GamePlay.from_puzzle(puzzle)
    size = f"{puzzle.width}×{puzzle.height}"

    for i in range(len(solution)):
        value = solution.next_move_value()
        game.click(value)

        progress = Text()
        progress.append(f"  Move {i + 1}/{len(solution)} ", style="bold cyan")
        progress.append(f"(click {value})", style="dim")

        out.print()
        out.print(Align.center(_panel(game.puzzle, f"Auto-Solve  {size}")))
        out.print(Align.center(progress))
        if delay:
            time.sleep(delay)

    out.print(f"[bold green]Solved in {game.state.moves} moves![/bold green]")
    return game.state.moves
