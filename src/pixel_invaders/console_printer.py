"""Console summaries of a simulated session."""

from rich.console import Console
from rich.table import Table

from .game.game_state import EnemyState
from .game.stats import SessionStats

ROSTER_GLYPHS = {
    EnemyState.ALIVE: "[green]@[/green]",
    EnemyState.DEAD: "[dim].[/dim]",
}


class SessionConsolePrinter:
    """Prints session statistics and the final alien roster."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, stats: SessionStats) -> None:
        table = Table(title="Session", show_header=False)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        table.add_row("Frames", str(stats.frames))
        table.add_row("Shots fired", str(stats.shots_fired))
        table.add_row("Shots dropped", str(stats.shots_dropped))
        table.add_row("Hits", str(stats.hits))
        table.add_row("Aliens destroyed", f"{stats.kills}/{len(stats.roster)}")
        table.add_row("Accuracy", f"{stats.accuracy:.0%}")
        table.add_row("Lives", str(stats.lives))
        self.console.print(table)

    def display_roster(self, stats: SessionStats) -> None:
        """Draw the roster as a grid, top row first like the screen."""
        if not stats.roster or stats.columns <= 0:
            return
        rows = [
            stats.roster[start:start + stats.columns]
            for start in range(0, len(stats.roster), stats.columns)
        ]
        self.console.print()
        for row in reversed(rows):
            self.console.print(" ".join(ROSTER_GLYPHS[state] for state in row))
