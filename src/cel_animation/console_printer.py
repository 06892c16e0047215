"""Rich console summaries of generated cel animations."""

from rich.console import Console
from rich.table import Table

from .declarations import StyleOutput, css_duration


class CelAnimationConsolePrinter:
    """Prints the timeline and shared properties of a generated animation."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, style: StyleOutput) -> None:
        properties = style.properties
        self.console.print("\n[bold]Cel animation[/bold]")
        self.console.print(f"  Cels: [cyan]{len(style.rules)}[/cyan]")
        self.console.print(f"  Total frames: [cyan]{style.timeline.total_frames}[/cyan]")
        self.console.print(f"  Duration: [cyan]{css_duration(properties.duration)}[/cyan]")
        self.console.print(f"  Iterations: [cyan]{properties.iteration_count}[/cyan]")
        self.console.print(f"  Direction: [cyan]{properties.direction or 'normal'}[/cyan]")

    def display_timeline(self, style: StyleOutput) -> None:
        table = Table(title="Timeline", title_justify="left")
        table.add_column("Child", justify="right")
        table.add_column("Frames", justify="right")
        table.add_column("Start %", justify="right")
        table.add_column("End %", justify="right")
        table.add_column("Keyframes", style="green")

        for window, rule in zip(style.timeline.windows, style.rules):
            table.add_row(
                str(window.index),
                str(window.frames),
                f"{window.start:.2f}",
                f"{window.end:.2f}",
                rule.id,
            )
        self.console.print(table)
