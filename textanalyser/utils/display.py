"""Display formatting using Rich library."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysers.base_analyser import BaseAnalyser


console = Console()


def display_result_summary(analyser: BaseAnalyser) -> None:
    """Display the word-level statistics of an analyser's latest run.

    Args:
        analyser: Analyser that has performed an analysis
    """
    result = analyser.get_result()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Statistic", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")

    table.add_row("Words", f"{result.get_word_count():,}")
    table.add_row("Characters", f"{result.get_total_chars():,}")
    table.add_row("Average length", f"{result.get_ave_word_length():.2f}")
    table.add_row("Longest word", escape(result.get_longest_word()) or "-")
    table.add_row("Shortest word", escape(result.get_shortest_word()) or "-")
    table.add_row("Last word", escape(result.get_last_word()) or "-")
    table.add_row("Analysis runs", str(result.get_reset_count()))

    console.print(f"\n[bold]{escape(analyser.name)}[/] [dim]summary[/]")
    console.print(table)
    console.print()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message
    """
    console.print(f"\n[bold red]Error:[/] {message}\n")
