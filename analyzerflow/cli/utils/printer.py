"""CLI Printer for consistent output formatting."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from analyzerflow.colors import color_for
from analyzerflow.graph import AnalyzerGraph, Stage
from analyzerflow.models import CatalogLoadResult


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def print_load_result(self, result: CatalogLoadResult) -> None:
        """Print catalog load errors and warnings.

        In JSON mode the whole result is printed as a dictionary.
        """
        if self.json_mode:
            self.console.print_json(data=result.to_dict(), default=str)
            return

        for error in result.errors:
            self.print_error(f"{error.error_type.value}: {error.message}")
        for warning in result.warnings:
            self.console.print(f"[yellow]⚠ Warning:[/yellow] {escape(warning.message)}")

    def print_stages(self, stages: list[Stage]) -> None:
        """Print execution stages as a table, or as JSON in JSON mode."""
        if self.json_mode:
            self.console.print_json(data={"stages": stages}, default=str)
            return

        if not stages:
            self.console.print("[dim]No analyzers in pipeline[/dim]")
            return

        table = Table(title="Execution stages")
        table.add_column("Stage", justify="right")
        table.add_column("Plugin")
        table.add_column("Version")
        for index, stage in enumerate(stages, start=1):
            for step in stage:
                table.add_row(
                    str(index),
                    f"[{color_for(step['name'])}]●[/] {escape(step['name'])}",
                    step["version"],
                )
        self.console.print(table)

    def print_graph(self, graph: AnalyzerGraph) -> None:
        """Print nodes with positions and edges, or the graph as JSON."""
        if self.json_mode:
            self.console.print_json(data=graph.to_dict(), default=str)
            return

        nodes_table = Table(title="Nodes")
        nodes_table.add_column("Id")
        nodes_table.add_column("Version")
        nodes_table.add_column("x", justify="right")
        nodes_table.add_column("y", justify="right")
        for node in graph.nodes:
            nodes_table.add_row(
                node.id,
                getattr(node, "version", ""),
                f"{node.position.x:g}",
                f"{node.position.y:g}",
            )
        self.console.print(nodes_table)

        edges_table = Table(title="Edges")
        edges_table.add_column("Source")
        edges_table.add_column("Target")
        edges_table.add_column("Handle")
        for edge in graph.edges:
            edges_table.add_row(edge.source, edge.target, edge.source_handle)
        self.console.print(edges_table)

    def show_progress(self, message: str) -> None:
        """Show progress message if verbose mode is enabled."""
        if self.verbose:
            self.console.print(f"🔄 {message}")

    def show_success(self, message: str) -> None:
        """Show success message with green checkmark."""
        self.console.print(f"✅ {message}")

    def print_error(self, message: str) -> None:
        """Print error message with red formatting."""
        self.console.print(f"[red]❌ Error:[/red] {escape(message)}")
