"""AnalyzerFlow CLI - Typer-based command line interface."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from analyzerflow.cli.commands import (
    diagram_command,
    graph_command,
    stages_command,
)
from analyzerflow.cli.utils import CLIContext
from analyzerflow.common.exceptions import ConfigurationError

# Create main app and console
app = typer.Typer(
    name="analyzerflow",
    help="AnalyzerFlow: dependency graphs and execution stages for analyzer pipelines",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    AnalyzerFlow CLI callback - sets up context for all commands.

    Commands access the shared CLIContext via ctx.obj.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        ctx.obj = CLIContext(console=console, verbose=verbose)
    except ConfigurationError as e:
        console.print(f"[red]❌ Error:[/red] Invalid configuration: {e}")
        raise typer.Exit(1) from e


app.command(name="graph")(graph_command)
app.command(name="stages")(stages_command)
app.command(name="diagram")(diagram_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
