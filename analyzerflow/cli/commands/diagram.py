"""Diagram command for generating pipeline visualizations."""

from pathlib import Path
from typing import Annotated

import click
import typer

from analyzerflow.cli.utils import safe_write_file
from analyzerflow.graph import GraphBuilder
from analyzerflow.visualization import PipelineMermaidGenerator


def diagram_command(
    ctx: typer.Context,
    catalog: Annotated[str, typer.Argument(help="Plugin catalog file (YAML/JSON)")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file path")
    ] = None,
    title: Annotated[
        str | None, typer.Option("--title", help="Diagram title")
    ] = None,
):
    """Generate a Mermaid diagram of the analyzer pipeline."""
    cli_ctx = ctx.obj

    plugins = cli_ctx.load_catalog_or_exit(catalog)

    cli_ctx.print_progress("Generating diagram...")
    graph = GraphBuilder(cli_ctx.config).build(plugins)
    diagram = PipelineMermaidGenerator().generate(graph.nodes, graph.edges, title=title)

    if output is None:
        typer.echo(diagram)
        return

    # Ensure .md extension
    if not output.suffix:
        output = output.with_suffix(".md")

    try:
        safe_write_file(output, diagram)
    except click.ClickException as e:
        cli_ctx.printer.print_error(e.message)
        raise typer.Exit(1) from e

    cli_ctx.printer.show_success(f"Mermaid diagram written to {output}")
