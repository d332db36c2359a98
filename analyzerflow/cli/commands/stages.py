"""Stages command: execution plan of a catalog."""

from typing import Annotated

import typer

from analyzerflow.graph import GraphBuilder, StageGrouper


def stages_command(
    ctx: typer.Context,
    catalog: Annotated[str, typer.Argument(help="Plugin catalog file (YAML/JSON)")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Show the ordered execution stages of a plugin catalog."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    plugins = cli_ctx.load_catalog_or_exit(catalog)

    cli_ctx.print_progress("Grouping plugins into stages...")
    graph = GraphBuilder(cli_ctx.config).build(plugins)
    stages = StageGrouper().group(graph.nodes, graph.edges)

    cli_ctx.printer.print_stages(stages)
