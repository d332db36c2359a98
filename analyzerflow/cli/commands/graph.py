"""Graph command: nodes and edges of a catalog, with layout positions."""

from typing import Annotated

import typer

from analyzerflow.graph import GraphBuilder, LayoutEngine


def graph_command(
    ctx: typer.Context,
    catalog: Annotated[str, typer.Argument(help="Plugin catalog file (YAML/JSON)")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Show the dependency graph of a plugin catalog."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    plugins = cli_ctx.load_catalog_or_exit(catalog)

    cli_ctx.print_progress("Building dependency graph...")
    graph = GraphBuilder(cli_ctx.config).build(plugins)
    LayoutEngine(cli_ctx.config.layout).layout(graph.nodes)

    cli_ctx.printer.print_graph(graph)
