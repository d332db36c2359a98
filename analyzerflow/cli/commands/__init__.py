"""CLI commands module for AnalyzerFlow."""

from analyzerflow.cli.commands.diagram import diagram_command
from analyzerflow.cli.commands.graph import graph_command
from analyzerflow.cli.commands.stages import stages_command

__all__ = [
    "diagram_command",
    "graph_command",
    "stages_command",
]
