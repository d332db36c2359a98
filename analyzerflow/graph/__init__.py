"""AnalyzerFlow graph engine.

Builds the dependency graph of an analyzer pipeline and derives execution
stages and layout positions from it.

Usage:
    from analyzerflow.graph import create_analyzer_nodes, retrieve_workflow_steps

    graph = create_analyzer_nodes(plugins)
    steps = retrieve_workflow_steps(graph.nodes, graph.edges)
"""

from .builder import GraphBuilder, create_analyzer_nodes, create_edges_from_nodes
from .depth import DepthResolver, resolve_depth
from .layout import LayoutEngine, layout_nodes
from .nodes import (
    AnalyzerGraph,
    AnalyzerNode,
    ConfigNode,
    Edge,
    Node,
    Position,
    create_analyzer_node,
)
from .selection import (
    add_plugin_with_dependencies,
    get_available_plugins,
    initialize_default_nodes,
)
from .stages import Stage, StageGrouper, retrieve_workflow_steps

__all__ = [
    # Graph model
    "AnalyzerGraph",
    "AnalyzerNode",
    "ConfigNode",
    "Node",
    "Edge",
    "Position",
    "Stage",
    # Engine
    "GraphBuilder",
    "DepthResolver",
    "StageGrouper",
    "LayoutEngine",
    "resolve_depth",
    "create_analyzer_nodes",
    "create_edges_from_nodes",
    "retrieve_workflow_steps",
    "layout_nodes",
    # Canvas helpers
    "create_analyzer_node",
    "initialize_default_nodes",
    "get_available_plugins",
    "add_plugin_with_dependencies",
]
