"""
AnalyzerFlow: dependency graphs for analyzer pipelines.

AnalyzerFlow turns a catalog of analysis plugins, each naming the plugins it
depends on, into a dependency graph. From that graph it derives the ordered
execution stages of the pipeline and deterministic coordinates for drawing it.

Core Components:
    - Plugin: Catalog entry
    - GraphBuilder: Plugins to nodes and edges
    - StageGrouper: Nodes to ordered execution stages
    - LayoutEngine: Nodes to 2-D positions
    - CatalogLoader: Plugin catalogs from YAML/JSON files

Example Usage:
    ```python
    from analyzerflow import load_catalog, create_analyzer_nodes, retrieve_workflow_steps

    plugins = load_catalog("plugins.yaml")
    graph = create_analyzer_nodes(plugins)
    steps = retrieve_workflow_steps(graph.nodes, graph.edges)
    ```
"""

__version__ = "0.1.0"

from .colors import color_for
from .config import EngineConfig, LayoutConfig
from .graph import (
    AnalyzerGraph,
    AnalyzerNode,
    ConfigNode,
    DepthResolver,
    Edge,
    GraphBuilder,
    LayoutEngine,
    Position,
    Stage,
    StageGrouper,
    add_plugin_with_dependencies,
    create_analyzer_node,
    create_analyzer_nodes,
    create_edges_from_nodes,
    get_available_plugins,
    initialize_default_nodes,
    layout_nodes,
    resolve_depth,
    retrieve_workflow_steps,
)
from .loader import CatalogLoader, load_catalog
from .plugin import Plugin
from .submission import AnalyzerForm, AnalyzerTemplate, build_submission

__all__ = [
    "__version__",
    # Core functionality
    "Plugin",
    "GraphBuilder",
    "DepthResolver",
    "StageGrouper",
    "LayoutEngine",
    "create_analyzer_nodes",
    "create_edges_from_nodes",
    "resolve_depth",
    "retrieve_workflow_steps",
    "layout_nodes",
    # Data types
    "AnalyzerGraph",
    "AnalyzerNode",
    "ConfigNode",
    "Edge",
    "Position",
    "Stage",
    # Canvas helpers
    "create_analyzer_node",
    "initialize_default_nodes",
    "get_available_plugins",
    "add_plugin_with_dependencies",
    # Configuration
    "EngineConfig",
    "LayoutConfig",
    # Catalog and submission
    "CatalogLoader",
    "load_catalog",
    "AnalyzerForm",
    "AnalyzerTemplate",
    "build_submission",
    # Presentation
    "color_for",
]
