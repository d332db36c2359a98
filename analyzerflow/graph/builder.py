"""Graph construction from a plugin catalog.

Turns a flat, ordered list of plugins into analyzer nodes and dependency
edges. Excluded plugins (name containing the configured substring,
``"notifier"`` by default) never become nodes, so dependencies on them are
dropped exactly like dependencies on plugins missing from the catalog.
"""

import logging
from collections.abc import Iterable, Sequence

from analyzerflow.config import DEFAULT_CONFIG, EngineConfig
from analyzerflow.graph.nodes import (
    AnalyzerGraph,
    AnalyzerNode,
    Edge,
    create_analyzer_node,
    edge_id,
)
from analyzerflow.plugin import Plugin

logger = logging.getLogger(__name__)

__all__ = [
    "GraphBuilder",
    "create_analyzer_nodes",
    "create_edges_from_nodes",
]


def _build_edges(
    dependents: Iterable[tuple[Plugin, str]],
    node_ids: dict[str, str],
) -> list[Edge]:
    """Create dependency edges for ``(plugin, node id)`` pairs.

    Args:
        dependents: Plugins paired with the id of the node representing them
        node_ids: Plugin name to node id for every node in the graph

    Returns:
        One edge per resolvable dependency, in plugin then ``depends_on`` order
    """
    edges: list[Edge] = []

    for plugin, target_id in dependents:
        for index, dependency in enumerate(plugin.depends_on):
            source_id = node_ids.get(dependency)
            if source_id is None:
                logger.debug(
                    "Skipping unresolved dependency '%s' of '%s'", dependency, plugin.name
                )
                continue

            edges.append(Edge(
                id=edge_id(source_id, target_id, index),
                source=source_id,
                target=target_id,
                # One handle per dependency name on both ends
                source_handle=dependency,
                target_handle=dependency,
            ))

    return edges


class GraphBuilder:
    """Builds the dependency graph for an analyzer pipeline."""

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config

    def build(self, plugins: Sequence[Plugin]) -> AnalyzerGraph:
        """
        Build nodes and edges from an ordered plugin catalog.

        Args:
            plugins: Catalog snapshot; order determines node and edge order

        Returns:
            AnalyzerGraph with one node per retained plugin and one edge per
            resolvable dependency
        """
        retained = [
            plugin for plugin in plugins
            if not plugin.is_excluded(self.config.excluded_substring)
        ]

        nodes: list[AnalyzerNode] = []
        node_ids: dict[str, str] = {}
        for plugin in retained:
            node = create_analyzer_node(plugin)
            node_ids[plugin.name] = node.id
            nodes.append(node)

        edges = _build_edges(
            ((plugin, node_ids[plugin.name]) for plugin in retained), node_ids
        )

        logger.debug(
            "Built graph with %d nodes and %d edges from %d plugins",
            len(nodes), len(edges), len(plugins),
        )
        return AnalyzerGraph(nodes=list(nodes), edges=edges)

    def edges_from_nodes(self, nodes: Sequence[AnalyzerNode]) -> list[Edge]:
        """
        Rebuild dependency edges for an existing set of analyzer nodes.

        Used when the node list was edited independently of the catalog. The
        nodes are taken as given; no exclusion filter is applied.
        """
        node_ids = {node.plugin.name: node.id for node in nodes}
        return _build_edges(((node.plugin, node.id) for node in nodes), node_ids)


def create_analyzer_nodes(
    plugins: Sequence[Plugin], config: EngineConfig = DEFAULT_CONFIG
) -> AnalyzerGraph:
    """Build the analyzer graph for a plugin catalog."""
    return GraphBuilder(config).build(plugins)


def create_edges_from_nodes(nodes: Sequence[AnalyzerNode]) -> list[Edge]:
    """Build dependency edges for already constructed analyzer nodes."""
    return GraphBuilder().edges_from_nodes(nodes)
