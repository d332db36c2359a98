"""Execution stage grouping.

Partitions analyzer nodes into sequential stages: every plugin in a stage
only depends on plugins in earlier stages. The result is the ``steps`` list
of an analyzer definition.
"""

import logging
from collections.abc import Sequence

from analyzerflow.graph.depth import DepthResolver
from analyzerflow.graph.nodes import AnalyzerNode, Edge, Node
from analyzerflow.models import WorkflowStep

logger = logging.getLogger(__name__)

Stage = list[WorkflowStep]

__all__ = [
    "Stage",
    "StageGrouper",
    "retrieve_workflow_steps",
]


class StageGrouper:
    """Groups analyzer nodes into ordered execution stages by depth."""

    def group(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> list[Stage]:
        """
        Compute the execution stages for a graph.

        Non-analyzer nodes are ignored. Depth buckets that end up empty are
        dropped, so stage indices are not depth values once a gap occurs.

        Args:
            nodes: Graph nodes, in catalog order
            edges: Dependency edges between those nodes

        Returns:
            Non-empty stages in ascending depth order; plugins keep their node
            order within a stage
        """
        analyzer_nodes = [node for node in nodes if isinstance(node, AnalyzerNode)]
        if not analyzer_nodes:
            return []

        dependency_map = self._build_dependency_map(analyzer_nodes, edges)
        resolver = DepthResolver(dependency_map)

        buckets: dict[int, Stage] = {}
        for node in analyzer_nodes:
            depth = resolver.depth_of(node.name)
            buckets.setdefault(depth, []).append(self._to_step(node))

        max_depth = max(buckets)
        stages = [buckets[depth] for depth in range(max_depth + 1) if buckets.get(depth)]

        logger.debug(
            "Grouped %d analyzers into %d stages (max depth %d)",
            len(analyzer_nodes), len(stages), max_depth,
        )
        return stages

    @staticmethod
    def _build_dependency_map(
        analyzer_nodes: Sequence[AnalyzerNode], edges: Sequence[Edge]
    ) -> dict[str, list[str]]:
        """Map each target plugin name to the plugin names its edges come from."""
        names_by_id: dict[str, str] = {}
        for node in analyzer_nodes:
            # First node wins for duplicate ids
            names_by_id.setdefault(node.id, node.name)

        dependency_map: dict[str, list[str]] = {}
        for edge in edges:
            source_name = names_by_id.get(edge.source)
            target_name = names_by_id.get(edge.target)
            if source_name is None or target_name is None:
                continue
            dependency_map.setdefault(target_name, []).append(source_name)

        return dependency_map

    @staticmethod
    def _to_step(node: AnalyzerNode) -> WorkflowStep:
        return WorkflowStep(
            name=node.name,
            version=node.version,
            config=node.plugin.config,
        )


def retrieve_workflow_steps(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[Stage]:
    """Compute the ordered execution stages for a graph."""
    return StageGrouper().group(nodes, edges)
