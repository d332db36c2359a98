"""Deterministic left-to-right layout for analyzer graphs.

Each dependency level becomes a column; nodes sharing a level are stacked
vertically and centred around ``start_y``. There is no crossing minimization:
analyzer pipelines are shallow and narrow enough for a purely formulaic
placement.
"""

import logging
from collections.abc import Sequence

from analyzerflow.config import LayoutConfig
from analyzerflow.graph.depth import DepthResolver
from analyzerflow.graph.nodes import AnalyzerNode, Node, Position

logger = logging.getLogger(__name__)

__all__ = [
    "LayoutEngine",
    "layout_nodes",
]


class LayoutEngine:
    """Assigns column/row positions to analyzer nodes."""

    def __init__(self, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()

    def layout(self, nodes: Sequence[Node]) -> list[AnalyzerNode]:
        """
        Position analyzer nodes by dependency level.

        Nodes are mutated in place. Dependencies on plugins that are not
        among the analyzer nodes are ignored for the level computation.

        Args:
            nodes: Canvas nodes; non-analyzer nodes are left untouched

        Returns:
            The analyzer nodes, in input order, with positions assigned
        """
        analyzer_nodes = [node for node in nodes if isinstance(node, AnalyzerNode)]
        present = {node.name for node in analyzer_nodes}

        dependency_map = {
            node.name: [dep for dep in node.plugin.depends_on if dep in present]
            for node in analyzer_nodes
        }
        resolver = DepthResolver(dependency_map)

        levels: dict[int, list[AnalyzerNode]] = {}
        for node in analyzer_nodes:
            levels.setdefault(resolver.depth_of(node.name), []).append(node)

        for level, nodes_at_level in levels.items():
            self._place_column(level, nodes_at_level)

        logger.debug(
            "Laid out %d analyzer nodes over %d levels", len(analyzer_nodes), len(levels)
        )
        return analyzer_nodes

    def _place_column(self, level: int, nodes_at_level: list[AnalyzerNode]) -> None:
        """Place one level's nodes in a column centred on start_y."""
        config = self.config
        x = config.start_x + level * config.column_width

        total_height = (len(nodes_at_level) - 1) * config.row_height
        start_y = config.start_y - total_height / 2

        for index, node in enumerate(nodes_at_level):
            node.position = Position(x=x, y=start_y + index * config.row_height)


def layout_nodes(nodes: Sequence[Node], config: LayoutConfig | None = None) -> list[AnalyzerNode]:
    """Position analyzer nodes in place and return them."""
    return LayoutEngine(config).layout(nodes)
