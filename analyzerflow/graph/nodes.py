"""Graph projections of plugins.

Nodes and edges only live for the duration of one graph computation. Node ids
and edge ids are derived from plugin names so that the same catalog always
yields the same graph.
"""

from dataclasses import dataclass, field
from typing import Any

from analyzerflow.constants import ANALYZER_NODE_PREFIX, EDGE_PREFIX
from analyzerflow.models import (
    AnalyzerNodeDataDict,
    ConfigNodeDataDict,
    EdgeDict,
    GraphDict,
    NodeDict,
    NodeType,
    PositionDict,
)
from analyzerflow.plugin import Plugin

__all__ = [
    "Position",
    "AnalyzerNode",
    "ConfigNode",
    "Node",
    "Edge",
    "AnalyzerGraph",
    "analyzer_node_id",
    "edge_id",
    "create_analyzer_node",
]


def analyzer_node_id(plugin_name: str) -> str:
    """Node id for the plugin with the given name."""
    return f"{ANALYZER_NODE_PREFIX}{plugin_name}"


def edge_id(source_id: str, target_id: str, index: int) -> str:
    """Edge id; ``index`` is the dependency's position in ``depends_on``."""
    return f"{EDGE_PREFIX}{source_id}-{target_id}-{index}"


@dataclass
class Position:
    x: float = 0
    y: float = 0

    def to_dict(self) -> PositionDict:
        return PositionDict(x=self.x, y=self.y)


@dataclass
class AnalyzerNode:
    """
    Visual unit wrapping a single plugin.

    ``position`` is assigned by the layout engine; everything else is a
    projection of the plugin.
    """

    id: str
    plugin: Plugin
    label: str
    version: str
    description: str
    position: Position = field(default_factory=Position)

    @property
    def type(self) -> NodeType:
        return NodeType.ANALYZER

    @property
    def name(self) -> str:
        """Plugin name, used as the dependency key."""
        return self.plugin.name

    @property
    def data(self) -> AnalyzerNodeDataDict:
        return AnalyzerNodeDataDict(
            label=self.label,
            plugin=self.plugin.to_dict(),
            version=self.version,
            description=self.description,
        )

    def to_dict(self) -> NodeDict:
        return NodeDict(
            id=self.id,
            type=self.type.value,
            position=self.position.to_dict(),
            data=self.data,
        )


@dataclass
class ConfigNode:
    """Canvas node holding one configuration value; never part of a stage."""

    id: str
    label: str
    config_key: str
    config_type: str
    value: Any = None
    position: Position = field(default_factory=Position)

    @property
    def type(self) -> NodeType:
        return NodeType.CONFIG

    @property
    def data(self) -> ConfigNodeDataDict:
        return ConfigNodeDataDict(
            label=self.label,
            configKey=self.config_key,
            configType=self.config_type,
            value=self.value,
        )

    def to_dict(self) -> NodeDict:
        return NodeDict(
            id=self.id,
            type=self.type.value,
            position=self.position.to_dict(),
            data=self.data,
        )


Node = AnalyzerNode | ConfigNode


@dataclass(frozen=True)
class Edge:
    """Directed relation from a dependency's node to the dependent's node."""

    id: str
    source: str
    target: str
    source_handle: str
    target_handle: str

    def to_dict(self) -> EdgeDict:
        return EdgeDict(
            id=self.id,
            source=self.source,
            target=self.target,
            sourceHandle=self.source_handle,
            targetHandle=self.target_handle,
        )


@dataclass
class AnalyzerGraph:
    """Nodes and edges produced from one catalog snapshot."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @property
    def analyzer_nodes(self) -> list[AnalyzerNode]:
        return [node for node in self.nodes if isinstance(node, AnalyzerNode)]

    def get_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_dict(self) -> GraphDict:
        return GraphDict(
            nodes=[node.to_dict() for node in self.nodes],
            edges=[edge.to_dict() for edge in self.edges],
        )


def create_analyzer_node(plugin: Plugin) -> AnalyzerNode:
    """Create an analyzer node for a plugin, placed at the origin."""
    return AnalyzerNode(
        id=analyzer_node_id(plugin.name),
        plugin=plugin,
        label=plugin.name,
        version=plugin.version,
        description=plugin.description,
    )
