"""
Base model definitions for AnalyzerFlow.

This module is the single source of truth for the TypedDict shapes exchanged
with collaborators: plugin records coming from the catalog, node and edge
dictionaries handed to a renderer, and workflow steps handed to the pipeline
submission backend.
"""

from typing import Any, NotRequired, TypedDict

__all__ = [
    # Catalog
    "PluginDict",
    # Rendering
    "PositionDict",
    "AnalyzerNodeDataDict",
    "ConfigNodeDataDict",
    "NodeDict",
    "EdgeDict",
    "GraphDict",
    # Pipeline submission
    "WorkflowStep",
    "LanguageConfigDict",
    "AnalyzerSubmission",
]


class PluginDict(TypedDict):
    """Plugin record as served by the plugin catalog."""

    name: str
    version: str
    description: str
    depends_on: list[str]
    config: Any  # Opaque document, passed through verbatim


class PositionDict(TypedDict):
    x: float
    y: float


class AnalyzerNodeDataDict(TypedDict):
    """Presentation data carried by an analyzer node."""

    label: str
    plugin: PluginDict
    version: str
    description: str


class ConfigNodeDataDict(TypedDict):
    """Presentation data carried by a config node."""

    label: str
    configKey: str
    configType: str
    value: Any


class NodeDict(TypedDict):
    """Node shape consumed by the graph-rendering collaborator."""

    id: str
    type: str
    position: PositionDict
    data: AnalyzerNodeDataDict | ConfigNodeDataDict


class EdgeDict(TypedDict):
    """Edge shape consumed by the graph-rendering collaborator."""

    id: str
    source: str
    target: str
    sourceHandle: str
    targetHandle: str


class GraphDict(TypedDict):
    nodes: list[NodeDict]
    edges: list[EdgeDict]


class WorkflowStep(TypedDict):
    """One plugin entry inside an execution stage."""

    name: str
    version: str
    config: Any


class LanguageConfigDict(TypedDict):
    plugins: list[str]


class AnalyzerSubmission(TypedDict):
    """Analyzer definition handed to the pipeline submission backend."""

    name: str
    description: str
    steps: list[list[WorkflowStep]]
    supported_languages: NotRequired[list[str]]
    language_config: NotRequired[dict[str, LanguageConfigDict]]
    logo: NotRequired[str]
