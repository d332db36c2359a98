"""Canvas selection helpers.

Helpers used while composing a pipeline by hand: the default starting canvas,
the plugins still available for adding, and adding a plugin together with
everything it depends on.
"""

from collections.abc import Sequence

from analyzerflow.config import DEFAULT_CONFIG, EngineConfig
from analyzerflow.constants import SBOM_PLUGIN_MARKERS, VULNERABILITY_PLUGIN_MARKERS
from analyzerflow.graph.nodes import AnalyzerNode, create_analyzer_node
from analyzerflow.plugin import Plugin

__all__ = [
    "create_analyzer_node",
    "initialize_default_nodes",
    "get_available_plugins",
    "add_plugin_with_dependencies",
]


def _find_plugin(plugins: Sequence[Plugin], markers: tuple[str, ...]) -> Plugin | None:
    for plugin in plugins:
        if any(marker in plugin.name for marker in markers):
            return plugin
    return None


def initialize_default_nodes(plugins: Sequence[Plugin]) -> list[AnalyzerNode]:
    """
    Build the default canvas: an SBOM plugin followed by a vulnerability plugin.

    Each is the first catalog plugin whose name matches; a missing one is
    simply left out.
    """
    default_nodes: list[AnalyzerNode] = []

    sbom_plugin = _find_plugin(plugins, SBOM_PLUGIN_MARKERS)
    if sbom_plugin:
        default_nodes.append(create_analyzer_node(sbom_plugin))

    vuln_plugin = _find_plugin(plugins, VULNERABILITY_PLUGIN_MARKERS)
    if vuln_plugin:
        default_nodes.append(create_analyzer_node(vuln_plugin))

    return default_nodes


def get_available_plugins(
    plugins: Sequence[Plugin],
    existing_nodes: Sequence[AnalyzerNode],
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[Plugin]:
    """Plugins that are neither on the canvas nor excluded, in catalog order."""
    existing_names = {node.plugin.name for node in existing_nodes}
    return [
        plugin for plugin in plugins
        if plugin.name not in existing_names
        and not plugin.is_excluded(config.excluded_substring)
    ]


def add_plugin_with_dependencies(
    plugin: Plugin,
    plugins: Sequence[Plugin],
    existing_nodes: Sequence[AnalyzerNode],
    processed: frozenset[str] = frozenset(),
) -> list[AnalyzerNode]:
    """
    Add a plugin to the canvas after its dependencies.

    Dependencies found in the catalog are added first, depth-first in
    ``depends_on`` order. Plugins already on the canvas are not added twice.
    ``processed`` is scoped to the current call path, so dependency cycles
    terminate.

    Args:
        plugin: Plugin to add
        plugins: Full catalog used to resolve dependency names
        existing_nodes: Current canvas; not modified
        processed: Plugin names already being added on this call path

    Returns:
        New node list including the plugin and its dependencies
    """
    if plugin.name in processed:
        return list(existing_nodes)
    processed = processed | {plugin.name}

    if any(node.plugin.name == plugin.name for node in existing_nodes):
        return list(existing_nodes)

    updated_nodes = list(existing_nodes)

    for dependency_name in plugin.depends_on:
        dependency = next((p for p in plugins if p.name == dependency_name), None)
        if dependency:
            updated_nodes = add_plugin_with_dependencies(
                dependency, plugins, updated_nodes, processed
            )

    updated_nodes.append(create_analyzer_node(plugin))
    return updated_nodes
