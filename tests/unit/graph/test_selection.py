"""Unit tests for canvas selection helpers."""

from analyzerflow.config import EngineConfig
from analyzerflow.graph import (
    add_plugin_with_dependencies,
    create_analyzer_node,
    get_available_plugins,
    initialize_default_nodes,
)
from tests.conftest import make_plugin


def node_names(nodes):
    return [node.name for node in nodes]


class TestCreateAnalyzerNode:
    def test_node_fields(self):
        plugin = make_plugin("js-sbom", version="1.2.3")

        node = create_analyzer_node(plugin)

        assert node.id == "analyzer-js-sbom"
        assert node.label == "js-sbom"
        assert node.version == "1.2.3"
        assert node.description == "js-sbom analyzer"
        assert node.plugin is plugin
        assert (node.position.x, node.position.y) == (0, 0)


class TestInitializeDefaultNodes:
    def test_sbom_then_vulnerability(self, js_catalog):
        nodes = initialize_default_nodes(js_catalog)

        assert node_names(nodes) == ["js-sbom", "js-vuln-finder"]

    def test_vulnerability_listed_first_in_catalog(self):
        plugins = [make_plugin("vulnerability-scanner"), make_plugin("php-sbom")]

        nodes = initialize_default_nodes(plugins)

        assert node_names(nodes) == ["php-sbom", "vulnerability-scanner"]

    def test_missing_defaults(self):
        assert initialize_default_nodes([make_plugin("codeql")]) == []

    def test_only_first_match_is_used(self):
        plugins = [make_plugin("js-sbom"), make_plugin("php-sbom")]

        assert node_names(initialize_default_nodes(plugins)) == ["js-sbom"]


class TestGetAvailablePlugins:
    def test_excludes_existing_and_notifiers(self, js_catalog):
        existing = [create_analyzer_node(js_catalog[0])]

        available = get_available_plugins(js_catalog, existing)

        assert [plugin.name for plugin in available] == [
            "js-vuln-finder",
            "js-license",
            "codeql",
            "js-patching",
        ]

    def test_empty_canvas(self, chain_plugins):
        assert get_available_plugins(chain_plugins, []) == chain_plugins

    def test_custom_excluded_substring(self, js_catalog):
        config = EngineConfig(excluded_substring="js-")

        available = get_available_plugins(js_catalog, [], config)

        assert [plugin.name for plugin in available] == ["codeql", "notifier"]


class TestAddPluginWithDependencies:
    def test_dependencies_added_first(self, chain_plugins):
        nodes = add_plugin_with_dependencies(chain_plugins[2], chain_plugins, [])

        assert node_names(nodes) == ["A", "B", "C"]

    def test_existing_nodes_not_duplicated(self, diamond_plugins):
        existing = [create_analyzer_node(diamond_plugins[0])]

        nodes = add_plugin_with_dependencies(diamond_plugins[3], diamond_plugins, existing)

        assert node_names(nodes) == ["A", "B", "C", "D"]
        assert nodes[0] is existing[0]

    def test_input_list_not_mutated(self, chain_plugins):
        existing = []

        add_plugin_with_dependencies(chain_plugins[1], chain_plugins, existing)

        assert existing == []

    def test_plugin_already_present(self, chain_plugins):
        existing = [create_analyzer_node(chain_plugins[0])]

        nodes = add_plugin_with_dependencies(chain_plugins[0], chain_plugins, existing)

        assert node_names(nodes) == ["A"]

    def test_unknown_dependency_skipped(self):
        plugins = [make_plugin("A", "ghost")]

        nodes = add_plugin_with_dependencies(plugins[0], plugins, [])

        assert node_names(nodes) == ["A"]

    def test_cycle_terminates(self):
        plugins = [make_plugin("A", "B"), make_plugin("B", "A")]

        nodes = add_plugin_with_dependencies(plugins[0], plugins, [])

        assert node_names(nodes) == ["B", "A"]
