"""Property-based tests for graph building, staging and layout.

Key properties tested:
- Every edge points from an earlier stage to a later one in acyclic catalogs
- Every non-excluded plugin lands in exactly one stage, cycles or not
- Layout columns follow dependency order
- Building is deterministic
"""

import pytest
from hypothesis import given

from analyzerflow.config import LayoutConfig
from analyzerflow.graph import GraphBuilder, LayoutEngine, StageGrouper
from tests.property.generators import acyclic_catalog, cyclic_catalog

pytestmark = pytest.mark.property


def stage_index_by_name(stages) -> dict[str, int]:
    return {step["name"]: index for index, stage in enumerate(stages) for step in stage}


class TestStageProperties:
    """Property-based tests for execution stages."""

    @given(plugins=acyclic_catalog())
    def test_dependencies_run_in_earlier_stages(self, plugins):
        graph = GraphBuilder().build(plugins)
        stages = StageGrouper().group(graph.nodes, graph.edges)
        stage_of = stage_index_by_name(stages)

        for edge in graph.edges:
            source = graph.get_node(edge.source)
            target = graph.get_node(edge.target)
            assert stage_of[source.name] < stage_of[target.name]

    @given(plugins=cyclic_catalog())
    def test_every_plugin_in_exactly_one_stage(self, plugins):
        graph = GraphBuilder().build(plugins)
        stages = StageGrouper().group(graph.nodes, graph.edges)

        names = [step["name"] for stage in stages for step in stage]
        assert sorted(names) == sorted(node.name for node in graph.analyzer_nodes)
        assert all(stage for stage in stages)

    @given(plugins=cyclic_catalog())
    def test_excluded_plugins_never_staged(self, plugins):
        graph = GraphBuilder().build(plugins)
        stages = StageGrouper().group(graph.nodes, graph.edges)

        assert not any("notifier" in name for name in stage_index_by_name(stages))


class TestLayoutProperties:
    """Property-based tests for node placement."""

    @given(plugins=acyclic_catalog())
    def test_dependencies_are_left_of_dependents(self, plugins):
        graph = GraphBuilder().build(plugins)
        nodes = LayoutEngine().layout(graph.nodes)
        x_by_name = {node.name: node.position.x for node in nodes}

        for node in nodes:
            in_set = [dep for dep in node.plugin.depends_on if dep in x_by_name]
            if not in_set:
                assert node.position.x == 150
            for dep in in_set:
                assert x_by_name[dep] + 500 <= node.position.x

    @given(plugins=cyclic_catalog())
    def test_columns_are_centred(self, plugins):
        config = LayoutConfig()
        graph = GraphBuilder().build(plugins)
        nodes = LayoutEngine(config).layout(graph.nodes)

        columns: dict[float, list[float]] = {}
        for node in nodes:
            columns.setdefault(node.position.x, []).append(node.position.y)
        for ys in columns.values():
            assert sum(ys) / len(ys) == pytest.approx(config.start_y)


class TestBuildProperties:
    """Property-based tests for graph construction."""

    @given(plugins=cyclic_catalog())
    def test_build_is_deterministic(self, plugins):
        first = GraphBuilder().build(plugins)
        second = GraphBuilder().build(plugins)

        assert first.to_dict() == second.to_dict()

    @given(plugins=acyclic_catalog())
    def test_edges_only_between_built_nodes(self, plugins):
        graph = GraphBuilder().build(plugins)
        node_ids = {node.id for node in graph.nodes}

        for edge in graph.edges:
            assert edge.source in node_ids
            assert edge.target in node_ids
            assert edge.source != edge.target
