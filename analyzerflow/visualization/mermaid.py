"""Mermaid diagram generation for analyzer pipelines."""

from collections.abc import Sequence

from analyzerflow.colors import color_for
from analyzerflow.graph.nodes import AnalyzerNode, Edge, Node
from analyzerflow.graph.stages import retrieve_workflow_steps


class PipelineMermaidGenerator:
    """
    Generator for Mermaid flowcharts of analyzer pipelines.

    Each execution stage becomes a subgraph, laid out left to right, with one
    node per analyzer and one arrow per dependency edge. Node fills come from
    the plugin color scale.
    """

    def __init__(self, direction: str = "LR"):
        """Initialize generator with the flowchart direction."""
        self.direction = direction

    def generate(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        title: str | None = None,
    ) -> str:
        """
        Generate a Mermaid flowchart for a pipeline graph.

        Args:
            nodes: Canvas nodes; non-analyzer nodes are skipped
            edges: Dependency edges
            title: Optional diagram title

        Returns:
            Mermaid markdown string
        """
        analyzer_nodes = [node for node in nodes if isinstance(node, AnalyzerNode)]

        # Mermaid ids must be simple identifiers; plugin names may not be
        mermaid_ids: dict[str, str] = {}
        nodes_by_name: dict[str, AnalyzerNode] = {}
        for index, node in enumerate(analyzer_nodes):
            mermaid_ids.setdefault(node.id, f"N{index}")
            nodes_by_name.setdefault(node.name, node)

        lines = ["```mermaid"]
        if title:
            lines.extend(["---", f"title: {title}", "---"])
        lines.append(f"flowchart {self.direction}")

        stages = retrieve_workflow_steps(analyzer_nodes, edges)
        declared: set[str] = set()
        for stage_index, stage in enumerate(stages):
            lines.append(f'    subgraph stage_{stage_index} ["Stage {stage_index + 1}"]')
            for step in stage:
                node = nodes_by_name[step["name"]]
                mermaid_id = mermaid_ids[node.id]
                # Records sharing a name share one node
                if mermaid_id in declared:
                    continue
                declared.add(mermaid_id)
                lines.append(f"        {mermaid_id}{self._node_label(node)}")
            lines.append("    end")

        for edge in edges:
            source = mermaid_ids.get(edge.source)
            target = mermaid_ids.get(edge.target)
            if source and target:
                lines.append(f"    {source} --> {target}")

        lines.extend(self._generate_styling(analyzer_nodes, mermaid_ids))
        lines.append("```")
        return "\n".join(lines)

    @staticmethod
    def _node_label(node: AnalyzerNode) -> str:
        label = node.label.replace('"', "'")
        if node.version:
            return f'["{label}<br/>v{node.version}"]'
        return f'["{label}"]'

    @staticmethod
    def _generate_styling(
        analyzer_nodes: Sequence[AnalyzerNode], mermaid_ids: dict[str, str]
    ) -> list[str]:
        if not analyzer_nodes:
            return []

        lines = ["", "    %% Styling"]
        styled: set[str] = set()
        for node in analyzer_nodes:
            mermaid_id = mermaid_ids[node.id]
            if mermaid_id in styled:
                continue
            styled.add(mermaid_id)
            lines.append(f"    style {mermaid_id} fill:{color_for(node.name)},color:#ffffff")
        return lines
