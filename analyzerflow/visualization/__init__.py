"""
Visualization module for AnalyzerFlow.

Provides Mermaid export of analyzer pipeline graphs.
"""

from analyzerflow.visualization.mermaid import PipelineMermaidGenerator

__all__ = [
    "PipelineMermaidGenerator",
]
