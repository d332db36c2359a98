"""
AnalyzerFlow models package.

This package holds the type definitions, enums and result structures shared
across AnalyzerFlow.

Usage:
    from analyzerflow.models import (
        NodeType,
        WorkflowStep,
        LoadError,
        CatalogLoadResult,
    )
"""

from .base import (
    AnalyzerNodeDataDict,
    AnalyzerSubmission,
    ConfigNodeDataDict,
    EdgeDict,
    GraphDict,
    LanguageConfigDict,
    NodeDict,
    PluginDict,
    PositionDict,
    WorkflowStep,
)
from .enums import (
    ErrorSeverity,
    FileFormat,
    LoadErrorType,
    LoadResultStatus,
    NodeType,
)
from .errors import (
    CatalogLoadResult,
    CatalogLoadResultDict,
    LoadError,
)

__all__ = [
    # Enums
    "NodeType",
    "LoadResultStatus",
    "ErrorSeverity",
    "LoadErrorType",
    "FileFormat",
    # Shapes
    "PluginDict",
    "PositionDict",
    "AnalyzerNodeDataDict",
    "ConfigNodeDataDict",
    "NodeDict",
    "EdgeDict",
    "GraphDict",
    "WorkflowStep",
    "LanguageConfigDict",
    "AnalyzerSubmission",
    # Errors and results
    "LoadError",
    "CatalogLoadResult",
    "CatalogLoadResultDict",
]
