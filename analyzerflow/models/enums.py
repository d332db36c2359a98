"""
Enums and constants for AnalyzerFlow.

This module defines all enums used to avoid magic strings throughout the
codebase.

Usage:
    from analyzerflow.models.enums import (
        NodeType,
        LoadResultStatus,
        LoadErrorType,
    )
"""

from enum import StrEnum

# ============================================================================
# Graph Enums
# ============================================================================


class NodeType(StrEnum):
    """Kinds of nodes that can appear on a pipeline canvas."""

    ANALYZER = "analyzer"
    CONFIG = "config"


# ============================================================================
# Load Result Enums
# ============================================================================


class LoadResultStatus(StrEnum):
    """Status of a catalog load operation."""

    SUCCESS = "success"
    FILE_ERROR = "file_error"
    PARSE_ERROR = "parse_error"
    STRUCTURE_ERROR = "structure_error"
    VALIDATION_ERROR = "validation_error"


class ErrorSeverity(StrEnum):
    """Severity level of load errors."""

    FATAL = "fatal"  # Catalog cannot be used
    WARNING = "warning"  # Catalog loaded but has issues
    INFO = "info"


class LoadErrorType(StrEnum):
    """Categorized error types for catalog loading."""

    # File-level errors
    FILE_NOT_FOUND = "file_not_found"
    FILE_PERMISSION_DENIED = "file_permission_denied"
    FILE_ENCODING_ERROR = "file_encoding_error"

    # Parse-level errors
    YAML_PARSE_ERROR = "yaml_parse_error"
    JSON_PARSE_ERROR = "json_parse_error"
    INVALID_FORMAT = "invalid_format"

    # Structure-level errors
    INVALID_STRUCTURE = "invalid_structure"
    INVALID_PLUGIN = "invalid_plugin"
    DUPLICATE_PLUGIN = "duplicate_plugin"
    NUMERIC_VERSION = "numeric_version"


class FileFormat(StrEnum):
    """Supported catalog file formats."""

    YAML = "yaml"
    JSON = "json"
