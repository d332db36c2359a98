"""Common exceptions for AnalyzerFlow.

The graph engine itself never raises: unresolved dependencies and cycles are
absorbed by policy. These exceptions belong to the surfaces around it
(configuration, catalog loading, analyzer submission).
"""

from typing import Any


class AnalyzerFlowError(Exception):
    """Base exception for all AnalyzerFlow-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(AnalyzerFlowError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


class CatalogError(AnalyzerFlowError):
    """Raised when a plugin catalog cannot be loaded."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        errors: list[Any] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize catalog error with the load errors that caused it."""
        super().__init__(message, context)
        self.source = source
        self.errors = errors or []


class SubmissionError(AnalyzerFlowError):
    """Raised when an analyzer definition fails form validation."""

    def __init__(
        self,
        message: str,
        field_errors: dict[str, list[str]] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize submission error with per-field messages."""
        super().__init__(message, context)
        self.field_errors = field_errors or {}
