"""Common utilities shared across AnalyzerFlow."""

from .exceptions import (
    AnalyzerFlowError,
    CatalogError,
    ConfigurationError,
    SubmissionError,
)

__all__ = [
    "AnalyzerFlowError",
    "ConfigurationError",
    "CatalogError",
    "SubmissionError",
]
