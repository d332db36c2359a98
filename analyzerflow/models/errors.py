"""
Error models and result structures for catalog loading.

Note: This module must NOT import from any analyzerflow modules except .enums
to maintain a clean vertical hierarchy and avoid circular imports.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict

from .enums import ErrorSeverity, LoadErrorType, LoadResultStatus


@dataclass(frozen=True)
class LoadError:
    """Structured error information from catalog loading.

    Attributes:
        error_type: Categorized error type
        severity: Error severity level
        message: Human-readable error description
        context: Additional context information (flexible dictionary)
    """

    error_type: LoadErrorType
    severity: ErrorSeverity
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error_type": self.error_type.value,
            "severity": self.severity.value,
            "message": self.message,
            "context": dict(self.context),
        }


class CatalogLoadResultDict(TypedDict):
    """JSON-serializable dictionary format for CatalogLoadResult."""

    status: str
    plugins: list[dict[str, Any]]
    errors: list[dict[str, Any]]
    warnings: list[dict[str, Any]]
    source: str


@dataclass(frozen=True)
class CatalogLoadResult:
    """Unified result object for catalog loading operations.

    Attributes:
        status: Overall load operation status
        plugins: Loaded plugins in catalog order (empty if loading failed)
        errors: Fatal problems; the catalog is unusable when present
        warnings: Non-fatal problems; plugins are still returned
        source: Source file path
    """

    status: LoadResultStatus
    plugins: list[Any] = field(default_factory=list)  # list[Plugin]
    errors: list[LoadError] = field(default_factory=list)
    warnings: list[LoadError] = field(default_factory=list)
    source: str = ""

    @property
    def success(self) -> bool:
        """Check if load was successful (plugins available)."""
        return self.status == LoadResultStatus.SUCCESS

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> CatalogLoadResultDict:
        """Convert result to JSON-serializable dictionary."""
        return CatalogLoadResultDict(
            status=self.status.value,
            plugins=[plugin.to_dict() for plugin in self.plugins],
            errors=[error.to_dict() for error in self.errors],
            warnings=[warning.to_dict() for warning in self.warnings],
            source=self.source,
        )

    def get_error_summary(self) -> str:
        """Get human-readable summary of errors."""
        if not self.errors:
            return "No errors"

        lines = [f"Found {self.error_count} error(s):"]
        for error in self.errors:
            lines.append(f"  - [{error.error_type.value}] {error.message}")
        return "\n".join(lines)
