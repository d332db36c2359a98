"""
Plugin catalog loader with structured error reporting.

This loader provides:
- YAML and JSON catalog files
- Plain plugin lists and paginated ``{"data": [...]}`` envelopes
- Per-record validation with pydantic
- A CatalogLoadResult for every outcome instead of exceptions
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from analyzerflow.common.exceptions import CatalogError
from analyzerflow.constants import JSON_EXTENSIONS, PAGINATED_DATA_KEY, YAML_EXTENSIONS
from analyzerflow.models import (
    CatalogLoadResult,
    ErrorSeverity,
    FileFormat,
    LoadError,
    LoadErrorType,
    LoadResultStatus,
)
from analyzerflow.plugin import Plugin

logger = logging.getLogger(__name__)


class PluginRecord(BaseModel):
    """Validation model for one catalog record.

    ``config`` is accepted as-is; its content is never validated.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    version: str = ""
    description: str = ""
    depends_on: list[str] = Field(default_factory=list)
    config: Any = Field(default_factory=dict)

    @field_validator("version", "description", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # YAML turns versions like 1.0 into floats
        if value is None:
            return ""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("depends_on", mode="before")
    @classmethod
    def _default_dependencies(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_plugin(self) -> Plugin:
        return Plugin(
            name=self.name,
            version=self.version,
            description=self.description,
            depends_on=list(self.depends_on),
            config=self.config,
        )


class CatalogLoader:
    """
    Plugin catalog loader with unified error handling and result reporting.

    Every problem is reported as a LoadError inside the returned
    CatalogLoadResult; ``load`` itself does not raise.
    """

    def load(self, source: str | Path) -> CatalogLoadResult:
        """
        Load a plugin catalog from a file.

        Args:
            source: Path to a YAML or JSON catalog file

        Returns:
            CatalogLoadResult with status, plugins (if successful) and errors
        """
        file_path = Path(source)
        errors: list[LoadError] = []

        # Phase 1: File access
        if not file_path.exists():
            errors.append(
                LoadError(
                    error_type=LoadErrorType.FILE_NOT_FOUND,
                    severity=ErrorSeverity.FATAL,
                    message=f"Catalog file not found: {file_path}",
                    context={"path": str(file_path)},
                )
            )
            return self._failed(LoadResultStatus.FILE_ERROR, errors, file_path)

        file_format = self.detect_file_format(file_path)
        if file_format is None:
            errors.append(
                LoadError(
                    error_type=LoadErrorType.INVALID_FORMAT,
                    severity=ErrorSeverity.FATAL,
                    message=f"Unsupported file format: {file_path.suffix}",
                    context={"path": str(file_path), "suffix": file_path.suffix},
                )
            )
            return self._failed(LoadResultStatus.PARSE_ERROR, errors, file_path)

        # Phase 2: File parsing
        try:
            raw_data = self._read(file_path, file_format)
        except json.JSONDecodeError as e:
            errors.append(
                LoadError(
                    error_type=LoadErrorType.JSON_PARSE_ERROR,
                    severity=ErrorSeverity.FATAL,
                    message=f"JSON parsing failed: {e}",
                    context={
                        "path": str(file_path),
                        "line": e.lineno,
                        "column": e.colno,
                    },
                )
            )
            return self._failed(LoadResultStatus.PARSE_ERROR, errors, file_path)
        except YAMLError as e:
            errors.append(
                LoadError(
                    error_type=LoadErrorType.YAML_PARSE_ERROR,
                    severity=ErrorSeverity.FATAL,
                    message=f"YAML parsing failed: {e}",
                    context={"path": str(file_path)},
                )
            )
            return self._failed(LoadResultStatus.PARSE_ERROR, errors, file_path)
        except PermissionError as e:
            errors.append(
                LoadError(
                    error_type=LoadErrorType.FILE_PERMISSION_DENIED,
                    severity=ErrorSeverity.FATAL,
                    message=f"Permission denied reading catalog: {e}",
                    context={"path": str(file_path)},
                )
            )
            return self._failed(LoadResultStatus.FILE_ERROR, errors, file_path)
        except (OSError, UnicodeDecodeError) as e:
            errors.append(
                LoadError(
                    error_type=LoadErrorType.FILE_ENCODING_ERROR,
                    severity=ErrorSeverity.FATAL,
                    message=f"Failed to read file: {e}",
                    context={"path": str(file_path)},
                )
            )
            return self._failed(LoadResultStatus.FILE_ERROR, errors, file_path)

        # Phase 3: Structure extraction
        records = self._extract_records(raw_data, errors)
        if records is None:
            return self._failed(LoadResultStatus.STRUCTURE_ERROR, errors, file_path)

        # Phase 4: Record validation
        plugins, warnings = self._validate_records(records, errors)
        if errors:
            return self._failed(LoadResultStatus.VALIDATION_ERROR, errors, file_path)

        logger.info("Loaded %d plugins from %s", len(plugins), file_path)
        return CatalogLoadResult(
            status=LoadResultStatus.SUCCESS,
            plugins=plugins,
            warnings=warnings,
            source=str(file_path),
        )

    def detect_file_format(self, file_path: Path) -> FileFormat | None:
        """
        Detect file format from extension.

        Returns:
            FileFormat enum value, or None for unsupported extensions
        """
        suffix = file_path.suffix.lower()
        if suffix in YAML_EXTENSIONS:
            return FileFormat.YAML
        if suffix in JSON_EXTENSIONS:
            return FileFormat.JSON
        return None

    def _read(self, file_path: Path, file_format: FileFormat) -> Any:
        with open(file_path, encoding="utf-8") as f:
            if file_format == FileFormat.JSON:
                return json.load(f)
            return YAML(typ="safe").load(f)

    def _extract_records(
        self, raw_data: Any, errors: list[LoadError]
    ) -> list[Any] | None:
        """
        Extract the list of plugin records from parsed file data.

        Accepts either a bare list or a paginated envelope holding the list
        under ``"data"``.
        """
        if isinstance(raw_data, dict) and PAGINATED_DATA_KEY in raw_data:
            raw_data = raw_data[PAGINATED_DATA_KEY]

        if not isinstance(raw_data, list):
            errors.append(
                LoadError(
                    error_type=LoadErrorType.INVALID_STRUCTURE,
                    severity=ErrorSeverity.FATAL,
                    message=(
                        "Catalog must be a list of plugins or an object with a "
                        f"'{PAGINATED_DATA_KEY}' list, got {type(raw_data).__name__}"
                    ),
                    context={"actual_type": type(raw_data).__name__},
                )
            )
            return None

        return raw_data

    def _validate_records(
        self, records: list[Any], errors: list[LoadError]
    ) -> tuple[list[Plugin], list[LoadError]]:
        """Validate each record, collecting fatal errors and warnings.

        Warnings cover duplicate names and unquoted float versions, which YAML
        and JSON parse as numbers (``1.10`` becomes ``"1.1"``).
        """
        plugins: list[Plugin] = []
        warnings: list[LoadError] = []
        seen: set[str] = set()

        for index, record in enumerate(records):
            try:
                plugin = PluginRecord.model_validate(record).to_plugin()
            except ValidationError as e:
                for detail in e.errors():
                    field_path = ".".join(str(part) for part in detail["loc"])
                    errors.append(
                        LoadError(
                            error_type=LoadErrorType.INVALID_PLUGIN,
                            severity=ErrorSeverity.FATAL,
                            message=f"Plugin #{index}: {field_path or 'record'}: {detail['msg']}",
                            context={"index": index, "field": field_path},
                        )
                    )
                continue

            if isinstance(record, dict) and isinstance(record.get("version"), float):
                warnings.append(
                    LoadError(
                        error_type=LoadErrorType.NUMERIC_VERSION,
                        severity=ErrorSeverity.WARNING,
                        message=(
                            f"Plugin '{plugin.name}' version was read as the number "
                            f"{plugin.version}; quote it to keep trailing zeros"
                        ),
                        context={"index": index, "name": plugin.name, "version": plugin.version},
                    )
                )

            if plugin.name in seen:
                warnings.append(
                    LoadError(
                        error_type=LoadErrorType.DUPLICATE_PLUGIN,
                        severity=ErrorSeverity.WARNING,
                        message=f"Plugin '{plugin.name}' is defined more than once",
                        context={"index": index, "name": plugin.name},
                    )
                )
            seen.add(plugin.name)
            plugins.append(plugin)

        return plugins, warnings

    def _failed(
        self, status: LoadResultStatus, errors: list[LoadError], file_path: Path
    ) -> CatalogLoadResult:
        logger.error("Failed to load catalog %s: %s", file_path, errors[-1].message)
        return CatalogLoadResult(status=status, errors=errors, source=str(file_path))


def load_catalog(source: str | Path) -> list[Plugin]:
    """
    Load a plugin catalog, raising on failure.

    Raises:
        CatalogError: If the catalog cannot be loaded
    """
    result = CatalogLoader().load(source)
    if not result.success:
        raise CatalogError(
            result.get_error_summary(), source=str(source), errors=result.errors
        )
    return result.plugins
