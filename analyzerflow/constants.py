"""Constants and default values for AnalyzerFlow configuration.

This module centralizes the engine defaults and the environment variable
names that can override them.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "ANALYZERFLOW_"

ENV_EXCLUDED_SUBSTRING: Final[str] = f"{ENV_VAR_PREFIX}EXCLUDED_SUBSTRING"

# Layout settings
ENV_LAYOUT_START_X: Final[str] = f"{ENV_VAR_PREFIX}LAYOUT_START_X"
ENV_LAYOUT_START_Y: Final[str] = f"{ENV_VAR_PREFIX}LAYOUT_START_Y"
ENV_LAYOUT_COLUMN_WIDTH: Final[str] = f"{ENV_VAR_PREFIX}LAYOUT_COLUMN_WIDTH"
ENV_LAYOUT_ROW_HEIGHT: Final[str] = f"{ENV_VAR_PREFIX}LAYOUT_ROW_HEIGHT"


# =============================================================================
# Graph Defaults
# =============================================================================

# Plugins whose name contains this substring never become graph nodes
DEFAULT_EXCLUDED_SUBSTRING: Final[str] = "notifier"

ANALYZER_NODE_PREFIX: Final[str] = "analyzer-"
EDGE_PREFIX: Final[str] = "edge-"

# Substrings used to pick the default canvas
SBOM_PLUGIN_MARKERS: Final[tuple[str, ...]] = ("sbom", "js-sbom")
VULNERABILITY_PLUGIN_MARKERS: Final[tuple[str, ...]] = (
    "vuln",
    "vulnerability",
    "js-vuln-finder",
)


# =============================================================================
# Layout Defaults
# =============================================================================

DEFAULT_START_X: Final[float] = 150
DEFAULT_START_Y: Final[float] = 200
DEFAULT_COLUMN_WIDTH: Final[float] = 500
DEFAULT_ROW_HEIGHT: Final[float] = 300


# =============================================================================
# Submission Form Rules
# =============================================================================

ANALYZER_NAME_MIN_LENGTH: Final[int] = 5
ANALYZER_DESCRIPTION_MIN_LENGTH: Final[int] = 10
ANALYZER_NAME_ERROR: Final[str] = "Please enter a name (minimum 5 characters)"
ANALYZER_DESCRIPTION_ERROR: Final[str] = (
    "Please enter a description (minimum 10 characters)"
)


# =============================================================================
# File Format Constants
# =============================================================================

YAML_EXTENSIONS: Final[tuple[str, ...]] = (".yaml", ".yml")
JSON_EXTENSIONS: Final[tuple[str, ...]] = (".json",)

# Key wrapping the plugin list in paginated catalog responses
PAGINATED_DATA_KEY: Final[str] = "data"


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_float(env_var: str, default: float) -> float:
    """
    Get float value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set or unparsable

    Returns:
        Float value from environment or default
    """
    try:
        return float(os.getenv(env_var, str(default)))
    except ValueError:
        return default


def get_env_str(env_var: str, default: str) -> str:
    """Get string value from environment variable."""
    return os.getenv(env_var, default)


# =============================================================================
# Configuration Value Getters (reads from environment)
# =============================================================================


def get_excluded_substring() -> str:
    return get_env_str(ENV_EXCLUDED_SUBSTRING, DEFAULT_EXCLUDED_SUBSTRING)


def get_start_x() -> float:
    return get_env_float(ENV_LAYOUT_START_X, DEFAULT_START_X)


def get_start_y() -> float:
    return get_env_float(ENV_LAYOUT_START_Y, DEFAULT_START_Y)


def get_column_width() -> float:
    return get_env_float(ENV_LAYOUT_COLUMN_WIDTH, DEFAULT_COLUMN_WIDTH)


def get_row_height() -> float:
    return get_env_float(ENV_LAYOUT_ROW_HEIGHT, DEFAULT_ROW_HEIGHT)
