# analyzerflow/config.py
from dataclasses import dataclass, field
from typing import TypedDict

from analyzerflow.common.exceptions import ConfigurationError
from analyzerflow.constants import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_EXCLUDED_SUBSTRING,
    DEFAULT_ROW_HEIGHT,
    DEFAULT_START_X,
    DEFAULT_START_Y,
    get_column_width,
    get_excluded_substring,
    get_row_height,
    get_start_x,
    get_start_y,
)


class LayoutConfigDict(TypedDict, total=False):
    """TypedDict for layout configuration dictionary"""
    start_x: float
    start_y: float
    column_width: float
    row_height: float


class EngineConfigDict(TypedDict, total=False):
    """TypedDict for engine configuration dictionary"""
    excluded_substring: str
    layout: LayoutConfigDict


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing used by the layout engine"""

    start_x: float = DEFAULT_START_X
    start_y: float = DEFAULT_START_Y
    column_width: float = DEFAULT_COLUMN_WIDTH
    row_height: float = DEFAULT_ROW_HEIGHT

    def __post_init__(self):
        """Validate spacing after initialization"""
        if self.column_width <= 0:
            raise ConfigurationError(
                f"column_width must be positive, got {self.column_width}",
                config_key="column_width",
            )
        if self.row_height <= 0:
            raise ConfigurationError(
                f"row_height must be positive, got {self.row_height}",
                config_key="row_height",
            )

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        """Create layout configuration from environment variables"""
        return cls(
            start_x=get_start_x(),
            start_y=get_start_y(),
            column_width=get_column_width(),
            row_height=get_row_height(),
        )

    def to_dict(self) -> LayoutConfigDict:
        return LayoutConfigDict(
            start_x=self.start_x,
            start_y=self.start_y,
            column_width=self.column_width,
            row_height=self.row_height,
        )


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the analyzer graph engine"""

    excluded_substring: str = DEFAULT_EXCLUDED_SUBSTRING
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self):
        if not self.excluded_substring:
            # An empty substring would exclude every plugin
            raise ConfigurationError(
                "excluded_substring must not be empty",
                config_key="excluded_substring",
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables"""
        return cls(
            excluded_substring=get_excluded_substring(),
            layout=LayoutConfig.from_env(),
        )

    @classmethod
    def from_dict(cls, config_dict: EngineConfigDict) -> "EngineConfig":
        """Create configuration from dictionary"""
        layout = LayoutConfig(**config_dict.get("layout", {}))
        return cls(
            excluded_substring=config_dict.get(
                "excluded_substring", DEFAULT_EXCLUDED_SUBSTRING
            ),
            layout=layout,
        )

    def to_dict(self) -> EngineConfigDict:
        """Convert configuration to dictionary"""
        return EngineConfigDict(
            excluded_substring=self.excluded_substring,
            layout=self.layout.to_dict(),
        )


DEFAULT_CONFIG = EngineConfig()
