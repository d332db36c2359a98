"""
CLI Context for AnalyzerFlow.

Provides centralized catalog loading and context management for all CLI commands.
"""

from dataclasses import dataclass, field

import typer
from rich.console import Console

from analyzerflow.cli.utils.printer import CliPrinter
from analyzerflow.config import EngineConfig
from analyzerflow.loader import CatalogLoader
from analyzerflow.models import CatalogLoadResult
from analyzerflow.plugin import Plugin


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once in the app callback and passed to all
    commands via Typer's context injection.

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        config: Engine configuration read from the environment
        printer: CLI printer for formatted output
        loader: Catalog loader instance
        load_result: Full load result of the last catalog load
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    config: EngineConfig = field(default_factory=EngineConfig.from_env)
    printer: CliPrinter = field(init=False)
    loader: CatalogLoader = field(init=False)
    load_result: CatalogLoadResult | None = None
    json_mode: bool = False

    def __post_init__(self):
        """Initialize printer and loader."""
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)
        self.loader = CatalogLoader()

    def set_json_mode(self, json_mode: bool) -> None:
        self.json_mode = json_mode
        self.printer.json_mode = json_mode

    def print_progress(self, message: str) -> None:
        """Print a progress message (only in verbose mode, not in JSON mode)."""
        if self.verbose and not self.json_mode:
            self.printer.show_progress(message)

    def load_catalog_or_exit(self, source: str) -> list[Plugin]:
        """
        Load a plugin catalog and exit on failure.

        Args:
            source: Catalog file path

        Returns:
            Plugins in catalog order (only if successful; otherwise exits)

        Raises:
            typer.Exit: If loading fails
        """
        self.print_progress(f"Loading catalog from: {source}")

        result = self.loader.load(source)
        self.load_result = result

        if not result.success:
            self.printer.print_load_result(result)
            raise typer.Exit(code=1)

        if result.has_warnings and not self.json_mode:
            self.printer.print_load_result(result)

        self.print_progress(f"Loaded {len(result.plugins)} plugins")
        return result.plugins
