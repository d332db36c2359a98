"""AnalyzerFlow command line interface."""

from analyzerflow.cli.main import app, main

__all__ = ["app", "main"]
