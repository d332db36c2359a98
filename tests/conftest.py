"""Pytest configuration and fixtures for AnalyzerFlow tests.

This module provides shared plugin catalogs and catalog files used across the
unit, CLI and property test suites.
"""

import json

import pytest
from ruamel.yaml import YAML

from analyzerflow.plugin import Plugin


def make_plugin(name: str, *depends_on: str, version: str = "1.0.0", config=None) -> Plugin:
    """Build a plugin with a default version and an empty config."""
    return Plugin(
        name=name,
        version=version,
        description=f"{name} analyzer",
        depends_on=list(depends_on),
        config=config if config is not None else {},
    )


@pytest.fixture
def chain_plugins() -> list[Plugin]:
    """A <- B <- C."""
    return [
        make_plugin("A"),
        make_plugin("B", "A"),
        make_plugin("C", "B"),
    ]


@pytest.fixture
def diamond_plugins() -> list[Plugin]:
    """A <- B, A <- C, {B, C} <- D."""
    return [
        make_plugin("A"),
        make_plugin("B", "A"),
        make_plugin("C", "A"),
        make_plugin("D", "B", "C"),
    ]


@pytest.fixture
def js_catalog() -> list[Plugin]:
    """Realistic JavaScript analyzer catalog including a notifier."""
    return [
        make_plugin("js-sbom", config={"project": {"type": "string"}}),
        make_plugin("js-vuln-finder", "js-sbom", config={"vulnerability_policy": {"type": "string"}}),
        make_plugin("js-license", "js-sbom"),
        make_plugin("codeql"),
        make_plugin("js-patching", "js-vuln-finder", "js-sbom"),
        make_plugin("notifier", "js-patching"),
    ]


@pytest.fixture
def catalog_records(js_catalog) -> list[dict]:
    return [plugin.to_dict() for plugin in js_catalog]


@pytest.fixture
def yaml_catalog_file(tmp_path, catalog_records):
    """Catalog written as a YAML list."""
    catalog_file = tmp_path / "plugins.yaml"
    yaml = YAML()
    yaml.default_flow_style = False
    with open(catalog_file, "w") as f:
        yaml.dump(catalog_records, f)
    return catalog_file


@pytest.fixture
def json_catalog_file(tmp_path, catalog_records):
    """Catalog written as a paginated JSON response."""
    catalog_file = tmp_path / "plugins.json"
    catalog_file.write_text(json.dumps({"data": catalog_records, "page": 0, "entry_count": len(catalog_records)}))
    return catalog_file


def make_ladder(layers: int) -> list[Plugin]:
    """Two plugins per layer, each depending on both plugins of the layer before."""
    plugins = [make_plugin("L0a"), make_plugin("L0b")]
    for layer in range(1, layers):
        previous = (f"L{layer - 1}a", f"L{layer - 1}b")
        plugins.append(make_plugin(f"L{layer}a", *previous))
        plugins.append(make_plugin(f"L{layer}b", *previous))
    return plugins
