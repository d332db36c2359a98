"""Unit tests for analyzer submission building."""

import pytest

from analyzerflow.common.exceptions import SubmissionError
from analyzerflow.graph import create_analyzer_nodes
from analyzerflow.submission import (
    AnalyzerForm,
    AnalyzerTemplate,
    build_submission,
    plugins_for_template,
    validate_form,
)
from tests.conftest import make_plugin

VALID_FORM = {
    "name": "JS analyzer",
    "description": "Default JavaScript analysis pipeline",
}


class TestValidateForm:
    def test_valid_form(self):
        form = validate_form(VALID_FORM)

        assert isinstance(form, AnalyzerForm)
        assert form.name == "JS analyzer"

    def test_short_name(self):
        with pytest.raises(SubmissionError) as exc_info:
            validate_form({**VALID_FORM, "name": "js"})

        assert exc_info.value.field_errors == {
            "name": ["Please enter a name (minimum 5 characters)"]
        }

    def test_short_description(self):
        with pytest.raises(SubmissionError) as exc_info:
            validate_form({**VALID_FORM, "description": "short"})

        assert exc_info.value.field_errors == {
            "description": ["Please enter a description (minimum 10 characters)"]
        }

    def test_boundary_lengths_accepted(self):
        form = validate_form({"name": "a" * 5, "description": "b" * 10})

        assert form.name == "aaaaa"

    def test_missing_fields(self):
        with pytest.raises(SubmissionError) as exc_info:
            validate_form({})

        assert set(exc_info.value.field_errors) == {"name", "description"}

    def test_form_instance_passes_through(self):
        form = AnalyzerForm(**VALID_FORM)

        assert validate_form(form) is form


class TestBuildSubmission:
    def test_steps_are_execution_stages(self, diamond_plugins):
        graph = create_analyzer_nodes(diamond_plugins)

        submission = build_submission(VALID_FORM, graph.nodes, graph.edges)

        assert submission["name"] == "JS analyzer"
        assert submission["description"] == "Default JavaScript analysis pipeline"
        assert [[step["name"] for step in stage] for stage in submission["steps"]] == [
            ["A"], ["B", "C"], ["D"],
        ]
        assert "supported_languages" not in submission
        assert "logo" not in submission

    def test_optional_language_metadata(self, chain_plugins):
        graph = create_analyzer_nodes(chain_plugins)
        form = {
            **VALID_FORM,
            "supported_languages": ["javascript"],
            "language_config": {"javascript": {"plugins": ["A", "B", "C"]}},
            "logo": "js",
        }

        submission = build_submission(form, graph.nodes, graph.edges)

        assert submission["supported_languages"] == ["javascript"]
        assert submission["language_config"] == {"javascript": {"plugins": ["A", "B", "C"]}}
        assert submission["logo"] == "js"

    def test_invalid_form_raises(self, chain_plugins):
        graph = create_analyzer_nodes(chain_plugins)

        with pytest.raises(SubmissionError):
            build_submission({"name": "x", "description": "y"}, graph.nodes, graph.edges)

    def test_cyclic_pipeline_still_submits(self):
        """Current behavior: cycles are not rejected at submission time."""
        graph = create_analyzer_nodes([make_plugin("A", "B"), make_plugin("B", "A")])

        submission = build_submission(VALID_FORM, graph.nodes, graph.edges)

        assert [[step["name"] for step in stage] for stage in submission["steps"]] == [["A", "B"]]


class TestPluginsForTemplate:
    def test_plugins_in_step_order(self, js_catalog):
        template = AnalyzerTemplate.model_validate({
            "name": "JavaScript",
            "supported_languages": ["javascript"],
            "language_config": {"javascript": {"plugins": ["js-sbom", "js-vuln-finder"]}},
            "steps": [
                [{"name": "js-sbom", "version": "1.0.0", "config": {}}],
                [{"name": "js-vuln-finder", "version": "1.0.0"}, {"name": "unknown"}],
                [{"name": "js-sbom"}],
            ],
        })

        plugins = plugins_for_template(template, js_catalog)

        assert [plugin.name for plugin in plugins] == ["js-sbom", "js-vuln-finder"]

    def test_empty_template(self, js_catalog):
        template = AnalyzerTemplate(name="empty")

        assert plugins_for_template(template, js_catalog) == []
