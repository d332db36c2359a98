"""Analyzer definitions handed to the pipeline submission backend.

The graph engine is lenient about dependency problems; the only validation
applied before submission is the analyzer form itself (name and description
length), kept here as a separate step.
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from analyzerflow.common.exceptions import SubmissionError
from analyzerflow.constants import (
    ANALYZER_DESCRIPTION_ERROR,
    ANALYZER_DESCRIPTION_MIN_LENGTH,
    ANALYZER_NAME_ERROR,
    ANALYZER_NAME_MIN_LENGTH,
)
from analyzerflow.graph.nodes import Edge, Node
from analyzerflow.graph.stages import retrieve_workflow_steps
from analyzerflow.models import AnalyzerSubmission
from analyzerflow.plugin import Plugin

logger = logging.getLogger(__name__)

__all__ = [
    "LanguageConfig",
    "AnalyzerForm",
    "TemplateStep",
    "AnalyzerTemplate",
    "validate_form",
    "build_submission",
    "plugins_for_template",
]


class LanguageConfig(BaseModel):
    """Plugins enabled for one language."""

    plugins: list[str] = Field(default_factory=list)


class AnalyzerForm(BaseModel):
    """User-entered analyzer metadata."""

    name: str
    description: str
    supported_languages: list[str] | None = None
    language_config: dict[str, LanguageConfig] | None = None
    logo: str | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if len(value) < ANALYZER_NAME_MIN_LENGTH:
            raise ValueError(ANALYZER_NAME_ERROR)
        return value

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        if len(value) < ANALYZER_DESCRIPTION_MIN_LENGTH:
            raise ValueError(ANALYZER_DESCRIPTION_ERROR)
        return value


class TemplateStep(BaseModel):
    """One plugin entry in a template stage."""

    name: str
    version: str = ""
    config: Any = Field(default_factory=dict)


class AnalyzerTemplate(BaseModel):
    """Predefined analyzer served by the template catalog."""

    name: str
    description: str = ""
    supported_languages: list[str] = Field(default_factory=list)
    language_config: dict[str, LanguageConfig] = Field(default_factory=dict)
    logo: str = ""
    steps: list[list[TemplateStep]] = Field(default_factory=list)


def _field_errors(error: ValidationError) -> dict[str, list[str]]:
    field_errors: dict[str, list[str]] = {}
    for detail in error.errors():
        field_path = ".".join(str(part) for part in detail["loc"]) or "form"
        message = detail["msg"].removeprefix("Value error, ")
        field_errors.setdefault(field_path, []).append(message)
    return field_errors


def validate_form(data: AnalyzerForm | dict) -> AnalyzerForm:
    """
    Validate analyzer form data.

    Raises:
        SubmissionError: With per-field messages when the form is invalid
    """
    if isinstance(data, AnalyzerForm):
        return data
    try:
        return AnalyzerForm.model_validate(data)
    except ValidationError as e:
        field_errors = _field_errors(e)
        raise SubmissionError(
            f"Invalid analyzer form: {', '.join(sorted(field_errors))}",
            field_errors=field_errors,
        ) from e


def build_submission(
    form: AnalyzerForm | dict,
    nodes: Sequence[Node],
    edges: Sequence[Edge],
) -> AnalyzerSubmission:
    """
    Build the analyzer definition for a canvas.

    Args:
        form: Analyzer name, description and optional language metadata
        nodes: Canvas nodes
        edges: Dependency edges between the canvas nodes

    Returns:
        Submission payload whose ``steps`` are the execution stages

    Raises:
        SubmissionError: If the form is invalid
    """
    analyzer_form = validate_form(form)
    steps = retrieve_workflow_steps(nodes, edges)

    submission = AnalyzerSubmission(
        name=analyzer_form.name,
        description=analyzer_form.description,
        steps=steps,
    )
    if analyzer_form.supported_languages is not None:
        submission["supported_languages"] = list(analyzer_form.supported_languages)
    if analyzer_form.language_config is not None:
        submission["language_config"] = {
            language: {"plugins": list(config.plugins)}
            for language, config in analyzer_form.language_config.items()
        }
    if analyzer_form.logo is not None:
        submission["logo"] = analyzer_form.logo

    logger.debug(
        "Built submission '%s' with %d stages", analyzer_form.name, len(steps)
    )
    return submission


def plugins_for_template(
    template: AnalyzerTemplate, plugins: Sequence[Plugin]
) -> list[Plugin]:
    """Catalog plugins named by a template's steps, in step order.

    Names missing from the catalog are skipped; each plugin is returned once.
    """
    by_name = {plugin.name: plugin for plugin in reversed(plugins)}
    selected: list[Plugin] = []
    seen: set[str] = set()

    for stage in template.steps:
        for step in stage:
            name = step.name
            if name in seen or name not in by_name:
                continue
            seen.add(name)
            selected.append(by_name[name])

    return selected
