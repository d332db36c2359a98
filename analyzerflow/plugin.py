"""Plugin catalog entries.

A Plugin is one unit of analysis work offered by the plugin catalog. Its
``name`` is both its identity and the key other plugins use in their
``depends_on`` lists. The ``config`` document is opaque: it is carried to the
pipeline definition verbatim and never inspected here.
"""

from dataclasses import dataclass, field
from typing import Any

from analyzerflow.constants import DEFAULT_EXCLUDED_SUBSTRING
from analyzerflow.models import PluginDict


@dataclass(frozen=True)
class Plugin:
    """
    Catalog entry describing an analyzer plugin.

    Attributes:
        name: Unique identifier, also used as dependency reference key
        version: Plugin version string
        description: Human-readable description
        depends_on: Ordered names of plugins that must run before this one
        config: Opaque configuration document
    """

    name: str
    version: str = ""
    description: str = ""
    depends_on: list[str] = field(default_factory=list)
    config: Any = field(default_factory=dict)

    def is_excluded(self, excluded_substring: str = DEFAULT_EXCLUDED_SUBSTRING) -> bool:
        """Check whether this plugin is kept out of the dependency graph."""
        return excluded_substring in self.name

    @classmethod
    def from_dict(cls, data: PluginDict | dict[str, Any]) -> "Plugin":
        """Create a Plugin from a catalog record."""
        return cls(
            name=data["name"],
            version=data.get("version", ""),
            description=data.get("description", ""),
            depends_on=list(data.get("depends_on") or []),
            config=data.get("config", {}),
        )

    def to_dict(self) -> PluginDict:
        """Convert plugin back to its catalog record shape."""
        return PluginDict(
            name=self.name,
            version=self.version,
            description=self.description,
            depends_on=list(self.depends_on),
            config=self.config,
        )
