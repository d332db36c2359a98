"""Hypothesis strategies for plugin catalogs.

Catalogs are kept small: depth resolution walks every dependency path, so
its cost grows with the number of distinct paths, not just the plugin count.
"""

import hypothesis.strategies as st

from analyzerflow.plugin import Plugin

PLUGIN_NAMES = [
    "js-sbom", "js-vuln-finder", "js-license", "js-patching", "codeql",
    "py-sbom", "py-audit", "secrets-scan", "email-notifier", "slack-notifier",
]


def plugin_versions():
    """Generate version strings, including the empty version."""
    return st.sampled_from(["", "1.0.0", "2.1.3", "0.9"])


@st.composite
def acyclic_catalog(draw, max_plugins: int = 7) -> list[Plugin]:
    """Generate a catalog whose dependencies form a DAG.

    Each plugin may only depend on plugins generated before it, or on a name
    outside the catalog. The catalog order is then shuffled.
    """
    names = draw(st.lists(
        st.sampled_from(PLUGIN_NAMES), min_size=1, max_size=max_plugins, unique=True
    ))

    plugins = []
    for index, name in enumerate(names):
        earlier = names[:index]
        depends_on = draw(st.lists(
            st.sampled_from(earlier), max_size=3, unique=True
        )) if earlier else []
        if draw(st.booleans()) and draw(st.booleans()):
            depends_on.append("missing-plugin")
        plugins.append(Plugin(
            name=name,
            version=draw(plugin_versions()),
            depends_on=depends_on,
        ))

    return draw(st.permutations(plugins))


@st.composite
def cyclic_catalog(draw, max_plugins: int = 6) -> list[Plugin]:
    """Generate a catalog with arbitrary dependencies, self-loops included."""
    names = draw(st.lists(
        st.sampled_from(PLUGIN_NAMES), min_size=1, max_size=max_plugins, unique=True
    ))

    return [
        Plugin(
            name=name,
            version=draw(plugin_versions()),
            depends_on=draw(st.lists(st.sampled_from(names), max_size=3, unique=True)),
        )
        for name in names
    ]
