"""Dependency depth resolution.

Depth is the length of the longest resolvable dependency chain ending at a
plugin. Both execution stages and layout columns are derived from it, so
there is exactly one implementation here.

Cycles are defused rather than reported: when a name reappears on the
current call path the revisited branch contributes depth 0. The path set is
local to each branch (every recursive call gets its own copy), so a plugin
reached through two sibling branches is not mistaken for a cycle.

Intermediate depths are cached only for names whose walk never reached a
revisited name. Nothing reachable from such a name lies on a cycle, so its
depth is the same whatever path leads to it.
"""

import logging
from collections.abc import Mapping, MutableMapping, Sequence

logger = logging.getLogger(__name__)

DependencyMap = Mapping[str, Sequence[str]]


def _resolve(
    name: str,
    dependency_map: DependencyMap,
    path: frozenset[str],
    cache: MutableMapping[str, int],
) -> tuple[int, bool]:
    """Return ``(depth, closed_cycle)`` for ``name`` on ``path``."""
    if name in path:
        logger.debug("Dependency cycle through '%s' defused", name)
        return 0, True

    if name in cache:
        return cache[name], False

    dependencies = dependency_map.get(name) or ()
    if not dependencies:
        cache[name] = 0
        return 0, False

    branch_path = path | {name}
    deepest = 0
    closed_cycle = False
    for dependency in dependencies:
        depth, dependency_cycle = _resolve(dependency, dependency_map, branch_path, cache)
        deepest = max(deepest, depth)
        closed_cycle = closed_cycle or dependency_cycle

    depth = 1 + deepest
    if not closed_cycle:
        cache[name] = depth
    return depth, closed_cycle


def resolve_depth(
    name: str,
    dependency_map: DependencyMap,
    path: frozenset[str] = frozenset(),
    cache: MutableMapping[str, int] | None = None,
) -> int:
    """
    Compute the dependency depth of ``name``.

    Args:
        name: Plugin name to resolve
        dependency_map: Direct dependencies per plugin name, limited to
            resolvable names
        path: Names already visited on the current call path
        cache: Cycle-free depths shared between calls on the same map

    Returns:
        0 when ``name`` has no dependencies or closes a cycle on this path,
        otherwise 1 + the maximum depth of its dependencies
    """
    if cache is None:
        cache = {}
    depth, _ = _resolve(name, dependency_map, path, cache)
    return depth


class DepthResolver:
    """
    Memoizing front-end for :func:`resolve_depth`.

    Top-level results are cached per name; cycle-free intermediate depths
    are shared across calls, so an acyclic map is walked once. A resolver is
    meant to be created for one computation and then discarded.
    """

    def __init__(self, dependency_map: DependencyMap):
        self.dependency_map = dependency_map
        self._depths: dict[str, int] = {}
        self._acyclic_depths: dict[str, int] = {}

    def depth_of(self, name: str) -> int:
        """Depth of ``name`` starting from an empty call path."""
        if name not in self._depths:
            self._depths[name] = resolve_depth(
                name, self.dependency_map, cache=self._acyclic_depths
            )
        return self._depths[name]

    @property
    def depths(self) -> dict[str, int]:
        """Depths resolved so far, in resolution order."""
        return dict(self._depths)
