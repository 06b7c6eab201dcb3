"""
Dependency resolution for container selections.
"""
from collections import deque
from typing import Dict, Iterable, List, Mapping, Set


class DependencyResolver:
    """
    Expands a selection of containers with everything they depend on.
    """
    def __init__(self, graph: Mapping[str, Iterable[str]]):
        """
        :param graph: Identifier to the identifiers it depends on.
        """
        self.graph: Dict[str, List[str]] = {name: list(deps) for name, deps in graph.items()}

    def resolve(self, selected: Iterable[str]) -> Set[str]:
        """
        Computes the closure of ``selected`` under the depends-on relation.

        Identifiers missing from the graph are kept but contribute no
        dependencies. Each identifier is queued at most once, so cycles
        terminate.

        :param selected: The identifiers chosen by the user.
        :return: The selection plus all transitive dependencies.
        """
        resolved = set(selected)
        queue = deque(resolved)

        while queue:
            current = queue.popleft()
            for dep in self.graph.get(current, []):
                if dep not in resolved:
                    resolved.add(dep)
                    queue.append(dep)

        return resolved

    def added_dependencies(self, selected: Iterable[str]) -> List[str]:
        """
        Identifiers that resolution pulled in on top of ``selected``.

        :param selected: The identifiers chosen by the user.
        :return: Sorted list of dependencies that were not explicitly selected.
        """
        selected = set(selected)
        return sorted(self.resolve(selected) - selected)
