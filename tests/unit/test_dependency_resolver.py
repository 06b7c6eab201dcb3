"""
Unit tests for container dependency resolution.
"""
import pytest
from ctk.RUNNERS.dependency_resolver import DependencyResolver
from ctk.REGISTRY.container_registry import default_registry


@pytest.fixture
def resolver():
    return DependencyResolver(default_registry().dependency_graph())


def reachable(graph, start):
    """Reference closure computed by plain graph search."""
    seen = set()
    stack = list(start)
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        stack.extend(graph.get(node, []))
    return seen


class TestDependencyResolver:
    """Tests for DependencyResolver."""

    def test_pulls_in_dependency(self, resolver):
        assert resolver.resolve({"pgadmin"}) == {"pgadmin", "postgres"}

    def test_no_dependencies(self, resolver):
        assert resolver.resolve({"redis", "minio"}) == {"redis", "minio"}

    def test_empty_selection(self, resolver):
        assert resolver.resolve(set()) == set()

    def test_unknown_identifier_passes_through(self, resolver):
        assert resolver.resolve({"mysql", "pgadmin"}) == {"mysql", "pgadmin", "postgres"}

    def test_does_not_modify_input(self, resolver):
        selected = {"pgadmin"}
        resolver.resolve(selected)
        assert selected == {"pgadmin"}

    def test_transitive_chain(self):
        resolver = DependencyResolver({"a": ["b"], "b": ["c"], "c": ["d"], "d": [], "e": []})
        assert resolver.resolve({"a"}) == {"a", "b", "c", "d"}

    def test_diamond(self):
        resolver = DependencyResolver({"top": ["left", "right"], "left": ["base"], "right": ["base"], "base": []})
        assert resolver.resolve({"top"}) == {"top", "left", "right", "base"}

    def test_cycle_terminates(self):
        resolver = DependencyResolver({"a": ["b"], "b": ["c"], "c": ["a"]})
        assert resolver.resolve({"b"}) == {"a", "b", "c"}

    def test_self_dependency(self):
        resolver = DependencyResolver({"a": ["a"]})
        assert resolver.resolve({"a"}) == {"a"}

    def test_deep_chain_is_not_recursive(self):
        graph = {f"n{i}": [f"n{i + 1}"] for i in range(5000)}
        resolver = DependencyResolver(graph)
        assert len(resolver.resolve({"n0"})) == 5001

    @pytest.mark.parametrize("selected", [
        set(),
        {"a"},
        {"c"},
        {"b", "e"},
        {"f", "unknown"},
        {"a", "b", "c", "d", "e", "f"},
    ])
    def test_closure_properties(self, selected):
        graph = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": [], "e": ["f"], "f": []}
        resolver = DependencyResolver(graph)
        resolved = resolver.resolve(selected)

        assert resolved >= selected
        assert resolved == reachable(graph, selected)
        assert resolver.resolve(resolved) == resolved

    def test_added_dependencies(self, resolver):
        assert resolver.added_dependencies(["pgadmin"]) == ["postgres"]
        assert resolver.added_dependencies(["pgadmin", "postgres"]) == []
