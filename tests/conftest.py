"""
Shared test fixtures and utilities for the treepost test suite.
"""

import pytest

from treepost.materializer import NodeMaterializer
from treepost.models import VersioningConfiguration
from treepost.store.memory import MemoryNode, MemorySession


@pytest.fixture
def session():
    """Empty in-memory store session."""
    return MemorySession()


@pytest.fixture
def changes():
    """Fresh change log."""
    return []


@pytest.fixture
def config():
    """Default versioning policy (no auto checkout, no checkin on new versionable)."""
    return VersioningConfiguration()


@pytest.fixture
def materializer():
    return NodeMaterializer()


@pytest.fixture
def make_nodes(session):
    """Factory creating every missing node along a path in the session fixture.

    Usage:
        def test_something(make_nodes):
            page = make_nodes("/content/page")
    """

    def _make(path: str) -> MemoryNode:
        node = session.get_root_node()
        for name in path.strip("/").split("/"):
            node = node.get_node(name) if node.has_node(name) else node.add_node(name)
        return node

    return _make
