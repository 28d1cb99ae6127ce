"""
Shared test fixtures.

Each test gets a fresh tree and fresh spies.
"""

from unittest.mock import Mock

import pytest

from lrud import FocusTree


@pytest.fixture
def tree():
    """Empty focus tree."""
    return FocusTree()


@pytest.fixture
def events(tree):
    """
    Record every focus/blur/select emission in order.

    Returns a list of (event, node_id) tuples.
    """
    recorded = []
    for name in ("focus", "blur", "select"):
        tree.on(name, lambda node_id, name=name: recorded.append((name, node_id)))
    return recorded


@pytest.fixture
def root_with_children(tree):
    """root -> [child, child2]"""
    tree.register("root")
    tree.register("child", parent="root")
    tree.register("child2", parent="root")
    return tree


@pytest.fixture
def spy():
    return Mock()
