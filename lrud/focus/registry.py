"""
Node registry.

Stores the focus tree as a flat mapping from node id to node record,
with parent/children back-references, and keeps the tree consistent
on register and unregister.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ..errors import (
    InvalidIdError,
    NotAChildError,
    ReparentError,
    UnknownNodeError,
    UnknownParentError,
)

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Axis along which a container lays out its children."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class _Node:
    """Mutable node record (internal)."""
    parent: Optional[str] = None
    children: List[str] = field(default_factory=list)
    active_child: Optional[str] = None
    focusable: Optional[bool] = None  # None = implicit (leaf)
    orientation: Optional[Orientation] = None

    @property
    def is_focusable(self) -> bool:
        if self.focusable is not None:
            return self.focusable
        return not self.children


@dataclass(frozen=True)
class NodeView:
    """Read-only snapshot of a node."""
    id: str
    parent: Optional[str]
    children: Tuple[str, ...]
    active_child: Optional[str]
    focusable: bool
    orientation: Optional[Orientation] = None


class NodeRegistry:
    """
    Flat id -> node mapping.

    Invariants kept by every mutation:
    - each child id is registered and points back at its owner
    - children lists hold no duplicates, in first-registered order
    - active_child, when set, is one of the node's current children
    """

    def __init__(self):
        self._nodes: Dict[str, _Node] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(list(self._nodes))

    def register(
        self,
        node_id: str,
        parent: Optional[str] = None,
        focusable: Optional[bool] = None,
        orientation: Union[Orientation, str, None] = None,
    ) -> None:
        """
        Register a node, or update the flags of an existing one.

        Registering an existing id again never moves it: its children and
        position under its parent stay as they are. Only the non-structural
        options (focusable, orientation) are applied.

        Args:
            node_id: Unique, non-empty node id
            parent: Id of an already registered parent, None for a root
            focusable: Explicit focusable flag (None = leaf nodes only)
            orientation: Layout axis used by directional navigation

        Raises:
            InvalidIdError: node_id is missing or empty
            UnknownParentError: parent is not registered
            ReparentError: node exists under a different parent
        """
        if not isinstance(node_id, str) or not node_id:
            raise InvalidIdError(node_id)
        if parent is not None and parent not in self._nodes:
            raise UnknownParentError(node_id, parent)
        if orientation is not None:
            orientation = Orientation(orientation)

        node = self._nodes.get(node_id)
        if node is not None:
            if parent is not None and parent != node.parent:
                raise ReparentError(node_id, node.parent, parent)
            if focusable is not None:
                node.focusable = focusable
            if orientation is not None:
                node.orientation = orientation
            return

        self._nodes[node_id] = _Node(
            parent=parent,
            focusable=focusable,
            orientation=orientation,
        )
        if parent is not None:
            self._nodes[parent].children.append(node_id)
        logger.debug(f"Registered {node_id!r} (parent={parent!r})")

    def unregister(self, node_id: str) -> List[str]:
        """
        Remove a node and its entire subtree.

        Args:
            node_id: Node to remove

        Returns:
            Removed ids, the node itself first (empty if it was unknown)
        """
        node = self._nodes.get(node_id)
        if node is None:
            return []

        if node.parent is not None:
            owner = self._nodes[node.parent]
            owner.children.remove(node_id)
            if owner.active_child == node_id:
                owner.active_child = None

        removed: List[str] = []
        stack = [node_id]
        while stack:
            current = stack.pop()
            removed.append(current)
            stack.extend(reversed(self._nodes.pop(current).children))

        logger.debug(f"Unregistered {node_id!r} ({len(removed)} node(s))")
        return removed

    def get(self, node_id: str) -> _Node:
        """
        Get the internal record of a node.

        Raises:
            UnknownNodeError: node is not registered
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def parent_of(self, node_id: str) -> Optional[str]:
        return self.get(node_id).parent

    def children_of(self, node_id: str) -> Tuple[str, ...]:
        return tuple(self.get(node_id).children)

    def roots(self) -> List[str]:
        """Get root ids in registration order."""
        return [node_id for node_id, node in self._nodes.items() if node.parent is None]

    def path_to_root(self, node_id: str) -> List[str]:
        """Get ids from node_id up to its root, inclusive."""
        path = [node_id]
        parent = self.get(node_id).parent
        while parent is not None:
            path.append(parent)
            parent = self._nodes[parent].parent
        return path

    def set_active_child(self, node_id: str, child_id: Optional[str]) -> None:
        """
        Set which child a node remembers as active.

        Raises:
            UnknownNodeError: node_id is not registered
            NotAChildError: child_id is not one of its children
        """
        node = self.get(node_id)
        if child_id is not None and child_id not in node.children:
            raise NotAChildError(node_id, child_id)
        node.active_child = child_id

    def view(self, node_id: str) -> NodeView:
        """Get a read-only snapshot of one node."""
        node = self.get(node_id)
        return NodeView(
            id=node_id,
            parent=node.parent,
            children=tuple(node.children),
            active_child=node.active_child,
            focusable=node.is_focusable,
            orientation=node.orientation,
        )

    def snapshot(self) -> Dict[str, NodeView]:
        """Get read-only snapshots of all nodes."""
        return {node_id: self.view(node_id) for node_id in self._nodes}
