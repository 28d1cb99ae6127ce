"""
Directional navigation.

Turns a direction and the current focus into a concrete focus target
and drives the focus tree with it.
"""

import logging
from typing import Callable, Mapping, Optional

from ..focus import FocusTree, NodeView, Orientation
from .manager import Direction

logger = logging.getLogger(__name__)


# (nodes, current focus, direction, wrap) -> target id or None
Adjacency = Callable[[Mapping[str, NodeView], str, Direction, bool], Optional[str]]


def sibling_adjacency(
    nodes: Mapping[str, NodeView],
    current: str,
    direction: Direction,
    wrap: bool = False,
) -> Optional[str]:
    """
    Find the neighbour of current in the given direction.

    Walks up from current. The first ancestor laid out along the
    direction's axis that has a sibling on that side of the path
    provides the target; the focus tree then descends into it.

    Args:
        nodes: Tree snapshot
        current: Currently focused node id
        direction: Direction to move in (not ENTER)
        wrap: Wrap from the last child to the first and back

    Returns:
        Target node id, or None if there is nothing in that direction
    """
    axis = Orientation.HORIZONTAL if direction.is_horizontal else Orientation.VERTICAL
    child = current
    parent = nodes[current].parent

    while parent is not None:
        container = nodes[parent]
        if container.orientation == axis:
            siblings = container.children
            index = siblings.index(child) + direction.step
            if wrap:
                index %= len(siblings)
            if 0 <= index < len(siblings) and siblings[index] != child:
                return siblings[index]
        child = parent
        parent = container.parent

    return None


class Navigator:
    """
    Applies directions to a focus tree.

    Usage:
        navigator = Navigator(tree)
        direction = input_manager.process_event(event)
        if direction:
            navigator.handle(direction)
    """

    def __init__(
        self,
        tree: FocusTree,
        adjacency: Adjacency = sibling_adjacency,
        wrap: Optional[bool] = None,
    ):
        """
        Initialize the navigator.

        Args:
            tree: Focus tree to drive
            adjacency: Strategy resolving (focus, direction) to a target
            wrap: Wrap at container edges (defaults to tree.config.wrap_navigation)
        """
        self.tree = tree
        self.adjacency = adjacency
        self.wrap = tree.config.wrap_navigation if wrap is None else wrap

    def handle(self, direction: Direction) -> Optional[str]:
        """
        Move focus (or select) according to a direction.

        Returns:
            The focused node after handling, or None if unfocused
        """
        current = self.tree.current_focus

        if direction is Direction.ENTER:
            self.tree.select()
            return current

        if current is None:
            roots = self.tree.roots()
            if roots:
                self.tree.focus(roots[0])
            return self.tree.current_focus

        target = self.adjacency(self.tree.nodes, current, direction, self.wrap)
        if target is None:
            logger.debug(f"No target {direction.name} of {current!r}")
            return current

        self.tree.focus(target)
        return self.tree.current_focus
