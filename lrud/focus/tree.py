"""
Focus tree.

Tracks which node holds focus, resolves focus down to a focusable
descendant and emits blur/focus notifications on every change.
"""

import logging
from typing import Dict, Optional, Union

from ..config import Config
from ..errors import UnknownNodeError
from .events import EventEmitter, EventName, FocusEvent, Handler, Subscription
from .registry import NodeRegistry, NodeView, Orientation

logger = logging.getLogger(__name__)


class FocusTree:
    """
    Focus state for one navigable UI surface.

    Usage:
        tree = FocusTree()
        tree.register("root")
        tree.register("menu", parent="root")
        tree.register("item-1", parent="menu")

        tree.on("focus", highlight)
        tree.on("blur", unhighlight)

        tree.focus("root")   # focuses "item-1"

    All operations are synchronous and run every handler before
    returning. Handlers may call back into the tree; guarding against
    unbounded recursion in that case is up to the handler.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize an empty tree.

        Args:
            config: Engine configuration (defaults to Config())
        """
        self.config = config or Config()
        self._registry = NodeRegistry()
        self._events = EventEmitter()
        self._current_focus: Optional[str] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def current_focus(self) -> Optional[str]:
        """Get the id of the focused node, or None."""
        return self._current_focus

    @property
    def nodes(self) -> Dict[str, NodeView]:
        """Get a read-only snapshot of every node."""
        return self._registry.snapshot()

    def node(self, node_id: str) -> NodeView:
        """Get a read-only snapshot of one node."""
        return self._registry.view(node_id)

    def roots(self):
        return self._registry.roots()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    # ─────────────────────────────────────────────────────────────────────────
    # Events
    # ─────────────────────────────────────────────────────────────────────────

    def on(self, event: EventName, handler: Handler) -> Subscription:
        """
        Subscribe to focus, blur or select notifications.

        Returns:
            Unsubscribe function
        """
        return self._events.on(event, handler)

    def off(self, event: EventName, handler: Handler) -> None:
        self._events.off(event, handler)

    # ─────────────────────────────────────────────────────────────────────────
    # Structure
    # ─────────────────────────────────────────────────────────────────────────

    def register(
        self,
        node_id: str,
        parent: Optional[str] = None,
        focusable: Optional[bool] = None,
        orientation: Union[Orientation, str, None] = None,
    ) -> None:
        """
        Register a node. See NodeRegistry.register.

        If the focused node stops being focusable (marked unfocusable,
        or given a first child), focus moves down to its focusable
        descendant, or is cleared when there is none.
        """
        self._registry.register(
            node_id, parent=parent, focusable=focusable, orientation=orientation
        )

        current = self._current_focus
        if current is not None and current in (node_id, parent):
            if not self._registry.get(current).is_focusable:
                self.focus(current)

    def unregister(self, node_id: str) -> None:
        """
        Remove a node and its subtree.

        If the focused node is removed, a single blur is emitted for it
        and the tree becomes unfocused.

        Raises:
            UnknownNodeError: node is unknown and config.strict_unregister is set
        """
        if node_id not in self._registry:
            if self.config.strict_unregister:
                raise UnknownNodeError(node_id)
            logger.debug(f"Ignoring unregister of unknown node {node_id!r}")
            return

        removed = self._registry.unregister(node_id)
        if self._current_focus is not None and self._current_focus in removed:
            self.clear_focus()

    # ─────────────────────────────────────────────────────────────────────────
    # Focus
    # ─────────────────────────────────────────────────────────────────────────

    def resolve_focus_target(self, node_id: str) -> Optional[str]:
        """
        Find the node that receives focus when node_id is focused.

        Walks down from node_id, trying the remembered active child
        before the other children (in registration order), and returns
        the first focusable node found.

        Returns:
            Focusable node id, or None if the subtree has none

        Raises:
            UnknownNodeError: node_id is not registered
        """
        self._registry.get(node_id)

        stack = [node_id]
        while stack:
            current = stack.pop()
            node = self._registry.get(current)
            if node.is_focusable:
                return current

            children = list(node.children)
            if node.active_child in children:
                children.remove(node.active_child)
                children.insert(0, node.active_child)
            stack.extend(reversed(children))

        return None

    def focus(self, node_id: Optional[str] = None) -> None:
        """
        Move focus.

        Without an argument the current focus is focused again (nothing
        happens when there is none). Otherwise focus goes to the
        focusable node resolved from node_id: the previous focus is
        blurred first, the path from the new target to its root is
        remembered as active children, then focus is emitted. If a blur
        handler unregisters the resolved target, the tree is left
        unfocused.

        Args:
            node_id: Node (or container) to focus

        Raises:
            UnknownNodeError: node_id is not registered
        """
        if node_id is None:
            if self._current_focus is None:
                return
            node_id = self._current_focus
        target = self.resolve_focus_target(node_id)

        previous = self._current_focus
        if previous is not None and previous != target:
            self._events.emit(FocusEvent.BLUR, previous)

        if target is not None and target not in self._registry:
            # removed by a blur handler
            logger.warning(f"Focus target {target!r} was unregistered during blur")
            self._current_focus = None
            return

        if target is None:
            logger.warning(f"No focusable node under {node_id!r}")
            self._current_focus = None
            return

        self._current_focus = target
        self._remember_path(target)
        logger.debug(f"Focus {previous!r} -> {target!r}")
        self._events.emit(FocusEvent.FOCUS, target)

    def blur(self, node_id: Optional[str] = None) -> None:
        """
        Emit a blur notification.

        Focus state is not changed; use clear_focus() for that.

        Args:
            node_id: Node to blur (defaults to the current focus)
        """
        if node_id is None:
            node_id = self._current_focus
            if node_id is None:
                return
        self._events.emit(FocusEvent.BLUR, node_id)

    def clear_focus(self) -> None:
        """Blur the current focus and leave the tree unfocused."""
        previous = self._current_focus
        if previous is None:
            return
        self._current_focus = None
        logger.debug(f"Focus cleared (was {previous!r})")
        self._events.emit(FocusEvent.BLUR, previous)

    def select(self, node_id: Optional[str] = None) -> None:
        """
        Emit a select notification for node_id or the current focus.

        Nothing is emitted when there is no focus and no node_id.
        """
        if node_id is None:
            node_id = self._current_focus
            if node_id is None:
                return
        self._events.emit(FocusEvent.SELECT, node_id)

    def _remember_path(self, target: str) -> None:
        """Set active_child along the path from target up to its root."""
        path = self._registry.path_to_root(target)
        for child, parent in zip(path, path[1:]):
            self._registry.set_active_child(parent, child)
