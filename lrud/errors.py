"""
Focus tree errors.

All errors raised by the engine derive from LrudError, and also from the
builtin exception that best describes them so callers can catch either.
"""


class LrudError(Exception):
    """Base class for focus tree errors."""


class InvalidIdError(LrudError, ValueError):
    """Raised when registering with a missing or empty id."""

    def __init__(self, node_id=None):
        super().__init__(f"Attempting to register with an invalid id: {node_id!r}")
        self.node_id = node_id


class UnknownParentError(LrudError, KeyError):
    """Raised when a node is registered under a parent that does not exist."""

    def __init__(self, node_id: str, parent: str):
        super().__init__(f"Cannot register {node_id!r}: unknown parent {parent!r}")
        self.node_id = node_id
        self.parent = parent

    def __str__(self) -> str:
        return self.args[0]


class UnknownNodeError(LrudError, KeyError):
    """Raised when an operation references a node that is not registered."""

    def __init__(self, node_id: str):
        super().__init__(f"Unknown node {node_id!r}")
        self.node_id = node_id

    def __str__(self) -> str:
        return self.args[0]


class ReparentError(LrudError, ValueError):
    """Raised when an existing node is registered again under another parent."""

    def __init__(self, node_id: str, current_parent, requested_parent: str):
        super().__init__(
            f"Cannot move {node_id!r} from parent {current_parent!r} "
            f"to {requested_parent!r}: re-parenting is not supported"
        )
        self.node_id = node_id
        self.current_parent = current_parent
        self.requested_parent = requested_parent


class LayoutError(LrudError, ValueError):
    """Raised when a layout description cannot be turned into a tree."""


class NotAChildError(LrudError, ValueError):
    """Raised when a node is used as the child of a node it does not belong to."""

    def __init__(self, node_id: str, child_id: str):
        super().__init__(f"{child_id!r} is not a child of {node_id!r}")
        self.node_id = node_id
        self.child_id = child_id
