"""
LRUD - focus tree engine for directional navigation.

Tracks focus across nested UI regions driven by left/right/up/down
input and announces focus changes to listeners.
"""

from .config import Config
from .errors import (
    InvalidIdError,
    LayoutError,
    LrudError,
    NotAChildError,
    ReparentError,
    UnknownNodeError,
    UnknownParentError,
)
from .focus import EventEmitter, FocusEvent, FocusTree, NodeView, Orientation

__version__ = "0.1.0"

__all__ = [
    "Config",
    "FocusTree",
    "FocusEvent",
    "EventEmitter",
    "NodeView",
    "Orientation",
    "LrudError",
    "InvalidIdError",
    "UnknownParentError",
    "UnknownNodeError",
    "NotAChildError",
    "ReparentError",
    "LayoutError",
]
