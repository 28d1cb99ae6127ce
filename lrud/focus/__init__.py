"""
Focus tree engine.

Contains the node registry, the focus controller and the event
emitter that announces focus changes.
"""

from .events import EventEmitter, FocusEvent
from .registry import NodeRegistry, NodeView, Orientation
from .tree import FocusTree

__all__ = [
    "EventEmitter",
    "FocusEvent",
    "NodeRegistry",
    "NodeView",
    "Orientation",
    "FocusTree",
]
