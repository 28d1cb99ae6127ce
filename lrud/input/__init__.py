"""
Input handling module.

Maps raw input events to directional intents and applies
them to a focus tree.
"""

from .manager import InputManager, Direction
from .navigation import Navigator, sibling_adjacency

__all__ = [
    "InputManager",
    "Direction",
    "Navigator",
    "sibling_adjacency",
]
