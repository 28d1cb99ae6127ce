"""
Input manager.

Translates raw keyboard events into directional intents,
independent of the physical input source.
"""

import logging
from enum import Enum, auto
from typing import Dict, Optional

import pygame

from ..config import Config

logger = logging.getLogger(__name__)


class Direction(Enum):
    """
    Directional intents.

    These are the logical navigation commands the focus tree responds
    to, independent of the key codes or remote buttons producing them.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    # Activate the focused node
    ENTER = auto()

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def step(self) -> int:
        """Sibling offset for this direction (0 for ENTER)."""
        if self in (Direction.LEFT, Direction.UP):
            return -1
        if self in (Direction.RIGHT, Direction.DOWN):
            return 1
        return 0


class InputManager:
    """
    Maps pygame keyboard events to directions.

    Hosts driving the tree from a remote control or another key layout
    pass their own key_map; only the default is defined here.
    """

    # Default keyboard mapping
    KEY_MAP: Dict[int, Direction] = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_RETURN: Direction.ENTER,
        pygame.K_KP_ENTER: Direction.ENTER,
    }

    def __init__(self, config: Optional[Config] = None, key_map: Optional[Dict[int, Direction]] = None):
        """
        Initialize the input manager.

        Args:
            config: Engine configuration
            key_map: Key code -> Direction mapping (defaults to KEY_MAP)
        """
        self.config = config or Config()
        self.key_map = dict(key_map) if key_map is not None else dict(self.KEY_MAP)

    def enable_key_repeat(self) -> None:
        """Apply the configured key repeat (pygame must be initialized)."""
        pygame.key.set_repeat(
            self.config.key_repeat_delay,
            self.config.key_repeat_interval
        )

    def process_event(self, event: pygame.event.Event) -> Optional[Direction]:
        """
        Process a pygame event and return a direction.

        Args:
            event: Pygame event to process

        Returns:
            Direction if event was recognized, None otherwise
        """
        if event.type == pygame.KEYDOWN:
            return self._handle_keydown(event)
        return None

    def _handle_keydown(self, event: pygame.event.Event) -> Optional[Direction]:
        direction = self.key_map.get(event.key)
        if direction is None:
            logger.debug(f"Unmapped key: {event.key}")
        return direction
