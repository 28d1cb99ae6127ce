"""
Engine configuration.

Policy switches for the focus tree and settings for the bundled
input adapter are centralized here.
"""

from dataclasses import dataclass


@dataclass
class Config:
    """Focus engine configuration."""

    # ─────────────────────────────────────────────────────────────────────────
    # Tree Policy
    # ─────────────────────────────────────────────────────────────────────────

    # Raise UnknownNodeError when unregistering an id that is not registered
    # (default: silently ignore, so teardown code can be idempotent)
    strict_unregister: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    # Wrap around to the first/last sibling at the end of a container
    wrap_navigation: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Development Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Development mode (debug logging)
    dev_mode: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Input Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Key repeat delay (ms) for held keys
    key_repeat_delay: int = 400
    key_repeat_interval: int = 100

