"""
Layout loading.

Builds a focus tree from a nested description, either a dict/list
structure or a JSON file:

    {
        "id": "root",
        "orientation": "vertical",
        "children": [
            {"id": "menu", "orientation": "horizontal", "children": [...]},
            {"id": "content"}
        ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .errors import LayoutError, LrudError
from .focus import FocusTree

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"id", "focusable", "orientation", "children"}


def build_tree(tree: FocusTree, layout: Union[dict, list], parent: Optional[str] = None) -> List[str]:
    """
    Register every node of a layout description.

    Nodes are registered depth-first, so children keep the order in
    which they are listed.

    Args:
        tree: Tree to register into
        layout: Node description, or a list of them
        parent: Parent for the top-level node(s)

    Returns:
        Registered ids in registration order

    Raises:
        LayoutError: the description is malformed or repeats an id
    """
    registered: List[str] = []
    pending = [(layout, parent)]

    while pending:
        entry, entry_parent = pending.pop()
        if isinstance(entry, list):
            pending.extend((item, entry_parent) for item in reversed(entry))
            continue
        if not isinstance(entry, dict):
            raise LayoutError(f"Expected a node object, got {type(entry).__name__}")

        unknown = set(entry) - _KNOWN_KEYS
        if unknown:
            raise LayoutError(f"Unknown layout keys {sorted(unknown)} in {entry.get('id')!r}")

        children = entry.get("children", [])
        if not isinstance(children, list):
            raise LayoutError(f"'children' of {entry.get('id')!r} must be a list")

        if entry.get("id") in registered:
            raise LayoutError(f"Duplicate id {entry['id']!r} in layout")

        try:
            tree.register(
                entry.get("id"),
                parent=entry_parent,
                focusable=entry.get("focusable"),
                orientation=entry.get("orientation"),
            )
        except (LrudError, ValueError) as e:
            raise LayoutError(str(e)) from e

        registered.append(entry["id"])
        pending.extend((child, entry["id"]) for child in reversed(children))

    logger.info(f"Built {len(registered)} node(s) from layout")
    return registered


def load_layout(path: Union[str, Path]) -> Any:
    """
    Read a layout description from a JSON file.

    Raises:
        LayoutError: file is missing or is not valid JSON
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise LayoutError(f"Layout file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise LayoutError(f"Invalid layout JSON in {path}: {e}") from e
