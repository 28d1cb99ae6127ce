"""
Demo entry point.

Usage:
    python -m lrud [options]

Options:
    --dev           Enable development mode (debug logging)
    --layout FILE   Build the tree from a JSON layout file
    --keys SEQ      Apply comma separated directions and exit (no window)
    --wrap          Wrap around at container edges

Examples:
    python -m lrud --dev
    python -m lrud --keys RIGHT,RIGHT,DOWN,ENTER
    python -m lrud --layout assets/layout.json
"""

import argparse
import logging
import sys
from typing import List

import pygame

from .config import Config
from .errors import LrudError
from .focus import FocusTree
from .input import Direction, InputManager, Navigator
from .layout import build_tree, load_layout

logger = logging.getLogger(__name__)


# Tree used when no --layout is given: a horizontal menu above a
# vertical list of rows
DEMO_LAYOUT = {
    "id": "root",
    "orientation": "vertical",
    "children": [
        {
            "id": "menu",
            "orientation": "horizontal",
            "children": [{"id": "home"}, {"id": "search"}, {"id": "settings"}],
        },
        {
            "id": "rows",
            "orientation": "vertical",
            "children": [
                {
                    "id": f"row-{row}",
                    "orientation": "horizontal",
                    "children": [{"id": f"tile-{row}-{col}"} for col in range(3)],
                }
                for row in range(2)
            ],
        },
    ],
}


def setup_logging(dev_mode: bool = False) -> None:
    """Configure logging for the demo."""
    level = logging.DEBUG if dev_mode else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="LRUD - directional focus navigation demo"
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Enable development mode"
    )
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        help="JSON layout file describing the focus tree"
    )
    parser.add_argument(
        "--keys",
        type=str,
        default=None,
        help="Comma separated directions to apply without opening a window (e.g. RIGHT,DOWN,ENTER)"
    )
    parser.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap around at container edges"
    )
    return parser.parse_args(argv)


def parse_keys(sequence: str) -> List[Direction]:
    """Parse 'RIGHT,down,ENTER' into directions."""
    directions = []
    for name in sequence.split(","):
        name = name.strip().upper()
        if not name:
            continue
        try:
            directions.append(Direction[name])
        except KeyError:
            raise argparse.ArgumentTypeError(f"Unknown direction: {name}") from None
    return directions


def run_window(navigator: Navigator, input_manager: InputManager) -> None:
    """Read arrow keys from a pygame window until closed or ESC."""
    pygame.init()
    pygame.display.set_caption("LRUD - focus navigation")
    pygame.display.set_mode((320, 120))
    input_manager.enable_key_repeat()
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                    break
                direction = input_manager.process_event(event)
                if direction is not None:
                    navigator.handle(direction)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = Config(dev_mode=args.dev, wrap_navigation=args.wrap)

    setup_logging(dev_mode=config.dev_mode)

    tree = FocusTree(config)

    tree.on("focus", lambda node_id: logger.info(f"focus  {node_id}"))
    tree.on("blur", lambda node_id: logger.info(f"blur   {node_id}"))
    tree.on("select", lambda node_id: logger.info(f"select {node_id}"))

    try:
        layout = load_layout(args.layout) if args.layout else DEMO_LAYOUT
        build_tree(tree, layout)
        directions = parse_keys(args.keys) if args.keys else None
    except (LrudError, argparse.ArgumentTypeError) as e:
        logger.error(str(e))
        return 1

    navigator = Navigator(tree)
    roots = tree.roots()
    if roots:
        tree.focus(roots[0])

    if directions is not None:
        for direction in directions:
            navigator.handle(direction)
        return 0

    try:
        run_window(navigator, InputManager(config))
    except KeyboardInterrupt:
        print("\nShutdown requested...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
