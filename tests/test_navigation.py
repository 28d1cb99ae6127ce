import pytest

from lrud import Config, FocusTree
from lrud.input import Direction, Navigator, sibling_adjacency
from lrud.layout import build_tree


GRID = {
    "id": "root",
    "orientation": "vertical",
    "children": [
        {
            "id": "menu",
            "orientation": "horizontal",
            "children": [{"id": "home"}, {"id": "search"}, {"id": "settings"}],
        },
        {
            "id": "row",
            "orientation": "horizontal",
            "children": [{"id": "tile-0"}, {"id": "tile-1"}],
        },
    ],
}


@pytest.fixture
def grid(tree):
    build_tree(tree, GRID)
    tree.focus("root")
    return tree


def test_right_moves_to_next_sibling(grid, events):
    navigator = Navigator(grid)

    assert navigator.handle(Direction.RIGHT) == "search"
    assert events == [("blur", "home"), ("focus", "search")]


def test_left_at_first_sibling_stays(grid, events):
    navigator = Navigator(grid)

    assert navigator.handle(Direction.LEFT) == "home"
    assert events == []


def test_down_enters_next_container(grid):
    navigator = Navigator(grid)

    assert navigator.handle(Direction.DOWN) == "tile-0"


def test_up_restores_remembered_child(grid):
    navigator = Navigator(grid)
    navigator.handle(Direction.RIGHT)
    navigator.handle(Direction.RIGHT)
    navigator.handle(Direction.DOWN)
    navigator.handle(Direction.RIGHT)

    assert navigator.handle(Direction.UP) == "settings"
    assert navigator.handle(Direction.DOWN) == "tile-1"


def test_wrap_moves_past_the_edge(grid):
    navigator = Navigator(grid, wrap=True)

    assert navigator.handle(Direction.LEFT) == "settings"
    assert navigator.handle(Direction.RIGHT) == "home"


def test_wrap_defaults_to_config():
    tree = FocusTree(Config(wrap_navigation=True))

    assert Navigator(tree).wrap is True


def test_enter_selects_current_focus(grid, events):
    navigator = Navigator(grid)

    assert navigator.handle(Direction.ENTER) == "home"
    assert events == [("select", "home")]


def test_direction_without_focus_focuses_first_root(tree):
    build_tree(tree, GRID)
    navigator = Navigator(tree)

    assert navigator.handle(Direction.DOWN) == "home"


def test_direction_on_empty_tree_does_nothing(tree, events):
    assert Navigator(tree).handle(Direction.RIGHT) is None
    assert events == []


def test_custom_adjacency_is_used(grid):
    calls = []

    def always_tile(nodes, current, direction, wrap):
        calls.append((current, direction))
        return "tile-1"

    navigator = Navigator(grid, adjacency=always_tile)

    assert navigator.handle(Direction.UP) == "tile-1"
    assert calls == [("home", Direction.UP)]


def test_sibling_adjacency_ignores_unoriented_containers(tree):
    tree.register("root")
    tree.register("a", parent="root")
    tree.register("b", parent="root")

    assert sibling_adjacency(tree.nodes, "a", Direction.RIGHT) is None


def test_sibling_adjacency_returns_container_for_descent(grid):
    assert sibling_adjacency(grid.nodes, "search", Direction.DOWN) == "row"
    assert sibling_adjacency(grid.nodes, "tile-0", Direction.DOWN) is None
