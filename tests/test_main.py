import json
import logging

import pytest

from lrud.__main__ import main, parse_keys
from lrud.input import Direction


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_keys():
    assert parse_keys("right, DOWN,,enter") == [Direction.RIGHT, Direction.DOWN, Direction.ENTER]


def test_main_applies_key_sequence(caplog):
    caplog.set_level(logging.INFO, logger="lrud.__main__")

    assert main(["--keys", "RIGHT,DOWN,ENTER"]) == 0

    messages = [r.getMessage() for r in caplog.records if r.name == "lrud.__main__"]
    assert messages == [
        "focus  home",
        "blur   home",
        "focus  search",
        "blur   search",
        "focus  tile-0-0",
        "select tile-0-0",
    ]


def test_main_rejects_unknown_direction():
    assert main(["--keys", "SIDEWAYS"]) == 1


def test_main_loads_layout_file(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="lrud.__main__")
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({
        "id": "bar",
        "orientation": "horizontal",
        "children": [{"id": "one"}, {"id": "two"}],
    }))

    assert main(["--layout", str(path), "--keys", "RIGHT"]) == 0
    assert caplog.records[-1].getMessage() == "focus  two"


def test_main_reports_missing_layout(tmp_path):
    assert main(["--layout", str(tmp_path / "missing.json"), "--keys", "RIGHT"]) == 1


def test_main_dev_flag_enables_debug_logging():
    assert main(["--dev", "--keys", "RIGHT"]) == 0

    assert logging.getLogger().level == logging.DEBUG


def test_main_defaults_to_info_logging():
    assert main(["--keys", "RIGHT"]) == 0

    assert logging.getLogger().level == logging.INFO
