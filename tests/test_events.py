from unittest.mock import Mock, call

import pytest

from lrud.focus import EventEmitter, FocusEvent


def test_handlers_run_in_registration_order():
    emitter = EventEmitter()
    order = []
    emitter.on("focus", lambda node_id: order.append(("first", node_id)))
    emitter.on("focus", lambda node_id: order.append(("second", node_id)))

    emitter.emit("focus", "a")

    assert order == [("first", "a"), ("second", "a")]


def test_enum_and_string_names_are_interchangeable():
    emitter = EventEmitter()
    handler = Mock()
    emitter.on(FocusEvent.BLUR, handler)

    emitter.emit("blur", "a")

    handler.assert_called_once_with("a")
    assert emitter.handler_count("blur") == 1


def test_events_are_isolated_by_name():
    emitter = EventEmitter()
    focus, blur = Mock(), Mock()
    emitter.on("focus", focus)
    emitter.on("blur", blur)

    emitter.emit("focus", "a")

    focus.assert_called_once_with("a")
    blur.assert_not_called()


def test_emit_without_handlers_is_noop():
    EventEmitter().emit("focus", "a")


def test_unsubscribe_removes_only_that_handler():
    emitter = EventEmitter()
    keep, drop = Mock(), Mock()
    emitter.on("focus", keep)
    unsubscribe = emitter.on("focus", drop)

    unsubscribe()
    unsubscribe()
    emitter.emit("focus", "a")

    keep.assert_called_once_with("a")
    drop.assert_not_called()


def test_handler_added_during_emit_runs_next_time():
    emitter = EventEmitter()
    late = Mock()

    def add_late(node_id):
        emitter.on("focus", late)

    emitter.on("focus", add_late)
    emitter.emit("focus", "a")
    late.assert_not_called()

    emitter.emit("focus", "b")
    late.assert_called_once_with("b")


def test_handler_exception_stops_emission():
    emitter = EventEmitter()
    after = Mock()
    emitter.on("focus", Mock(side_effect=ValueError("bad")))
    emitter.on("focus", after)

    with pytest.raises(ValueError):
        emitter.emit("focus", "a")

    after.assert_not_called()


def test_clear_removes_everything():
    emitter = EventEmitter()
    handler = Mock()
    emitter.on("focus", handler)
    emitter.on("blur", handler)

    emitter.clear()
    emitter.emit("focus", "a")
    emitter.emit("blur", "a")

    assert handler.call_args_list == []
    assert emitter.handler_count(FocusEvent.FOCUS) == 0


def test_same_handler_registered_twice_is_called_twice():
    emitter = EventEmitter()
    handler = Mock()
    emitter.on("focus", handler)
    emitter.on("focus", handler)

    emitter.emit("focus", "a")

    assert handler.call_args_list == [call("a"), call("a")]
