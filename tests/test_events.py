import logging

import pytest

from filerepo.events import ReadResultEvent


def test_fire_without_subscribers_is_noop():
    event = ReadResultEvent()
    event.fire("nothing happens")
    assert len(event) == 0


def test_handlers_run_in_subscription_order():
    calls = []
    event = ReadResultEvent()
    event.subscribe(lambda text: calls.append(("first", text)))
    event += lambda text: calls.append(("second", text))

    event.fire("abc")

    assert calls == [("first", "abc"), ("second", "abc")]
    assert len(event) == 2


def test_unsubscribe():
    calls = []
    event = ReadResultEvent()
    event.subscribe(calls.append)
    event -= calls.append

    event.fire("abc")

    assert calls == []
    # unknown handlers are ignored
    event.unsubscribe(calls.append)


def test_subscribe_rejects_non_callables():
    with pytest.raises(TypeError):
        ReadResultEvent().subscribe("not a function")


def test_failing_handler_is_logged_and_skipped(caplog):
    calls = []

    def broken(text):
        raise RuntimeError("boom")

    event = ReadResultEvent()
    event.subscribe(broken)
    event.subscribe(calls.append)

    with caplog.at_level(logging.ERROR, logger="filerepo.events"):
        event.fire("still delivered")

    assert calls == ["still delivered"]
    assert any(r.exc_info for r in caplog.records)


def test_failing_handler_does_not_break_read(repo, make_record):
    make_record(1, "payload")
    seen = []

    def broken(text):
        raise RuntimeError("boom")

    repo.read_result.subscribe(broken)
    repo.read_result.subscribe(seen.append)

    assert repo.read(1) == "payload"
    assert seen == ["payload"]
