"""Tests for FrameScheduler request/cancel semantics."""

from nebula.scheduler import FrameScheduler


def test_request_runs_on_next_frame():
    scheduler = FrameScheduler()
    calls = []
    scheduler.request(lambda: calls.append("a"))

    assert scheduler.pending == 1
    assert scheduler.run_frame() == 1
    assert calls == ["a"]
    assert scheduler.pending == 0


def test_handles_are_unique():
    scheduler = FrameScheduler()
    handles = {scheduler.request(lambda: None) for _ in range(10)}
    assert len(handles) == 10


def test_cancel_prevents_call():
    scheduler = FrameScheduler()
    calls = []
    handle = scheduler.request(lambda: calls.append("a"))
    scheduler.cancel(handle)

    assert scheduler.pending == 0
    assert scheduler.run_frame() == 0
    assert calls == []


def test_cancel_unknown_or_none_is_noop():
    scheduler = FrameScheduler()
    scheduler.cancel(None)
    scheduler.cancel(12345)
    assert scheduler.pending == 0


def test_request_during_frame_defers_to_next():
    """A callback re-requesting itself forms one chain, one call per frame."""
    scheduler = FrameScheduler()
    calls = []

    def tick():
        calls.append(len(calls))
        scheduler.request(tick)

    scheduler.request(tick)
    scheduler.run_frame()
    assert calls == [0]
    assert scheduler.pending == 1
    scheduler.run_frame()
    scheduler.run_frame()
    assert calls == [0, 1, 2]


def test_callback_can_cancel_later_callback_in_same_frame():
    scheduler = FrameScheduler()
    calls = []
    handles = {}

    def first():
        calls.append("first")
        scheduler.cancel(handles["second"])

    scheduler.request(first)
    handles["second"] = scheduler.request(lambda: calls.append("second"))
    assert scheduler.run_frame() == 1
    assert calls == ["first"]
