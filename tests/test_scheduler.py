"""Tests for the frame and timer scheduler."""

from sharkdash.core.scheduler import FrameScheduler


def test_frame_callback_runs_once_on_next_frame():
    scheduler = FrameScheduler()
    calls = []
    scheduler.request_frame(lambda: calls.append(scheduler.frame))

    scheduler.advance(16.0)
    scheduler.advance(16.0)

    assert calls == [1]
    assert scheduler.pending == 0


def test_rearmed_callback_runs_once_per_frame():
    scheduler = FrameScheduler()
    frames = []

    def loop():
        frames.append(scheduler.frame)
        scheduler.request_frame(loop)

    scheduler.request_frame(loop)
    for _ in range(5):
        scheduler.advance(16.0)

    assert frames == [1, 2, 3, 4, 5]
    assert scheduler.pending == 1


def test_timer_fires_after_delay():
    scheduler = FrameScheduler()
    fired = []
    scheduler.call_later(1000.0, lambda: fired.append(scheduler.now_ms))

    for _ in range(62):
        scheduler.advance(16.0)
    assert fired == []

    scheduler.advance(16.0)
    assert fired == [1008.0]
    assert scheduler.pending == 0


def test_timers_fire_before_frame_callbacks():
    scheduler = FrameScheduler()
    order = []
    scheduler.request_frame(lambda: order.append("frame"))
    scheduler.call_later(10.0, lambda: order.append("timer"))

    scheduler.advance(16.0)
    assert order == ["timer", "frame"]


def test_frame_requested_by_timer_runs_same_advance():
    scheduler = FrameScheduler()
    order = []
    scheduler.call_later(
        10.0, lambda: scheduler.request_frame(lambda: order.append(scheduler.frame))
    )
    scheduler.advance(16.0)
    assert order == [1]


def test_cancel_frame_and_timer():
    scheduler = FrameScheduler()
    calls = []
    frame_handle = scheduler.request_frame(lambda: calls.append("frame"))
    timer_handle = scheduler.call_later(5.0, lambda: calls.append("timer"))

    scheduler.cancel(frame_handle)
    scheduler.cancel(timer_handle)
    scheduler.cancel(None)
    scheduler.cancel(9999)

    scheduler.advance(16.0)
    assert calls == []
    assert scheduler.pending == 0


def test_cancel_within_the_running_batch():
    scheduler = FrameScheduler()
    calls = []
    handles = {}

    def first():
        calls.append("first")
        scheduler.cancel(handles["second"])

    handles["first"] = scheduler.request_frame(first)
    handles["second"] = scheduler.request_frame(lambda: calls.append("second"))

    scheduler.advance(16.0)
    assert calls == ["first"]
