import threading

import pytest

from deeplib.sync import INFINITE, Event, Thread, checkpoint


def test_infinite_wait_on_signalled_event():
    ev = Event(initial_state=True)
    assert ev.wait(INFINITE) is True
    assert ev.state() is False


def test_event_initial_state():
    assert Event().state() is False
    assert Event(initial_state=True).state() is True


def test_auto_reset_consumes_signal():
    ev = Event(manual_reset=False)
    ev.set()
    assert ev.state() is True
    assert ev.wait(0) is True
    assert ev.state() is False
    assert ev.wait(0) is False


def test_manual_reset_keeps_signal():
    ev = Event(manual_reset=True)
    ev.set()
    assert ev.wait(0) is True
    assert ev.wait(0) is True
    assert ev.state() is True
    ev.reset()
    assert ev.state() is False
    assert ev.wait(0) is False


def test_wait_times_out_when_not_signalled():
    ev = Event()
    assert ev.wait(20) is False
    assert ev.state() is False


def test_event_set_from_other_thread_wakes_waiter():
    ev = Event()
    timer = threading.Timer(0.02, ev.set)
    timer.start()
    try:
        assert ev.wait(5000) is True
    finally:
        timer.cancel()
    assert ev.state() is False


@pytest.mark.parametrize("ms", [-1, 0x1_0000_0000])
def test_wait_rejects_out_of_range(ms):
    with pytest.raises(ValueError):
        Event().wait(ms)


def test_thread_runs_callback_with_args():
    results = []
    t = Thread.create(results.append, "payload")
    assert t.wait() is True
    assert results == ["payload"]
    assert t.is_suspended() is False


def test_paused_thread_waits_for_resume():
    results = []
    t = Thread.create(results.append, 7, paused=True)
    assert t.is_suspended() is True
    assert t.wait(50) is False
    assert results == []
    t.resume()
    assert t.is_suspended() is False
    assert t.wait(5000) is True
    assert results == [7]


def test_suspend_and_resume_are_idempotent():
    t = Thread.create(lambda _: None, paused=True)
    t.suspend()
    assert t.is_suspended() is True
    t.resume()
    t.resume()
    assert t.is_suspended() is False
    assert t.wait(5000) is True


def test_suspend_holds_thread_at_checkpoint():
    started = threading.Event()
    proceed = threading.Event()
    results = []

    def work(arg):
        started.set()
        proceed.wait(5)
        checkpoint()
        results.append(arg)

    t = Thread.create(work, 1)
    assert started.wait(5)
    t.suspend()
    proceed.set()
    assert t.wait(50) is False
    assert results == []
    t.resume()
    assert t.wait(5000) is True
    assert results == [1]


def test_callback_exception_is_recorded():
    def boom(_):
        raise RuntimeError("failed")

    t = Thread.create(boom)
    assert t.wait(5000) is True
    assert isinstance(t.exception, RuntimeError)


def test_create_rejects_non_callable():
    with pytest.raises(TypeError):
        Thread.create(42)


def test_checkpoint_outside_thread_returns():
    assert checkpoint() is None
    t = Thread.create(lambda _: checkpoint())
    assert t.wait(5000) is True
    assert t.exception is None