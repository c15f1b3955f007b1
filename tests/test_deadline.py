import threading
import time

import pytest

from patternkit.deadline import TimedOutError, Worker


def worker_takes_5ms(stopper):
    time.sleep(0.005)
    return "done"


def worker_takes_long(stopper):
    time.sleep(0.3)
    return "late"


def cancel_work(stopper):
    stopper.stop(RuntimeError("canceled job"))
    time.sleep(0.005)
    return None


def returns_error(stopper):
    raise ValueError("foo")


def test_multi_deadline():
    dl = Worker(0.15, "test multi deadline case")

    assert dl.run(worker_takes_5ms) == "done"

    with pytest.raises(RuntimeError, match="canceled job"):
        dl.run(cancel_work)

    with pytest.raises(TimedOutError):
        dl.run(worker_takes_long)


def test_error_from_work_is_raised():
    dl = Worker(0.5, "error case")
    with pytest.raises(ValueError, match="foo"):
        dl.run(returns_error)


def test_deadline_expires_stopper():
    dl = Worker(0.05, "one time deadline case worker")
    done = threading.Event()
    seen = {}

    def work(stopper):
        seen["expired"] = stopper.wait(2.0)
        done.set()
        return None

    with pytest.raises(TimedOutError):
        dl.run(work)
    assert done.wait(2.0)
    assert seen["expired"] is True


def test_timed_out_message():
    assert str(TimedOutError()) == "timed out waiting for function to finish"