import threading
import time

import pytest

from patternkit.semaphore import IllegalReleaseError, NoTicketsError, Semaphore


def test_semaphore_acquire_release():
    sem = Semaphore(3, 1.0)
    for _ in range(10):
        sem.acquire()
        sem.acquire()
        sem.acquire()
        assert not sem.is_empty()
        sem.release()
        sem.release()
        sem.release()
        assert sem.is_empty()


def test_semaphore_block_timeout():
    sem = Semaphore(1, 0.2)
    sem.acquire()

    start = time.monotonic()
    with pytest.raises(NoTicketsError):
        sem.acquire()
    assert time.monotonic() - start >= 0.19

    sem.release()
    sem.acquire()
    assert not sem.is_empty()


def test_semaphore_empty():
    sem = Semaphore(2, 0.2)
    assert sem.is_empty()
    sem.acquire()
    assert not sem.is_empty()
    sem.release()
    assert sem.is_empty()


def test_release_without_acquire_raises():
    sem = Semaphore(2, 0.05)
    with pytest.raises(IllegalReleaseError):
        sem.release()
    assert sem.is_empty()


def test_release_from_other_thread_unblocks_acquire():
    sem = Semaphore(1, 2.0)
    sem.acquire()

    def later_release():
        time.sleep(0.05)
        sem.release()

    thread = threading.Thread(target=later_release)
    thread.start()
    sem.acquire()
    thread.join()
    assert not sem.is_empty()


def test_context_manager_holds_ticket():
    sem = Semaphore(1, 0.05)
    with sem as held:
        assert held is sem
        assert not sem.is_empty()
        with pytest.raises(NoTicketsError):
            sem.acquire()
    assert sem.is_empty()


def test_negative_tickets_rejected():
    with pytest.raises(ValueError):
        Semaphore(-1, 0.1)


def test_error_messages():
    assert str(NoTicketsError()) == "could not acquire semaphore ticket"
    assert str(IllegalReleaseError()) == "can't release the semaphore without acquiring it first"