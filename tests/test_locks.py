import threading

import pytest

from matchroom.game.errors import RegistryBusy
from matchroom.game.locks import RWLock


def test_readers_share_the_lock():
    lock = RWLock()
    both_inside = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read():
            # Deadlocks (and the barrier times out) if reads were exclusive.
            both_inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not both_inside.broken


def test_writer_times_out_while_reader_holds():
    lock = RWLock()

    with lock.read():
        with pytest.raises(RegistryBusy):
            with lock.write(timeout=0.05):
                pass

    # Lock is usable again afterwards.
    with lock.write(timeout=0.05):
        pass
    with lock.read():
        pass


def test_writer_excludes_writer():
    lock = RWLock()
    with lock.write():
        failures = []

        def other():
            try:
                with lock.write(timeout=0.05):
                    pass
            except RegistryBusy:
                failures.append(True)

        t = threading.Thread(target=other)
        t.start()
        t.join(timeout=5)

    assert failures == [True]


def test_waiting_writer_blocks_new_readers():
    lock = RWLock()
    order = []

    def writer():
        with lock.write():
            order.append("writer")

    def late_reader():
        with lock.read():
            order.append("reader")

    w = threading.Thread(target=writer)
    r = threading.Thread(target=late_reader)
    with lock.read():
        w.start()
        w.join(timeout=0.1)
        assert w.is_alive()

        # A second reader would be admitted here if readers could jump the queue.
        r.start()
        r.join(timeout=0.1)
        assert r.is_alive()
        assert order == []

    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["writer", "reader"]
