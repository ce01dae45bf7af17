"""
Unit tests for the reader/writer lock
"""

import threading

import pytest

from i18n_resolver.utils.rwlock import ReadWriteLock


@pytest.mark.unit
class TestReadWriteLock:
    """Test shared and exclusive acquisition"""

    def test_multiple_readers(self):
        lock = ReadWriteLock()
        lock.acquire_read()
        lock.acquire_read()

        assert lock.readers == 2

        lock.release_read()
        lock.release_read()
        assert lock.readers == 0

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        with lock.write_locked():
            assert lock.write_held
            t = threading.Thread(target=reader)
            t.start()
            assert not acquired.wait(timeout=0.2)

        t.join(timeout=5)
        assert acquired.is_set()
        assert not lock.write_held

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        written = threading.Event()

        def writer():
            with lock.write_locked():
                written.set()

        with lock.read_locked():
            t = threading.Thread(target=writer)
            t.start()
            assert not written.wait(timeout=0.2)

        t.join(timeout=5)
        assert written.is_set()

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []
        writer_started = threading.Event()

        def writer():
            writer_started.set()
            with lock.write_locked():
                order.append("writer")

        def late_reader():
            with lock.read_locked():
                order.append("reader")

        lock.acquire_read()
        w = threading.Thread(target=writer)
        w.start()
        writer_started.wait(timeout=5)
        # Give the writer time to register as waiting.
        for _ in range(100):
            with lock._cond:
                if lock._writers_waiting:
                    break
            threading.Event().wait(0.01)

        r = threading.Thread(target=late_reader)
        r.start()
        threading.Event().wait(0.1)
        assert order == []

        lock.release_read()
        w.join(timeout=5)
        r.join(timeout=5)

        assert order == ["writer", "reader"]

    def test_unbalanced_release_raises(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()

        with pytest.raises(ValueError):
            with lock.write_locked():
                raise ValueError("boom")

        assert not lock.write_held
        with lock.read_locked():
            assert lock.readers == 1
