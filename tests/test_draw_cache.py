"""Draw cache TTL behavior and locking."""
from __future__ import annotations

import threading
import time

from conftest import FakeClock

from lotto_board.services.draw_cache import DrawCache


class TickingClock(FakeClock):
    """Advances one tick per read and notes reads made outside the cache lock."""

    def __init__(self) -> None:
        super().__init__()
        self.cache: DrawCache | None = None
        self.unlocked_reads: list[int] = []
        self.local = threading.local()
        self._tick_lock = threading.Lock()

    def __call__(self) -> float:
        if self.cache is not None and not self.cache._lock.locked():
            self.unlocked_reads.append(threading.get_ident())
        with self._tick_lock:
            self.now += 1
            tick = self.now
        self.local.last = tick
        # Give other threads a chance to run mid-operation.
        time.sleep(0)
        return tick


def test_set_then_get_returns_value(cache: DrawCache) -> None:
    """A fresh entry is returned unchanged."""

    value = {"round": 1}
    cache.set("draw-1", value)
    assert cache.get("draw-1") is value


def test_missing_key_returns_none(cache: DrawCache) -> None:
    assert cache.get("draw-404") is None


def test_entry_valid_at_exact_ttl(cache: DrawCache, clock: FakeClock) -> None:
    """Entries stay readable while now - captured_at <= ttl."""

    cache.set("draw-1", "a")
    clock.advance(86_400)
    assert cache.get("draw-1") == "a"


def test_entry_expires_after_ttl_and_is_evicted(cache: DrawCache, clock: FakeClock) -> None:
    """Reading an expired entry removes it."""

    cache.set("draw-1", "a")
    clock.advance(86_400 + 1)
    assert "draw-1" in cache

    assert cache.get("draw-1") is None
    assert "draw-1" not in cache
    assert len(cache) == 0


def test_expired_entries_are_not_swept_without_a_read(cache: DrawCache, clock: FakeClock) -> None:
    cache.set("draw-1", "a")
    cache.set("draw-2", "b")
    clock.advance(90_000)
    cache.get("draw-1")
    assert "draw-2" in cache
    assert len(cache) == 1


def test_set_overwrites_and_restamps(cache: DrawCache, clock: FakeClock) -> None:
    cache.set("draw-1", "old")
    clock.advance(80_000)
    cache.set("draw-1", "new")
    clock.advance(80_000)
    assert cache.get("draw-1") == "new"


def test_invalidate_and_clear(cache: DrawCache) -> None:
    cache.set("draw-1", "a")
    cache.set("draw-2", "b")
    cache.invalidate("draw-1")
    assert cache.get("draw-1") is None
    cache.clear()
    assert len(cache) == 0


def test_custom_ttl() -> None:
    clock = FakeClock()
    short = DrawCache(ttl_seconds=10, clock=clock)
    short.set("k", 1)
    clock.advance(11)
    assert short.get("k") is None


def test_concurrent_set_and_get_keep_entries_consistent() -> None:
    """Each stored entry pairs a value with the timestamp of the same write."""

    clock = TickingClock()
    cache = DrawCache(ttl_seconds=1e12, clock=clock)
    clock.cache = cache

    keys = [f"draw-{n}" for n in range(5)]
    writes: list[tuple[str, tuple[int, int], float]] = []
    writes_lock = threading.Lock()
    start = threading.Barrier(8)

    def worker(tid: int) -> None:
        start.wait()
        for i in range(200):
            key = keys[(tid + i) % len(keys)]
            value = (tid, i)
            cache.set(key, value)
            stamp = clock.local.last
            with writes_lock:
                writes.append((key, value, stamp))
            read = cache.get(keys[(tid + i + 1) % len(keys)])
            assert read is None or isinstance(read, tuple)

    threads = [threading.Thread(target=worker, args=(tid,)) for tid in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stamp_of = {value: stamp for _, value, stamp in writes}
    newest = {key: max(stamp for k, _, stamp in writes if k == key) for key in keys}

    assert len(writes) == 8 * 200
    assert len(cache) == len(keys)
    for key in keys:
        entry = cache._entries[key]
        assert entry.captured_at == stamp_of[entry.value]
        assert entry.captured_at == newest[key]
    assert clock.unlocked_reads == []


def test_default_clock_is_monotonic() -> None:
    assert DrawCache()._clock is time.monotonic
