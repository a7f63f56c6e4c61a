"""TTLCache 单元测试，使用假时钟推进时间。"""

import pytest

from lesson_client.core.cache import TTLCache
from tests.conftest import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestTTLCache:
    def test_hit_within_window(self, clock):
        cache = TTLCache(30000, clock=clock)
        cache.set("?pageNum=1", "page-1")
        clock.advance_ms(29999)
        assert cache.get("?pageNum=1") == "page-1"

    def test_expired_after_window(self, clock):
        cache = TTLCache(30000, clock=clock)
        cache.set("?pageNum=1", "page-1")
        clock.advance_ms(30001)
        assert cache.get("?pageNum=1") is None
        assert len(cache) == 0

    def test_miss(self, clock):
        assert TTLCache(30000, clock=clock).get("?pageNum=1") is None

    def test_last_write_wins(self, clock):
        cache = TTLCache(30000, clock=clock)
        cache.set("k", "old")
        clock.advance_ms(20000)
        cache.set("k", "new")
        clock.advance_ms(20000)
        assert cache.get("k") == "new"

    def test_invalidate_and_clear(self, clock):
        cache = TTLCache(30000, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.invalidate("a")
        cache.invalidate("missing")
        assert cache.get("a") is None
        assert cache.get("b") == 2
        cache.clear()
        assert len(cache) == 0

    def test_disabled(self, clock):
        cache = TTLCache(0, clock=clock)
        assert not cache.enabled
        cache.set("a", 1)
        assert cache.get("a") is None

    def test_negative_ttl(self):
        with pytest.raises(ValueError):
            TTLCache(-1)

    def test_set_with_stale_generation_dropped(self, clock):
        cache = TTLCache(30000, clock=clock)
        generation = cache.generation
        cache.clear()
        assert cache.set("k", "old", generation) is False
        assert cache.get("k") is None
        assert cache.set("k", "new", cache.generation) is True
        assert cache.get("k") == "new"
