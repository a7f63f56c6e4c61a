"""短时 GET 缓存：按查询串缓存结果，超过有效期即失效。只用于读接口。"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    data: V
    timestamp: float


class TTLCache(Generic[V]):
    """
    以查询串为 key 的缓存，后写覆盖先写。
    clock 可注入，测试时用假时钟推进时间。

    每次 clear() 都会推进 generation。读请求在发出前记下 generation，
    写回时若已被清空过则丢弃结果，避免把清空前发出的旧数据写回缓存。
    """

    def __init__(self, ttl_ms: int, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_ms < 0:
            raise ValueError("ttl_ms must be >= 0")
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}
        self._generation = 0

    @property
    def enabled(self) -> bool:
        return self.ttl_ms > 0

    @property
    def generation(self) -> int:
        return self._generation

    def get(self, key: str) -> V | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if (self._clock() - entry.timestamp) * 1000 >= self.ttl_ms:
            del self._entries[key]
            return None
        return entry.data

    def set(self, key: str, data: V, generation: int | None = None) -> bool:
        """写入缓存；generation 与当前不一致时不写入，返回是否写入。"""
        if not self.enabled:
            return False
        if generation is not None and generation != self._generation:
            return False
        self._entries[key] = CacheEntry(data=data, timestamp=self._clock())
        return True

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self._generation += 1

    def __len__(self) -> int:
        return len(self._entries)
