# -*- coding: utf-8 -*-
"""
令牌桶限速器

以固定速率 rate（个/秒）连续补充令牌（允许小数），桶容量 capacity 默认等于一秒的令牌数。
每次 acquire() 取走一个令牌；令牌不足时只等待补足差额所需的时间，
稳定负载下放行间隔趋近 1/rate，短时突发最多被桶容量吸收。
"""

import asyncio
import math
import time

from ..errors import ConfigError

_EPSILON = 1e-9


class RateLimiter:
    """令牌桶限速器（asyncio 版）

    多个协程同时 acquire() 时按到达顺序排队，补充与取令牌在锁内完成。
    clock/sleep 可以替换，便于用假时钟测试。
    """

    def __init__(self, rate: float, capacity: float = None, clock=time.monotonic, sleep=asyncio.sleep):
        if (isinstance(rate, bool) or not isinstance(rate, (int, float))
                or not rate > 0 or not math.isfinite(rate)):
            raise ConfigError(f"QPS 必须大于 0: {rate}")
        self.rate = float(rate)
        self.capacity = float(capacity) if capacity is not None else max(1.0, self.rate)
        if not math.isfinite(self.capacity) or self.capacity < 1:
            raise ConfigError(f"令牌桶容量必须 >= 1: {capacity}")

        self._clock = clock
        self._sleep = sleep
        self._tokens = self.capacity  # 初始为满桶
        self._last = clock()
        self._lock = None
        self.granted = 0

    def _refill(self):
        now = self._clock()
        elapsed = now - self._last
        if elapsed > 0:
            self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
        self._last = now

    @property
    def tokens(self) -> float:
        """当前可用令牌数"""
        self._refill()
        return self._tokens

    @property
    def interval(self) -> float:
        """稳定状态下两次放行的间隔（秒）"""
        return 1.0 / self.rate

    async def acquire(self):
        """挂起直到允许发起一次查询。被取消时不消耗令牌。"""
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            self._refill()
            while self._tokens < 1 - _EPSILON:
                await self._sleep((1 - self._tokens) / self.rate)
                self._refill()
            self._tokens -= 1
            self.granted += 1
