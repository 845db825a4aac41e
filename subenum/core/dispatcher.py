# -*- coding: utf-8 -*-
"""
调度器模块

按字典顺序取出候选域名，每个候选先占用一个在途槽位，再向限速器申请令牌，
拿到令牌后立即创建解析任务，不等待前一个任务完成。
解析结果按完成顺序写入一个有界队列，由 run() 以异步生成器的形式交给调用方。

状态：IDLE -> RUNNING -> DRAINING -> DONE，stop() 可以从任意状态直接进入 DONE。
停止时不再接纳新候选，在途任务全部取消，每个被取消的候选产生一条 Cancelled 结果，
然后关闭输出通道（只关闭一次），之后不会再有任何结果。
"""

import asyncio
from enum import Enum
from typing import AsyncIterator, Dict, Iterable, List

from ..models import QueryOutcome
from ..utils.logger import get_logger
from .rate_limiter import RateLimiter
from .worker import ResolutionWorker

logger = get_logger(__name__)

_CLOSED = object()


class DispatcherState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


class Dispatcher:
    """限速并发解析调度器"""

    def __init__(self, worker: ResolutionWorker, limiter: RateLimiter,
                 max_in_flight: int = 64, queue_size: int = 1024):
        if max_in_flight < 1:
            raise ValueError(f"max_in_flight 必须 >= 1: {max_in_flight}")
        if queue_size < 1:
            raise ValueError(f"queue_size 必须 >= 1: {queue_size}")
        self.worker = worker
        self.limiter = limiter
        self.max_in_flight = max_in_flight
        self.queue_size = queue_size

        # 初始化状态变量
        self.state = DispatcherState.IDLE
        self.admitted = 0
        self.completed = 0
        self.cancelled: List[str] = []
        self._tasks: Dict[asyncio.Task, str] = {}
        self._queue = None
        self._slots = None
        self._admission = None
        self._started = False
        self._admitting = False
        self._stopping = False
        self._closing = False
        self._detached = False

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def stop(self):
        """停止扫描（可以在信号处理函数中调用，可重复调用）"""
        if self._stopping:
            return
        self._stopping = True
        # 接纳循环尚未开始时只需置标志，循环开头会检查
        if self._admitting and not self._closing and not self._admission.done():
            self._admission.cancel()

    async def run(self, candidates: Iterable[str]) -> AsyncIterator[QueryOutcome]:
        """运行调度，按完成顺序逐个产出 QueryOutcome"""
        if self._started:
            raise RuntimeError("Dispatcher 只能运行一次")
        self._started = True
        self._queue = asyncio.Queue(maxsize=self.queue_size)
        self._slots = asyncio.Semaphore(self.max_in_flight)
        self._admission = asyncio.create_task(self._admit(candidates))

        finished = False
        try:
            while True:
                item = await self._queue.get()
                if item is _CLOSED:
                    finished = True
                    break
                yield item
            # 传播候选序列本身抛出的异常
            await self._admission
        finally:
            if not finished:
                # 调用方提前退出：照常停止，但不再投递结果
                self._detached = True
                self.stop()
                self._drain_queue()
                await asyncio.wait([self._admission])
                error = None if self._admission.cancelled() else self._admission.exception()
                if error is not None:
                    raise error

    async def _admit(self, candidates: Iterable[str]):
        self._admitting = True
        try:
            for candidate in candidates:
                if self._stopping:
                    break
                if self.state is DispatcherState.IDLE:
                    self.state = DispatcherState.RUNNING

                await self._slots.acquire()
                try:
                    await self.limiter.acquire()
                except BaseException:
                    self._slots.release()
                    raise

                task = asyncio.create_task(self._work(candidate))
                self._tasks[task] = candidate
                self.admitted += 1

            if not self._stopping:
                if self._tasks:
                    self.state = DispatcherState.DRAINING
                while self._tasks:
                    await asyncio.wait(list(self._tasks))
        except asyncio.CancelledError:
            self._stopping = True
            logger.debug("收到停止请求，停止接纳新的候选域名")
        finally:
            await self._close()

    async def _work(self, candidate: str):
        task = asyncio.current_task()
        try:
            outcome = await self.worker.resolve(candidate)
            await self._queue.put(outcome)
            self.completed += 1
            logger.debug("已接纳: %d, 在途: %d, 已完成: %d",
                         self.admitted, len(self._tasks) - 1, self.completed)
        finally:
            self._tasks.pop(task, None)
            self._slots.release()

    async def _close(self):
        """取消在途任务，上报被取消的候选，然后关闭输出通道"""
        self._closing = True
        pending = dict(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        for task, candidate in pending.items():
            # 尚未开始运行就被取消的任务不会执行自己的 finally
            self._tasks.pop(task, None)
            if task.cancelled():
                self.cancelled.append(candidate)
                await self._emit(QueryOutcome.cancelled(candidate))
        if self.cancelled:
            logger.debug(f"已取消 {len(self.cancelled)} 个在途查询")

        self.state = DispatcherState.DONE
        await self._emit(_CLOSED)

    async def _emit(self, item):
        if self._detached:
            return
        await self._queue.put(item)

    def _drain_queue(self):
        while not self._queue.empty():
            self._queue.get_nowait()
