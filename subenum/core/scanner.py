"""扫描器核心：把配置、解析引擎、限速器与调度器组装在一起"""
import time
from typing import AsyncIterator, Dict, Iterable, Optional

from ..engines.async_dns_engine import AsyncDNSEngine
from ..engines.base_engine import BaseResolver
from ..engines.brute_engine import CandidateSource
from ..engines.dns_engine import DNSEngine
from ..models import QueryOutcome
from ..utils.helpers import format_nameserver
from ..utils.logger import get_logger
from .config import EngineConfig
from .dispatcher import Dispatcher
from .rate_limiter import RateLimiter
from .worker import ResolutionWorker

logger = get_logger(__name__)


class SubdomainScanner:
    """子域名枚举扫描器。

    resolver 与 limiter 可以从外部注入（测试时使用假解析器），
    否则由 initialize() 按配置创建，整个运行期间只创建一次。
    """

    def __init__(self, config: EngineConfig, resolver: Optional[BaseResolver] = None,
                 limiter: Optional[RateLimiter] = None):
        self.config = config
        self.resolver = resolver
        self.limiter = limiter or RateLimiter(config.qps, config.capacity)
        self.source = None
        self.dispatcher = None
        self.should_stop = False
        self.start_time = 0.0
        self.end_time = 0.0

    async def initialize(self):
        """创建解析引擎（需要在事件循环中调用）"""
        if self.resolver is None:
            self.resolver = self.build_resolver()
        logger.debug(f"目标: {self.config.domain}, DNS 服务器: {format_nameserver(self.config.nameserver)}, "
                     f"后端: {self.config.backend}")
        logger.debug(f"目标间隔: {self.limiter.interval:.4f}s, 令牌桶容量: {self.limiter.capacity:g}, "
                     f"在途上限: {self.config.in_flight_limit}")

    def build_resolver(self) -> BaseResolver:
        engine_cls = AsyncDNSEngine if self.config.backend == 'aiodns' else DNSEngine
        return engine_cls(nameserver=self.config.nameserver, timeout=self.config.timeout,
                          record_types=self.config.record_types)

    async def scan(self, words: Iterable[str]) -> AsyncIterator[QueryOutcome]:
        """对字典中的每个条目发起查询，按完成顺序产出结果"""
        await self.initialize()
        self.source = CandidateSource(words, self.config.domain)
        worker = ResolutionWorker(self.resolver, self.config.timeout)
        self.dispatcher = Dispatcher(worker, self.limiter,
                                     max_in_flight=self.config.in_flight_limit,
                                     queue_size=self.config.queue_size)
        if self.should_stop:
            self.dispatcher.stop()

        self.start_time = time.time()
        try:
            async for outcome in self.dispatcher.run(self.source):
                yield outcome
        finally:
            self.end_time = time.time()

    def stop(self):
        """停止扫描：不再发起新查询，取消在途查询"""
        self.should_stop = True
        if self.dispatcher is not None:
            self.dispatcher.stop()

    def get_stats(self) -> Dict:
        """获取扫描统计信息"""
        end = self.end_time or time.time()
        duration = end - self.start_time if self.start_time else 0.0
        dispatcher = self.dispatcher
        admitted = dispatcher.admitted if dispatcher else 0
        return {
            'target': self.config.domain,
            'duration': duration,
            'admitted': admitted,
            'completed': dispatcher.completed if dispatcher else 0,
            'cancelled': len(dispatcher.cancelled) if dispatcher else 0,
            'skipped': self.source.skipped if self.source else 0,
            'queries_per_second': admitted / duration if duration > 0 else 0,
        }
