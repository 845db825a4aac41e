"""解析工作者：对单个候选域名发起一次查询，并把结果分类为 QueryOutcome"""
import asyncio
import time

from ..engines.base_engine import BaseResolver, LookupTimeout, NameNotFound
from ..models import QueryOutcome
from ..utils.logger import get_logger

logger = get_logger(__name__)


def describe_error(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


class ResolutionWorker:
    """每次 resolve() 只查询一次，不做任何重试；超时与错误如实上报一次。"""

    def __init__(self, resolver: BaseResolver, timeout: float, clock=time.monotonic):
        self.resolver = resolver
        self.timeout = timeout
        self._clock = clock

    async def resolve(self, candidate: str) -> QueryOutcome:
        start = self._clock()
        try:
            records = await asyncio.wait_for(self.resolver.lookup(candidate, self.timeout), self.timeout)
        except NameNotFound:
            return QueryOutcome.not_found(candidate, self._clock() - start)
        except (LookupTimeout, asyncio.TimeoutError) as e:
            outcome = QueryOutcome.timed_out(candidate, self._clock() - start, str(e) or None)
            logger.debug(f"{candidate} 超时 ({outcome.elapsed:.2f}s)")
            return outcome
        except Exception as e:
            outcome = QueryOutcome.failed(candidate, describe_error(e), self._clock() - start)
            logger.debug(f"{candidate} 解析出错: {outcome.error}")
            return outcome

        elapsed = self._clock() - start
        if not records:
            return QueryOutcome.not_found(candidate, elapsed)
        return QueryOutcome.resolved(candidate, records, elapsed)
