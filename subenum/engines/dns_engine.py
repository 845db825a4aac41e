"""DNS 查询引擎（dnspython 异步解析器）"""
from typing import List, Optional, Sequence, Tuple

import dns.asyncresolver
import dns.exception
import dns.resolver

from ..errors import ConfigError
from .base_engine import BaseResolver, LookupTimeout, NameNotFound

DEFAULT_RECORD_TYPES = ('A', 'AAAA')


class DNSEngine(BaseResolver):
    """基于 dns.asyncresolver 的解析引擎。

    nameserver 为 (ip, port)；为 None 时读取系统解析配置（/etc/resolv.conf 等），
    只在初始化时读取一次。
    """

    def __init__(self, nameserver: Optional[Tuple[str, int]] = None, timeout: float = 5.0,
                 record_types: Sequence[str] = DEFAULT_RECORD_TYPES):
        try:
            self.resolver = dns.asyncresolver.Resolver(configure=nameserver is None)
        except dns.resolver.NoResolverConfiguration as e:
            raise ConfigError(f"无法读取系统 DNS 配置，请使用 --ns 指定服务器: {e}") from e

        if nameserver is not None:
            host, port = nameserver
            # 先设置端口，再设置服务器列表
            self.resolver.port = port
            self.resolver.nameservers = [host]

        # 单次查询：不重试 SERVFAIL，整个查询生命周期等于超时
        self.resolver.retry_servfail = False
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout
        self.record_types = tuple(record_types) or DEFAULT_RECORD_TYPES

    async def lookup(self, name: str, timeout: float) -> List[str]:
        # 先查 IPv4，没有记录时再查 IPv6
        for rdtype in self.record_types:
            try:
                answer = await self.resolver.resolve(name, rdtype, search=False, lifetime=timeout)
            except dns.resolver.NoAnswer:
                continue
            except dns.resolver.NXDOMAIN as e:
                raise NameNotFound(name) from e
            except dns.exception.Timeout as e:
                raise LookupTimeout(str(e)) from e
            return [rdata.to_text() for rdata in answer]
        raise NameNotFound(name)
