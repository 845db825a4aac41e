"""异步 DNS 引擎，使用 aiodns（c-ares）进行解析"""
from typing import List, Optional, Sequence, Tuple

import aiodns
from aiodns.error import DNSError

from .base_engine import BaseResolver, LookupTimeout, NameNotFound
from .dns_engine import DEFAULT_RECORD_TYPES


class AsyncDNSEngine(BaseResolver):
    def __init__(self, nameserver: Optional[Tuple[str, int]] = None, timeout: float = 5.0,
                 record_types: Sequence[str] = DEFAULT_RECORD_TYPES):
        # tries=1：c-ares 内部不重试
        options = {'timeout': timeout, 'tries': 1}
        nameservers = None
        if nameserver is not None:
            host, port = nameserver
            nameservers = [host]
            options['udp_port'] = port
            options['tcp_port'] = port
        self.resolver = aiodns.DNSResolver(nameservers=nameservers, **options)
        self.record_types = tuple(record_types) or DEFAULT_RECORD_TYPES

    async def lookup(self, name: str, timeout: float) -> List[str]:
        for rdtype in self.record_types:
            try:
                answers = await self.resolver.query(name, rdtype)
            except DNSError as e:
                code = e.args[0] if e.args else None
                if code == aiodns.error.ARES_ENODATA:
                    continue
                if code == aiodns.error.ARES_ENOTFOUND:
                    raise NameNotFound(name) from e
                if code == aiodns.error.ARES_ETIMEOUT:
                    raise LookupTimeout(str(e)) from e
                raise
            records = [a.host for a in answers]
            if records:
                return records
        raise NameNotFound(name)
