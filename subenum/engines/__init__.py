"""Engines package"""

from .base_engine import BaseResolver, NameNotFound, LookupTimeout
from .dns_engine import DNSEngine
from .async_dns_engine import AsyncDNSEngine
from .brute_engine import CandidateSource

__all__ = ["BaseResolver", "NameNotFound", "LookupTimeout", "DNSEngine", "AsyncDNSEngine", "CandidateSource"]
