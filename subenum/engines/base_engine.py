"""解析引擎基类：定义 DNS 解析能力的接口与失败类型"""
from abc import ABC, abstractmethod
from typing import List


class NameNotFound(Exception):
    """权威回答 NXDOMAIN，或域名存在但没有地址记录（NODATA）"""


class LookupTimeout(Exception):
    """在超时时间内没有收到应答"""


class BaseResolver(ABC):
    """DNS 解析能力。

    lookup 成功时返回地址记录列表；域名不存在抛出 NameNotFound，
    超时抛出 LookupTimeout，其余任何失败直接抛出原始异常。
    """

    @abstractmethod
    async def lookup(self, name: str, timeout: float) -> List[str]:
        pass
