# -*- coding: utf-8 -*-
"""
数据模型模块
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional, Tuple


class OutcomeKind(Enum):
    """单个候选域名的解析结果分类"""
    RESOLVED = "Resolved"
    NOT_FOUND = "NotFound"
    TIMED_OUT = "TimedOut"
    ERROR = "Error"
    CANCELLED = "Cancelled"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class QueryOutcome:
    """解析结果数据类，创建后不可修改"""
    name: str
    kind: OutcomeKind
    records: Tuple[str, ...] = ()
    error: Optional[str] = None
    elapsed: float = 0.0

    @classmethod
    def resolved(cls, name: str, records, elapsed: float = 0.0) -> 'QueryOutcome':
        return cls(name, OutcomeKind.RESOLVED, records=tuple(records), elapsed=elapsed)

    @classmethod
    def not_found(cls, name: str, elapsed: float = 0.0) -> 'QueryOutcome':
        return cls(name, OutcomeKind.NOT_FOUND, elapsed=elapsed)

    @classmethod
    def timed_out(cls, name: str, elapsed: float = 0.0, error: Optional[str] = None) -> 'QueryOutcome':
        return cls(name, OutcomeKind.TIMED_OUT, error=error, elapsed=elapsed)

    @classmethod
    def failed(cls, name: str, error: str, elapsed: float = 0.0) -> 'QueryOutcome':
        return cls(name, OutcomeKind.ERROR, error=error, elapsed=elapsed)

    @classmethod
    def cancelled(cls, name: str) -> 'QueryOutcome':
        return cls(name, OutcomeKind.CANCELLED)

    @property
    def is_resolved(self) -> bool:
        return self.kind is OutcomeKind.RESOLVED

    def to_dict(self) -> Dict:
        """转换为字典，便于 JSON/CSV 导出"""
        result_dict = asdict(self)
        result_dict['kind'] = self.kind.value
        result_dict['records'] = list(self.records)
        return result_dict
