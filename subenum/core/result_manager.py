"""结果管理：按到达顺序保存解析结果并统计各类结果数量"""
from collections import Counter
from typing import Dict, List

from ..models import OutcomeKind, QueryOutcome


class ResultManager:
    def __init__(self):
        self._results: List[QueryOutcome] = []
        self._counts = Counter()

    def add(self, outcome: QueryOutcome):
        self._results.append(outcome)
        self._counts[outcome.kind] += 1

    def get_all(self) -> List[QueryOutcome]:
        """全部结果（到达顺序，即完成顺序）"""
        return list(self._results)

    def get_resolved(self) -> List[QueryOutcome]:
        """解析成功的结果，按域名排序"""
        return sorted((r for r in self._results if r.is_resolved), key=lambda r: r.name)

    def count(self, kind: OutcomeKind) -> int:
        return self._counts[kind]

    def summary(self) -> Dict[str, int]:
        return {kind.value: self.count(kind) for kind in OutcomeKind}

    def __len__(self):
        return len(self._results)
