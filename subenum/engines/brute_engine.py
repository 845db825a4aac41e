"""字典爆破引擎：把字典条目与目标域名拼接成候选子域名

候选序列是惰性的、只能遍历一次；重复条目与空条目原样保留，不做去重。
"""
from typing import Iterable, Iterator

from ..utils.logger import get_logger

logger = get_logger(__name__)

MAX_NAME_LENGTH = 253
MAX_LABEL_LENGTH = 63


def normalize_domain(domain: str) -> str:
    return domain.strip().rstrip('.').lower()


class CandidateSource:
    def __init__(self, words: Iterable[str], domain: str):
        self.domain = normalize_domain(domain)
        self._words = iter(words)
        self.produced = 0
        self.skipped = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        for word in self._words:
            candidate = f"{word}.{self.domain}"
            if self._overflows(word, candidate):
                self.skipped += 1
                logger.debug(f"跳过超长候选: {candidate[:80]}... ({len(candidate)} 字符)")
                continue
            self.produced += 1
            return candidate
        raise StopIteration

    @staticmethod
    def _overflows(word: str, candidate: str) -> bool:
        if len(candidate) > MAX_NAME_LENGTH:
            return True
        return any(len(label) > MAX_LABEL_LENGTH for label in word.split('.'))
