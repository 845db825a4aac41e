"""配置管理：从 YAML 加载默认配置，并与命令行参数合并成不可变的 EngineConfig"""
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

from ..errors import ConfigError
from ..utils.helpers import parse_nameserver

DEFAULTS = {
    'qps': 10,
    'timeout': 5.0,
    'burst': None,
    'concurrency': None,
    'queue_size': 1024,
    'record_types': ['A', 'AAAA'],
    'backend': 'dnspython',
    'nameserver': None,
    'wordlist': None,
}

BACKENDS = ('dnspython', 'aiodns')
MIN_IN_FLIGHT = 64


class Config:
    def __init__(self, path: str = None):
        default = Path(__file__).parents[1] / 'config' / 'default_config.yaml'
        self.explicit = bool(path)
        self.path = Path(path) if path else default
        self._data = {}
        self.load()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            if self.explicit:
                raise ConfigError(f"配置文件不存在: {self.path}") from None
            data = {}
        except yaml.YAMLError as e:
            raise ConfigError(f"配置文件格式错误 {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"配置文件顶层必须是映射: {self.path}")
        self._data = data

    def get(self, key, default=None):
        return self._data.get(key, default)


@dataclass(frozen=True)
class EngineConfig:
    """一次运行的配置快照，启动时构建一次，运行期间只读"""
    domain: str
    wordlist: Optional[str] = None
    nameserver: Optional[Tuple[str, int]] = None
    qps: float = 10
    timeout: float = 5.0
    burst: Optional[float] = None
    max_in_flight: Optional[int] = None
    queue_size: int = 1024
    record_types: Tuple[str, ...] = ('A', 'AAAA')
    backend: str = 'dnspython'
    debug: bool = False

    def __post_init__(self):
        if not self.domain or not self.domain.strip().strip('.'):
            raise ConfigError("必须指定目标域名 (-t/--target)")
        if (isinstance(self.qps, bool) or not isinstance(self.qps, (int, float))
                or not self.qps > 0 or not math.isfinite(self.qps)):
            raise ConfigError(f"QPS 必须大于 0: {self.qps}")
        if (isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float))
                or not self.timeout > 0 or not math.isfinite(self.timeout)):
            raise ConfigError(f"超时时间必须大于 0: {self.timeout}")
        if self.burst is not None and (isinstance(self.burst, bool) or not math.isfinite(self.burst)
                                       or self.burst < 1):
            raise ConfigError(f"突发容量必须 >= 1: {self.burst}")
        if self.max_in_flight is not None and self.max_in_flight < 1:
            raise ConfigError(f"并发上限必须 >= 1: {self.max_in_flight}")
        if self.queue_size < 1:
            raise ConfigError(f"结果队列长度必须 >= 1: {self.queue_size}")
        if self.backend not in BACKENDS:
            raise ConfigError(f"未知的解析后端: {self.backend}（可选: {', '.join(BACKENDS)}）")
        if not self.record_types:
            raise ConfigError("record_types 不能为空")

    @property
    def capacity(self) -> float:
        """令牌桶容量，默认一秒的令牌数"""
        return self.burst if self.burst is not None else max(1.0, float(self.qps))

    @property
    def in_flight_limit(self) -> int:
        """在途任务上限，只作为资源保护，默认远大于 qps * timeout"""
        if self.max_in_flight is not None:
            return self.max_in_flight
        return max(MIN_IN_FLIGHT, 2 * math.ceil(self.qps * self.timeout))

    @classmethod
    def from_sources(cls, args, config: Optional[Config] = None) -> 'EngineConfig':
        """合并命令行参数（优先）、YAML 配置与内置默认值"""
        config = config or Config()

        def pick(arg_name, key):
            value = getattr(args, arg_name, None)
            if value is not None:
                return value
            value = config.get(key)
            if value is not None:
                return value
            return DEFAULTS[key]

        wordlist = pick('subdomains', 'wordlist')
        if not wordlist:
            raise ConfigError("必须指定子域名字典文件 (-s/--subdomains)")

        record_types = pick('record_types', 'record_types')
        if isinstance(record_types, str):
            record_types = [record_types]

        return cls(
            domain=getattr(args, 'target', None) or '',
            wordlist=str(wordlist),
            nameserver=parse_nameserver(pick('ns', 'nameserver')),
            qps=_number(pick('qps', 'qps'), 'qps'),
            timeout=_number(pick('timeout', 'timeout'), 'timeout'),
            burst=_optional_number(pick('burst', 'burst'), 'burst'),
            max_in_flight=_optional_int(pick('concurrency', 'concurrency'), 'concurrency'),
            queue_size=_optional_int(pick('queue_size', 'queue_size'), 'queue_size'),
            record_types=tuple(str(t).upper() for t in record_types),
            backend=str(pick('backend', 'backend')).lower(),
            debug=bool(getattr(args, 'debug', False)),
        )


def _number(value, name):
    try:
        return float(value) if isinstance(value, str) else value
    except ValueError:
        raise ConfigError(f"{name} 必须是数字: {value}") from None


def _optional_number(value, name):
    return None if value is None else _number(value, name)


def _optional_int(value, name):
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} 必须是整数: {value}") from None
