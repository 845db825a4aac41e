# -*- coding: utf-8 -*-
"""
subenum包 - 异步 DNS 子域名枚举工具

把字典中的每个条目与目标域名拼接成候选子域名，按指定的每秒查询数（QPS）
向配置的（或系统默认的）DNS 服务器并发查询，并按完成顺序输出结果。

主要功能：
- 令牌桶限速，长期速率不超过 QPS
- 有上限的并发在途查询
- 结果分类：Resolved / NotFound / TimedOut / Error
- dnspython 与 aiodns 两种解析后端
- JSON / CSV 结果导出

使用方法：
```python
from subenum import EngineConfig, SubdomainScanner

config = EngineConfig(domain='example.com', qps=20)
scanner = SubdomainScanner(config)
async for outcome in scanner.scan(['www', 'mail']):
    print(outcome.name, outcome.kind)
```
"""

# 版本信息
__version__ = '0.1.0'

# 导入主要模块
from .errors import SubenumError, ConfigError, WordlistError
from .models import OutcomeKind, QueryOutcome
from .core import (
    Config,
    EngineConfig,
    RateLimiter,
    ResolutionWorker,
    Dispatcher,
    DispatcherState,
    ResultManager,
    SubdomainScanner,
)
from .engines import BaseResolver, NameNotFound, LookupTimeout, DNSEngine, AsyncDNSEngine, CandidateSource
from .main import run

# 导出列表
__all__ = [
    # 主要类
    'SubdomainScanner',
    'Dispatcher',
    'DispatcherState',
    'RateLimiter',
    'ResolutionWorker',
    'CandidateSource',
    # 配置
    'Config',
    'EngineConfig',
    # 数据模型
    'OutcomeKind',
    'QueryOutcome',
    'ResultManager',
    # 解析引擎
    'BaseResolver',
    'NameNotFound',
    'LookupTimeout',
    'DNSEngine',
    'AsyncDNSEngine',
    # 异常
    'SubenumError',
    'ConfigError',
    'WordlistError',
    # 主入口
    'run',
]
