"""Core package for scanner"""

from .config import Config, EngineConfig
from .rate_limiter import RateLimiter
from .worker import ResolutionWorker
from .dispatcher import Dispatcher, DispatcherState
from .result_manager import ResultManager
from .scanner import SubdomainScanner

__all__ = ["Config", "EngineConfig", "RateLimiter", "ResolutionWorker", "Dispatcher",
           "DispatcherState", "ResultManager", "SubdomainScanner"]
