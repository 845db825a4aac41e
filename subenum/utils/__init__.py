"""工具集合"""

from .logger import get_logger, set_debug
from .helpers import load_wordlist, parse_nameserver, format_nameserver

__all__ = ["get_logger", "set_debug", "load_wordlist", "parse_nameserver", "format_nameserver"]
