"""辅助函数：加载字典文件、解析 DNS 服务器地址等小工具"""
import ipaddress
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import ConfigError, WordlistError

DEFAULT_DNS_PORT = 53


def load_wordlist(path: str) -> List[str]:
    """按顺序读取字典，去掉首尾空白并跳过空行。

    文件不存在或无法读取时抛出 WordlistError，由入口在扫描开始前报告。
    """
    p = Path(path)
    try:
        with p.open('r', encoding='utf-8', errors='replace') as f:
            return [l.strip() for l in f if l.strip()]
    except OSError as e:
        raise WordlistError(f"无法读取字典文件 {path}: {e.strerror or e}") from e


def parse_nameserver(value: Optional[str]) -> Optional[Tuple[str, int]]:
    """解析 DNS 服务器地址，返回 (ip, port)；None 或空串表示使用系统默认配置。

    支持的格式：
      1.1.1.1
      1.1.1.1:53
      2606:4700::1111
      [2606:4700::1111]:53
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    host, port = text, DEFAULT_DNS_PORT
    if text.startswith('['):
        end = text.find(']')
        if end == -1:
            raise ConfigError(f"无效的 DNS 服务器地址: {value}")
        host, rest = text[1:end], text[end + 1:]
        if rest:
            if not rest.startswith(':'):
                raise ConfigError(f"无效的 DNS 服务器地址: {value}")
            port = _parse_port(rest[1:], value)
    elif text.count(':') == 1:
        # IPv4:port；多个冒号说明是不带端口的 IPv6 地址
        host, port_text = text.split(':', 1)
        port = _parse_port(port_text, value)

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        raise ConfigError(f"无效的 DNS 服务器地址: {value}") from None
    return str(ip), port


def _parse_port(text: str, original) -> int:
    try:
        port = int(text)
    except ValueError:
        raise ConfigError(f"无效的 DNS 服务器端口: {original}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"DNS 服务器端口超出范围: {original}")
    return port


def format_nameserver(nameserver: Optional[Tuple[str, int]]) -> str:
    if nameserver is None:
        return '系统默认'
    host, port = nameserver
    if ':' in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"
