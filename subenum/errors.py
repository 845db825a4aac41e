# -*- coding: utf-8 -*-
"""
异常定义：启动阶段的致命错误
"""


class SubenumError(Exception):
    """subenum 所有可预期错误的基类"""


class ConfigError(SubenumError, ValueError):
    """配置错误（QPS 非法、缺少目标域名、DNS 服务器地址格式错误等）"""


class WordlistError(SubenumError):
    """字典文件无法读取"""
