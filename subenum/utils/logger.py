"""日志封装：所有模块的 logger 挂在 subenum 根 logger 下，统一输出到 stderr"""
import logging
import sys

ROOT_LOGGER = 'subenum'


def get_logger(name=ROOT_LOGGER, level=None):
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s')
        h.setFormatter(fmt)
        root.addHandler(h)
        root.setLevel(logging.INFO)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_debug(enabled: bool):
    """切换整个 subenum 的日志级别（--debug）"""
    get_logger(ROOT_LOGGER, logging.DEBUG if enabled else logging.INFO)
